# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Banking formulas: interest, loans and lending ratios.

Rates are fractions per period (0.04 for 4%). Loan formulas assume
payments at the end of each period.
"""

from decimal import Decimal

from .numeric import exp, formula, power

__all__ = [
    "calc_annual_percentage_yield",
    "calc_balloon_balance_of_loan",
    "calc_balloon_loan_payment",
    "calc_compound_interest",
    "calc_continuous_compounding",
    "calc_debt_to_income_ratio",
    "calc_loan_payment",
    "calc_loan_to_deposit_ratio",
    "calc_loan_to_value_ratio",
    "calc_remaining_balance_on_loan",
    "calc_simple_interest",
    "calc_simple_interest_principal",
    "calc_simple_interest_rate",
    "calc_simple_interest_time",
]


@formula
def calc_annual_percentage_yield(
    stated_annual_interest_rate: Decimal,
    number_of_times_compounded: Decimal,
) -> Decimal:
    """
    Annual Percentage Yield from a stated annual rate and compounding frequency.

    ``(1 + rate / m) ** m - 1`` where ``m`` is the number of compounding
    periods per year.
    """
    m = number_of_times_compounded
    return power(1 + stated_annual_interest_rate / m, m) - 1


@formula
def calc_balloon_loan_payment(
    present_value: Decimal,
    balloon_amount: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Periodic payment of a loan that ends with a balloon payment.

    The present value of the balloon is removed from the principal and the
    remainder is amortised like a regular loan.
    """
    growth = 1 + rate_per_period
    pv_of_periodic_payments = present_value - balloon_amount / power(
        growth, number_of_periods
    )
    annuity_payment_factor = rate_per_period / (
        1 - power(growth, -number_of_periods)
    )
    return pv_of_periodic_payments * annuity_payment_factor


@formula
def calc_compound_interest(
    principal: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Compound interest earned (not the final balance) on a principal."""
    return principal * (power(1 + rate_per_period, number_of_periods) - 1)


@formula
def calc_continuous_compounding(
    principal: Decimal,
    rate: Decimal,
    time: Decimal,
) -> Decimal:
    """Balance after continuous compounding: ``principal * e ** (rate * time)``."""
    return principal * exp(rate * time)


@formula
def calc_debt_to_income_ratio(
    monthly_debt_payments: Decimal,
    gross_monthly_income: Decimal,
) -> Decimal:
    """Debt to Income Ratio."""
    return monthly_debt_payments / gross_monthly_income


def _future_balance(
    present_value: Decimal,
    payment: Decimal,
    rate_per_payment: Decimal,
    number_of_payments: Decimal,
) -> Decimal:
    growth = power(1 + rate_per_payment, number_of_payments)
    return present_value * growth - payment * ((growth - 1) / rate_per_payment)


@formula
def calc_balloon_balance_of_loan(
    present_value: Decimal,
    payment: Decimal,
    rate_per_payment: Decimal,
    number_of_payments: Decimal,
) -> Decimal:
    """
    Balloon balance left on a loan after a number of payments.

    Future value of the principal minus the future value of the payments
    already made.
    """
    return _future_balance(present_value, payment, rate_per_payment, number_of_payments)


@formula
def calc_loan_payment(
    present_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Periodic payment that fully amortises a loan.

    ``rate * pv / (1 - (1 + rate) ** -n)``. A zero rate has no finite
    answer through this expression and raises ``ZeroDenominatorError``.
    """
    return (rate_per_period * present_value) / (
        1 - power(1 + rate_per_period, -number_of_periods)
    )


@formula
def calc_remaining_balance_on_loan(
    present_value: Decimal,
    payment: Decimal,
    rate_per_payment: Decimal,
    number_of_payments: Decimal,
) -> Decimal:
    """Remaining balance on a loan after a number of payments."""
    return _future_balance(present_value, payment, rate_per_payment, number_of_payments)


@formula
def calc_loan_to_deposit_ratio(loans: Decimal, deposits: Decimal) -> Decimal:
    """Loan to Deposit Ratio."""
    return loans / deposits


@formula
def calc_loan_to_value_ratio(
    loan_amount: Decimal,
    value_of_collateral: Decimal,
) -> Decimal:
    """Loan to Value Ratio."""
    return loan_amount / value_of_collateral


@formula
def calc_simple_interest(principal: Decimal, rate: Decimal, time: Decimal) -> Decimal:
    """Simple interest: ``principal * rate * time``."""
    return principal * rate * time


@formula
def calc_simple_interest_rate(
    principal: Decimal,
    interest: Decimal,
    time: Decimal,
) -> Decimal:
    """Rate implied by a simple interest amount."""
    return interest / (principal * time)


@formula
def calc_simple_interest_principal(
    interest: Decimal,
    rate: Decimal,
    time: Decimal,
) -> Decimal:
    """Principal implied by a simple interest amount."""
    return interest / (rate * time)


@formula
def calc_simple_interest_time(
    principal: Decimal,
    interest: Decimal,
    rate: Decimal,
) -> Decimal:
    """Time implied by a simple interest amount."""
    return interest / (principal * rate)
