from decimal import Decimal

import pytest

from financial_formulas import banking
from financial_formulas.numeric import ZeroDenominatorError, round_half_away


@pytest.mark.parametrize(
    "func, args, places, expected",
    [
        (banking.calc_annual_percentage_yield, (0.04, 12), 7, "0.0407415"),
        (banking.calc_balloon_loan_payment, (10000, 2000, 0.04, 10), 2, "1066.33"),
        (banking.calc_compound_interest, (1000, 0.07, 10), 2, "967.15"),
        (banking.calc_continuous_compounding, (1000, 0.07, 10), 2, "2013.75"),
        (banking.calc_debt_to_income_ratio, (250, 1000), 2, "0.25"),
        (banking.calc_balloon_balance_of_loan, (100000, 500, 0.04, 25), 2, "245760.68"),
        (banking.calc_loan_payment, (1000, 0.04, 10), 2, "123.29"),
        (banking.calc_remaining_balance_on_loan, (10000, 250, 0.04, 10), 2, "11800.92"),
        (banking.calc_loan_to_deposit_ratio, (10000, 4000), 2, "2.5"),
        (banking.calc_loan_to_value_ratio, (150000, 130000), 2, "1.15"),
        (banking.calc_simple_interest, (1000, 0.04, 10), 2, "400"),
        (banking.calc_simple_interest_rate, (1000, 400, 10), 2, "0.04"),
        (banking.calc_simple_interest_principal, (400, 0.04, 10), 2, "1000"),
        (banking.calc_simple_interest_time, (1000, 400, 0.04), 2, "10"),
    ],
)
def test_banking_reference_values(func, args, places, expected) -> None:
    """Each banking formula reproduces its reference value once rounded."""
    assert round_half_away(func(*args), places) == Decimal(expected)


def test_simple_interest_is_exact() -> None:
    """Formulas with no transcendental step stay exact in Decimal."""
    assert banking.calc_simple_interest("1000", "0.04", "10") == Decimal("400.00")


def test_balloon_balance_and_remaining_balance_agree() -> None:
    """Both names describe the same future balance of an amortising loan."""
    args = (Decimal("25000"), Decimal("450"), Decimal("0.005"), Decimal("36"))
    balloon = banking.calc_balloon_balance_of_loan(*args)
    assert balloon == banking.calc_remaining_balance_on_loan(*args)


def test_loan_fully_repaid_after_all_payments() -> None:
    """Paying the computed instalment for n periods leaves (almost) nothing owed."""
    payment = banking.calc_loan_payment(1000, 0.04, 10)
    balance = banking.calc_remaining_balance_on_loan(1000, payment, 0.04, 10)
    assert round_half_away(balance, 6) == Decimal(0)


def test_keyword_arguments_are_accepted() -> None:
    result = banking.calc_loan_to_value_ratio(
        value_of_collateral=200000, loan_amount=150000
    )
    assert result == Decimal("0.75")


@pytest.mark.parametrize(
    "func, args",
    [
        (banking.calc_loan_payment, (1000, 0, 10)),
        (banking.calc_debt_to_income_ratio, (250, 0)),
        (banking.calc_simple_interest_rate, (0, 400, 10)),
        (banking.calc_loan_to_deposit_ratio, (10000, 0)),
    ],
)
def test_zero_denominators_raise(func, args) -> None:
    with pytest.raises(ZeroDenominatorError):
        func(*args)
