# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
General finance formulas: time value of money.

This module groups the annuity, perpetuity and discounting formulas. Most
of them come in pairs that invert each other, for example:

- ``calc_present_value_of_annuity`` / ``calc_annuity_payment_present_value``
- ``calc_future_value_of_annuity`` / ``calc_annuity_payment_future_value``
- ``calc_present_value_of_annuity_due`` /
  ``calc_annuity_due_payment_using_present_value``
- ``calc_future_value_of_annuity_due`` /
  ``calc_annuity_due_payment_using_future_value``
- ``calc_present_value_of_growing_annuity`` /
  ``calc_growing_annuity_payment_from_present_value``
- ``calc_future_value_of_growing_annuity`` /
  ``calc_growing_annuity_payment_from_future_value``
- ``calc_future_value_factor`` / ``calc_present_value_factor``

Each member of a pair is written with the same factor so that a round trip
returns the original amount up to the float precision of the power step.

Ordinary annuities pay at the end of each period, annuities due at the
start. A zero rate makes the annuity factors ``0 / 0`` and raises
``ZeroDenominatorError``.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from .numeric import as_weighted_pairs, exp, formula, ln, power

__all__ = [
    "calc_annuity_due_payment_using_future_value",
    "calc_annuity_due_payment_using_present_value",
    "calc_annuity_payment_future_value",
    "calc_annuity_payment_present_value",
    "calc_average_collection_period",
    "calc_doubling_time",
    "calc_doubling_time_for_simple_interest",
    "calc_doubling_time_with_continuous_compounding",
    "calc_future_value",
    "calc_future_value_factor",
    "calc_future_value_of_annuity",
    "calc_future_value_of_annuity_due",
    "calc_future_value_of_annuity_with_continuous_compounding",
    "calc_future_value_of_growing_annuity",
    "calc_future_value_with_continuous_compounding",
    "calc_growing_annuity_payment_from_future_value",
    "calc_growing_annuity_payment_from_present_value",
    "calc_number_of_periods_for_future_value_of_annuity",
    "calc_number_of_periods_for_present_value_of_annuity",
    "calc_number_of_periods_for_present_value_to_reach_future_value",
    "calc_present_value",
    "calc_present_value_annuity_factor",
    "calc_present_value_factor",
    "calc_present_value_of_annuity",
    "calc_present_value_of_annuity_due",
    "calc_present_value_of_growing_annuity",
    "calc_present_value_of_growing_perpetuity",
    "calc_present_value_of_perpetuity",
    "calc_present_value_with_continuous_compounding",
    "calc_rate_required_to_double_by_rule_of_72",
    "calc_rule_of_72",
    "calc_weighted_average",
]

DAYS_PER_YEAR = 365
RULE_OF_72 = 72


# ---------------------------------------------------------------------------
# Factors shared by the annuity pairs
# ---------------------------------------------------------------------------


def _pv_annuity_factor(rate: Decimal, periods: Decimal) -> Decimal:
    return (1 - power(1 + rate, -periods)) / rate


def _fv_annuity_factor(rate: Decimal, periods: Decimal) -> Decimal:
    return (power(1 + rate, periods) - 1) / rate


def _pv_growing_annuity_factor(
    rate: Decimal,
    growth: Decimal,
    periods: Decimal,
) -> Decimal:
    return (1 - power((1 + growth) / (1 + rate), periods)) / (rate - growth)


def _fv_growing_annuity_factor(
    rate: Decimal,
    growth: Decimal,
    periods: Decimal,
) -> Decimal:
    return (power(1 + rate, periods) - power(1 + growth, periods)) / (rate - growth)


# ---------------------------------------------------------------------------
# Ordinary annuities
# ---------------------------------------------------------------------------


@formula
def calc_future_value_of_annuity(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Future Value of an ordinary annuity.

    ``payment * ((1 + rate) ** n - 1) / rate``
    """
    return periodic_payment * _fv_annuity_factor(rate_per_period, number_of_periods)


@formula
def calc_future_value_of_annuity_with_continuous_compounding(
    cash_flow: Decimal,
    rate: Decimal,
    time: Decimal,
) -> Decimal:
    """Future Value of an annuity with continuous compounding."""
    return cash_flow * ((exp(rate * time) - 1) / (exp(rate) - 1))


@formula
def calc_number_of_periods_for_future_value_of_annuity(
    future_value_of_annuity: Decimal,
    rate: Decimal,
    payment: Decimal,
) -> Decimal:
    """Number of periods for an annuity to reach a future value."""
    return ln(1 + (future_value_of_annuity * rate) / payment) / ln(1 + rate)


@formula
def calc_annuity_payment_present_value(
    present_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Annuity payment from a present value.

    Inverse of ``calc_present_value_of_annuity``.
    """
    return present_value / _pv_annuity_factor(rate_per_period, number_of_periods)


@formula
def calc_annuity_payment_future_value(
    future_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Annuity payment from a future value.

    Inverse of ``calc_future_value_of_annuity``.
    """
    return future_value / _fv_annuity_factor(rate_per_period, number_of_periods)


@formula
def calc_number_of_periods_for_present_value_of_annuity(
    present_value_of_annuity: Decimal,
    rate: Decimal,
    payment: Decimal,
) -> Decimal:
    """
    Number of periods for an annuity to pay off a present value.

    ``ln(1 / (1 - pv * rate / payment)) / ln(1 + rate)``. When the payment
    does not even cover the interest, the logarithm argument is not
    positive and ``DomainViolation`` is raised.
    """
    return ln(1 / (1 - (present_value_of_annuity * rate) / payment)) / ln(1 + rate)


@formula
def calc_present_value_of_annuity(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Present Value of an ordinary annuity.

    ``payment * (1 - (1 + rate) ** -n) / rate``
    """
    return periodic_payment * _pv_annuity_factor(rate_per_period, number_of_periods)


@formula
def calc_present_value_annuity_factor(
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Present Value Annuity Factor: present value of 1 paid each period."""
    return _pv_annuity_factor(rate_per_period, number_of_periods)


# ---------------------------------------------------------------------------
# Annuities due
# ---------------------------------------------------------------------------


@formula
def calc_present_value_of_annuity_due(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Present Value of an annuity due (payments at the start of each period)."""
    factor = _pv_annuity_factor(rate_per_period, number_of_periods)
    return periodic_payment * factor * (1 + rate_per_period)


@formula
def calc_future_value_of_annuity_due(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Future Value of an annuity due."""
    factor = _fv_annuity_factor(rate_per_period, number_of_periods)
    return periodic_payment * factor * (1 + rate_per_period)


@formula
def calc_annuity_due_payment_using_present_value(
    present_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Annuity Due payment from a present value."""
    factor = _pv_annuity_factor(rate_per_period, number_of_periods)
    return present_value / (factor * (1 + rate_per_period))


@formula
def calc_annuity_due_payment_using_future_value(
    future_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Annuity Due payment from a future value."""
    factor = _fv_annuity_factor(rate_per_period, number_of_periods)
    return future_value / (factor * (1 + rate_per_period))


# ---------------------------------------------------------------------------
# Growing annuities and perpetuities
# ---------------------------------------------------------------------------


@formula
def calc_future_value_of_growing_annuity(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    growth_rate: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Future Value of a growing annuity.

    ``payment * ((1 + r) ** n - (1 + g) ** n) / (r - g)``. The expression is
    undefined when ``r == g`` (``ZeroDenominatorError``).
    """
    factor = _fv_growing_annuity_factor(rate_per_period, growth_rate, number_of_periods)
    return periodic_payment * factor


@formula
def calc_growing_annuity_payment_from_present_value(
    present_value: Decimal,
    rate_per_period: Decimal,
    growth_rate: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """First payment of a growing annuity from its present value."""
    factor = _pv_growing_annuity_factor(rate_per_period, growth_rate, number_of_periods)
    return present_value / factor


@formula
def calc_growing_annuity_payment_from_future_value(
    future_value: Decimal,
    rate_per_period: Decimal,
    growth_rate: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """First payment of a growing annuity from its future value."""
    factor = _fv_growing_annuity_factor(rate_per_period, growth_rate, number_of_periods)
    return future_value / factor


@formula
def calc_present_value_of_growing_annuity(
    periodic_payment: Decimal,
    rate_per_period: Decimal,
    growth_rate: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """
    Present Value of a growing annuity.

    ``payment * (1 - ((1 + g) / (1 + r)) ** n) / (r - g)``
    """
    factor = _pv_growing_annuity_factor(rate_per_period, growth_rate, number_of_periods)
    return periodic_payment * factor


@formula
def calc_present_value_of_growing_perpetuity(
    dividend_or_coupon_at_first_period: Decimal,
    discount_rate: Decimal,
    growth_rate: Decimal,
) -> Decimal:
    """Present Value of a growing perpetuity: ``d / (r - g)``."""
    return dividend_or_coupon_at_first_period / (discount_rate - growth_rate)


@formula
def calc_present_value_of_perpetuity(
    dividend_or_coupon_per_period: Decimal,
    discount_rate: Decimal,
) -> Decimal:
    """Present Value of a perpetuity: ``d / r``."""
    return dividend_or_coupon_per_period / discount_rate


# ---------------------------------------------------------------------------
# Single amounts
# ---------------------------------------------------------------------------


@formula
def calc_future_value(
    cash_flow_at_period_zero: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Future Value of a single amount."""
    return cash_flow_at_period_zero * power(1 + rate_per_period, number_of_periods)


@formula
def calc_future_value_with_continuous_compounding(
    cash_flow_at_period_zero: Decimal,
    rate: Decimal,
    time: Decimal,
) -> Decimal:
    """Future Value of a single amount with continuous compounding."""
    return cash_flow_at_period_zero * exp(rate * time)


@formula
def calc_future_value_factor(
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Future Value Factor: ``(1 + rate) ** n``."""
    return power(1 + rate_per_period, number_of_periods)


@formula
def calc_present_value(
    cash_flow_at_period_one: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Present Value of a single amount received after ``n`` periods."""
    return cash_flow_at_period_one / power(1 + rate_per_period, number_of_periods)


@formula
def calc_present_value_with_continuous_compounding(
    cash_flow: Decimal,
    rate: Decimal,
    time: Decimal,
) -> Decimal:
    """Present Value of a single amount with continuous discounting."""
    return cash_flow / exp(rate * time)


@formula
def calc_present_value_factor(
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Present Value Factor: ``1 / (1 + rate) ** n``."""
    return 1 / power(1 + rate_per_period, number_of_periods)


@formula
def calc_number_of_periods_for_present_value_to_reach_future_value(
    future_value: Decimal,
    present_value: Decimal,
    rate_per_period: Decimal,
) -> Decimal:
    """Number of periods for a present value to grow into a future value."""
    return ln(future_value / present_value) / ln(1 + rate_per_period)


# ---------------------------------------------------------------------------
# Doubling time and rules of thumb
# ---------------------------------------------------------------------------


@formula
def calc_doubling_time(rate_of_return: Decimal) -> Decimal:
    """
    Doubling Time with periodic compounding: ``ln(2) / ln(1 + rate)``.

    Raises ``DomainViolation`` when ``1 + rate <= 0`` and
    ``ZeroDenominatorError`` for a zero rate.
    """
    return ln(2) / ln(1 + rate_of_return)


@formula
def calc_doubling_time_with_continuous_compounding(rate_of_return: Decimal) -> Decimal:
    """Doubling Time with continuous compounding: ``ln(2) / rate``."""
    return ln(2) / rate_of_return


@formula
def calc_doubling_time_for_simple_interest(rate_of_return: Decimal) -> Decimal:
    """Doubling Time for simple interest: ``1 / rate``."""
    return 1 / rate_of_return


@formula
def calc_rule_of_72(rate_of_return: Decimal) -> Decimal:
    """Rule of 72 estimate of the periods needed to double (rate as a fraction)."""
    return RULE_OF_72 / (rate_of_return * 100)


@formula
def calc_rate_required_to_double_by_rule_of_72(number_of_periods: Decimal) -> Decimal:
    """Rate (as a fraction) needed to double within ``n`` periods by the Rule of 72."""
    return RULE_OF_72 / number_of_periods / 100


# ---------------------------------------------------------------------------
# Miscellaneous
# ---------------------------------------------------------------------------


@formula
def calc_average_collection_period(receivables_turnover: Decimal) -> Decimal:
    """Average Collection Period (days) from the receivables turnover."""
    return DAYS_PER_YEAR / receivables_turnover


@formula(series=("pairs",))
def calc_weighted_average(pairs: Iterable[Any]) -> Decimal:
    """
    Weighted Average of ``(weight, value)`` pairs.

    Returns ``sum(weight * value)``. Weights are not normalised: pass
    weights that sum to 1 for a true average, or any weights for a
    weighted sum. An empty collection yields 0. Pairs are not accepted as a
    ``{weight: value}`` mapping, which would merge pairs sharing a weight.

    Example:
        >>> calc_weighted_average([(Decimal("0.25"), Decimal("0.06")),
        ...                        (Decimal("0.75"), Decimal("0.02"))])
        Decimal('0.0300')
    """
    total = Decimal(0)
    for weight, value in as_weighted_pairs(pairs):
        total += weight * value
    return total
