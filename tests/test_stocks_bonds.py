from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from financial_formulas import stocks_bonds as sb
from financial_formulas.numeric import (
    DomainViolation,
    InvalidInputError,
    ZeroDenominatorError,
    round_half_away,
)


@pytest.mark.parametrize(
    "func, args, expected",
    [
        # Prices, spreads and per-share measures
        (sb.calc_bid_ask_spread, ("99.5", "100"), "0.5"),
        (sb.calc_book_value_per_share, (1000000, 250000), "4"),
        (sb.calc_diluted_earnings_per_share, (100000, 40000, 10000), "2"),
        (sb.calc_dividend_payout_ratio, (250000, 1000000), "0.25"),
        (sb.calc_dividend_yield, (2, 40), "0.05"),
        (sb.calc_dividends_per_share, (1000, 250), "4"),
        (sb.calc_earnings_per_share, (1000000, 250000), "4"),
        (sb.calc_equity_multiplier, (1000000, 250000), "4"),
        (sb.calc_equity_multiplier_from_equity_ratio, ("0.25",), "4"),
        (sb.calc_estimated_earnings, (1000000, 750000), "250000"),
        (sb.calc_estimated_earnings_with_profit_margin, (1000000, "0.1"), "100000"),
        (sb.calc_net_asset_value, (1000000, 200000, 40000), "20"),
        (sb.calc_price_to_book_value_ratio, (40, 10), "4"),
        (sb.calc_price_to_earnings_ratio, (40, 10), "4"),
        (sb.calc_price_to_sales_ratio, (40, 10), "4"),
        # Required returns and valuation models
        (sb.calc_capital_asset_pricing_model, ("0.02", "1.5", "0.08"), "0.11"),
        (sb.calc_risk_premium, ("0.08", "0.02"), "0.06"),
        (sb.calc_growth_rate, ("0.6", "0.15"), "0.09"),
        (sb.calc_required_rate_of_return, ("0.04", "0.03"), "0.07"),
        (sb.calc_preferred_stock_value, (5, "0.05"), "100"),
        (sb.calc_rate_of_return, (5, 100), "0.05"),
        (sb.calc_stock_present_value_with_constant_growth, (2, "0.08", "0.03"), "40"),
        (sb.calc_stock_present_value_with_zero_growth, (2, "0.08"), "25"),
        # Returns
        (sb.calc_capital_gains_yield, (40, 50), "0.25"),
        (sb.calc_holding_period_return_from_income, (50, 150, 1000), "0.2"),
        (sb.calc_total_stock_return_percentage, (40, 50, 2), "0.3"),
        (sb.calc_total_stock_return_cash, (40, 50, 2), "12"),
        (sb.calc_total_stock_return_from_yields, ("0.05", "0.25"), "0.3"),
        # Bonds and yields
        (sb.calc_current_yield, (60, 1000), "0.06"),
        (sb.calc_tax_equivalent_yield, ("0.03", "0.25"), "0.04"),
    ],
)
def test_exact_values(func, args, expected) -> None:
    """Formulas made of the four operations are exact in Decimal."""
    assert func(*args) == Decimal(expected)


@pytest.mark.parametrize(
    "func, args, places, expected",
    [
        (sb.calc_bond_equivalent_yield, (1000, 950, "182.5"), 6, "0.105263"),
        (sb.calc_approx_yield_to_maturity, (50, 1000, 950, 10), 6, "0.056410"),
        (sb.calc_zero_coupon_bond_value, (100, 0.06, 10), 2, "55.84"),
        (sb.calc_zero_coupon_bond_yield, (100, "55.84", 10), 4, "0.0600"),
        (sb.calc_holding_period_return_from_rate, ("0.1", 2), 10, "0.21"),
    ],
)
def test_rounded_values(func, args, places, expected) -> None:
    assert round_half_away(func(*args), places) == Decimal(expected)


def test_geometric_mean_return() -> None:
    """Two periods compounding to +21% average +10% per period."""
    result = sb.calc_geometric_mean_return(["0.21", "0"])
    assert round_half_away(result, 10) == Decimal("0.1")
    single = sb.calc_geometric_mean_return(["0.05"])
    assert round_half_away(single, 10) == Decimal("0.05")


def test_geometric_mean_return_is_below_arithmetic_mean() -> None:
    rates = [Decimal("0.1"), Decimal("-0.05"), Decimal("0.2")]
    arithmetic = sum(rates) / 3
    assert sb.calc_geometric_mean_return(rates) < arithmetic


def test_holding_period_return_compounds_series() -> None:
    assert sb.calc_holding_period_return(["0.1", "0.2"]) == Decimal("0.32")
    assert sb.calc_holding_period_return(("0.1",)) == Decimal("0.1")


@pytest.mark.parametrize(
    "func", [sb.calc_geometric_mean_return, sb.calc_holding_period_return]
)
def test_empty_series_returns_zero_and_logs(func) -> None:
    with capture_logs() as logs:
        assert func([]) == Decimal(0)
    assert logs == [
        {"event": "empty_series", "formula": func.__name__, "log_level": "debug"}
    ]


def test_series_must_be_ordered() -> None:
    with pytest.raises(InvalidInputError):
        sb.calc_holding_period_return({"0.1", "0.2"})
    with pytest.raises(InvalidInputError):
        sb.calc_geometric_mean_return("0.1")


def test_geometric_mean_of_negative_product() -> None:
    """A product below zero has no real fractional power, odd roots included."""
    with pytest.raises(DomainViolation):
        sb.calc_geometric_mean_return(["-1.5", "0.1"])
    with pytest.raises(DomainViolation):
        sb.calc_geometric_mean_return(["-1.5", "0.1", "0.2"])


def test_zero_denominators() -> None:
    with pytest.raises(ZeroDenominatorError):
        sb.calc_stock_present_value_with_constant_growth(2, "0.05", "0.05")
    with pytest.raises(ZeroDenominatorError):
        sb.calc_zero_coupon_bond_yield(100, 0, 10)
    with pytest.raises(ZeroDenominatorError):
        sb.calc_tax_equivalent_yield("0.03", 1)
