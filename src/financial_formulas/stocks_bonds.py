# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Stocks and bonds formulas.

This module covers:
- per-share measures and valuation multiples,
- dividend discount models (zero and constant growth),
- returns over a holding period, including the aggregates computed from a
  series of periodic returns,
- bond yields and zero-coupon bond pricing.

Aggregates over a series
------------------------
``calc_geometric_mean_return`` and ``calc_holding_period_return`` compound
a series of periodic returns starting from a product of 1. An empty series
is not an error: both return 0.

The holding period return exists in three forms, exposed under distinct
names:

- ``calc_holding_period_return(period_returns)``: compounded series,
- ``calc_holding_period_return_from_rate(periodic_rate, number_of_periods)``,
- ``calc_holding_period_return_from_income(earnings, asset_appreciation,
  initial_investment)``.

The equity multiplier likewise has ``calc_equity_multiplier`` (from the
balance sheet) and ``calc_equity_multiplier_from_equity_ratio``.
"""

from collections.abc import Iterable
from decimal import Decimal

from .logging_config import get_logger
from .numeric import as_series, formula, growth_product, power

__all__ = [
    "calc_approx_yield_to_maturity",
    "calc_bid_ask_spread",
    "calc_bond_equivalent_yield",
    "calc_book_value_per_share",
    "calc_capital_asset_pricing_model",
    "calc_capital_gains_yield",
    "calc_current_yield",
    "calc_diluted_earnings_per_share",
    "calc_dividend_payout_ratio",
    "calc_dividend_yield",
    "calc_dividends_per_share",
    "calc_earnings_per_share",
    "calc_equity_multiplier",
    "calc_equity_multiplier_from_equity_ratio",
    "calc_estimated_earnings",
    "calc_estimated_earnings_with_profit_margin",
    "calc_geometric_mean_return",
    "calc_growth_rate",
    "calc_holding_period_return",
    "calc_holding_period_return_from_income",
    "calc_holding_period_return_from_rate",
    "calc_net_asset_value",
    "calc_preferred_stock_value",
    "calc_price_to_book_value_ratio",
    "calc_price_to_earnings_ratio",
    "calc_price_to_sales_ratio",
    "calc_rate_of_return",
    "calc_required_rate_of_return",
    "calc_risk_premium",
    "calc_stock_present_value_with_constant_growth",
    "calc_stock_present_value_with_zero_growth",
    "calc_tax_equivalent_yield",
    "calc_total_stock_return_cash",
    "calc_total_stock_return_from_yields",
    "calc_total_stock_return_percentage",
    "calc_zero_coupon_bond_value",
    "calc_zero_coupon_bond_yield",
]

DAYS_PER_YEAR = 365


# ---------------------------------------------------------------------------
# Prices, spreads and per-share measures
# ---------------------------------------------------------------------------


@formula
def calc_bid_ask_spread(bid: Decimal, ask: Decimal) -> Decimal:
    """Bid-Ask Spread."""
    return ask - bid


@formula
def calc_book_value_per_share(
    total_common_stockholders_equity: Decimal,
    number_of_common_shares: Decimal,
) -> Decimal:
    """Book Value per Share."""
    return total_common_stockholders_equity / number_of_common_shares


@formula
def calc_diluted_earnings_per_share(
    net_income: Decimal,
    average_shares: Decimal,
    other_convertible_instruments: Decimal,
) -> Decimal:
    """Diluted Earnings per Share."""
    return net_income / (average_shares + other_convertible_instruments)


@formula
def calc_dividend_payout_ratio(dividends: Decimal, net_income: Decimal) -> Decimal:
    """Dividend Payout Ratio."""
    return dividends / net_income


@formula
def calc_dividend_yield(
    dividends_for_the_period: Decimal,
    initial_price_for_the_period: Decimal,
) -> Decimal:
    """Dividend Yield."""
    return dividends_for_the_period / initial_price_for_the_period


@formula
def calc_dividends_per_share(dividends: Decimal, number_of_shares: Decimal) -> Decimal:
    """Dividends per Share."""
    return dividends / number_of_shares


@formula
def calc_earnings_per_share(
    net_income: Decimal,
    weighted_average_outstanding_shares: Decimal,
) -> Decimal:
    """Earnings per Share."""
    return net_income / weighted_average_outstanding_shares


@formula
def calc_equity_multiplier(
    total_assets: Decimal,
    stockholders_equity: Decimal,
) -> Decimal:
    """Equity Multiplier from total assets and stockholders' equity."""
    return total_assets / stockholders_equity


@formula
def calc_equity_multiplier_from_equity_ratio(equity_ratio: Decimal) -> Decimal:
    """Equity Multiplier from the equity ratio: ``1 / equity_ratio``."""
    return 1 / equity_ratio


@formula
def calc_estimated_earnings(
    forecasted_sales: Decimal,
    forecasted_expenses: Decimal,
) -> Decimal:
    """Estimated Earnings from forecasted sales and expenses."""
    return forecasted_sales - forecasted_expenses


@formula
def calc_estimated_earnings_with_profit_margin(
    projected_sales: Decimal,
    projected_net_profit_margin: Decimal,
) -> Decimal:
    """Estimated Earnings from projected sales and net profit margin."""
    return projected_sales * projected_net_profit_margin


@formula
def calc_net_asset_value(
    fund_assets: Decimal,
    fund_liabilities: Decimal,
    outstanding_shares: Decimal,
) -> Decimal:
    """Net Asset Value per share of a fund."""
    return (fund_assets - fund_liabilities) / outstanding_shares


@formula
def calc_price_to_book_value_ratio(
    market_price_per_share: Decimal,
    book_value_per_share: Decimal,
) -> Decimal:
    """Price to Book Value Ratio."""
    return market_price_per_share / book_value_per_share


@formula
def calc_price_to_earnings_ratio(
    price_per_share: Decimal,
    earnings_per_share: Decimal,
) -> Decimal:
    """Price to Earnings Ratio."""
    return price_per_share / earnings_per_share


@formula
def calc_price_to_sales_ratio(
    price_per_share: Decimal,
    sales_per_share: Decimal,
) -> Decimal:
    """Price to Sales Ratio."""
    return price_per_share / sales_per_share


# ---------------------------------------------------------------------------
# Required returns and valuation models
# ---------------------------------------------------------------------------


@formula
def calc_capital_asset_pricing_model(
    risk_free_rate: Decimal,
    beta: Decimal,
    return_on_the_market: Decimal,
) -> Decimal:
    """Expected return under the Capital Asset Pricing Model."""
    return risk_free_rate + beta * (return_on_the_market - risk_free_rate)


@formula
def calc_risk_premium(
    asset_or_investment_return: Decimal,
    risk_free_return: Decimal,
) -> Decimal:
    """Risk Premium over the risk-free return."""
    return asset_or_investment_return - risk_free_return


@formula
def calc_growth_rate(retention_rate: Decimal, return_on_equity: Decimal) -> Decimal:
    """Sustainable growth rate: retention rate times return on equity."""
    return retention_rate * return_on_equity


@formula
def calc_required_rate_of_return(
    dividend_yield: Decimal,
    growth_rate: Decimal,
) -> Decimal:
    """Required Rate of Return: dividend yield plus growth rate."""
    return dividend_yield + growth_rate


@formula
def calc_preferred_stock_value(dividend: Decimal, discount_rate: Decimal) -> Decimal:
    """Preferred Stock value as a perpetuity."""
    return dividend / discount_rate


@formula
def calc_rate_of_return(dividend: Decimal, price: Decimal) -> Decimal:
    """Rate of Return on a preferred stock."""
    return dividend / price


@formula
def calc_stock_present_value_with_constant_growth(
    estimated_dividends_for_next_period: Decimal,
    required_rate_of_return: Decimal,
    growth_rate: Decimal,
) -> Decimal:
    """
    Stock present value with constant dividend growth (Gordon growth model).

    ``next_dividend / (required_return - growth)``; a growth rate equal to
    the required return raises ``ZeroDenominatorError``.
    """
    return estimated_dividends_for_next_period / (required_rate_of_return - growth_rate)


@formula
def calc_stock_present_value_with_zero_growth(
    dividends_per_period: Decimal,
    required_rate_of_return: Decimal,
) -> Decimal:
    """Stock present value with a constant dividend."""
    return dividends_per_period / required_rate_of_return


# ---------------------------------------------------------------------------
# Returns
# ---------------------------------------------------------------------------


@formula
def calc_capital_gains_yield(
    initial_stock_price: Decimal,
    ending_stock_price: Decimal,
) -> Decimal:
    """Capital Gains Yield."""
    return (ending_stock_price - initial_stock_price) / initial_stock_price


@formula(series=("rates_of_return",))
def calc_geometric_mean_return(rates_of_return: Iterable[Decimal]) -> Decimal:
    """
    Geometric Mean Return of a series of periodic returns.

    Compounds ``(1 + r_i)`` starting from 1 and returns
    ``product ** (1 / n) - 1``.

    Args:
        rates_of_return: Ordered periodic returns.

    Returns:
        The geometric mean return per period, or 0 for an empty series.

    Raises:
        DomainViolation: if the compounded product is negative and ``n`` is
            greater than 1. The exponent ``1 / n`` is then fractional, and a
            negative base has no real fractional power, odd roots included.
    """
    rates = as_series(rates_of_return, "rates_of_return")
    if not rates:
        get_logger(__name__).debug(
            "empty_series", formula="calc_geometric_mean_return"
        )
        return Decimal(0)

    product = growth_product(rates)
    return power(product, Decimal(1) / len(rates)) - 1


@formula(series=("period_returns",))
def calc_holding_period_return(period_returns: Iterable[Decimal]) -> Decimal:
    """
    Holding Period Return compounded from a series of periodic returns.

    ``(1 + r_1) * ... * (1 + r_n) - 1``; an empty series returns 0.
    """
    rates = as_series(period_returns, "period_returns")
    if not rates:
        get_logger(__name__).debug(
            "empty_series", formula="calc_holding_period_return"
        )
        return Decimal(0)

    return growth_product(rates) - 1


@formula
def calc_holding_period_return_from_rate(
    periodic_rate: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Holding Period Return of a constant periodic rate: ``(1 + r) ** n - 1``."""
    return power(1 + periodic_rate, number_of_periods) - 1


@formula
def calc_holding_period_return_from_income(
    earnings: Decimal,
    asset_appreciation: Decimal,
    initial_investment: Decimal,
) -> Decimal:
    """Holding Period Return from income and appreciation."""
    return (earnings + asset_appreciation) / initial_investment


@formula
def calc_total_stock_return_percentage(
    initial_stock_price: Decimal,
    ending_stock_price: Decimal,
    dividends: Decimal,
) -> Decimal:
    """Total Stock Return as a fraction of the initial price."""
    gain = (ending_stock_price - initial_stock_price) + dividends
    return gain / initial_stock_price


@formula
def calc_total_stock_return_cash(
    initial_stock_price: Decimal,
    ending_stock_price: Decimal,
    dividends: Decimal,
) -> Decimal:
    """Total Stock Return in cash."""
    return (ending_stock_price - initial_stock_price) + dividends


@formula
def calc_total_stock_return_from_yields(
    dividend_yield: Decimal,
    capital_gains_yield: Decimal,
) -> Decimal:
    """Total Stock Return from dividend and capital gains yields."""
    return dividend_yield + capital_gains_yield


# ---------------------------------------------------------------------------
# Bonds and yields
# ---------------------------------------------------------------------------


@formula
def calc_bond_equivalent_yield(
    face_value: Decimal,
    bond_price: Decimal,
    days_to_maturity: Decimal,
) -> Decimal:
    """Bond Equivalent Yield of a discount bond, annualised on 365 days."""
    return ((face_value - bond_price) / bond_price) * (DAYS_PER_YEAR / days_to_maturity)


@formula
def calc_current_yield(annual_coupons: Decimal, current_bond_price: Decimal) -> Decimal:
    """Current Yield."""
    return annual_coupons / current_bond_price


@formula
def calc_tax_equivalent_yield(tax_free_yield: Decimal, tax_rate: Decimal) -> Decimal:
    """Tax Equivalent Yield: ``tax_free_yield / (1 - tax_rate)``."""
    return tax_free_yield / (1 - tax_rate)


@formula
def calc_approx_yield_to_maturity(
    coupon_or_interest_payment: Decimal,
    face_value: Decimal,
    price: Decimal,
    years_to_maturity: Decimal,
) -> Decimal:
    """
    Approximate Yield to Maturity.

    Annual coupon plus the straight-line accretion of the discount, over the
    average of face value and price.
    """
    numerator = coupon_or_interest_payment + ((face_value - price) / years_to_maturity)
    denominator = (face_value + price) / 2
    return numerator / denominator


@formula
def calc_zero_coupon_bond_value(
    face_value: Decimal,
    rate_or_yield: Decimal,
    time_to_maturity: Decimal,
) -> Decimal:
    """Zero Coupon Bond value: ``face / (1 + y) ** t``."""
    return face_value / power(1 + rate_or_yield, time_to_maturity)


@formula
def calc_zero_coupon_bond_yield(
    face_value: Decimal,
    present_value: Decimal,
    time_to_maturity: Decimal,
) -> Decimal:
    """
    Zero Coupon Bond yield: ``(face / price) ** (1 / t) - 1``.

    Inverse of ``calc_zero_coupon_bond_value``.
    """
    return power(face_value / present_value, 1 / time_to_maturity) - 1
