# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.


"""
Financial statement ratios and basic accounting identities.

This module is the "financial formulas" group of the catalogue. It
collects the ratios an analyst computes from an income statement and a
balance sheet, organised in seven families:

1. Activity
   ---------
   Turnovers and conversion periods (days). Conversion periods use a
   365-day year, so ``calc_inventory_conversion_period(365) == 1``.

2. Basic
   ------
   Accounting identities: assets = liabilities + equity, gross profit,
   EBIT, operating and net profit, net sales revenue. Each identity and
   its rearrangements hold exactly, e.g.
   ``calc_assets(l, e) - e == l``.

3. Debt
   -----
   Leverage and coverage ratios.

4. Depreciation
   -------------
   Book value, declining balance, straight-line and units-of-production
   charges.

5. Liquidity
   ----------
   Cash, current, quick and operating cash flow ratios.

6. Market
   -------
   Per-share and valuation ratios.

7. Profitability
   --------------
   Margins and returns on assets, capital, equity and investment.

Some names also exist in the ``corporate`` or ``stocks_bonds`` groups with
a different parameter set (for example ``calc_quick_ratio`` here takes
current assets and inventories, the corporate version takes quick assets
directly). They are separate functions; import them from the group whose
inputs you have.

Every ratio divides by a user-supplied amount. A zero divisor raises
``ZeroDenominatorError`` instead of returning an infinite or missing value.
"""

from decimal import Decimal

from .numeric import formula

__all__ = [
    # Activity
    "calc_asset_turnover",
    "calc_average_collection_period",
    "calc_cash_conversion_cycle",
    "calc_inventory_conversion_period",
    "calc_inventory_conversion_ratio",
    "calc_inventory_turnover",
    "calc_payables_conversion_period",
    "calc_receivables_conversion_period",
    "calc_receivables_turnover_ratio",
    # Basic
    "calc_assets",
    "calc_ebit",
    "calc_equity",
    "calc_gross_profit",
    "calc_liabilities",
    "calc_net_profit",
    "calc_operating_profit",
    "calc_sales_revenue",
    # Debt
    "calc_debt_equity_ratio",
    "calc_debt_ratio",
    "calc_debt_service_coverage_ratio",
    "calc_long_term_debt_equity_ratio",
    # Depreciation
    "calc_book_value",
    "calc_declining_balance",
    "calc_straight_line_method",
    "calc_units_of_production",
    # Liquidity
    "calc_cash_ratio",
    "calc_current_ratio",
    "calc_operating_cash_flow_ratio",
    "calc_quick_ratio",
    # Market
    "calc_dividend_cover",
    "calc_dividend_yield",
    "calc_dividends_per_share",
    "calc_earnings_per_share",
    "calc_payout_ratio",
    "calc_peg_ratio",
    "calc_price_sales_ratio",
    # Profitability
    "calc_ebitda",
    "calc_efficiency_ratio",
    "calc_gross_profit_margin",
    "calc_operating_margin",
    "calc_profit_margin",
    "calc_return_on_assets",
    "calc_return_on_capital",
    "calc_return_on_equity",
    "calc_return_on_investment",
    "calc_return_on_net_assets",
    "calc_risk_adjusted_return_on_capital",
]

DAYS_PER_YEAR = 365

# Share of sales used as the cost basis in the inventory conversion ratio.
INVENTORY_CONVERSION_SALES_SHARE = Decimal("0.5")


# ---------------------------------------------------------------------------
# Activity
# ---------------------------------------------------------------------------


@formula
def calc_asset_turnover(net_sales: Decimal, total_assets: Decimal) -> Decimal:
    """Asset Turnover."""
    return net_sales / total_assets


@formula
def calc_average_collection_period(
    accounts_receivable: Decimal,
    annual_credit_sales: Decimal,
) -> Decimal:
    """
    Average Collection Period (days).

    Receivables divided by average daily credit sales:
    ``accounts_receivable / (annual_credit_sales / 365)``.
    """
    return accounts_receivable / (annual_credit_sales / DAYS_PER_YEAR)


@formula
def calc_cash_conversion_cycle(
    inventory_conversion_period: Decimal,
    receivables_conversion_period: Decimal,
    payables_conversion_period: Decimal,
) -> Decimal:
    """Cash Conversion Cycle (days)."""
    return (
        inventory_conversion_period
        + receivables_conversion_period
        - payables_conversion_period
    )


@formula
def calc_inventory_conversion_period(inventory_turnover_ratio: Decimal) -> Decimal:
    """Inventory Conversion Period (days)."""
    return DAYS_PER_YEAR / inventory_turnover_ratio


@formula
def calc_inventory_conversion_ratio(
    sales: Decimal,
    cost_of_goods_sold: Decimal,
) -> Decimal:
    """Inventory Conversion Ratio: ``(sales * 0.5) / cost_of_goods_sold``."""
    return (sales * INVENTORY_CONVERSION_SALES_SHARE) / cost_of_goods_sold


@formula
def calc_inventory_turnover(sales: Decimal, average_inventory: Decimal) -> Decimal:
    """Inventory Turnover."""
    return sales / average_inventory


@formula
def calc_payables_conversion_period(
    accounts_payable: Decimal,
    purchases: Decimal,
) -> Decimal:
    """Payables Conversion Period (days)."""
    return (accounts_payable / purchases) * DAYS_PER_YEAR


@formula
def calc_receivables_conversion_period(
    receivables: Decimal,
    net_sales: Decimal,
) -> Decimal:
    """Receivables Conversion Period (days)."""
    return (receivables / net_sales) * DAYS_PER_YEAR


@formula
def calc_receivables_turnover_ratio(
    net_credit_sales: Decimal,
    average_net_receivables: Decimal,
) -> Decimal:
    """Receivables Turnover Ratio."""
    return net_credit_sales / average_net_receivables


# ---------------------------------------------------------------------------
# Basic
# ---------------------------------------------------------------------------


@formula
def calc_assets(liabilities: Decimal, equity: Decimal) -> Decimal:
    """Assets = Liabilities + Equity."""
    return liabilities + equity


@formula
def calc_ebit(revenue: Decimal, operating_expenses: Decimal) -> Decimal:
    """Earnings Before Interest and Taxes."""
    return revenue - operating_expenses


@formula
def calc_equity(assets: Decimal, liabilities: Decimal) -> Decimal:
    """Equity = Assets - Liabilities."""
    return assets - liabilities


@formula
def calc_gross_profit(revenue: Decimal, cost_of_goods_sold: Decimal) -> Decimal:
    """Gross Profit."""
    return revenue - cost_of_goods_sold


@formula
def calc_liabilities(assets: Decimal, equity: Decimal) -> Decimal:
    """Liabilities = Assets - Equity."""
    return assets - equity


@formula
def calc_net_profit(
    gross_profit: Decimal,
    operating_expenses: Decimal,
    taxes: Decimal,
    interest: Decimal,
) -> Decimal:
    """Net Profit."""
    return gross_profit - operating_expenses - taxes - interest


@formula
def calc_operating_profit(
    gross_profit: Decimal,
    operating_expenses: Decimal,
) -> Decimal:
    """Operating Profit."""
    return gross_profit - operating_expenses


@formula
def calc_sales_revenue(
    gross_sales: Decimal,
    sales_of_returns_and_allowances: Decimal,
) -> Decimal:
    """Net Sales Revenue."""
    return gross_sales - sales_of_returns_and_allowances


# ---------------------------------------------------------------------------
# Debt
# ---------------------------------------------------------------------------


@formula
def calc_debt_equity_ratio(
    total_liabilities: Decimal,
    shareholder_equity: Decimal,
) -> Decimal:
    """Debt to Equity Ratio."""
    return total_liabilities / shareholder_equity


@formula
def calc_debt_ratio(total_liabilities: Decimal, total_assets: Decimal) -> Decimal:
    """Debt Ratio."""
    return total_liabilities / total_assets


@formula
def calc_debt_service_coverage_ratio(
    net_operating_income: Decimal,
    total_debt_service: Decimal,
) -> Decimal:
    """Debt Service Coverage Ratio."""
    return net_operating_income / total_debt_service


@formula
def calc_long_term_debt_equity_ratio(
    long_term_liabilities: Decimal,
    equity: Decimal,
) -> Decimal:
    """Long-Term Debt to Equity Ratio."""
    return long_term_liabilities / equity


# ---------------------------------------------------------------------------
# Depreciation
# ---------------------------------------------------------------------------


@formula
def calc_book_value(acquisition_cost: Decimal, depreciation: Decimal) -> Decimal:
    """Book Value of an asset net of accumulated depreciation."""
    return acquisition_cost - depreciation


@formula
def calc_declining_balance(
    depreciation_rate: Decimal,
    book_value_at_beginning_of_year: Decimal,
) -> Decimal:
    """Declining Balance depreciation charge for the year."""
    return depreciation_rate * book_value_at_beginning_of_year


@formula
def calc_units_of_production(
    cost_of_asset: Decimal,
    residual_value: Decimal,
    estimated_total_production: Decimal,
    actual_production: Decimal,
) -> Decimal:
    """
    Units of Production depreciation charge.

    Depreciable base spread over the estimated production, times the
    actual production of the period.
    """
    per_unit = (cost_of_asset - residual_value) / estimated_total_production
    return per_unit * actual_production


@formula
def calc_straight_line_method(
    cost_of_fixed_asset: Decimal,
    residual_value: Decimal,
    useful_life_of_asset: Decimal,
) -> Decimal:
    """Straight Line depreciation charge per period."""
    return (cost_of_fixed_asset - residual_value) / useful_life_of_asset


# ---------------------------------------------------------------------------
# Liquidity
# ---------------------------------------------------------------------------


@formula
def calc_cash_ratio(
    cash: Decimal,
    marketable_securities: Decimal,
    current_liabilities: Decimal,
) -> Decimal:
    """Cash Ratio."""
    return (cash + marketable_securities) / current_liabilities


@formula
def calc_current_ratio(
    current_assets: Decimal,
    current_liabilities: Decimal,
) -> Decimal:
    """Current Ratio."""
    return current_assets / current_liabilities


@formula
def calc_operating_cash_flow_ratio(
    operating_cash_flow: Decimal,
    total_debts: Decimal,
) -> Decimal:
    """Operating Cash Flow Ratio."""
    return operating_cash_flow / total_debts


@formula
def calc_quick_ratio(
    current_assets: Decimal,
    inventories: Decimal,
    current_liabilities: Decimal,
) -> Decimal:
    """Quick Ratio (acid test) from current assets less inventories."""
    return (current_assets - inventories) / current_liabilities


# ---------------------------------------------------------------------------
# Market
# ---------------------------------------------------------------------------


@formula
def calc_dividend_cover(
    earnings_per_share: Decimal,
    dividends_per_share: Decimal,
) -> Decimal:
    """Dividend Cover."""
    return earnings_per_share / dividends_per_share


@formula
def calc_dividends_per_share(
    dividends_paid: Decimal,
    number_of_shares: Decimal,
) -> Decimal:
    """Dividends per Share."""
    return dividends_paid / number_of_shares


@formula
def calc_dividend_yield(
    annual_dividend_per_share: Decimal,
    price_per_share: Decimal,
) -> Decimal:
    """Dividend Yield."""
    return annual_dividend_per_share / price_per_share


@formula
def calc_earnings_per_share(
    net_earnings: Decimal,
    number_of_shares: Decimal,
) -> Decimal:
    """Earnings per Share."""
    return net_earnings / number_of_shares


@formula
def calc_payout_ratio(dividends: Decimal, earnings: Decimal) -> Decimal:
    """Payout Ratio."""
    return dividends / earnings


@formula
def calc_peg_ratio(price_per_earnings: Decimal, annual_eps_growth: Decimal) -> Decimal:
    """Price/Earnings to Growth ratio."""
    return price_per_earnings / annual_eps_growth


@formula
def calc_price_sales_ratio(
    price_per_share: Decimal,
    revenue_per_share: Decimal,
) -> Decimal:
    """Price to Sales Ratio."""
    return price_per_share / revenue_per_share


# ---------------------------------------------------------------------------
# Profitability
# ---------------------------------------------------------------------------


@formula
def calc_efficiency_ratio(non_interest_expense: Decimal, revenue: Decimal) -> Decimal:
    """Efficiency Ratio (banking)."""
    return non_interest_expense / revenue


@formula
def calc_gross_profit_margin(gross_profit: Decimal, revenue: Decimal) -> Decimal:
    """Gross Profit Margin."""
    return gross_profit / revenue


@formula
def calc_operating_margin(operating_income: Decimal, revenue: Decimal) -> Decimal:
    """Operating Margin."""
    return operating_income / revenue


@formula
def calc_profit_margin(net_profit: Decimal, revenue: Decimal) -> Decimal:
    """Profit Margin."""
    return net_profit / revenue


@formula
def calc_return_on_assets(net_income: Decimal, total_assets: Decimal) -> Decimal:
    """Return on Assets."""
    return net_income / total_assets


@formula
def calc_return_on_capital(
    ebit: Decimal,
    tax_rate: Decimal,
    invested_capital: Decimal,
) -> Decimal:
    """Return on Capital: after-tax EBIT over invested capital."""
    return ebit * (1 - tax_rate) / invested_capital


@formula
def calc_return_on_equity(
    net_income: Decimal,
    average_shareholder_equity: Decimal,
) -> Decimal:
    """Return on Equity."""
    return net_income / average_shareholder_equity


@formula
def calc_return_on_net_assets(
    net_income: Decimal,
    fixed_assets: Decimal,
    working_capital: Decimal,
) -> Decimal:
    """Return on Net Assets."""
    return net_income / (fixed_assets + working_capital)


@formula
def calc_risk_adjusted_return_on_capital(
    expected_return: Decimal,
    economic_capital: Decimal,
) -> Decimal:
    """Risk-Adjusted Return on Capital."""
    return expected_return / economic_capital


@formula
def calc_return_on_investment(gain: Decimal, cost: Decimal) -> Decimal:
    """Return on Investment: ``(gain - cost) / cost``."""
    return (gain - cost) / cost


@formula
def calc_ebitda(ebit: Decimal, depreciation: Decimal, amortization: Decimal) -> Decimal:
    """Earnings Before Interest, Taxes, Depreciation and Amortization."""
    return ebit + depreciation + amortization
