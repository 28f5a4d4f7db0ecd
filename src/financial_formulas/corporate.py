# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Corporate finance formulas.

This group covers:
- capital budgeting (net present value, payback periods, equivalent
  annual annuity),
- free cash flow to equity and to the firm,
- the usual corporate ratios (liquidity, leverage, turnover, returns).

All formulas are pure functions of Decimal inputs. Turnover-to-days
conversions use a 365-day year.
"""

from collections.abc import Iterable
from decimal import Decimal

from .numeric import as_series, formula, ln, power

__all__ = [
    "calc_asset_to_sales_ratio",
    "calc_asset_turnover_ratio",
    "calc_average_collection_period",
    "calc_contribution_margin",
    "calc_current_ratio",
    "calc_days_in_inventory",
    "calc_debt_coverage_ratio",
    "calc_debt_ratio",
    "calc_debt_to_equity_ratio",
    "calc_discounted_payback_period",
    "calc_equivalent_annual_annuity",
    "calc_free_cash_flow_to_equity",
    "calc_free_cash_flow_to_firm",
    "calc_interest_coverage_ratio",
    "calc_inventory_turnover_ratio",
    "calc_net_present_value",
    "calc_net_profit_margin",
    "calc_net_working_capital",
    "calc_payback_period",
    "calc_quick_ratio",
    "calc_receivables_turnover_ratio",
    "calc_retention_ratio",
    "calc_return_on_assets",
    "calc_return_on_equity",
    "calc_return_on_investment",
]

DAYS_PER_YEAR = 365


@formula
def calc_asset_to_sales_ratio(total_assets: Decimal, sales_revenue: Decimal) -> Decimal:
    """Asset to Sales Ratio."""
    return total_assets / sales_revenue


@formula
def calc_asset_turnover_ratio(sales_revenue: Decimal, total_assets: Decimal) -> Decimal:
    """Asset Turnover Ratio."""
    return sales_revenue / total_assets


@formula
def calc_average_collection_period(receivables_turnover: Decimal) -> Decimal:
    """Average Collection Period (days) from the receivables turnover."""
    return DAYS_PER_YEAR / receivables_turnover


@formula
def calc_contribution_margin(
    price_per_product: Decimal,
    variable_cost_per_product: Decimal,
) -> Decimal:
    """Contribution Margin per unit."""
    return price_per_product - variable_cost_per_product


@formula
def calc_current_ratio(
    current_assets: Decimal,
    current_liabilities: Decimal,
) -> Decimal:
    """Current Ratio."""
    return current_assets / current_liabilities


@formula
def calc_days_in_inventory(inventory_turnover: Decimal) -> Decimal:
    """Days in Inventory from the inventory turnover."""
    return DAYS_PER_YEAR / inventory_turnover


@formula
def calc_debt_coverage_ratio(
    net_operating_income: Decimal,
    debt_service: Decimal,
) -> Decimal:
    """Debt Coverage Ratio."""
    return net_operating_income / debt_service


@formula
def calc_debt_ratio(total_liabilities: Decimal, total_assets: Decimal) -> Decimal:
    """Debt Ratio."""
    return total_liabilities / total_assets


@formula
def calc_debt_to_equity_ratio(
    total_liabilities: Decimal,
    total_equity: Decimal,
) -> Decimal:
    """Debt to Equity Ratio."""
    return total_liabilities / total_equity


@formula
def calc_discounted_payback_period(
    initial_investment: Decimal,
    rate: Decimal,
    periodic_cash_flow: Decimal,
) -> Decimal:
    """
    Discounted Payback Period for a level periodic cash flow.

    ``ln(1 / (1 - investment * rate / cash_flow)) / ln(1 + rate)``

    When the discounted cash flows never recover the investment the result
    is undefined. At ``investment * rate == cash_flow`` the logarithm
    argument divides by zero and ``ZeroDenominatorError`` is raised; above
    that the argument is negative and ``DomainViolation`` is raised.
    """
    recovered = 1 - (initial_investment * rate) / periodic_cash_flow
    return ln(1 / recovered) / ln(1 + rate)


@formula
def calc_equivalent_annual_annuity(
    net_present_value: Decimal,
    rate_per_period: Decimal,
    number_of_periods: Decimal,
) -> Decimal:
    """Equivalent Annual Annuity of a project's net present value."""
    return (rate_per_period * net_present_value) / (
        1 - power(1 + rate_per_period, -number_of_periods)
    )


@formula
def calc_free_cash_flow_to_equity(
    net_income: Decimal,
    depreciation_and_amortization: Decimal,
    capital_expenditure: Decimal,
    change_in_working_capital: Decimal,
    net_borrowing: Decimal,
) -> Decimal:
    """Free Cash Flow to Equity."""
    return (
        net_income
        + depreciation_and_amortization
        - change_in_working_capital
        - capital_expenditure
        + net_borrowing
    )


@formula
def calc_free_cash_flow_to_firm(
    ebit: Decimal,
    tax_rate: Decimal,
    depreciation_and_amortization: Decimal,
    capital_expenditure: Decimal,
    change_in_working_capital: Decimal,
) -> Decimal:
    """Free Cash Flow to Firm from after-tax EBIT."""
    return (
        ebit * (1 - tax_rate)
        + depreciation_and_amortization
        - capital_expenditure
        - change_in_working_capital
    )


@formula
def calc_interest_coverage_ratio(ebit: Decimal, interest_expense: Decimal) -> Decimal:
    """Interest Coverage Ratio."""
    return ebit / interest_expense


@formula
def calc_inventory_turnover_ratio(sales: Decimal, inventory: Decimal) -> Decimal:
    """Inventory Turnover Ratio."""
    return sales / inventory


@formula(series=("cash_flows",))
def calc_net_present_value(
    initial_investment: Decimal,
    cash_flows: Iterable[Decimal],
    discount_rate: Decimal,
) -> Decimal:
    """
    Net Present Value of a series of end-of-period cash flows.

    ``-initial_investment + sum(cf_t / (1 + rate) ** t for t = 1..n)``

    Args:
        initial_investment: Outlay at period 0 (positive amount).
        cash_flows: Ordered cash flows; the first element is discounted one
            full period.
        discount_rate: Discount rate per period.

    Returns:
        The net present value. An empty series yields ``-initial_investment``.
    """
    growth = 1 + discount_rate
    total = Decimal(0)
    for period, cash_flow in enumerate(as_series(cash_flows, "cash_flows"), start=1):
        total += cash_flow / power(growth, period)
    return -initial_investment + total


@formula
def calc_net_profit_margin(net_income: Decimal, sales_revenue: Decimal) -> Decimal:
    """Net Profit Margin."""
    return net_income / sales_revenue


@formula
def calc_net_working_capital(
    current_assets: Decimal,
    current_liabilities: Decimal,
) -> Decimal:
    """Net Working Capital."""
    return current_assets - current_liabilities


@formula
def calc_payback_period(
    initial_investment: Decimal,
    periodic_cash_flow: Decimal,
) -> Decimal:
    """Payback Period (undiscounted) for a level periodic cash flow."""
    return initial_investment / periodic_cash_flow


@formula
def calc_quick_ratio(quick_assets: Decimal, current_liabilities: Decimal) -> Decimal:
    """Quick Ratio from quick assets."""
    return quick_assets / current_liabilities


@formula
def calc_receivables_turnover_ratio(
    sales_revenue: Decimal,
    average_accounts_receivable: Decimal,
) -> Decimal:
    """Receivables Turnover Ratio."""
    return sales_revenue / average_accounts_receivable


@formula
def calc_retention_ratio(net_income: Decimal, dividends: Decimal) -> Decimal:
    """Retention Ratio: share of net income not paid out as dividends."""
    return (net_income - dividends) / net_income


@formula
def calc_return_on_assets(
    net_income: Decimal,
    average_total_assets: Decimal,
) -> Decimal:
    """Return on Assets."""
    return net_income / average_total_assets


@formula
def calc_return_on_equity(
    net_income: Decimal,
    average_stockholders_equity: Decimal,
) -> Decimal:
    """Return on Equity."""
    return net_income / average_stockholders_equity


@formula
def calc_return_on_investment(
    earnings: Decimal,
    initial_investment: Decimal,
) -> Decimal:
    """Return on Investment: ``(earnings - investment) / investment``."""
    return (earnings - initial_investment) / initial_investment
