# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Financial Formulas
------------------

A reference catalogue of finance and accounting formulas, computed with
``decimal.Decimal`` end to end. Every formula is a pure function: it takes
numbers, returns one Decimal, never rounds, and raises a typed error
instead of returning an infinite or missing value.

Main capabilities:
- banking formulas (interest, loans, annual percentage yield),
- corporate finance (net present value, payback, free cash flows, ratios),
- general finance (time value of money, annuities, perpetuities),
- financial markets (inflation, real rate of return),
- stocks and bonds (yields, returns, dividend valuation, risk measures),
- financial statement ratios (activity, debt, liquidity, profitability),
- a catalogue of every formula with a pandas tabular view,
- row-wise evaluation over pandas DataFrames,
- optional TOML configuration and structlog logging.

Formulas are grouped in modules::

    from financial_formulas import corporate, round_half_away

    npv = corporate.calc_net_present_value(
        100000, [35000, 55000, 45000, 20000, 5000], "0.04"
    )
    round_half_away(npv, 2)  # Decimal('45714.99')

Version: 0.1.0
"""

from . import banking, corporate, general_finance, markets, ratios, stocks_bonds
from .config import LibraryConfig, NumericSettings, load_config
from .logging_config import configure_logging
from .numeric import (
    DomainViolation,
    FormulaError,
    InvalidInputError,
    ZeroDenominatorError,
    round_half_away,
    to_decimal,
)

__all__ = [
    "banking",
    "corporate",
    "general_finance",
    "markets",
    "ratios",
    "stocks_bonds",
    "DomainViolation",
    "FormulaError",
    "InvalidInputError",
    "ZeroDenominatorError",
    "round_half_away",
    "to_decimal",
    "LibraryConfig",
    "NumericSettings",
    "load_config",
    "configure_logging",
]

__version__ = "0.1.0"
