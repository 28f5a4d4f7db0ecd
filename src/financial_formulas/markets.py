# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""Financial markets formulas: inflation and real returns."""

from decimal import Decimal

from .numeric import formula

__all__ = [
    "calc_rate_of_inflation",
    "calc_real_rate_of_return",
]


@formula
def calc_rate_of_inflation(
    initial_consumer_price_index: Decimal,
    ending_consumer_price_index: Decimal,
) -> Decimal:
    """Rate of Inflation between two consumer price index readings."""
    return (
        ending_consumer_price_index - initial_consumer_price_index
    ) / initial_consumer_price_index


@formula
def calc_real_rate_of_return(nominal_rate: Decimal, inflation_rate: Decimal) -> Decimal:
    """
    Real Rate of Return (Fisher relation, exact form).

    ``(1 + nominal) / (1 + inflation) - 1``
    """
    return (1 + nominal_rate) / (1 + inflation_rate) - 1
