# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Row-wise evaluation of formulas over pandas DataFrames.

A typical use is computing one ratio for many companies or periods at
once: each DataFrame row supplies the arguments of one formula call, and
the results come back as a Series aligned on the DataFrame index.

Two error policies are available:

- ``errors="raise"`` (default): the first failing row propagates its
  ``FormulaError`` unchanged.
- ``errors="coerce"``: a failing row yields ``None`` (the ratio "cannot be
  computed" for that row) and a warning is logged with the row index.
"""

import inspect
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Optional, Union

import pandas as pd

from .catalogue import get_formula
from .logging_config import get_logger
from .numeric import FormulaError, round_half_away

ERROR_POLICIES = ("raise", "coerce")


def _resolve_formula(
    formula: Union[str, Callable[..., Decimal]],
) -> Callable[..., Decimal]:
    if isinstance(formula, str):
        return get_formula(formula)
    if not callable(formula):
        raise TypeError(
            "formula must be a callable or a catalogue key, "
            f"got {type(formula).__name__}"
        )
    return formula


def _argument_columns(
    func: Callable[..., Decimal],
    frame: pd.DataFrame,
    columns: Optional[Mapping[str, str]],
) -> list[str]:
    """
    Return, in parameter order, the column feeding each formula parameter.

    Raises:
        KeyError: if a mapped or implied column is not in ``frame``.
    """
    mapping = dict(columns or {})
    parameters = list(inspect.signature(func).parameters)

    unknown = set(mapping).difference(parameters)
    if unknown:
        raise KeyError(
            f"{func.__name__} has no parameter(s) named {sorted(unknown)}"
        )

    selected = [mapping.get(param, param) for param in parameters]
    missing = [col for col in selected if col not in frame.columns]
    if missing:
        raise KeyError(f"Missing column(s) for {func.__name__}: {missing}")
    return selected


def evaluate_frame(
    frame: pd.DataFrame,
    formula: Union[str, Callable[..., Decimal]],
    columns: Optional[Mapping[str, str]] = None,
    errors: str = "raise",
) -> pd.Series:
    """
    Evaluate a formula once per DataFrame row.

    Parameters
    ----------
    frame : pd.DataFrame
        Input data, one formula call per row.
    formula : str or callable
        A formula function, or a catalogue key such as
        ``"banking.calc_loan_payment"``.
    columns : mapping, optional
        Parameter name -> column name. Parameters not listed are read from
        the column of the same name.
    errors : {"raise", "coerce"}
        Error policy for rows whose evaluation fails.

    Returns
    -------
    pd.Series
        Object-dtype Series of Decimal (or None) values, indexed like
        ``frame`` and named after the formula.

    Raises
    ------
    KeyError
        If a required column is missing or the catalogue key is unknown.
    ValueError
        If ``errors`` is not a supported policy.
    FormulaError
        With ``errors="raise"``, the error of the first failing row.
    """
    if errors not in ERROR_POLICIES:
        raise ValueError(
            f"Unknown errors policy '{errors}'. "
            f"Expected one of: {', '.join(ERROR_POLICIES)}."
        )

    func = _resolve_formula(formula)
    selected = _argument_columns(func, frame, columns)

    values: list[Optional[Decimal]] = []
    for row in frame[selected].itertuples(index=True, name=None):
        row_index, args = row[0], row[1:]
        try:
            values.append(func(*args))
        except FormulaError as exc:
            if errors == "raise":
                raise
            get_logger(__name__).warning(
                "formula_row_failed",
                formula=func.__name__,
                row=row_index,
                error=str(exc),
            )
            values.append(None)

    return pd.Series(values, index=frame.index, dtype=object, name=func.__name__)


def round_series(series: pd.Series, places: int) -> pd.Series:
    """
    Round every Decimal of a result Series half away from zero.

    ``None`` cells (rows that could not be computed) are kept as ``None``.
    """
    return series.map(
        lambda value: None if value is None else round_half_away(value, places)
    ).astype(object)
