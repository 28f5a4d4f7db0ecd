# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Formula catalogue.

This module indexes every formula exported by the group modules so that
callers can discover, look up and document them without importing each
group by hand.

1. Keys
   -----
   A formula is identified by ``"<group>.<name>"``, for example
   ``"corporate.calc_net_present_value"``. The same function name may exist
   in several groups (``calc_quick_ratio`` is both a corporate and a ratios
   formula); the group prefix keeps the keys unique.

2. Metadata
   ---------
   Each entry is a frozen ``FormulaMeta`` holding the parameter names in
   call order, the names of the series parameters and a one-line label taken
   from the function docstring.

3. Tabular view
   -------------
   ``catalogue_to_dataframe()`` returns the catalogue as a pandas DataFrame,
   ready to print or export.

The catalogue is built once at import time and exposed read-only.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType, ModuleType
from typing import Optional

import pandas as pd

from . import banking, corporate, general_finance, markets, ratios, stocks_bonds
from .logging_config import get_logger

GROUPS = (
    "banking",
    "corporate",
    "general_finance",
    "markets",
    "stocks_bonds",
    "ratios",
)

_GROUP_MODULES: dict[str, ModuleType] = {
    "banking": banking,
    "corporate": corporate,
    "general_finance": general_finance,
    "markets": markets,
    "stocks_bonds": stocks_bonds,
    "ratios": ratios,
}

CATALOGUE_COLUMNS = ["key", "group", "name", "label", "parameters"]


@dataclass(frozen=True)
class FormulaMeta:
    """Describes one catalogue formula."""

    key: str
    group: str
    name: str
    label: str
    parameters: tuple[str, ...]
    series_parameters: tuple[str, ...]
    function: Callable[..., Decimal]


def _label(func: Callable[..., Decimal]) -> str:
    doc = inspect.getdoc(func) or ""
    first_line = doc.strip().splitlines()[0] if doc.strip() else ""
    return first_line.rstrip(".") or func.__name__


def _build_catalogue() -> dict[str, FormulaMeta]:
    entries: dict[str, FormulaMeta] = {}
    for group in GROUPS:
        module = _GROUP_MODULES[group]
        for name in sorted(module.__all__):
            func = getattr(module, name)
            key = f"{group}.{name}"
            entries[key] = FormulaMeta(
                key=key,
                group=group,
                name=name,
                label=_label(func),
                parameters=tuple(inspect.signature(func).parameters),
                series_parameters=tuple(getattr(func, "series_parameters", ())),
                function=func,
            )
    get_logger(__name__).debug(
        "catalogue_built", formulas=len(entries), groups=len(GROUPS)
    )
    return entries


FORMULAS: MappingProxyType[str, FormulaMeta] = MappingProxyType(_build_catalogue())


def get_formula(key: str) -> Callable[..., Decimal]:
    """
    Return the formula registered under ``key``.

    Raises:
        KeyError: if no formula is registered under that key.
    """
    try:
        return FORMULAS[key].function
    except KeyError:
        raise KeyError(f"Unknown formula: {key!r}") from None


def list_formulas(group: Optional[str] = None) -> list[FormulaMeta]:
    """
    List catalogue entries, optionally restricted to one group.

    Entries are ordered by group (in ``GROUPS`` order) and then by name.

    Raises:
        ValueError: if ``group`` is not one of ``GROUPS``.
    """
    if group is not None and group not in GROUPS:
        raise ValueError(
            f"Unknown formula group '{group}'. Expected one of: {', '.join(GROUPS)}."
        )
    # FORMULAS is built group by group in sorted name order.
    return [
        meta for meta in FORMULAS.values() if group is None or meta.group == group
    ]


def catalogue_to_dataframe(group: Optional[str] = None) -> pd.DataFrame:
    """
    Convert the catalogue into a pandas DataFrame.

    The resulting DataFrame has the following columns:
        - key:        Catalogue identifier ("<group>.<name>").
        - group:      Formula group.
        - name:       Function name.
        - label:      Human-readable label (first docstring line).
        - parameters: Parameter names in call order, joined with ", ".

    Args:
        group:
            Optional group name to restrict the listing.

    Returns:
        A pandas DataFrame containing one row per formula, in the order of
        ``list_formulas()``.
    """
    rows = [
        {
            "key": meta.key,
            "group": meta.group,
            "name": meta.name,
            "label": meta.label,
            "parameters": ", ".join(meta.parameters),
        }
        for meta in list_formulas(group)
    ]
    if not rows:
        return pd.DataFrame(columns=CATALOGUE_COLUMNS)
    return pd.DataFrame(rows)[CATALOGUE_COLUMNS]
