# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Configuration helpers for Financial Formulas.

This module is responsible for:
- loading the optional library configuration from a TOML file,
- validating the Decimal arithmetic settings (precision, rounding mode),
- exposing typed dataclasses that callers use to opt in to those settings.

The configuration is never installed globally. A caller who wants the
configured precision wraps formula calls explicitly::

    cfg = load_config()
    with decimal.localcontext(cfg.numeric.context()):
        value = calc_net_present_value(100000, flows, "0.04")
"""

import decimal
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_FILE = "financial_formulas.toml"

# Rounding modes accepted in [numeric].rounding (names of decimal constants).
ROUNDING_MODES = (
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class NumericSettings:
    """Decimal arithmetic settings applied through ``context()``."""

    precision: int = 28
    rounding: str = decimal.ROUND_HALF_EVEN

    def context(self) -> decimal.Context:
        """
        Build a fresh Decimal context from these settings.

        Division by zero, invalid operations and overflow are trapped so
        that formulas evaluated under this context raise instead of
        returning infinities or NaN.
        """
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[
                decimal.DivisionByZero,
                decimal.InvalidOperation,
                decimal.Overflow,
            ],
        )


@dataclass(frozen=True)
class LibraryConfig:
    """
    Library-wide configuration for Financial Formulas.

    This aggregates:
    - the Decimal arithmetic settings,
    - the log level used by ``configure_logging``,
    - the number of decimals used when presenting results.
    """

    numeric: NumericSettings = field(default_factory=NumericSettings)
    log_level: str = "WARNING"
    display_decimals: int = 2


def _load_toml(path: Path) -> dict[str, Any]:
    """
    Load a TOML file and return its content as a dictionary.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the TOML content cannot be parsed or is not a table.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Failed to parse TOML config file: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Invalid TOML root type in {path}, expected a table.")

    return data


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, Mapping):
        return {}
    return section


def _parse_numeric(raw: Mapping[str, Any]) -> NumericSettings:
    """
    Extract and validate the [numeric] section.

    Raises:
        ValueError: if the precision is not a positive integer or the
            rounding mode is not one of the decimal ROUND_* names.
    """
    section = _section(raw, "numeric")
    defaults = NumericSettings()

    precision = section.get("precision", defaults.precision)
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(
            "Invalid value for 'numeric.precision' in the configuration. "
            "Expected an integer."
        )
    if precision < 1:
        raise ValueError("'numeric.precision' must be at least 1.")

    rounding = str(section.get("rounding", defaults.rounding)).upper()
    if rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode '{rounding}'. "
            f"Expected one of: {', '.join(ROUNDING_MODES)}."
        )

    return NumericSettings(precision=precision, rounding=rounding)


def load_config(config_path: Optional[str] = None) -> LibraryConfig:
    """
    Load the Financial Formulas configuration from a TOML file.

    Expected top-level sections in the TOML file
    --------------------------------------------
    [numeric]
        ``precision`` (significant digits) and ``rounding`` (a decimal
        rounding mode name such as "ROUND_HALF_EVEN").

    [logging]
        ``level`` passed to ``configure_logging``.

    [display]
        ``decimals`` used when presenting results.

    Every section and key is optional.

    Parameters
    ----------
    config_path : str, optional
        Path to the TOML configuration file. When omitted, the file
        ``financial_formulas.toml`` in the current directory is used if it
        exists, otherwise the defaults are returned.

    Returns
    -------
    LibraryConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If an explicit ``config_path`` does not exist.
    ValueError
        If the file cannot be parsed or holds invalid settings.
    """
    if config_path is None:
        config_file = Path(DEFAULT_CONFIG_FILE).resolve()
        if not config_file.is_file():
            return LibraryConfig()
    else:
        config_file = Path(config_path).resolve()

    raw = _load_toml(config_file)

    # 1) Numeric section
    numeric = _parse_numeric(raw)

    # 2) Logging section
    logging_section = _section(raw, "logging")
    log_level = str(logging_section.get("level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{log_level}'. "
            f"Expected one of: {', '.join(LOG_LEVELS)}."
        )

    # 3) Display options
    display_section = _section(raw, "display")
    try:
        display_decimals = int(display_section.get("decimals", 2))
    except (TypeError, ValueError):
        display_decimals = 2

    return LibraryConfig(
        numeric=numeric,
        log_level=log_level,
        display_decimals=display_decimals,
    )
