# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Logging configuration for Financial Formulas.

The library logs through structlog on top of the standard ``logging``
module. Modules obtain a logger with ``get_logger(__name__)`` at the point
where they log; nothing is configured at import time. Applications that want
console output call ``configure_logging()`` once, typically with the level
read from ``LibraryConfig.log_level``.

Until structlog is configured, events go to the standard ``logging`` tree
under the module name, so an application that never configures logging sees
no DEBUG output (warnings reach stderr through ``logging.lastResort``).
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add log level to the event dict.
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


_UNCONFIGURED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


def configure_logging(log_level: str = "WARNING") -> None:
    """
    Configure structured console logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    logging.basicConfig(
        format="%(message)s",
        handlers=[console_handler],
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """
    Get a logger instance (structured logger).

    Once structlog is configured (by ``configure_logging()``, the host
    application or ``structlog.testing.capture_logs``) this is the regular
    structlog logger. Before that, structlog's default pipeline would print
    every event to stdout, so the event is routed to ``logging.getLogger(name)``
    instead and filtered by the standard logging levels.

    Usage:
        get_logger(__name__).debug(
            "empty_series", formula="calc_geometric_mean_return"
        )
    """
    if structlog.is_configured():
        return structlog.get_logger(name)

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_UNCONFIGURED_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
