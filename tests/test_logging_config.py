import logging
import subprocess
import sys

import pytest
import structlog

from financial_formulas.logging_config import configure_logging, get_logger


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


def test_configure_logging_renders_to_stderr(reset_logging, capsys) -> None:
    configure_logging("INFO")
    get_logger("financial_formulas.tests").info("hello", answer=42)

    err = capsys.readouterr().err
    assert "hello" in err
    assert "answer" in err
    assert "financial_formulas.tests" in err


def test_configure_logging_filters_by_level(reset_logging, capsys) -> None:
    configure_logging("WARNING")
    logger = get_logger("financial_formulas.tests")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unknown_level_falls_back_to_warning(reset_logging, capsys) -> None:
    configure_logging("LOUD")
    logger = get_logger("financial_formulas.tests")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unconfigured_library_prints_nothing() -> None:
    """Importing and running formulas without configuring logging stays silent."""
    script = (
        "from financial_formulas import catalogue, stocks_bonds\n"
        "stocks_bonds.calc_geometric_mean_return([])\n"
        "stocks_bonds.calc_holding_period_return([])\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        check=True,
    )
    assert completed.stdout == ""
    assert "catalogue_built" not in completed.stderr
    assert "empty_series" not in completed.stderr


def test_unconfigured_logger_goes_through_stdlib_logging(
    reset_logging, caplog
) -> None:
    structlog.reset_defaults()
    caplog.set_level(logging.DEBUG, logger="financial_formulas.tests")

    get_logger("financial_formulas.tests").debug("empty_series", formula="f")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "financial_formulas.tests"
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "event='empty_series' formula='f'"
