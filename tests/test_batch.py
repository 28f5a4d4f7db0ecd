from decimal import Decimal

import pandas as pd
import pytest
from structlog.testing import capture_logs

from financial_formulas import banking, ratios
from financial_formulas.batch import evaluate_frame, round_series
from financial_formulas.numeric import ZeroDenominatorError


@pytest.fixture
def balance_sheets() -> pd.DataFrame:
    """Three companies, the last one without current liabilities."""
    return pd.DataFrame(
        {
            "current_assets": [500, 1200, 300],
            "current_liabilities": [200, 400, 0],
        },
        index=["acme", "globex", "initech"],
    )


def test_evaluate_frame_with_callable(balance_sheets: pd.DataFrame) -> None:
    result = evaluate_frame(balance_sheets.iloc[:2], ratios.calc_current_ratio)
    assert list(result.index) == ["acme", "globex"]
    assert result.dtype == object
    assert result.name == "calc_current_ratio"
    assert result["acme"] == Decimal("2.5")
    assert result["globex"] == Decimal(3)


def test_evaluate_frame_with_catalogue_key_and_column_mapping() -> None:
    frame = pd.DataFrame(
        {"loan": [150000, 90000], "collateral": [200000, 100000]},
        index=[2023, 2024],
    )
    result = evaluate_frame(
        frame,
        "banking.calc_loan_to_value_ratio",
        columns={"loan_amount": "loan", "value_of_collateral": "collateral"},
    )
    assert result.loc[2023] == Decimal("0.75")
    assert result.loc[2024] == Decimal("0.9")


def test_evaluate_frame_missing_column() -> None:
    frame = pd.DataFrame({"principal": [1000], "rate": [0.04]})
    with pytest.raises(KeyError):
        evaluate_frame(frame, banking.calc_simple_interest)


def test_evaluate_frame_unknown_parameter_in_mapping() -> None:
    frame = pd.DataFrame({"principal": [1000], "rate": [0.04], "time": [10]})
    with pytest.raises(KeyError):
        evaluate_frame(frame, banking.calc_simple_interest, columns={"years": "time"})


def test_evaluate_frame_raise_policy(balance_sheets: pd.DataFrame) -> None:
    with pytest.raises(ZeroDenominatorError):
        evaluate_frame(balance_sheets, ratios.calc_current_ratio)


def test_evaluate_frame_coerce_policy(balance_sheets: pd.DataFrame) -> None:
    """A ratio that cannot be computed becomes None and is reported."""
    with capture_logs() as logs:
        result = evaluate_frame(
            balance_sheets, ratios.calc_current_ratio, errors="coerce"
        )

    assert result["acme"] == Decimal("2.5")
    assert result["initech"] is None
    assert len(logs) == 1
    assert logs[0]["event"] == "formula_row_failed"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["row"] == "initech"


def test_evaluate_frame_unknown_policy(balance_sheets: pd.DataFrame) -> None:
    with pytest.raises(ValueError):
        evaluate_frame(balance_sheets, ratios.calc_current_ratio, errors="ignore")


def test_round_series_keeps_none() -> None:
    frame = pd.DataFrame(
        {"current_assets": [1000, 10], "current_liabilities": [3000, 0]},
        index=["a", "b"],
    )
    result = evaluate_frame(frame, ratios.calc_current_ratio, errors="coerce")
    rounded = round_series(result, 2)
    assert rounded["a"] == Decimal("0.33")
    assert rounded["b"] is None
