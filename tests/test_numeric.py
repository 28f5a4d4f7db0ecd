from decimal import Decimal, DivisionByZero, localcontext

import pytest

from financial_formulas.numeric import (
    DomainViolation,
    FormulaError,
    InvalidInputError,
    ZeroDenominatorError,
    as_series,
    as_weighted_pairs,
    exp,
    formula,
    growth_product,
    ln,
    power,
    round_half_away,
    to_decimal,
)

# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Decimal("1.25"), Decimal("1.25")),
        (7, Decimal("7")),
        (0.04, Decimal("0.04")),
        (0.1, Decimal("0.1")),
        ("1000.50", Decimal("1000.50")),
        (" 3 ", Decimal("3")),
    ],
)
def test_to_decimal_accepts_numbers_and_numeric_strings(raw, expected) -> None:
    """Floats convert through their shortest repr, not their binary expansion."""
    assert to_decimal(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [True, None, "abc", float("nan"), float("inf"), Decimal("NaN"), [1]],
)
def test_to_decimal_rejects_non_finite_or_non_numeric(raw) -> None:
    """Anything that is not a finite number raises InvalidInputError."""
    with pytest.raises(InvalidInputError):
        to_decimal(raw, "amount")


def test_invalid_input_error_is_also_type_error() -> None:
    """The taxonomy keeps the builtin exception families usable."""
    with pytest.raises(TypeError):
        to_decimal(None)
    assert issubclass(InvalidInputError, FormulaError)
    assert issubclass(ZeroDenominatorError, ZeroDivisionError)
    assert issubclass(DomainViolation, ValueError)


def test_as_series_keeps_order_and_converts() -> None:
    """Series elements are converted one by one, in order."""
    assert as_series([1, 0.5, "2"]) == [Decimal(1), Decimal("0.5"), Decimal(2)]
    assert as_series(iter([3, 4])) == [Decimal(3), Decimal(4)]
    assert as_series([]) == []


@pytest.mark.parametrize("values", [{1, 2}, {"a": 1}, "123", 42])
def test_as_series_rejects_unordered_or_scalar_input(values) -> None:
    """Sets, mappings, strings and scalars are not series."""
    with pytest.raises(InvalidInputError):
        as_series(values, "cash_flows")


def test_as_weighted_pairs_converts_pairs() -> None:
    pairs = as_weighted_pairs([(0.25, 0.06), (0.75, 0.02)])
    assert pairs == [
        (Decimal("0.25"), Decimal("0.06")),
        (Decimal("0.75"), Decimal("0.02")),
    ]
    assert as_weighted_pairs(iter([("0.5", 1)])) == [(Decimal("0.5"), Decimal(1))]


def test_as_weighted_pairs_rejects_mapping() -> None:
    """A {weight: value} dict would merge pairs that share a weight."""
    with pytest.raises(InvalidInputError):
        as_weighted_pairs({0.25: 0.06, 0.75: 0.02})


def test_as_weighted_pairs_rejects_malformed_pair() -> None:
    with pytest.raises(InvalidInputError):
        as_weighted_pairs([(1, 2, 3)])


# ---------------------------------------------------------------------------
# Transcendental helpers
# ---------------------------------------------------------------------------


def test_power_integral_and_fractional_exponents() -> None:
    assert round_half_away(power(Decimal("1.04"), 10), 6) == Decimal("1.480244")
    assert round_half_away(power(4, Decimal("0.5")), 10) == Decimal("2")
    assert power(Decimal(-2), 3) == Decimal(-8)


def test_power_zero_base_negative_exponent_is_zero_denominator() -> None:
    with pytest.raises(ZeroDenominatorError):
        power(0, -1)


def test_power_negative_base_fractional_exponent_is_domain_violation() -> None:
    with pytest.raises(DomainViolation):
        power(-8, Decimal("0.5"))


def test_power_overflow_is_domain_violation() -> None:
    with pytest.raises(DomainViolation):
        power(10, 400)


def test_exp_and_ln() -> None:
    assert round_half_away(exp(1), 6) == Decimal("2.718282")
    assert round_half_away(ln(Decimal("2.718281828459045")), 10) == Decimal("1")
    with pytest.raises(DomainViolation):
        exp(1000)


@pytest.mark.parametrize("value", [0, -1, Decimal("-0.5")])
def test_ln_of_non_positive_value(value) -> None:
    with pytest.raises(DomainViolation):
        ln(value)


def test_growth_product_starts_from_one() -> None:
    assert growth_product([]) == Decimal(1)
    assert growth_product([Decimal("0.1"), Decimal("0.2")]) == Decimal("1.32")


@pytest.mark.parametrize(
    "value, places, expected",
    [
        (Decimal("0.365"), 2, Decimal("0.37")),
        (Decimal("-0.365"), 2, Decimal("-0.37")),
        (Decimal("2.5"), 0, Decimal("3")),
        (Decimal("-2.5"), 0, Decimal("-3")),
        (Decimal("1.2344"), 3, Decimal("1.234")),
        (
            Decimal("12345678901234567890123456789"),
            2,
            Decimal("12345678901234567890123456789.00"),
        ),
        (
            "1234567890123456789012345678.905",
            2,
            Decimal("1234567890123456789012345678.91"),
        ),
    ],
)
def test_round_half_away_from_zero(value, places, expected) -> None:
    """Halves are rounded away from zero, unlike the banker's rounding default."""
    assert round_half_away(value, places) == expected


# ---------------------------------------------------------------------------
# Formula decorator
# ---------------------------------------------------------------------------


@formula
def _ratio(numerator, denominator):
    """Ratio used to exercise the decorator."""
    return numerator / denominator


@formula(series=("values",))
def _total(values, scale):
    return sum(as_series(values), Decimal(0)) * scale


def test_formula_coerces_scalars_and_keeps_series() -> None:
    assert _ratio(1, 4) == Decimal("0.25")
    assert _ratio(numerator="3", denominator=0.5) == Decimal(6)
    assert _total([1, 2, 3], scale=2) == Decimal(12)
    assert _total.series_parameters == ("values",)
    assert _ratio.series_parameters == ()


def test_formula_translates_decimal_signals() -> None:
    """Plain division by zero and 0/0 both surface as ZeroDenominatorError."""
    with pytest.raises(ZeroDenominatorError):
        _ratio(1, 0)
    with pytest.raises(ZeroDenominatorError):
        _ratio(0, 0)


@formula
def _zero_rate_factor(rate, periods):
    """Annuity factor shape that turns into 0/0 at a zero rate."""
    return ((1 + rate) ** int(periods) - 1) / rate


def test_zero_by_zero_is_not_a_domain_violation() -> None:
    with pytest.raises(ZeroDenominatorError) as excinfo:
        _zero_rate_factor(0, 10)
    assert not isinstance(excinfo.value, DomainViolation)


def test_other_invalid_operations_are_domain_violations() -> None:
    @formula
    def _square_root(value):
        return value.sqrt()

    with pytest.raises(DomainViolation):
        _square_root(-4)


def test_formula_traps_even_when_caller_context_does_not() -> None:
    """A permissive caller context cannot leak Infinity out of a formula."""
    with localcontext() as ctx:
        ctx.traps[DivisionByZero] = False
        with pytest.raises(ZeroDenominatorError):
            _ratio(1, 0)


def test_formula_respects_caller_precision() -> None:
    with localcontext() as ctx:
        ctx.prec = 5
        assert _ratio(1, 3) == Decimal("0.33333")


def test_formula_rejects_unknown_series_parameter() -> None:
    with pytest.raises(TypeError):

        @formula(series=("missing",))
        def _broken(value):
            return value


def test_formula_keeps_metadata() -> None:
    assert _ratio.__name__ == "_ratio"
    assert _ratio.__doc__ == "Ratio used to exercise the decorator."
