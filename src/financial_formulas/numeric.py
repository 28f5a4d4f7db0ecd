# Financial Formulas - Reference catalogue of finance & accounting formulas
# Copyright (c) 2025 Maxence Bernard (maxencebernardhub)
# Licensed under the MIT License. See LICENSE file for details.

"""
Numeric evaluation discipline shared by every formula group.

Every formula in this package follows the same rules:

1. Decimal in, Decimal out
   ------------------------
   Scalar inputs are coerced to ``decimal.Decimal`` at the formula boundary
   by ``to_decimal()``. Floats go through their shortest ``repr`` so that
   ``0.04`` becomes ``Decimal("0.04")`` and not the exact binary expansion.
   Additions, subtractions, multiplications and divisions stay in exact
   decimal arithmetic under the caller's current decimal context.

2. Transcendental steps go through float
   --------------------------------------
   There is no exact decimal algorithm for a real power, an exponential or
   a logarithm. ``power()``, ``exp()`` and ``ln()`` convert their operands
   to binary floats, call the ``math`` module and convert the result back.
   The precision loss is bounded (about 1e-15 relative) and identical for
   every formula.

3. No rounding
   ------------
   Formulas return full precision. ``round_half_away()`` is available to
   callers that need a presentation value (half away from zero).

4. One error taxonomy
   -------------------
   - ``ZeroDenominatorError``: a denominator is zero.
   - ``DomainViolation``: fractional power of a negative base, logarithm of
     a non-positive value, or a transcendental result out of float range.
   - ``InvalidInputError``: an argument is not a finite number, or a series
     argument is not an ordered iterable.

   All three derive from ``FormulaError`` (itself a ``ValueError``).

The ``formula`` decorator wires rules 1 and 4 into each catalogue function:
it coerces scalar arguments, runs the body in a local decimal context with
the relevant traps enabled, and translates decimal signals raised by plain
``/`` into the taxonomy above.
"""

import functools
import inspect
import math
import numbers
from collections.abc import Callable, Iterable, Mapping, Set
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DivisionByZero,
    DivisionUndefined,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Any, Optional, Union

Number = Union[Decimal, int, float, str]

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FormulaError(ValueError):
    """Base class for every error raised by a formula."""


class InvalidInputError(FormulaError, TypeError):
    """An argument is not a finite number or not a usable series."""


class ZeroDenominatorError(FormulaError, ZeroDivisionError):
    """A formula divided by zero (including zero raised to a negative power)."""


class DomainViolation(FormulaError):
    """
    A transcendental step was evaluated outside its real domain.

    Raised for a negative base under a fractional exponent, for the
    logarithm of a non-positive value, and when a float result overflows.
    """


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def _from_float(value: float) -> Decimal:
    return Decimal(repr(value))


def to_decimal(value: Any, name: str = "value") -> Decimal:
    """
    Coerce a scalar input to a finite Decimal.

    Accepted inputs are Decimal, int, float (including numpy scalars) and
    numeric strings. Booleans are rejected even though ``bool`` is an
    ``int`` subclass, since ``True`` is never a meaningful amount.

    Args:
        value: Raw input value.
        name: Parameter name used in error messages.

    Returns:
        The value as a Decimal.

    Raises:
        InvalidInputError: if the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        result = _from_float(float(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidInputError(
                f"{name} is not a numeric string: {value!r}"
            ) from exc
    else:
        raise InvalidInputError(
            f"{name} must be a number, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {result}")

    return result


def as_series(values: Iterable[Any], name: str = "values") -> list[Decimal]:
    """
    Materialise an ordered series of amounts or rates as Decimals.

    The first element is period 1, the second period 2 and so on. Sets and
    mappings are rejected because their iteration order has no period
    meaning.

    Raises:
        InvalidInputError: if ``values`` is unordered, not iterable, or holds
            a non-numeric element.
    """
    if isinstance(values, (Set, Mapping, str, bytes)):
        raise InvalidInputError(
            f"{name} must be an ordered sequence, got {type(values).__name__}"
        )

    try:
        items = list(values)
    except TypeError as exc:
        raise InvalidInputError(
            f"{name} must be an ordered sequence of numbers"
        ) from exc

    return [to_decimal(v, f"{name}[{i}]") for i, v in enumerate(items)]


def as_weighted_pairs(
    pairs: Iterable[Any], name: str = "pairs"
) -> list[tuple[Decimal, Decimal]]:
    """
    Materialise ``(weight, value)`` pairs as Decimals.

    ``pairs`` is an iterable of 2-item pairs. Mappings are rejected: a
    ``{weight: value}`` dict would silently merge pairs sharing a weight.
    Order is irrelevant to the consumers of this helper.
    """
    if isinstance(pairs, (Mapping, str, bytes)):
        raise InvalidInputError(
            f"{name} must be an iterable of (weight, value) pairs, "
            f"got {type(pairs).__name__}"
        )

    try:
        items = list(pairs)
    except TypeError as exc:
        raise InvalidInputError(
            f"{name} must be an iterable of (weight, value) pairs"
        ) from exc

    result: list[tuple[Decimal, Decimal]] = []
    for i, pair in enumerate(items):
        try:
            weight, value = pair
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                f"{name}[{i}] must be a (weight, value) pair, got {pair!r}"
            ) from exc
        result.append(
            (
                to_decimal(weight, f"{name}[{i}].weight"),
                to_decimal(value, f"{name}[{i}].value"),
            )
        )

    return result


# ---------------------------------------------------------------------------
# Transcendental operations (through binary floating point)
# ---------------------------------------------------------------------------


def _transcendental_result(value: float, operation: str) -> Decimal:
    if math.isinf(value) or math.isnan(value):
        raise DomainViolation(f"{operation} result is out of range: {value}")
    return _from_float(value)


def power(base: Number, exponent: Number) -> Decimal:
    """
    Raise ``base`` to a real ``exponent``.

    Args:
        base: Decimal base (typically ``1 + rate``).
        exponent: Real exponent; fractional periods are allowed.

    Returns:
        ``base ** exponent`` as a Decimal.

    Raises:
        ZeroDenominatorError: if ``base`` is zero and ``exponent`` negative.
        DomainViolation: if ``base`` is negative and ``exponent`` is not an
            integer, or if the result overflows.
    """
    base_d = to_decimal(base, "base")
    exponent_d = to_decimal(exponent, "exponent")

    if base_d.is_zero() and exponent_d < 0:
        raise ZeroDenominatorError(
            f"0 cannot be raised to a negative power ({exponent_d})"
        )

    if base_d < 0 and exponent_d != exponent_d.to_integral_value():
        raise DomainViolation(
            f"Negative base {base_d} cannot be raised to fractional power {exponent_d}"
        )

    try:
        result = math.pow(float(base_d), float(exponent_d))
    except (OverflowError, ValueError) as exc:
        raise DomainViolation(f"power({base_d}, {exponent_d}) is out of range") from exc

    return _transcendental_result(result, "power")


def exp(value: Number) -> Decimal:
    """Return ``e ** value`` as a Decimal."""
    value_d = to_decimal(value)
    try:
        result = math.exp(float(value_d))
    except OverflowError as exc:
        raise DomainViolation(f"exp({value_d}) is out of range") from exc
    return _transcendental_result(result, "exp")


def ln(value: Number) -> Decimal:
    """
    Return the natural logarithm of ``value`` as a Decimal.

    Raises:
        DomainViolation: if ``value`` is zero or negative.
    """
    value_d = to_decimal(value)
    if value_d <= 0:
        raise DomainViolation(f"Logarithm of a non-positive value: {value_d}")
    try:
        result = math.log(float(value_d))
    except ValueError as exc:
        # Positive decimals that underflow to 0.0 as a float.
        raise DomainViolation(f"ln({value_d}) is out of range") from exc
    return _transcendental_result(result, "ln")


# ---------------------------------------------------------------------------
# Aggregates and rounding
# ---------------------------------------------------------------------------


def growth_product(rates: Iterable[Decimal]) -> Decimal:
    """Compound a series of periodic rates: ``(1 + r_1) * ... * (1 + r_n)``."""
    product = Decimal(1)
    for rate in rates:
        product *= 1 + rate
    return product


def round_half_away(value: Number, places: int) -> Decimal:
    """
    Round ``value`` to ``places`` decimals, halves away from zero.

    This is the presentation rounding used by callers and tests; formulas
    themselves never round.

    Examples:
        >>> round_half_away(Decimal("0.365"), 2)
        Decimal('0.37')
        >>> round_half_away(Decimal("-2.5"), 0)
        Decimal('-3')
    """
    value_d = to_decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals.
        ctx.prec = max(ctx.prec, value_d.adjusted() + places + 2)
        return value_d.quantize(quantum, rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Formula decorator
# ---------------------------------------------------------------------------


def _is_zero_by_zero(exc: InvalidOperation) -> bool:
    """
    Tell a ``0/0`` division apart from other invalid operations.

    The C implementation of ``decimal`` raises ``InvalidOperation`` with the
    list of conditions as its argument; the pure Python one raises a
    ``DivisionUndefined`` instance.
    """
    if isinstance(exc, DivisionUndefined):
        return True
    conditions = exc.args[0] if exc.args else ()
    return isinstance(conditions, list) and DivisionUndefined in conditions


def formula(
    func: Optional[Callable[..., Decimal]] = None,
    *,
    series: tuple[str, ...] = (),
) -> Any:
    """
    Mark a function as a catalogue formula.

    Usable bare (``@formula``) or with the names of the parameters that
    receive a series or a collection of pairs (``@formula(series=("cash_flows",))``).
    Those parameters are passed through untouched; every other argument is
    coerced with ``to_decimal()``.

    The body runs in a copy of the caller's decimal context with the
    ``DivisionByZero``, ``InvalidOperation`` and ``Overflow`` traps set, so
    no Infinity or NaN can leave a formula. Decimal signals are translated:

    - ``DivisionByZero`` and ``0/0`` -> ``ZeroDenominatorError``
    - any other ``InvalidOperation`` and ``Overflow`` -> ``DomainViolation``

    The wrapper exposes ``series_parameters`` for the catalogue.
    """

    def decorate(fn: Callable[..., Decimal]) -> Callable[..., Decimal]:
        signature = inspect.signature(fn)
        series_names = frozenset(series)
        unknown = series_names.difference(signature.parameters)
        if unknown:
            raise TypeError(
                f"{fn.__name__} has no parameter(s) named {sorted(unknown)}"
            )

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Decimal:
            bound = signature.bind(*args, **kwargs)
            for param_name, value in bound.arguments.items():
                if param_name not in series_names:
                    bound.arguments[param_name] = to_decimal(value, param_name)

            with localcontext() as ctx:
                ctx.traps[DivisionByZero] = True
                ctx.traps[InvalidOperation] = True
                ctx.traps[Overflow] = True
                try:
                    return fn(*bound.args, **bound.kwargs)
                except DivisionByZero as exc:
                    raise ZeroDenominatorError(
                        f"{fn.__name__}: division by zero"
                    ) from exc
                except InvalidOperation as exc:
                    if _is_zero_by_zero(exc):
                        raise ZeroDenominatorError(
                            f"{fn.__name__}: division by zero (0/0)"
                        ) from exc
                    raise DomainViolation(
                        f"{fn.__name__}: invalid decimal operation"
                    ) from exc
                except Overflow as exc:
                    raise DomainViolation(
                        f"{fn.__name__}: decimal result out of range"
                    ) from exc

        wrapper.series_parameters = tuple(series)  # type: ignore[attr-defined]
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
