"""Numeric width checks for the int32, int64, float and double formats.

A payload number that cannot be represented in the declared wire width is
still a valid JSON Schema integer/number, so these checks report warnings
instead of errors.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from decimal import Decimal

from swagger_schema_validator.validation_reporting.report_models import Severity

from .format_models import FormatViolation

_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)
# Shortest decimal form of any single-precision value needs at most 9 digits.
_FLOAT32_MAX_DIGITS = 9


def check_int32(value: int) -> FormatViolation | None:
    """Warn when the integer does not fit a signed 32-bit integer."""
    return _check_integer_width("int32", value, _INT32_RANGE)


def check_int64(value: int) -> FormatViolation | None:
    """Warn when the integer does not fit a signed 64-bit integer."""
    return _check_integer_width("int64", value, _INT64_RANGE)


def check_float(value: int | float | Decimal) -> FormatViolation | None:
    """Warn when the number changes after a round trip through single precision."""
    return _check_round_trip("float", value, _to_float32)


def check_double(value: int | float | Decimal) -> FormatViolation | None:
    """Warn when the number changes after a round trip through double precision."""
    return _check_round_trip("double", value, _to_float64)


def _check_integer_width(
    format_name: str, value: int, bounds: tuple[int, int]
) -> FormatViolation | None:
    lower, upper = bounds
    if lower <= value <= upper:
        return None
    return FormatViolation(
        severity=Severity.WARNING,
        key=f"warn.format.{format_name}.overflow",
        message=f"value for {format_name} leads to overflow (found: {value})",
        arguments={"value": value},
    )


def _check_round_trip(
    format_name: str,
    value: int | float | Decimal,
    convert: Callable[[Decimal], Decimal],
) -> FormatViolation | None:
    original = _decimal_value(value)
    if not original.is_finite():
        return None
    converted = convert(original)
    if converted == original:
        return None
    return FormatViolation(
        severity=Severity.WARNING,
        key=f"warn.format.{format_name}.overflow",
        message=(
            f"value for {format_name} leads to overflow "
            f"(original: {original}, converted: {converted})"
        ),
        arguments={"value": original, "converted": converted},
    )


def _decimal_value(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr gives the shortest string that round-trips, i.e. what the payload said.
        return Decimal(repr(value))
    return Decimal(value)


def _to_float64(value: Decimal) -> Decimal:
    return Decimal(repr(float(value)))


def _to_float32(value: Decimal) -> Decimal:
    try:
        single = _round_to_float32(float(value))
    except OverflowError:
        return Decimal("-Infinity") if value < 0 else Decimal("Infinity")
    for digits in range(1, _FLOAT32_MAX_DIGITS + 1):
        candidate = f"{single:.{digits}g}"
        if _round_to_float32(float(candidate)) == single:
            return Decimal(candidate)
    return Decimal(repr(single))


def _round_to_float32(value: float) -> float:
    return struct.unpack(">f", struct.pack(">f", value))[0]
