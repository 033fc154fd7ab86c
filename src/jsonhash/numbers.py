"""
numbers.py — Number canonicalization for hashing

Floats are truncated to a fixed number of decimal digits before hashing so
that values differing only by platform rounding noise hash identically.
Truncation works on the shortest round-trip decimal representation of the
float (``repr``), not on the binary value, so ``truncate(1.23456789, 8)``
stays ``1.23456789``.

Integers and floats keep their type: integer ``1`` renders ``1`` while float
``1.0`` renders ``1.0``.
"""

from __future__ import annotations
import math
from decimal import ROUND_DOWN, Context, Decimal
from typing import Union

from .config import NumberConfig
from .errors import InvalidNumberError

Number = Union[int, float]

# Machine epsilon for IEEE 754 double precision.
EPSILON = 2.220446049250313e-16


def _check_finite(value: float) -> None:
    if math.isnan(value):
        raise InvalidNumberError(value, "NaN is not supported.")
    if math.isinf(value):
        raise InvalidNumberError(value, f"{value} is not supported.")


def truncate(value: float, precision: int) -> float:
    """Truncate ``value`` toward zero to ``precision`` decimal digits.

    Args:
        value: Finite float.
        precision: Number of decimal digits to keep.

    Returns:
        float: The truncated value. Negative zero is returned as ``0.0``.

    Raises:
        InvalidNumberError: If ``value`` is NaN or infinite.
    """
    _check_finite(value)
    if value == 0:
        return 0.0

    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -precision:
        return value

    quantum = Decimal(1).scaleb(-precision)
    context = Context(prec=max(28, precision + 32))
    result = float(exact.quantize(quantum, rounding=ROUND_DOWN, context=context))
    return 0.0 if result == 0 else result


def _exceeds_precision(value: float, number_config: NumberConfig) -> bool:
    precision = number_config.precision
    rounded = round(value / precision) * precision
    return abs(value - rounded) > EPSILON * max(1.0, abs(value))


def check_number(value: Number, number_config: NumberConfig) -> None:
    """Audit a number before it is hashed.

    NaN and Infinity are always rejected. With
    ``number_config.throw_on_range_error`` set, floats that are not a
    multiple of ``number_config.precision`` or that fall outside
    ``[min_num, max_num]`` are rejected too. Integers pass unaudited.

    Raises:
        InvalidNumberError: If the number cannot be hashed reliably.
    """
    if isinstance(value, int):
        return

    _check_finite(value)

    if not number_config.throw_on_range_error:
        return

    if _exceeds_precision(value, number_config):
        raise InvalidNumberError(
            value, f"Number {value} has a higher precision than {number_config.precision}."
        )

    if value > number_config.max_num:
        raise InvalidNumberError(value, f"Number {value} exceeds NumberConfig.max_num.")

    if value < number_config.min_num:
        raise InvalidNumberError(value, f"Number {value} is smaller than NumberConfig.min_num.")


def convert_number(
    value: Number,
    floating_point_precision: int,
    number_config: NumberConfig,
) -> Number:
    """Return the canonical number used in a hashing view."""
    check_number(value, number_config)
    if isinstance(value, int):
        return value
    return truncate(value, floating_point_precision)


def format_number(value: Number) -> str:
    """Render a number in canonical text form.

    Integers render as plain digits. Floats render positionally without an
    exponent and always keep a fractional part (``1.0``, ``0.00001``).
    """
    if isinstance(value, int):
        return str(value)

    _check_finite(value)
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text
