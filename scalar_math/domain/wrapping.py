"""Remainders, range wrapping and periodic folding."""

import numpy as np

from scalar_math.domain.angle import Angle, Degree, Radian, unit_preserving
from scalar_math.domain.comparison import is_zero_approx
from scalar_math.domain.conversions import full_turn
from scalar_math.domain.precision import cast, precision_of, working_precision


@unit_preserving
def fmod(x, y):
    """IEEE remainder of x / y; the sign follows the dividend."""
    dtype = working_precision(x, y)
    x, y = cast(dtype, x, y)
    return np.fmod(x, y)


@unit_preserving
def fposmod(x, y):
    """Remainder folded towards the sign of the divisor.

    The divisor is added once when the raw remainder and y have strictly
    opposite signs, so the result lies in [0, y) for y > 0 and in (y, 0]
    for y < 0.
    """
    dtype = working_precision(x, y)
    x, y = cast(dtype, x, y)
    value = np.fmod(x, y)
    if (value < 0 and y > 0) or (value > 0 and y < 0):
        value += y
    # A remainder one ulp below zero folds onto y itself
    if value == y:
        value = dtype(0)
    return value + dtype(0)  # -0.0 -> 0.0


@unit_preserving
def fposmodp(x, y):
    """Remainder folded whenever the raw remainder is negative.

    Unlike fposmod the sign of the divisor is not consulted: a negative
    remainder always gets y added.
    """
    dtype = working_precision(x, y)
    x, y = cast(dtype, x, y)
    value = np.fmod(x, y)
    if value < 0:
        value += y
    if value == y:
        value = dtype(0)
    return value + dtype(0)


def posmod(x: int, y: int) -> int:
    """Integer remainder with the sign of the divisor.

    Python's % already folds a truncated remainder with the wrong sign by
    adding the divisor, which is exactly this rule.

    Raises:
        ZeroDivisionError: If y is 0.
    """
    return int(x) % int(y)


def wrapi(value: int, min_value: int, max_value: int) -> int:
    """Wrap an integer into [min_value, max_value); an empty range returns min_value."""
    value, min_value, max_value = int(value), int(min_value), int(max_value)
    span = max_value - min_value
    if span == 0:
        return min_value
    return min_value + ((value - min_value) % span + span) % span


@unit_preserving
def wrapf(value, min_value, max_value):
    """Wrap a real value into [min_value, max_value).

    A range that is approximately zero returns min_value instead of dividing
    by it.
    """
    dtype = working_precision(value, min_value, max_value)
    value, min_value, max_value = cast(dtype, value, min_value, max_value)
    span = max_value - min_value
    if is_zero_approx(span):
        return min_value

    result = value - span * np.floor((value - min_value) / span)
    # A rounded quotient can leave the result a hair outside [min, max)
    if span > 0:
        if result >= max_value:
            result -= span
        elif result < min_value:
            result += span
    return result


def angle_wrap(value):
    """Normalize an angle into one turn starting at zero.

    The wrap is always done in degrees, [0, 360). A Degree comes back as a
    Degree, a Radian as a Radian in [0, 2*pi). A plain real is taken as
    radians and returned as a plain real.
    """
    if isinstance(value, Degree):
        return Degree(wrapf(value.value, 0, 360))

    radian = Radian(value)
    dtype = radian.dtype
    wrapped = Radian(Degree(wrapf(Degree(radian).value, 0, 360)))
    if wrapped.value >= full_turn(dtype):
        wrapped = Radian(dtype(0))

    if isinstance(value, Angle):
        return wrapped
    return dtype(wrapped.value)


@unit_preserving
def fract(value):
    """Fractional part, value - floor(value)."""
    value = precision_of(value)(value)
    return value - np.floor(value)


@unit_preserving
def pingpong(value, length):
    """Fold value into a triangle wave between 0 and length.

    The wave has period 2 * length; a zero length returns 0.
    """
    dtype = working_precision(value, length)
    value, length = cast(dtype, value, length)
    if length == 0:
        return dtype(0)
    two = dtype(2)
    return np.abs(fract((value - length) / (length * two)) * length * two - length)
