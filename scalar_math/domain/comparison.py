"""Classification, approximate comparison and generic numeric helpers."""

import builtins
from numbers import Integral

import numpy as np

from scalar_math.domain.angle import magnitude_only, unit_preserving
from scalar_math.domain.constants import constants_for
from scalar_math.domain.precision import cast, precision_of, working_precision


@magnitude_only
def is_nan(value) -> bool:
    return bool(np.isnan(value))


@magnitude_only
def is_inf(value) -> bool:
    return bool(np.isinf(value))


@magnitude_only
def is_finite(value) -> bool:
    return bool(np.isfinite(value))


@magnitude_only
def is_equal_approx(a, b, tolerance=None) -> bool:
    """Check whether two values are approximately equal.

    Args:
        a: Reference value; its magnitude scales the default tolerance.
        b: Value compared against a.
        tolerance: Absolute tolerance. When omitted, CMP_EPSILON * |a| is
            used, floored at CMP_EPSILON, so the check is relative for large
            magnitudes and absolute near zero.

    Returns:
        True if |a - b| is strictly below the tolerance, or a == b.
    """
    if tolerance is None:
        dtype = working_precision(a, b)
    else:
        dtype = working_precision(a, b, tolerance)
    a, b = cast(dtype, a, b)

    # Exact equality first, required to handle infinities
    if a == b:
        return True

    if tolerance is None:
        epsilon = constants_for(dtype).cmp_epsilon
        tolerance = epsilon * np.abs(a)
        if tolerance < epsilon:
            tolerance = epsilon
    else:
        tolerance = dtype(tolerance)

    return bool(np.abs(a - b) < tolerance)


@magnitude_only
def is_zero_approx(value) -> bool:
    """Check |value| < CMP_EPSILON; no relative scaling."""
    dtype = precision_of(value)
    return bool(np.abs(dtype(value)) < constants_for(dtype).cmp_epsilon)


def _match_precision(*values) -> tuple:
    # All-integer arguments stay integers
    if all(isinstance(value, (Integral, np.integer)) for value in values):
        return values
    return cast(working_precision(*values), *values)


@unit_preserving
def clamp(value, min_value, max_value):
    value, min_value, max_value = _match_precision(value, min_value, max_value)
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


@unit_preserving
def min(a, b):
    a, b = _match_precision(a, b)
    return a if a < b else b


@unit_preserving
def max(a, b):
    a, b = _match_precision(a, b)
    return a if a > b else b


@unit_preserving
def sign(value):
    """Return -1, 0 or 1 with the type of value."""
    kind = type(value)
    if value == 0:
        return kind(0)
    return kind(-1) if value < 0 else kind(1)


@unit_preserving
def abs(value):
    return builtins.abs(value)
