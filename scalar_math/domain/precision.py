"""Precision selection for real scalars.

All float arguments of one call must share a precision: numpy.float32 on
one side, float and numpy.float64 on the other. That precision is used for
the whole computation. Integers carry no precision of their own and are
cast to it. Mixing 32-bit and 64-bit floats raises PrecisionMismatchError
instead of widening or narrowing either of them.
"""

from numbers import Integral

import numpy as np

from scalar_math.config import get_settings
from scalar_math.domain.exceptions import PrecisionMismatchError
from scalar_math.domain.units import Real


def precision_of(value: Real) -> type[np.floating]:
    """Return the numpy float type matching the precision of a real scalar.

    Args:
        value: float, numpy floating scalar or integer.

    Returns:
        np.float32 for 32-bit (or narrower) floats, np.float64 for 64-bit
        floats, and the configured real precision for integers.
    """
    if isinstance(value, (np.float32, np.float16)):
        return np.float32
    if isinstance(value, (Integral, np.integer)):
        return get_settings().real_precision
    return np.float64


def real_precision() -> type[np.floating]:
    """Configured precision used for integers and default-constructed values."""
    return get_settings().real_precision


def working_precision(*values: Real) -> type[np.floating]:
    """Return the precision shared by the float arguments of one call.

    Integers adapt to the floats; with no float argument at all the
    configured real precision is used.

    Raises:
        PrecisionMismatchError: If 32-bit and 64-bit floats are mixed.
    """
    found = None
    for value in values:
        if isinstance(value, (Integral, np.integer)):
            continue
        dtype = precision_of(value)
        if found is None:
            found = dtype
        elif dtype is not found:
            raise PrecisionMismatchError(
                f"Cannot mix {found.__name__} and {dtype.__name__} arguments; "
                "convert one of them explicitly"
            )
    return found if found is not None else real_precision()


def cast(dtype: type[np.floating], *values) -> tuple:
    """Cast every value to dtype."""
    return tuple(dtype(v) for v in values)
