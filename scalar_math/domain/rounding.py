"""Rounding and snapping of real scalars and angles."""

import numpy as np

from scalar_math.domain.angle import unit_preserving
from scalar_math.domain.precision import cast, precision_of, working_precision


@unit_preserving
def floor(value):
    return np.floor(precision_of(value)(value))


@unit_preserving
def ceil(value):
    return np.ceil(precision_of(value)(value))


@unit_preserving
def round(value):
    """Round half away from zero (2.5 -> 3, -2.5 -> -3), not half to even."""
    dtype = precision_of(value)
    value, half = cast(dtype, value, 0.5)
    if value >= 0:
        return np.floor(value + half)
    return -np.floor(-value + half)


@unit_preserving
def snapped(value, step):
    """Round value to the nearest multiple of step; step == 0 leaves it as is."""
    dtype = working_precision(value, step)
    value, step = cast(dtype, value, step)
    if step != 0:
        value = np.floor(value / step + dtype(0.5)) * step
    return value


@unit_preserving
def snap_scalar(offset, step, target):
    """Snap target onto the grid offset + k * step."""
    dtype = working_precision(offset, step, target)
    offset, step, target = cast(dtype, offset, step, target)
    if step != 0:
        return snapped(target - offset, step) + offset
    return target


@unit_preserving
def snap_scalar_separation(offset, step, target, separation):
    """Snap target onto a grid of cells of size step separated by gaps.

    Each period of the grid is step + separation long. Of the two candidate
    edges around target, the one numerically closer to target wins.
    """
    dtype = working_precision(offset, step, target, separation)
    offset, step, target, separation = cast(dtype, offset, step, target, separation)
    if step == 0:
        return target

    a = snapped(target - offset, step + separation) + offset
    b = a
    if target >= 0:
        b -= separation
    else:
        b += step
    return a if np.abs(target - a) < np.abs(target - b) else b
