"""Degree/radian conversion on plain real scalars."""

import numpy as np

from scalar_math.domain.constants import constants_for
from scalar_math.domain.precision import precision_of


def deg_to_rad(degrees):
    """Convert degrees to radians at the precision of the input.

    A float32 input is converted with the float32 value of pi, so the result
    never passes through double precision.
    """
    dtype = precision_of(degrees)
    return dtype(degrees) * constants_for(dtype).pi / dtype(180)


def rad_to_deg(radians):
    """Convert radians to degrees at the precision of the input."""
    dtype = precision_of(radians)
    return dtype(radians) * dtype(180) / constants_for(dtype).pi


def full_turn(dtype: type[np.floating], in_degrees: bool = False) -> np.floating:
    """Return one full turn (tau radians or 360 degrees) as dtype."""
    if in_degrees:
        return dtype(360)
    return constants_for(dtype).tau
