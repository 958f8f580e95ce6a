# scalar_math/domain/units.py
"""
Type aliases for the scalar kinds accepted by the library.

The 32-bit and 64-bit families are kept apart: numpy.float32 values stay
32-bit through every function, float and numpy.float64 stay 64-bit.

Usage:
    from scalar_math.domain.units import Real

    def halve(x: Real) -> Real:
        ...
"""

from typing import TypeAlias

import numpy as np

# Any real scalar accepted as input (ints take the configured precision)
Real: TypeAlias = int | float | np.floating

# Semantic aliases
Ratio: TypeAlias = float | np.floating  # dimensionless weight or factor
Seconds: TypeAlias = float | np.floating  # arrival time of a control point
