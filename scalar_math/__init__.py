"""Unit-safe angles and precision-preserving scalar interpolation math."""

from scalar_math.domain.angle import (
    Angle,
    Degree,
    Radian,
    from_degrees,
    from_radians,
    to_degrees,
    to_radians,
)
from scalar_math.domain.comparison import (
    abs,
    clamp,
    is_equal_approx,
    is_finite,
    is_inf,
    is_nan,
    is_zero_approx,
    max,
    min,
    sign,
)
from scalar_math.domain.constants import constants_for
from scalar_math.domain.conversions import deg_to_rad, rad_to_deg
from scalar_math.domain.exceptions import (
    ConfigurationError,
    PrecisionMismatchError,
    ScalarMathException,
    UnitMismatchError,
)
from scalar_math.domain.interpolation import (
    bezier_interpolate,
    cubic_interpolate,
    cubic_interpolate_angle,
    cubic_interpolate_angle_in_time,
    cubic_interpolate_in_time,
    inverse_lerp,
    lerp,
    lerp_angle,
    move_toward,
    remap,
    smoothstep,
)
from scalar_math.domain.rounding import (
    ceil,
    floor,
    round,
    snap_scalar,
    snap_scalar_separation,
    snapped,
)
from scalar_math.domain.transcendental import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    cosh,
    db2linear,
    exp,
    linear2db,
    log,
    pow,
    sin,
    sinc,
    sincn,
    sinh,
    sqrt,
    tan,
    tanh,
)
from scalar_math.domain.wrapping import (
    angle_wrap,
    fmod,
    fposmod,
    fposmodp,
    fract,
    pingpong,
    posmod,
    wrapf,
    wrapi,
)

# abs, min, max, round and pow are reachable as scalar_math.<name> but kept
# out of __all__ so a star import does not shadow the builtins.
__all__ = [
    "Angle",
    "Radian",
    "Degree",
    "from_radians",
    "from_degrees",
    "to_radians",
    "to_degrees",
    "deg_to_rad",
    "rad_to_deg",
    "constants_for",
    "ScalarMathException",
    "UnitMismatchError",
    "PrecisionMismatchError",
    "ConfigurationError",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinc",
    "sincn",
    "sqrt",
    "log",
    "exp",
    "linear2db",
    "db2linear",
    "fmod",
    "fposmod",
    "fposmodp",
    "posmod",
    "wrapi",
    "wrapf",
    "angle_wrap",
    "fract",
    "pingpong",
    "lerp",
    "inverse_lerp",
    "remap",
    "lerp_angle",
    "cubic_interpolate",
    "cubic_interpolate_angle",
    "cubic_interpolate_in_time",
    "cubic_interpolate_angle_in_time",
    "bezier_interpolate",
    "smoothstep",
    "move_toward",
    "is_nan",
    "is_inf",
    "is_finite",
    "is_equal_approx",
    "is_zero_approx",
    "clamp",
    "sign",
    "floor",
    "ceil",
    "snapped",
    "snap_scalar",
    "snap_scalar_separation",
]
