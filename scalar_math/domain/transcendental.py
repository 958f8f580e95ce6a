"""
Precision-preserving wrappers around the transcendental functions.

Forward trigonometry consumes angles and returns plain reals; inverse
trigonometry consumes plain reals and returns a Radian. A Degree passed to a
forward function is converted to radians first, a plain real is taken as
radians.
"""

import numpy as np

from scalar_math.domain.angle import Angle, Radian, magnitude_only, unwrap
from scalar_math.domain.constants import constants_for
from scalar_math.domain.precision import cast, precision_of, working_precision


def _radians(angle):
    if isinstance(angle, Angle):
        angle = Radian(angle).value
    return precision_of(angle)(angle)


def _real(value):
    if isinstance(value, Angle):
        value = value.value
    return precision_of(value)(value)


def sin(angle):
    return np.sin(_radians(angle))


def cos(angle):
    return np.cos(_radians(angle))


def tan(angle):
    return np.tan(_radians(angle))


def sinh(angle):
    return np.sinh(_radians(angle))


def cosh(angle):
    return np.cosh(_radians(angle))


def tanh(angle):
    return np.tanh(_radians(angle))


def sinc(angle):
    """Unnormalized sinc: sin(x) / x, with the removable singularity at 0 filled by 1."""
    x = _radians(angle)
    if x == 0:
        return type(x)(1)
    return np.sin(x) / x


def sincn(angle):
    """Normalized sinc: sinc(pi * x)."""
    x = _radians(angle)
    return sinc(constants_for(type(x)).pi * x)


def asin(value) -> Radian:
    return Radian(np.arcsin(_real(value)))


def acos(value) -> Radian:
    return Radian(np.arccos(_real(value)))


def atan(value) -> Radian:
    return Radian(np.arctan(_real(value)))


def atan2(y, x) -> Radian:
    _, (y, x) = unwrap(y, x)
    dtype = working_precision(y, x)
    y, x = cast(dtype, y, x)
    return Radian(np.arctan2(y, x))


@magnitude_only
def sqrt(value):
    return np.sqrt(precision_of(value)(value))


@magnitude_only
def pow(base, exponent):
    dtype = working_precision(base, exponent)
    base, exponent = cast(dtype, base, exponent)
    return np.power(base, exponent)


@magnitude_only
def log(value):
    return np.log(precision_of(value)(value))


@magnitude_only
def exp(value):
    return np.exp(precision_of(value)(value))


@magnitude_only
def linear2db(linear):
    """Convert a linear amplitude ratio to decibels: 20 * log10(linear)."""
    dtype = precision_of(linear)
    return np.log(dtype(linear)) * constants_for(dtype).linear_to_db


@magnitude_only
def db2linear(db):
    """Convert decibels to a linear amplitude ratio: 10 ** (db / 20)."""
    dtype = precision_of(db)
    return np.exp(dtype(db) * constants_for(dtype).db_to_linear)
