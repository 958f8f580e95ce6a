# scalar_math/domain/angle.py
"""
Unit-tagged angle values.

Radian and Degree wrap a single real magnitude. Values of the same unit
combine freely with each other and with plain reals of the same precision;
mixing units raises UnitMismatchError and mixing 32-bit with 64-bit floats
raises PrecisionMismatchError instead of converting silently. Conversion
between the two units happens only when one is constructed from the other.

Usage:
    from scalar_math.domain.angle import Degree, Radian

    heading = Degree(Radian(math.pi / 2))  # Degree(value=90.0)
    heading += Degree(15)                   # Degree(value=105.0)
    heading + Radian(1.0)                   # raises UnitMismatchError
"""

import functools
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Callable, ClassVar, TypeVar

import numpy as np

from scalar_math.domain.conversions import deg_to_rad, full_turn, rad_to_deg
from scalar_math.domain.exceptions import UnitMismatchError
from scalar_math.domain.precision import precision_of, real_precision, working_precision

AngleT = TypeVar("AngleT", bound="Angle")

_REAL_TYPES = (Integral, float, np.integer, np.floating)


def _normalize_real(value):
    """Store 64-bit magnitudes as float and 32-bit ones as numpy.float32."""
    dtype = precision_of(value)
    if dtype is np.float32:
        return np.float32(value)
    return float(value)


@dataclass(frozen=True, slots=True, eq=False)
class Angle:
    """
    Common base of Radian and Degree; not instantiated directly.

    value: magnitude in the unit of the concrete class. Python floats and
    numpy.float64 are kept as 64-bit, numpy.float32 as 32-bit, integers and
    the default zero take the configured real precision.
    """

    value: Any = None

    SYMBOL: ClassVar[str] = ""
    IN_DEGREES: ClassVar[bool] = False

    def __post_init__(self):
        if type(self) is Angle:
            raise TypeError("Angle has no unit; construct a Radian or a Degree")

        value = self.value
        if value is None:
            value = real_precision()(0)
        elif isinstance(value, Angle):
            value = self._from_angle(value)
        elif isinstance(value, bool) or not isinstance(value, _REAL_TYPES):
            raise TypeError(
                f"{type(self).__name__} expects a real number or an angle, "
                f"got {type(value).__name__}"
            )
        elif isinstance(value, (Integral, np.integer)):
            value = real_precision()(value)

        object.__setattr__(self, "value", _normalize_real(value))

    @classmethod
    def _from_angle(cls, other: "Angle"):
        if isinstance(other, cls):
            return other.value
        return cls._convert_from_other_unit(other.value)

    @staticmethod
    def _convert_from_other_unit(value):
        raise NotImplementedError

    @classmethod
    def full_turn(cls, dtype: type[np.floating] = np.float64) -> np.floating:
        """One full turn expressed in this unit."""
        return full_turn(dtype, in_degrees=cls.IN_DEGREES)

    @property
    def dtype(self) -> type[np.floating]:
        return precision_of(self.value)

    def to_radians(self) -> "Radian":
        return Radian(self)

    def to_degrees(self) -> "Degree":
        return Degree(self)

    # Arithmetic

    def _operand(self, other):
        if isinstance(other, Angle):
            if type(other) is not type(self):
                raise UnitMismatchError(
                    f"Cannot combine {type(self).__name__} with {type(other).__name__}; "
                    "convert one of them explicitly"
                )
            other = other.value
        elif isinstance(other, bool) or not isinstance(other, _REAL_TYPES):
            return NotImplemented
        return working_precision(self.value, other)(other)

    def _binary(self, other, operation: Callable, reflected: bool = False):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        value = self.dtype(self.value)
        if reflected:
            return type(self)(operation(operand, value))
        return type(self)(operation(value, operand))

    def __add__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a + b, reflected=True)

    def __sub__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a - b, reflected=True)

    def __mul__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a * b, reflected=True)

    def __truediv__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a / b)

    def __rtruediv__(self: AngleT, other) -> AngleT:
        return self._binary(other, lambda a, b: a / b, reflected=True)

    def __neg__(self: AngleT) -> AngleT:
        return type(self)(-self.value)

    def __pos__(self: AngleT) -> AngleT:
        return type(self)(self.value)

    def __abs__(self: AngleT) -> AngleT:
        return type(self)(abs(self.value))

    # Comparison

    def __eq__(self, other) -> bool:
        if isinstance(other, Angle):
            return type(other) is type(self) and bool(self.value == other.value)
        if isinstance(other, _REAL_TYPES):
            return bool(self.value == other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def _compare(self, other, operation: Callable) -> bool:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return bool(operation(self.dtype(self.value), operand))

    def __lt__(self, other) -> bool:
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other) -> bool:
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other) -> bool:
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other) -> bool:
        return self._compare(other, lambda a, b: a >= b)

    # Decay to a plain real

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return bool(self.value != 0)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __str__(self) -> str:
        return f"{self.value}{self.SYMBOL}"


class Radian(Angle):
    """Angle measured in radians."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = " rad"
    IN_DEGREES: ClassVar[bool] = False

    @staticmethod
    def _convert_from_other_unit(value):
        return deg_to_rad(value)


class Degree(Angle):
    """Angle measured in degrees."""

    __slots__ = ()

    SYMBOL: ClassVar[str] = "°"
    IN_DEGREES: ClassVar[bool] = True

    @staticmethod
    def _convert_from_other_unit(value):
        return rad_to_deg(value)


def from_radians(value) -> Radian:
    """Build a Radian from a raw magnitude, no conversion applied."""
    return Radian(value)


def from_degrees(value) -> Degree:
    """Build a Degree from a raw magnitude, no conversion applied."""
    return Degree(value)


def to_degrees(angle: Angle) -> Degree:
    return Degree(angle)


def to_radians(angle: Angle) -> Radian:
    return Radian(angle)


# Helpers for functions defined on both reals and angles


def unwrap(*values) -> tuple[type[Angle] | None, tuple]:
    """Split arguments into the common angle unit and raw magnitudes.

    Returns:
        (unit, raw) where unit is the angle class shared by the angle
        arguments (None when there are none) and raw holds the magnitudes,
        with non-angle arguments passed through.

    Raises:
        UnitMismatchError: If radians and degrees are mixed.
    """
    unit: type[Angle] | None = None
    raw = []
    for value in values:
        if isinstance(value, Angle):
            if unit is None:
                unit = type(value)
            elif type(value) is not unit:
                raise UnitMismatchError(
                    f"Cannot mix {unit.__name__} and {type(value).__name__} arguments"
                )
            value = value.value
        raw.append(value)
    return unit, tuple(raw)


def rewrap(unit: type[Angle] | None, value):
    """Wrap a raw result back into unit, or return it unchanged."""
    if unit is None:
        return value
    return unit(value)


def unit_preserving(func: Callable) -> Callable:
    """Run func on raw magnitudes and give the result the unit of the angle arguments."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        keys = list(kwargs)
        unit, raw = unwrap(*args, *kwargs.values())
        raw_args = raw[: len(args)]
        raw_kwargs = dict(zip(keys, raw[len(args) :]))
        return rewrap(unit, func(*raw_args, **raw_kwargs))

    return wrapper


def magnitude_only(func: Callable) -> Callable:
    """Run func on raw magnitudes and return its result as is."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        keys = list(kwargs)
        _, raw = unwrap(*args, *kwargs.values())
        raw_args = raw[: len(args)]
        raw_kwargs = dict(zip(keys, raw[len(args) :]))
        return func(*raw_args, **raw_kwargs)

    return wrapper
