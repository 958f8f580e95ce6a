"""Numeric constants at both supported precisions."""

import math
from dataclasses import dataclass

import numpy as np

from scalar_math.config import get_settings

# Literal values, kept at full decimal precision
_SQRT12 = 0.7071067811865475244008443621048490
_SQRT2 = 1.4142135623730950488016887242
_LN2 = 0.6931471805599453094172321215
_PI = 3.1415926535897932384626433833
_TAU = 6.2831853071795864769252867666
_E = 2.7182818284590452353602874714

# log(x) * LINEAR_TO_DB == 20 * log10(x)
LINEAR_TO_DB = 8.6858896380650365530225783783321  # 20 / ln(10)
DB_TO_LINEAR = 0.11512925464970228420089957273422  # ln(10) / 20

# Comparison epsilons
_CMP_EPSILON = 0.00001
# For values related to a unit size (scalar or vector length)
_UNIT_EPSILON_PRECISE = 0.00001
_UNIT_EPSILON_TOLERANT = 0.001


def _unit_epsilon() -> float:
    if get_settings().precise_math_checks:
        return _UNIT_EPSILON_PRECISE
    return _UNIT_EPSILON_TOLERANT


@dataclass(frozen=True, slots=True)
class PrecisionConstants:
    """Constants materialised at a single precision (immutable)."""

    dtype: type[np.floating]
    sqrt12: np.floating
    sqrt2: np.floating
    ln2: np.floating
    pi: np.floating
    tau: np.floating
    e: np.floating
    inf: np.floating
    nan: np.floating
    cmp_epsilon: np.floating
    cmp_epsilon2: np.floating
    unit_epsilon: np.floating
    linear_to_db: np.floating
    db_to_linear: np.floating

    @classmethod
    def build(cls, dtype: type[np.floating]) -> "PrecisionConstants":
        cmp_epsilon = dtype(_CMP_EPSILON)
        return cls(
            dtype=dtype,
            sqrt12=dtype(_SQRT12),
            sqrt2=dtype(_SQRT2),
            ln2=dtype(_LN2),
            pi=dtype(_PI),
            tau=dtype(_TAU),
            e=dtype(_E),
            inf=dtype(math.inf),
            nan=dtype(math.nan),
            cmp_epsilon=cmp_epsilon,
            cmp_epsilon2=cmp_epsilon * cmp_epsilon,
            unit_epsilon=dtype(_unit_epsilon()),
            linear_to_db=dtype(LINEAR_TO_DB),
            db_to_linear=dtype(DB_TO_LINEAR),
        )


SINGLE = PrecisionConstants.build(np.float32)
DOUBLE = PrecisionConstants.build(np.float64)


def constants_for(dtype: type[np.floating]) -> PrecisionConstants:
    """Return the constant bundle for np.float32 or np.float64."""
    if dtype is np.float32:
        return SINGLE
    if dtype is np.float64:
        return DOUBLE
    raise TypeError(f"Unsupported precision: {dtype}")


# 64-bit constants
SQRT12 = float(DOUBLE.sqrt12)
SQRT2 = float(DOUBLE.sqrt2)
LN2 = float(DOUBLE.ln2)
PI = float(DOUBLE.pi)
TAU = float(DOUBLE.tau)
E = float(DOUBLE.e)
INF = math.inf
NAN = math.nan
CMP_EPSILON = float(DOUBLE.cmp_epsilon)
CMP_EPSILON2 = float(DOUBLE.cmp_epsilon2)
UNIT_EPSILON = float(DOUBLE.unit_epsilon)

# 32-bit constants
SQRT12_F32 = SINGLE.sqrt12
SQRT2_F32 = SINGLE.sqrt2
LN2_F32 = SINGLE.ln2
PI_F32 = SINGLE.pi
TAU_F32 = SINGLE.tau
E_F32 = SINGLE.e
INF_F32 = SINGLE.inf
NAN_F32 = SINGLE.nan
CMP_EPSILON_F32 = SINGLE.cmp_epsilon
CMP_EPSILON2_F32 = SINGLE.cmp_epsilon2
UNIT_EPSILON_F32 = SINGLE.unit_epsilon
