"""Process-wide settings, read once from the environment."""

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from environs import Env

from scalar_math.domain.exceptions import ConfigurationError
from scalar_math.logging_config import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "SCALAR_MATH_"

# Accepted spellings for SCALAR_MATH_REAL_PRECISION
_PRECISIONS: dict[str, type[np.floating]] = {
    "single": np.float32,
    "float": np.float32,
    "float32": np.float32,
    "double": np.float64,
    "float64": np.float64,
}


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Build-time style switches of the library.

    precise_math_checks: tighten UNIT_EPSILON down to CMP_EPSILON
    real_precision: precision given to integers and default-constructed angles
    """

    precise_math_checks: bool = False
    real_precision: type[np.floating] = np.float64

    def __post_init__(self):
        if self.real_precision not in (np.float32, np.float64):
            raise ConfigurationError(
                f"real_precision must be float32 or float64, got {self.real_precision}"
            )


def load_settings(env: Env | None = None) -> Settings:
    """Build settings from environment variables.

    Args:
        env: Environment handler; a fresh Env() is used when omitted.

    Returns:
        Immutable Settings instance.

    Raises:
        ConfigurationError: If SCALAR_MATH_REAL_PRECISION is not recognised.
    """
    env = env if env is not None else Env()

    with env.prefixed(ENV_PREFIX):
        precise_math_checks = env.bool("PRECISE_MATH_CHECKS", default=False)
        precision_name = env.str("REAL_PRECISION", default="double").strip().lower()

    if precision_name not in _PRECISIONS:
        raise ConfigurationError(
            f"Invalid real precision '{precision_name}'. "
            f"Expected one of: {', '.join(sorted(_PRECISIONS))}"
        )

    settings = Settings(
        precise_math_checks=precise_math_checks,
        real_precision=_PRECISIONS[precision_name],
    )
    logger.debug(
        "Loaded settings: precise_math_checks=%s, real_precision=%s",
        settings.precise_math_checks,
        settings.real_precision.__name__,
    )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
