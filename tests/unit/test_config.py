import dataclasses

import numpy as np
import pytest
from environs import Env

from scalar_math.config import Settings, get_settings, load_settings
from scalar_math.domain import precision
from scalar_math.domain.angle import Radian
from scalar_math.domain.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any SCALAR_MATH_ variables."""
    monkeypatch.delenv("SCALAR_MATH_PRECISE_MATH_CHECKS", raising=False)
    monkeypatch.delenv("SCALAR_MATH_REAL_PRECISION", raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings(Env())
        assert settings == Settings()
        assert settings.precise_math_checks is False
        assert settings.real_precision is np.float64

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("single", np.float32),
            ("float32", np.float32),
            (" Float ", np.float32),
            ("double", np.float64),
            ("FLOAT64", np.float64),
        ],
    )
    def test_real_precision(self, clean_env, raw, expected):
        clean_env.setenv("SCALAR_MATH_REAL_PRECISION", raw)
        assert load_settings(Env()).real_precision is expected

    def test_precise_math_checks(self, clean_env):
        clean_env.setenv("SCALAR_MATH_PRECISE_MATH_CHECKS", "true")
        assert load_settings(Env()).precise_math_checks is True

    def test_invalid_precision(self, clean_env):
        clean_env.setenv("SCALAR_MATH_REAL_PRECISION", "quad")
        with pytest.raises(ConfigurationError, match="Invalid real precision 'quad'"):
            load_settings(Env())

    def test_configuration_error_is_value_error(self, clean_env):
        clean_env.setenv("SCALAR_MATH_REAL_PRECISION", "half")
        with pytest.raises(ValueError):
            load_settings(Env())

    def test_env_defaults_to_process_environment(self, clean_env):
        clean_env.setenv("SCALAR_MATH_REAL_PRECISION", "single")
        assert load_settings().real_precision is np.float32


class TestSettings:
    def test_frozen(self):
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.precise_math_checks = True

    def test_rejects_other_precisions(self):
        with pytest.raises(ConfigurationError, match="float32 or float64"):
            Settings(real_precision=np.float16)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestRealPrecision:
    def test_integers_follow_configured_precision(self, monkeypatch):
        monkeypatch.setattr(
            precision, "get_settings", lambda: Settings(real_precision=np.float32)
        )
        assert precision.precision_of(3) is np.float32
        assert type(Radian(3).value) is np.float32
        assert type(Radian().value) is np.float32

    def test_floats_ignore_configured_precision(self, monkeypatch):
        monkeypatch.setattr(
            precision, "get_settings", lambda: Settings(real_precision=np.float32)
        )
        assert precision.precision_of(3.0) is np.float64
        assert type(Radian(3.0).value) is float
