import dataclasses
import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from scalar_math.config import Settings
from scalar_math.domain import constants
from scalar_math.domain.constants import DOUBLE, SINGLE, PrecisionConstants, constants_for


class TestPrecisionBundles:
    def test_lookup(self):
        assert constants_for(np.float32) is SINGLE
        assert constants_for(np.float64) is DOUBLE

    @pytest.mark.parametrize("dtype", [np.float16, float, int])
    def test_unsupported_precision(self, dtype):
        with pytest.raises(TypeError, match="Unsupported precision"):
            constants_for(dtype)

    @pytest.mark.parametrize("bundle, dtype", [(SINGLE, np.float32), (DOUBLE, np.float64)])
    def test_every_field_has_bundle_precision(self, bundle, dtype):
        for field in dataclasses.fields(bundle):
            if field.name == "dtype":
                continue
            assert type(getattr(bundle, field.name)) is dtype, field.name

    def test_bundles_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DOUBLE.pi = 3.0

    def test_single_values_are_rounded_double_values(self):
        assert SINGLE.pi == np.float32(math.pi)
        assert SINGLE.tau == np.float32(2 * math.pi)
        assert SINGLE.cmp_epsilon == np.float32(1e-5)


class TestDoubleConstants:
    def test_exact_double_values(self):
        assert constants.PI == math.pi
        assert constants.TAU == math.tau
        assert constants.E == math.e
        assert constants.SQRT2 == math.sqrt(2.0)
        assert constants.SQRT12 == math.sqrt(0.5)
        assert_allclose(constants.LN2, math.log(2.0), rtol=1e-15)

    def test_non_finite(self):
        assert math.isinf(constants.INF) and constants.INF > 0
        assert math.isnan(constants.NAN)

    def test_epsilons(self):
        assert constants.CMP_EPSILON == 1e-5
        assert constants.CMP_EPSILON2 == 1e-5 * 1e-5

    def test_decibel_factors(self):
        assert_allclose(constants.LINEAR_TO_DB, 20.0 / math.log(10.0), rtol=1e-15)
        assert_allclose(constants.DB_TO_LINEAR, math.log(10.0) / 20.0, rtol=1e-15)
        assert_allclose(constants.LINEAR_TO_DB * constants.DB_TO_LINEAR, 1.0, rtol=1e-15)

    def test_module_attributes_are_plain_floats(self):
        for name in ("PI", "TAU", "E", "SQRT2", "SQRT12", "LN2", "CMP_EPSILON", "UNIT_EPSILON"):
            assert type(getattr(constants, name)) is float, name

    def test_single_attributes(self):
        for name in ("PI_F32", "TAU_F32", "E_F32", "CMP_EPSILON_F32", "UNIT_EPSILON_F32"):
            assert type(getattr(constants, name)) is np.float32, name


class TestUnitEpsilon:
    def test_tolerant_by_default(self, monkeypatch):
        monkeypatch.setattr(constants, "get_settings", lambda: Settings())
        assert PrecisionConstants.build(np.float64).unit_epsilon == 1e-3

    def test_precise_math_checks(self, monkeypatch):
        monkeypatch.setattr(
            constants, "get_settings", lambda: Settings(precise_math_checks=True)
        )
        bundle = PrecisionConstants.build(np.float32)
        assert bundle.unit_epsilon == bundle.cmp_epsilon
