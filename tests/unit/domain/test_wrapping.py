import math

import numpy as np
import pytest

from scalar_math.domain.angle import Degree, Radian
from scalar_math.domain.exceptions import UnitMismatchError
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


class TestRemainders:
    def test_fmod_sign_follows_dividend(self):
        assert fmod(7.0, 3.0) == 1.0
        assert fmod(-7.0, 3.0) == -1.0
        assert fmod(7.0, -3.0) == 1.0

    def test_fmod_keeps_precision_and_unit(self):
        assert type(fmod(np.float32(7.5), 2)) is np.float32
        assert fmod(Degree(370.0), 360.0) == Degree(10.0)

    def test_fposmod(self):
        assert fposmod(-7.0, 3.0) == 2.0
        assert fposmod(7.0, 3.0) == 1.0
        # Sign of the divisor wins
        assert fposmod(7.0, -3.0) == -2.0
        assert fposmod(-7.0, -3.0) == -1.0
        assert fposmod(1.0, -3.0) == -2.0

    def test_fposmod_negative_zero_is_normalized(self):
        result = fposmod(-6.0, 3.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_fposmod_in_range_for_random_inputs(self):
        """For y > 0 the result lies in [0, y); for y < 0 in (y, 0]."""
        rng = np.random.default_rng(seed=42)
        xs = rng.uniform(-1e4, 1e4, size=2000)
        ys = rng.uniform(1e-3, 1e3, size=2000) * rng.choice([-1.0, 1.0], size=2000)
        for x, y in zip(xs, ys):
            r = fposmod(x, y)
            if y > 0:
                assert 0 <= r < y
            else:
                assert y < r <= 0

    def test_fposmod_single_precision_in_range(self):
        rng = np.random.default_rng(seed=5)
        xs = rng.uniform(-1e3, 1e3, size=1000).astype(np.float32)
        ys = rng.uniform(1e-2, 1e2, size=1000).astype(np.float32)
        for x, y in zip(xs, ys):
            r = fposmod(x, y)
            assert type(r) is np.float32
            assert 0 <= r < y

    def test_fposmodp_folds_every_negative_remainder(self):
        assert fposmodp(-7.0, 3.0) == 2.0
        # Positive remainder with a negative divisor is left alone...
        assert fposmodp(7.0, -3.0) == 1.0
        # ...while a negative one gets the divisor added regardless of its sign
        assert fposmodp(-7.0, -3.0) == -4.0

    def test_fposmod_and_fposmodp_differ(self):
        assert fposmod(7.0, -3.0) != fposmodp(7.0, -3.0)

    def test_posmod(self):
        assert posmod(-7, 3) == 2
        assert posmod(7, 3) == 1
        assert posmod(7, -3) == -2
        assert posmod(-6, 3) == 0

    def test_posmod_zero_divisor_raises(self):
        with pytest.raises(ZeroDivisionError):
            posmod(5, 0)


class TestWrapi:
    @pytest.mark.parametrize(
        "value, expected", [(5, 5), (10, 0), (-1, 9), (23, 3), (-11, 9)]
    )
    def test_wraps_into_half_open_range(self, value, expected):
        assert wrapi(value, 0, 10) == expected

    def test_offset_range(self):
        assert wrapi(7, 2, 5) == 4
        assert wrapi(1, 2, 5) == 4

    def test_degenerate_range_returns_min(self):
        rng = np.random.default_rng(seed=1)
        for value, bound in rng.integers(-1000, 1000, size=(200, 2)):
            assert wrapi(int(value), int(bound), int(bound)) == bound


class TestWrapf:
    def test_wraps_into_half_open_range(self):
        assert wrapf(370.0, 0.0, 360.0) == 10.0
        assert wrapf(-10.0, 0.0, 360.0) == 350.0
        assert wrapf(360.0, 0.0, 360.0) == 0.0
        assert wrapf(0.5, -1.0, 1.0) == 0.5

    def test_offset_range(self):
        assert math.isclose(wrapf(5.5, 2.0, 4.0), 3.5)

    def test_degenerate_range_returns_min(self):
        assert wrapf(123.0, 5.0, 5.0) == 5.0
        assert wrapf(123.0, 5.0, 5.000001) == 5.0

    def test_value_just_below_min_does_not_reach_max(self):
        assert wrapf(-1e-20, 0.0, 360.0) == 0.0

    def test_keeps_precision_and_unit(self):
        assert type(wrapf(np.float32(370.0), 0, 360)) is np.float32
        assert wrapf(Degree(-90.0), Degree(0.0), Degree(360.0)) == Degree(270.0)
        with pytest.raises(UnitMismatchError):
            wrapf(Degree(-90.0), Radian(0.0), Radian(1.0))


class TestAngleWrap:
    def test_degree(self):
        assert angle_wrap(Degree(370.0)) == Degree(10.0)
        assert angle_wrap(Degree(-30.0)) == Degree(330.0)
        assert angle_wrap(Degree(720.0)) == Degree(0.0)

    def test_radian_stays_radian(self):
        result = angle_wrap(Radian(-math.pi / 2))
        assert isinstance(result, Radian)
        assert math.isclose(result.value, 3 * math.pi / 2)

    def test_plain_real_is_radians(self):
        assert math.isclose(angle_wrap(5 * math.pi), math.pi)
        assert not isinstance(angle_wrap(1.0), Radian)

    def test_random_degrees_in_range(self):
        rng = np.random.default_rng(seed=2024)
        for value in rng.uniform(-1e5, 1e5, size=10_000):
            wrapped = angle_wrap(Degree(value)).value
            assert 0.0 <= wrapped < 360.0

    def test_random_radians_in_range(self):
        rng = np.random.default_rng(seed=4048)
        for value in rng.uniform(-2000.0, 2000.0, size=10_000):
            wrapped = angle_wrap(Radian(value)).value
            assert 0.0 <= wrapped < 2 * math.pi

    def test_random_single_precision_in_range(self):
        rng = np.random.default_rng(seed=77)
        for value in rng.uniform(-1e4, 1e4, size=2000).astype(np.float32):
            wrapped = angle_wrap(Degree(value)).value
            assert type(wrapped) is np.float32
            assert 0.0 <= wrapped < 360.0


class TestPeriodicHelpers:
    @pytest.mark.parametrize("value, expected", [(1.25, 0.25), (-1.25, 0.75), (3.0, 0.0)])
    def test_fract(self, value, expected):
        assert fract(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 1.0), (4.0, 0.0), (5.0, 1.0), (-1.0, 1.0)],
    )
    def test_pingpong(self, value, expected):
        assert math.isclose(pingpong(value, 2.0), expected, abs_tol=1e-12)

    def test_pingpong_zero_length(self):
        assert pingpong(3.7, 0.0) == 0.0
        assert type(pingpong(np.float32(3.7), 0)) is np.float32
