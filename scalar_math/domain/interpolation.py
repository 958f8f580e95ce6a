"""Interpolation of real scalars and angles.

Every function computes at the precision shared by its float arguments. The
angle variants take the shortest way around the circle, using one full turn
of the argument's unit (2*pi for radians and plain reals, 360 for degrees).
"""

import numpy as np

from scalar_math.domain.angle import magnitude_only, rewrap, unit_preserving, unwrap
from scalar_math.domain.comparison import clamp, is_equal_approx, sign
from scalar_math.domain.conversions import full_turn
from scalar_math.domain.precision import cast, working_precision
from scalar_math.domain.units import Ratio, Seconds


def _lerp(from_, to, weight):
    if weight == 0:
        return from_
    if weight == 1:
        return to
    return from_ + weight * (to - from_)


@unit_preserving
def lerp(from_, to, weight: Ratio):
    """Linear interpolation from + weight * (to - from).

    The weight is not clamped: values outside [0, 1] extrapolate. Both
    endpoints are reproduced exactly.
    """
    dtype = working_precision(from_, to, weight)
    return _lerp(*cast(dtype, from_, to, weight))


@magnitude_only
def inverse_lerp(from_, to, value):
    """Weight at which lerp(from_, to, weight) == value.

    Equal bounds are not guarded and give inf or nan.
    """
    dtype = working_precision(from_, to, value)
    from_, to, value = cast(dtype, from_, to, value)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (value - from_) / (to - from_)


@unit_preserving
def remap(value, istart, istop, ostart, ostop):
    """Map value from the range [istart, istop] onto [ostart, ostop]."""
    dtype = working_precision(value, istart, istop, ostart, ostop)
    value, istart, istop, ostart, ostop = cast(dtype, value, istart, istop, ostart, ostop)
    return _lerp(ostart, ostop, inverse_lerp(istart, istop, value))


def _turn(unit, dtype):
    if unit is None:
        return full_turn(dtype)
    return unit.full_turn(dtype)


def _shortest(base, target, turn):
    """Re-express target as base plus the signed shortest turn towards it."""
    difference = np.fmod(target - base, turn)
    return base + np.fmod(difference * type(difference)(2), turn) - difference


def lerp_angle(from_, to, weight):
    """Interpolate between two angles along the shorter arc.

    The raw difference is folded into (-turn/2, turn/2] so the result never
    goes the long way around the circle. Works on plain reals (radians),
    Radian and Degree values.
    """
    unit, (from_, to, weight) = unwrap(from_, to, weight)
    dtype = working_precision(from_, to, weight)
    from_, to, weight = cast(dtype, from_, to, weight)
    turn = _turn(unit, dtype)

    difference = np.fmod(to - from_, turn)
    distance = np.fmod(dtype(2) * difference, turn) - difference
    return rewrap(unit, from_ + distance * weight)


def _cubic_interpolate(from_, to, pre, post, weight):
    dtype = type(from_)
    weight2 = weight * weight
    weight3 = weight2 * weight
    return dtype(0.5) * (
        (from_ * dtype(2))
        + (-pre + to) * weight
        + (dtype(2) * pre - dtype(5) * from_ + dtype(4) * to - post) * weight2
        + (-pre + dtype(3) * from_ - dtype(3) * to + post) * weight3
    )


@unit_preserving
def cubic_interpolate(from_, to, pre, post, weight):
    """Catmull-Rom interpolation between from_ and to.

    Args:
        from_: Value at weight 0.
        to: Value at weight 1.
        pre: Control point before from_.
        post: Control point after to.
        weight: Position between from_ and to, nominally in [0, 1].
    """
    dtype = working_precision(from_, to, pre, post, weight)
    return _cubic_interpolate(*cast(dtype, from_, to, pre, post, weight))


def _fold_control_points(from_, to, pre, post, turn):
    from_rot = np.fmod(from_, turn)
    pre_rot = _shortest(from_rot, pre, turn)
    to_rot = _shortest(from_rot, to, turn)
    post_rot = _shortest(to_rot, post, turn)
    return from_rot, to_rot, pre_rot, post_rot


def cubic_interpolate_angle(from_, to, pre, post, weight):
    """Catmull-Rom interpolation of angles.

    pre and to are re-expressed relative to from_, post relative to to, each
    by the shortest turn, before the plain cubic blend is applied.
    """
    unit, (from_, to, pre, post, weight) = unwrap(from_, to, pre, post, weight)
    dtype = working_precision(from_, to, pre, post, weight)
    from_, to, pre, post, weight = cast(dtype, from_, to, pre, post, weight)

    from_rot, to_rot, pre_rot, post_rot = _fold_control_points(
        from_, to, pre, post, _turn(unit, dtype)
    )
    return rewrap(unit, _cubic_interpolate(from_rot, to_rot, pre_rot, post_rot, weight))


def _cubic_interpolate_in_time(from_, to, pre, post, weight, to_t, pre_t, post_t):
    # Barry-Goldman method
    dtype = type(from_)
    zero, half, one = dtype(0), dtype(0.5), dtype(1)

    t = _lerp(zero, to_t, weight)
    a1 = _lerp(pre, from_, zero if pre_t == 0 else (t - pre_t) / -pre_t)
    a2 = _lerp(from_, to, half if to_t == 0 else t / to_t)
    a3 = _lerp(to, post, one if post_t - to_t == 0 else (t - to_t) / (post_t - to_t))
    b1 = _lerp(a1, a2, zero if to_t - pre_t == 0 else (t - pre_t) / (to_t - pre_t))
    b2 = _lerp(a2, a3, one if post_t == 0 else t / post_t)
    return _lerp(b1, b2, half if to_t == 0 else t / to_t)


@unit_preserving
def cubic_interpolate_in_time(
    from_, to, pre, post, weight: Ratio, to_t: Seconds, pre_t: Seconds, post_t: Seconds
):
    """Cubic interpolation for control points unevenly spaced in time.

    from_ sits at time 0; pre at pre_t <= 0, to at to_t >= 0 and post at
    post_t >= to_t. The query time is lerp(0, to_t, weight). Zero-length
    time intervals fall back to fixed blend weights instead of dividing.
    """
    dtype = working_precision(from_, to, pre, post, weight, to_t, pre_t, post_t)
    return _cubic_interpolate_in_time(
        *cast(dtype, from_, to, pre, post, weight, to_t, pre_t, post_t)
    )


def cubic_interpolate_angle_in_time(
    from_, to, pre, post, weight: Ratio, to_t: Seconds, pre_t: Seconds, post_t: Seconds
):
    """Time-aware cubic interpolation of angles along the shortest turns.

    The time arguments are plain reals.
    """
    unit, (from_, to, pre, post) = unwrap(from_, to, pre, post)
    dtype = working_precision(from_, to, pre, post, weight, to_t, pre_t, post_t)
    from_, to, pre, post, weight, to_t, pre_t, post_t = cast(
        dtype, from_, to, pre, post, weight, to_t, pre_t, post_t
    )

    from_rot, to_rot, pre_rot, post_rot = _fold_control_points(
        from_, to, pre, post, _turn(unit, dtype)
    )
    return rewrap(
        unit,
        _cubic_interpolate_in_time(
            from_rot, to_rot, pre_rot, post_rot, weight, to_t, pre_t, post_t
        ),
    )


@unit_preserving
def bezier_interpolate(start, control_1, control_2, end, t):
    """Point at t on the cubic Bezier curve defined by four control values.

    Equal to start*(1-t)^3 + 3*control_1*(1-t)^2*t + 3*control_2*(1-t)*t^2
    + end*t^3, evaluated by repeated linear interpolation (de Casteljau) so
    coincident control values come back exactly.
    """
    dtype = working_precision(start, control_1, control_2, end, t)
    start, control_1, control_2, end, t = cast(dtype, start, control_1, control_2, end, t)

    ab = _lerp(start, control_1, t)
    bc = _lerp(control_1, control_2, t)
    cd = _lerp(control_2, end, t)
    return _lerp(_lerp(ab, bc, t), _lerp(bc, cd, t), t)


@magnitude_only
def smoothstep(from_, to, weight):
    """Hermite step 3x^2 - 2x^3 of weight between the edges from_ and to.

    Returns from_ unchanged when the edges are approximately equal.
    """
    dtype = working_precision(from_, to, weight)
    from_, to, weight = cast(dtype, from_, to, weight)
    if is_equal_approx(from_, to):
        return from_

    x = clamp((weight - from_) / (to - from_), dtype(0), dtype(1))
    return x * x * (dtype(3) - dtype(2) * x)


@unit_preserving
def move_toward(from_, to, delta):
    """Step from_ towards to by delta without overshooting."""
    dtype = working_precision(from_, to, delta)
    from_, to, delta = cast(dtype, from_, to, delta)
    if np.abs(to - from_) <= delta:
        return to
    return from_ + sign(to - from_) * delta
