import math

import pytest

from pcbrouting.vec2 import FixedPoint, FixedVec2, FloatVec2, IntVec2


def test_delta_and_one_bits():
    assert FixedPoint.DELTA.to_bits() == 1
    assert FixedPoint.from_num(1).to_bits() == 1 << 16
    assert FixedPoint.ZERO.to_bits() == 0


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 123.0625, -32768.0])
def test_float_round_trip(value):
    assert FixedPoint.from_num(value).to_float() == value


@pytest.mark.parametrize("bits", [-5, 0, 7, 2**31 - 1, -(2**31)])
def test_bits_round_trip(bits):
    assert FixedPoint.from_bits(bits).to_bits() == bits


def test_from_num_rounds_to_nearest_step():
    step = 1 / 65536
    assert FixedPoint.from_num(0.4 * step) == FixedPoint.ZERO
    assert FixedPoint.from_num(0.6 * step) == FixedPoint.DELTA


def test_out_of_range_raises():
    with pytest.raises(OverflowError):
        FixedPoint.from_num(40000)
    with pytest.raises(OverflowError):
        FixedPoint.from_bits(2**31)
    with pytest.raises(OverflowError):
        FixedPoint.MAX + FixedPoint.DELTA


def test_nan_raises():
    with pytest.raises(ValueError):
        FixedPoint.from_num(float("nan"))


@pytest.mark.parametrize("a,b", [(1.5, 2.25), (-3.0, 0.5), (100.125, -7.75)])
def test_arithmetic_matches_exact_float(a, b):
    fa, fb = FixedPoint.from_num(a), FixedPoint.from_num(b)
    assert (fa + fb).to_float() == a + b
    assert (fa - fb).to_float() == a - b
    assert (fa * fb).to_float() == a * b
    assert (fa + fb) - fb == fa
    assert (fa * fb) / fb == fa


def test_division_truncates_toward_zero():
    result = FixedPoint.from_bits(-1) / FixedPoint.from_num(2)
    assert result.to_bits() == 0


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        FixedPoint.from_num(1) / FixedPoint.ZERO


@pytest.mark.parametrize("value", [0.0, 2.0, 10.5, 1000.0, 0.001])
def test_sqrt_is_floor_of_root(value):
    x = FixedPoint.from_num(value)
    root = x.sqrt()
    assert root * root <= x
    above = root + FixedPoint.DELTA
    assert above.to_float() ** 2 > x.to_float()


def test_sqrt_negative_raises():
    with pytest.raises(ValueError):
        FixedPoint.from_num(-1).sqrt()


def test_comparison_with_numbers():
    assert FixedPoint.from_num(1.5) > 0
    assert FixedPoint.from_num(-0.5) < 0.0
    assert FixedPoint.from_num(2) == 2


def test_fixed_vec2_coerces_numbers():
    v = FixedVec2(1.5, 2)
    assert v.x == FixedPoint.from_num(1.5)
    assert v.y == FixedPoint.from_num(2)


def test_fixed_vec2_length():
    assert FixedVec2(3, 4).length() == FixedPoint.from_num(5)


def test_fixed_vec2_ordering_is_lexicographic():
    assert FixedVec2(1, 5) < FixedVec2(2, 0)
    assert FixedVec2(1, 0) < FixedVec2(1, 5)
    assert sorted([FixedVec2(2, 0), FixedVec2(1, 5), FixedVec2(1, 0)]) == [
        FixedVec2(1, 0),
        FixedVec2(1, 5),
        FixedVec2(2, 0),
    ]


def test_fixed_vec2_hashable():
    lookup = {FixedVec2(1.5, -2): "a"}
    assert lookup[FixedVec2(1.5, -2)] == "a"


def test_parity_checks():
    odd = FixedVec2(FixedPoint.from_bits(1), FixedPoint.from_bits(3))
    mixed = FixedVec2(FixedPoint.from_bits(1), FixedPoint.from_bits(2))
    assert odd.is_x_odd_y_odd()
    assert odd.is_sum_even()
    assert not mixed.is_x_odd_y_odd()
    assert not mixed.is_sum_even()


@pytest.mark.parametrize("xb,yb", [(1, 3), (1, 2), (2, 5), (4, 6), (-3, -7)])
def test_to_nearest_even_even(xb, yb):
    v = FixedVec2(FixedPoint.from_bits(xb), FixedPoint.from_bits(yb))
    even = v.to_nearest_even_even()
    assert even.x.to_bits() % 2 == 0
    assert even.y.to_bits() % 2 == 0
    assert v.x - even.x in (FixedPoint.ZERO, FixedPoint.DELTA)
    assert v.y - even.y in (FixedPoint.ZERO, FixedPoint.DELTA)


def test_fixed_vec2_operators():
    v = FixedVec2(1.5, -2.25)
    w = FixedVec2(0.5, 4)
    assert (v + w) - w == v
    assert -(-v) == v
    assert (v * FixedPoint.from_num(2)) / FixedPoint.from_num(2) == v


def test_fixed_vec2_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        FixedVec2(1, 1) / FixedPoint.ZERO


def test_fixed_to_float_and_back():
    v = FixedVec2(1.5, -2.25)
    assert v.to_float() == FloatVec2(1.5, -2.25)
    assert v.to_float().to_fixed() == v


@pytest.mark.parametrize("x,y", [(3.0, 4.0), (-1.0, 2.0), (0.1, -7.0)])
def test_normalize_unit_length(x, y):
    assert FloatVec2(x, y).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_unchanged():
    assert FloatVec2(0.0, 0.0).normalize() == FloatVec2(0.0, 0.0)


def test_perp_is_orthogonal():
    v = FloatVec2(2.5, -1.25)
    assert v.dot(v.perp()) == 0.0
    assert v.perp().length() == pytest.approx(v.length())


def test_magnitude2_is_length_squared():
    v = FloatVec2(1.5, 2.0)
    assert v.magnitude2() == pytest.approx(v.length() ** 2)
    assert v.length() == pytest.approx(math.hypot(1.5, 2.0))


def test_float_vec2_add_sub():
    a, b = FloatVec2(1.0, 2.0), FloatVec2(0.5, -3.0)
    assert (a + b) - b == a


def test_float_vec2_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        FloatVec2(1.0, 1.0) / 0.0


def test_float_vec2_dict_round_trip():
    v = FloatVec2(1.5, -0.25)
    assert v.to_dict() == {"x": 1.5, "y": -0.25}
    assert FloatVec2.from_dict(v.to_dict()) == v


def test_float_vec2_from_dict_missing_key():
    with pytest.raises(ValueError):
        FloatVec2.from_dict({"x": 1.0})


def test_int_vec2_to_fixed():
    assert IntVec2(-3, 7).to_fixed().to_float() == FloatVec2(-3.0, 7.0)