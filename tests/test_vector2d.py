import math

import pytest

from cluedo.vector2d import Vector2D


def approx_vec(v):
    return (pytest.approx(v.x), pytest.approx(v.y))


def test_add_sub_round_trip():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(0.25, 7.0)
    assert (a + b) - b == a


def test_mul_and_div_are_inverse():
    a = Vector2D(3.0, -6.0)
    assert (a * 2.5) / 2.5 == a
    assert 2.5 * a == a * 2.5


def test_length_of_3_4():
    assert Vector2D(3.0, 4.0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vector2D(-2.0, 9.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v.cross(n) == pytest.approx(0.0)
    assert v.dot(n) > 0


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D().normalized()


def test_dot_and_cross_of_ccw90():
    v = Vector2D(2.0, 3.0)
    r = v.rotated_ccw90()
    assert v.dot(r) == pytest.approx(0.0)
    assert v.cross(r) == pytest.approx(v.dot(v))
    assert r.length() == pytest.approx(v.length())


def test_projection_and_rejection_sum_to_original():
    v = Vector2D(4.0, -1.0)
    unit = Vector2D(1.0, 1.0).normalized()
    proj = v.projected_onto(unit)
    rej = v.rejected_from(unit)
    total = proj + rej
    assert (total.x, total.y) == approx_vec(v)
    assert rej.dot(unit) == pytest.approx(0.0)
    assert proj.cross(unit) == pytest.approx(0.0)


def test_rotated_by_quarter_turn_matches_ccw90():
    v = Vector2D(1.25, -3.5)
    rotated = v.rotated_by(math.pi / 2)
    expected = v.rotated_ccw90()
    assert (rotated.x, rotated.y) == approx_vec(expected)


def test_rotation_preserves_length():
    v = Vector2D(-7.0, 2.0)
    assert v.rotated_by(1.1).length() == pytest.approx(v.length())


def test_decompose_from_polar_round_trip():
    v = Vector2D(-3.0, 0.5)
    radius, angle = v.decompose()
    back = Vector2D.from_polar(radius, angle)
    assert (back.x, back.y) == approx_vec(v)
    assert radius == pytest.approx(v.length())


def test_default_is_origin():
    assert Vector2D() == Vector2D(0.0, 0.0)
    assert Vector2D().length() == 0.0