import math

import pytest

from wizardtd.vector import Vec2, circles_overlap, rects_overlap


def test_magnitude_of_axis_vector():
    assert Vec2(0, 7).magnitude() == 7


@pytest.mark.parametrize("v", [Vec2(3, 4), Vec2(-2, 9), Vec2(0.5, -0.25)])
def test_normalized_has_unit_length(v):
    assert v.normalized().magnitude() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    v = Vec2(6, 8)
    n = v.normalized()
    assert n * v.magnitude() == Vec2(pytest.approx(6), pytest.approx(8))


def test_normalized_zero_stays_zero():
    assert Vec2(0, 0).normalized() == Vec2(0, 0)


def test_arithmetic_round_trip():
    a, b = Vec2(1.5, -2), Vec2(4, 10)
    assert (a + b) - b == a
    assert (a * 4) / 4 == a
    assert 2 * a == a * 2
    assert -a + a == Vec2(0, 0)


def test_iteration_unpacks():
    x, y = Vec2(5, 6)
    assert (x, y) == (5, 6)


def test_rotation_preserves_length():
    v = Vec2(3, -7)
    assert v.rotated(0.1745).magnitude() == pytest.approx(v.magnitude())


def test_rotation_by_zero_is_identity():
    v = Vec2(2, 3)
    assert v.rotated(0) == v


def test_rotation_composes():
    v = Vec2(1, 2)
    a = v.rotated(0.3).rotated(0.4)
    b = v.rotated(0.7)
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)


def test_quarter_turn():
    r = Vec2(1, 0).rotated(math.pi / 2)
    assert r.x == pytest.approx(0, abs=1e-12)
    assert r.y == pytest.approx(1)


def test_circles_overlap_and_apart():
    assert circles_overlap(Vec2(0, 0), 4, Vec2(5, 0), 4)
    assert not circles_overlap(Vec2(0, 0), 4, Vec2(50, 0), 4)


def test_circles_touching_do_not_overlap():
    assert not circles_overlap(Vec2(0, 0), 2, Vec2(4, 0), 2)


def test_circles_overlap_is_symmetric():
    p, q = Vec2(1, 1), Vec2(3, 2)
    assert circles_overlap(p, 1, q, 2) == circles_overlap(q, 2, p, 1)


def test_rects_overlap():
    inner_min, inner_max = Vec2(10, 10), Vec2(20, 20)
    assert rects_overlap(inner_min, inner_max, Vec2(0, 0), Vec2(1280, 832))
    assert not rects_overlap(Vec2(-30, 10), Vec2(-20, 20), Vec2(0, 0), Vec2(1280, 832))
    assert not rects_overlap(Vec2(10, 900), Vec2(20, 910), Vec2(0, 0), Vec2(1280, 832))


def test_rects_touching_edges_overlap():
    assert rects_overlap(Vec2(-10, 0), Vec2(0, 5), Vec2(0, 0), Vec2(10, 10))