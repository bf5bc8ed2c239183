import pytest

from wizardtd.effects import Effect, SummonEffect
from wizardtd.vector import Vec2


def make_summon(scale=0.2):
    return SummonEffect("play/magic2.png", Vec2(100, 200), time_span=0.6, scale=scale)


def test_effect_moves_by_velocity():
    e = Effect("play/x.png", Vec2(10, 10), velocity=Vec2(4, -2))
    e.update(0.5)
    assert e.position == Vec2(12, 9)
    assert e.alive


def test_summon_fades_monotonically():
    s = make_summon()
    alphas = []
    for _ in range(5):
        s.update(0.1)
        alphas.append(s.tint[3])
    assert alphas == sorted(alphas, reverse=True)
    assert all(0 <= a <= 255 for a in alphas)
    assert s.alive


def test_summon_keeps_colour_channels():
    s = make_summon()
    s.tint = (10, 20, 30, 255)
    s.update(0.1)
    assert s.tint[:3] == (10, 20, 30)


def test_summon_dies_after_time_span():
    s = make_summon()
    s.update(0.3)
    assert s.alive
    s.update(0.31)
    assert not s.alive
    assert s.alpha <= 0


def test_summon_does_not_rotate_or_move():
    s = make_summon()
    s.update(0.2)
    assert s.position == Vec2(100, 200)
    assert s.rotation == 0.0


def test_draw_rect_is_scaled_and_anchored():
    s = make_summon(scale=0.2)
    x, y, w, h = s.draw_rect(500, 300)
    assert w == pytest.approx(500 * 0.2)
    assert h == pytest.approx(300 * 0.2)
    # Centre anchor: the rectangle is centred on the position.
    assert x + w / 2 == pytest.approx(100)
    assert y + h / 2 == pytest.approx(200)


def test_draw_rect_top_left_anchor():
    s = SummonEffect("img", Vec2(7, 9), anchor=Vec2(0, 0), time_span=1.0)
    assert s.draw_rect(32, 16) == (7, 9, 32, 16)