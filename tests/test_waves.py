import pytest

from wizardtd.waves import (
    DANGER_TIME,
    DangerState,
    WaveEntry,
    danger_alpha,
    danger_state,
    load_waves,
    parse_waves,
)


def test_parse_expands_repeats():
    entries = parse_waves("1 2 3\n4 0.5 1\n")
    assert entries == [WaveEntry(1, 2.0)] * 3 + [WaveEntry(4, 0.5)]


def test_parse_zero_or_negative_repeat_adds_nothing():
    assert parse_waves("1 2 0\n3 1 -2\n") == []


def test_parse_fractional_repeat_rounds_up():
    assert len(parse_waves("2 1 2.5")) == 3


def test_parse_truncates_kind():
    assert parse_waves("5.9 1 1") == [WaveEntry(5, 1.0)]


def test_parse_stops_at_incomplete_triple():
    assert parse_waves("1 2 1 7 8") == [WaveEntry(1, 2.0)]


def test_parse_stops_at_garbage():
    assert parse_waves("1 2 1 x 3 4 1") == [WaveEntry(1, 2.0)]


def test_parse_number_followed_by_junk_still_counts():
    assert parse_waves("6 1.5 2junk") == [WaveEntry(6, 1.5)] * 2


def test_parse_empty():
    assert parse_waves("") == []


def test_load_round_trip(tmp_path):
    path = tmp_path / "enemy1.txt"
    path.write_text("7 3 2\n")
    assert load_waves(path) == [WaveEntry(7, 3.0), WaveEntry(7, 3.0)]


def test_load_missing_file_is_empty(tmp_path):
    assert load_waves(tmp_path / "absent.txt") == []


def test_danger_alpha_bounds():
    assert danger_alpha(0.0) == 0
    assert danger_alpha(DANGER_TIME) == 255


def test_danger_alpha_is_monotonic():
    values = [danger_alpha(t / 10 * DANGER_TIME) for t in range(11)]
    assert values == sorted(values)
    assert all(0 <= v <= 255 for v in values)


def test_danger_state_safe_when_lives_cover_arrivals():
    state = danger_state([1.0, 2.0], lives=3)
    assert state == DangerState()
    assert not state.active


def test_danger_state_ignores_late_arrivals():
    state = danger_state([DANGER_TIME + 1, DANGER_TIME + 2], lives=1)
    assert not state.active


def test_danger_state_finds_fatal_arrival():
    state = danger_state([3.0, 1.0, 2.0], lives=2)
    assert state.active
    assert state.countdown == 2.0
    assert state.offset == pytest.approx(DANGER_TIME - 2.0)
    assert state.alpha == danger_alpha(DANGER_TIME - 2.0)


def test_danger_state_zero_lives_uses_first_arrival():
    state = danger_state([4.0, 5.0], lives=0)
    assert state.countdown == 4.0