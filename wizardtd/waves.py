"""Enemy wave files and the danger countdown derived from enemy arrival times."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

DANGER_TIME = 7.61
MAX_ALPHA = 255

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE = re.compile(r"\s*")


@dataclass(frozen=True)
class WaveEntry:
    """One enemy to spawn: its kind and the seconds to wait before it appears."""

    kind: int
    wait: float


def _numbers(text: str) -> Iterator[float]:
    """Leading numbers of ``text``, stopping at the first thing that is not one."""
    pos = 0
    while True:
        pos = _SPACE.match(text, pos).end()
        match = _NUMBER.match(text, pos)
        if match is None:
            return
        yield float(match.group())
        pos = match.end()


def parse_waves(text: str) -> list[WaveEntry]:
    """Expand ``kind wait repeat`` triples into a spawn list.

    Reading stops at the first value that is not a number or at an
    incomplete triple. Each triple contributes one entry per whole step
    below ``repeat``; the kind is truncated to an integer.
    """
    values = _numbers(text)
    entries: list[WaveEntry] = []
    for kind in values:
        wait = next(values, None)
        repeat = next(values, None)
        if wait is None or repeat is None:
            break
        count = math.ceil(repeat) if repeat > 0 else 0
        entries.extend(WaveEntry(int(kind), wait) for _ in range(count))
    return entries


def load_waves(path: str | PathLike[str]) -> list[WaveEntry]:
    """Read a wave file; a missing file yields no waves."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return []
    return parse_waves(text)


@dataclass(frozen=True)
class DangerState:
    """Outcome of the danger check.

    ``countdown`` is the arrival time of the enemy that would take the last
    life, or None when the lives are safe. ``offset`` is how far into the
    danger window that arrival lies and ``alpha`` the indicator opacity.
    """

    countdown: float | None = None
    offset: float = 0.0
    alpha: int = 0

    @property
    def active(self) -> bool:
        return self.countdown is not None


def danger_alpha(position: float, danger_time: float = DANGER_TIME) -> int:
    """Opacity of the danger indicator, growing quadratically over the window."""
    ratio = position / danger_time
    return max(0, min(MAX_ALPHA, int(ratio * ratio * MAX_ALPHA)))


def danger_state(
    reach_end_times: Iterable[float],
    lives: int,
    danger_time: float = DANGER_TIME,
) -> DangerState:
    """Find the first arrival within ``danger_time`` that would use up all lives."""
    remaining = lives
    for arrival in sorted(reach_end_times):
        if arrival > danger_time:
            continue
        remaining -= 1
        if remaining <= 0:
            offset = danger_time - arrival
            return DangerState(arrival, offset, danger_alpha(offset, danger_time))
    return DangerState()