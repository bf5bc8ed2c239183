"""Menu scenes, the moves between them and the shared audio settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from wizardtd.waves import DANGER_TIME

LOSE_MUSIC_OFFSET = DANGER_TIME


class SceneName(str, Enum):
    """Names under which the game's scenes are registered."""

    START = "start"
    STAGE_SELECT = "stage-select"
    SETTINGS = "settings"
    SCOREBOARD = "scoreboard"
    PLAY = "play"
    WIN = "win"
    LOSE = "lose"


_BACK_TARGETS: dict[SceneName, SceneName] = {
    SceneName.STAGE_SELECT: SceneName.START,
    SceneName.SETTINGS: SceneName.START,
    SceneName.SCOREBOARD: SceneName.START,
    SceneName.WIN: SceneName.STAGE_SELECT,
    SceneName.LOSE: SceneName.STAGE_SELECT,
}


def back_target(scene: SceneName | str) -> SceneName:
    """The scene a scene's Back button leads to."""
    name = SceneName(scene)
    try:
        return _BACK_TARGETS[name]
    except KeyError:
        raise ValueError(f"scene {name.value!r} has no back button") from None


@dataclass
class AudioSettings:
    """Music and sound-effect volumes shared by all scenes."""

    bgm_volume: float = 1.0
    sfx_volume: float = 1.0
    on_bgm_change: Callable[[float], None] | None = None

    def set_bgm_volume(self, value: float) -> None:
        """Change the music volume and apply it to the music now playing."""
        if self.on_bgm_change is not None:
            self.on_bgm_change(value)
        self.bgm_volume = value

    def set_sfx_volume(self, value: float) -> None:
        self.sfx_volume = value


@dataclass
class MenuFlow:
    """Tracks the active scene and moves between scenes as the menus do."""

    current: SceneName = SceneName.START
    map_id: int | None = None
    audio: AudioSettings = field(default_factory=AudioSettings)
    history: list[SceneName] = field(default_factory=list)

    def __init__(self) -> None:
        self.current = SceneName.START
        self.map_id = None
        self.audio = AudioSettings()
        self.history = [SceneName.START]

    def _require(self, *allowed: SceneName) -> None:
        if self.current not in allowed:
            names = ", ".join(s.value for s in allowed)
            raise ValueError(f"not possible from {self.current.value!r}; needs {names}")

    def _go(self, scene: SceneName) -> SceneName:
        self.current = scene
        self.history.append(scene)
        return scene

    def start_play(self) -> SceneName:
        """The Play button of the start screen."""
        self._require(SceneName.START)
        return self._go(SceneName.STAGE_SELECT)

    def open_settings(self) -> SceneName:
        """The Settings button of the start screen."""
        self._require(SceneName.START)
        return self._go(SceneName.SETTINGS)

    def select_stage(self, stage: int) -> SceneName:
        """Start playing the given stage."""
        self._require(SceneName.STAGE_SELECT)
        if stage < 1:
            raise ValueError(f"invalid stage {stage}")
        self.map_id = stage
        return self._go(SceneName.PLAY)

    def open_scoreboard(self) -> SceneName:
        """The Scoreboard button of the stage selection."""
        self._require(SceneName.STAGE_SELECT)
        return self._go(SceneName.SCOREBOARD)

    def back(self) -> SceneName:
        """The Back button of the active scene."""
        return self._go(back_target(self.current))

    def win(self) -> SceneName:
        self._require(SceneName.PLAY)
        return self._go(SceneName.WIN)

    def lose(self) -> SceneName:
        self._require(SceneName.PLAY)
        return self._go(SceneName.LOSE)