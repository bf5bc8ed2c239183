import pytest

from wizardtd.scenes import AudioSettings, MenuFlow, SceneName, back_target


def test_scene_names_match_registered_names():
    assert SceneName.STAGE_SELECT.value == "stage-select"
    assert SceneName("start") is SceneName.START


@pytest.mark.parametrize(
    "scene, target",
    [
        (SceneName.STAGE_SELECT, SceneName.START),
        (SceneName.SETTINGS, SceneName.START),
        (SceneName.SCOREBOARD, SceneName.START),
        (SceneName.WIN, SceneName.STAGE_SELECT),
        (SceneName.LOSE, SceneName.STAGE_SELECT),
    ],
)
def test_back_target(scene, target):
    assert back_target(scene) is target


def test_back_target_accepts_string():
    assert back_target("lose") is SceneName.STAGE_SELECT


@pytest.mark.parametrize("scene", [SceneName.START, SceneName.PLAY])
def test_back_target_without_button(scene):
    with pytest.raises(ValueError):
        back_target(scene)


def test_back_target_unknown_scene():
    with pytest.raises(ValueError):
        back_target("nowhere")


def test_audio_settings_volumes():
    seen = []
    audio = AudioSettings(on_bgm_change=seen.append)
    audio.set_bgm_volume(0.25)
    audio.set_sfx_volume(0.5)
    assert audio.bgm_volume == 0.25
    assert audio.sfx_volume == 0.5
    assert seen == [0.25]


def test_sfx_does_not_touch_music():
    seen = []
    audio = AudioSettings(on_bgm_change=seen.append)
    before = audio.bgm_volume
    audio.set_sfx_volume(0.1)
    assert seen == []
    assert audio.bgm_volume == before


def test_flow_starts_at_start():
    flow = MenuFlow()
    assert flow.current is SceneName.START
    assert flow.map_id is None


def test_play_stage_and_win():
    flow = MenuFlow()
    assert flow.start_play() is SceneName.STAGE_SELECT
    assert flow.select_stage(2) is SceneName.PLAY
    assert flow.map_id == 2
    assert flow.win() is SceneName.WIN
    assert flow.back() is SceneName.STAGE_SELECT


def test_lose_returns_to_stage_select():
    flow = MenuFlow()
    flow.start_play()
    flow.select_stage(1)
    assert flow.lose() is SceneName.LOSE
    assert flow.back() is SceneName.STAGE_SELECT
    assert flow.back() is SceneName.START


def test_settings_round_trip():
    flow = MenuFlow()
    flow.open_settings()
    assert flow.current is SceneName.SETTINGS
    assert flow.back() is SceneName.START
    assert flow.history == [SceneName.START, SceneName.SETTINGS, SceneName.START]


def test_scoreboard_back_goes_to_start():
    flow = MenuFlow()
    flow.start_play()
    assert flow.open_scoreboard() is SceneName.SCOREBOARD
    assert flow.back() is SceneName.START


def test_invalid_moves_raise():
    flow = MenuFlow()
    with pytest.raises(ValueError):
        flow.select_stage(1)
    with pytest.raises(ValueError):
        flow.win()
    with pytest.raises(ValueError):
        flow.back()
    assert flow.current is SceneName.START


def test_invalid_stage_number():
    flow = MenuFlow()
    flow.start_play()
    with pytest.raises(ValueError):
        flow.select_stage(0)
    assert flow.current is SceneName.STAGE_SELECT
    assert flow.map_id is None