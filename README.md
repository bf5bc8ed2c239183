# wizardtd

This package holds the game rules for a small real-time tower-defense game. A wizard
moves around a 20 × 13 tile map. Enemies follow breadth-first-search paths across the
walkable tiles, and bullets fly in straight lines until they hit something. The package
contains only plain Python objects and has no dependencies outside the standard library.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

- `wizardtd.vector`
  - `Vec2` is an immutable point type. It supports `+`, `-`, `*`, `/` and unary `-`, and has `magnitude()`, `normalized()` and `rotated(angle)`.
  - `circles_overlap` returns true when two circles intersect. Circles that only touch do not count.
  - `rects_overlap` tests two axis-aligned rectangles.
- `wizardtd.tilemap`
  - `TileType` has the values `DIRT`, `FLOOR` and `OCCUPIED`.
  - `TileMap.parse(text)` and `TileMap.load(path)` read a map of `0` (dirt, walkable) and `1` (floor, a wall). Whitespace is ignored. If any other character appears, or the map does not have exactly 20 × 13 cells, they raise `MapError`, a `ValueError`.
  - `TileMap.distances_to(end)` gives the breadth-first step count from every dirt cell to `end`. Cells that cannot reach `end` get `-1`.
  - `tile`, `set_tile`, `in_bounds` and `walkable_cells` work with single cells.
  - `grid_of`, `cell_center` and `client_size` convert between pixels and cells. One cell is 64 pixels.
- `wizardtd.effects`
  - `Effect` is a moving visual effect.
  - `SummonEffect` fades out linearly over `time_span` seconds. `alive` becomes false when it is done. `draw_rect(width, height)` returns its scaled destination rectangle.
- `wizardtd.waves`
  - `parse_waves` and `load_waves` expand `kind wait repeat` triples into a list of `WaveEntry`. A missing file gives an empty list.
  - `danger_state(reach_end_times, lives)` finds the arrival that would take the last life within the 7.61-second danger window. It returns a `DangerState` with `countdown`, `offset`, `alpha` and `active`.
  - `danger_alpha` gives the opacity of the danger indicator.
- `wizardtd.enemies`
  - `Enemy` walks a path that `update_path(distances)` builds. `hit(damage, world)` deals damage. An enemy that dies or reaches the end of its path sets `alive = False`.
  - The enemy kinds are:
    - `SoldierEnemy`
    - `PlaneEnemy`
    - `TankEnemy`, whose head drifts toward random angles.
    - `DyyEnemy`, which splits into two planes when it dies.
    - `BossEnemy`, which triples its speed at 15 hp or less.
    - `RobotEnemy`, which chases the player and speeds up ×5 at 15 hp or less.
    - `SkeletonEnemy`
    - `WitchEnemy`, which summons skeletons when the player is within 300 pixels, every 6 seconds.
  - `make_enemy(kind, position)` builds the enemy for wave kinds 1–7. Any other kind gives `None`.
- `wizardtd.bullet`
  - `Bullet` stops (`alive = False`) when it enters a floor tile, when it hits the first live, visible enemy it touches, or when it leaves the field. `boosted=True` multiplies its damage by 1.5.
- `wizardtd.player`
  - `InputState` holds the frame's directions, mouse position, fire button and skill keys.
  - `Player` moves over dirt tiles and bobs up and down. It fires on a fresh click. The world's `enchantment_level` adds a chance of a second, angled shot. When an enemy touches the player, it takes a life and knocks the player back, and further hits are ignored for one second.
  - `Wizard` also records the skill keys being held in `cast_skills`.
- `wizardtd.scenes`
  - `SceneName` lists the scene names.
  - `AudioSettings` holds the music and effect volumes.
  - `MenuFlow` tracks moves between the start, stage-select, settings, scoreboard, play, win and lose scenes. It raises `ValueError` for a move that is not possible from the current scene.
  - `back_target(scene)` gives the destination of a scene's Back button.

## The world object

Enemies, bullets and the player do not own the scene. Each `update` call receives a
`world` object that you provide. It needs these attributes:

- Enemies use `distances`, `enemies`, `effects`, `ground_effects`, `player`, `hit()`, `earn_money(amount)` and `player_position()`.
- Bullets use `tilemap`, `enemies` and `earn_money`.
- The player uses `tilemap`, `enemies`, `bullets`, `potion_effect_active`, `enchantment_level` and `hit()`.

Objects never remove themselves. Your loop drops everything whose `alive` is false.

## Example

```python
from wizardtd.tilemap import TileMap, cell_center
from wizardtd.enemies import make_enemy
from wizardtd.waves import parse_waves, danger_state
from wizardtd.scenes import MenuFlow, SceneName

tilemap = TileMap.parse("\n".join(["0" * 20] * 13))
distances = tilemap.distances_to((10, 6))
assert distances[0][0] == 16

enemy = make_enemy(1, cell_center(0, 0))
enemy.update_path(distances)

waves = parse_waves("1 1.0 2\n3 2.5 1\n")
assert [w.kind for w in waves] == [1, 1, 3]

state = danger_state([1.0, 3.0], lives=2)
assert state.active and state.countdown == 3.0

flow = MenuFlow()
flow.start_play()
assert flow.select_stage(2) is SceneName.PLAY
flow.win()
assert flow.back() is SceneName.STAGE_SELECT
```

## What this package does not do

- There is no play-scene object. Nothing here keeps lives, money or score, spawns waves over time, buys or places turrets, or decides when a stage is won or lost. You write that loop around the pieces above.
- There is no scoreboard storage and no name entry for winners.
- There is no keyboard handling for hotkeys or key sequences.
- There is no drawing, audio, window or command-line program.

## Running the tests

```
pytest
```