# dungeoncrawl

A small turn-based dungeon crawler. Each game builds a fresh dungeon out of
rooms, winding corridors and doors. A knight explores it under a fog of war
while demons, skeletons and mud creatures wander around and chase the hero
once they can see it.

## Installing

```
pip install .
```

Windows, drawing, sound and input come from `pygame`.

## Playing

```
dungeoncrawl [SETTINGS] [--monsters N]
```

- `SETTINGS` is the path of the settings file (default: `settings.txt`).
- `--monsters N` sets how many monsters are created (default: 20). Each one
  is a skeleton half the time, otherwise a demon or a mud creature with
  equal chance.

The same command is available as `python -m dungeoncrawl.game`. If anything
goes wrong while starting or running the game, the error message is printed
and the command exits with status 1.

### The settings file

The settings file is a list of `key value` pairs separated by whitespace.
Every one of these keys has to be present, or the game stops with an error
naming the missing key:

| key | meaning |
| --- | --- |
| `title` | window title |
| `screen_width`, `screen_height` | window size in pixels |
| `tile_size` | pixels per tile |
| `zoom` | starting camera zoom |
| `map_width`, `map_height` | dungeon size in tiles: odd numbers, at least 19 |
| `room_placement_attempts` | how many times room placement is tried |
| `tiles`, `heroes`, `monsters`, `items`, `effects` | sprite sheet description files |
| `sounds` | sound list file; it must name a `background` sound |

Numeric values are read from their leading digits. The asset paths are used
as written, so they are relative to the directory the game is started from.

A sprite sheet description file starts with the image file name, followed by
records of `name x y width height [frames]`; with several frames, they lie
side by side in the image starting at `x`. A sound list file holds
`name file` pairs. An image or sound file name is joined to the part of the
description file's path up to and including its first `/`.

The tile sheet must provide the wall, floor, door, pillar, torch and
broken-wall sprite names the dungeon decorator asks for; the hero sheet a
`knight`; the monster sheet `demon_big`, `skeleton` and `muddy`.

### Controls

| key | action |
| --- | --- |
| arrow keys | move, opening a closed door in the way |
| `R` | rest for a turn |
| `C` | close the open, unoccupied doors next to you |
| `Z` | step in a random open direction |
| `-` / `=` | zoom out / in (zoom stays between 1 and 8) |

The game ends when the window is closed or the hero dies.

## Using the engine

The pieces can also be used on their own. The layout generator returns a
`Grid` of numbers (-1 hidden wall, 0 wall, 1 floor, 2 door) and the rooms:

```python
from dungeoncrawl.dungeon.builder import Builder, format_layout
from dungeoncrawl.util import randomness

randomness.seed(42)  # reproducible dungeons
layout, rooms = Builder(room_placement_attempts=200).generate(41, 31)
print(format_layout(layout))
```

Other building blocks:

- `dungeoncrawl.dungeon.fov.FieldOfView().compute(position, is_opaque)`
  returns the set of positions visible from `position` by symmetric shadow
  casting.
- `dungeoncrawl.dungeon.pathfinding.breadth_first(dungeon, start, goal)`
  returns the shortest path around walls, or an empty list.
- `dungeoncrawl.dungeon.dungeon.Dungeon` holds the tiles, rooms, decorations
  and `Fog`, and offers `neighbors`, `is_opaque`, `calculate_path` and
  `random_open_room_tile`.
- `dungeoncrawl.util.vec.Vec` and `dungeoncrawl.util.grid.Grid` are the
  integer vector and bounds-checked grid used throughout.
- New behaviour is written as `dungeoncrawl.action.Action` subclasses
  returning `success()`, `failure()` or `alternative(other_action)`, and as
  `dungeoncrawl.event.Event` subclasses queued with `Events.create_event`.

## What it does not do

There is no combat yet: a monster that runs into the hero just rests, and
nothing deals damage during play. `Item.use` and the monsters' `Bite` item
have no effect, items are never placed in the dungeon, and mouse clicks are
recorded but not acted on. There is no saving or loading of games.

## Running the tests

```
pip install ".[test]"
pytest
```