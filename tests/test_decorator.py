import pytest

from dungeoncrawl.dungeon.builder import Builder
from dungeoncrawl.dungeon.decorator import Decorator
from dungeoncrawl.dungeon.tile import TileType
from dungeoncrawl.graphics.animatedsprite import AnimatedSprite
from dungeoncrawl.graphics.sprite import Sprite
from dungeoncrawl.util import randomness
from dungeoncrawl.util.grid import Grid
from dungeoncrawl.util.vec import Vec

FLOOR_NAMES = {"floor_cracked_1", "floor_sunken", "floor_cracked_2", "floor_nice"}
ANIMATION_BASE = 1000


class RecordingGraphics:
    """Hands out sprites whose texture id identifies the requested name."""

    def __init__(self):
        self.names = []
        self.animated = []

    def get_sprite(self, name):
        self.names.append(name)
        return Sprite(texture_id=len(self.names) - 1)

    def get_animated_sprite(self, name, ticks_per_frame=1, random_start=False, shuffle_order=False):
        self.animated.append((name, ticks_per_frame, random_start, shuffle_order))
        return AnimatedSprite([Sprite(texture_id=ANIMATION_BASE + len(self.animated) - 1)], ticks_per_frame)

    def name_of(self, sprite):
        return self.names[sprite.texture_id]

    def animation_name(self, animation):
        return self.animated[animation.current_sprite().texture_id - ANIMATION_BASE][0]


def make_layout(rows):
    layout = Grid(len(rows[0]), len(rows), 0)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            layout[x, y] = int(ch)
    return layout


HORIZONTAL = ["00000", "01110", "00200", "01110", "00000"]
VERTICAL = ["00000", "01010", "01210", "01010", "00000"]


def test_horizontal_door():
    randomness.seed(1)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, make_layout(HORIZONTAL), []).create_dungeon()
    tile = dungeon.tiles[2, 2]
    assert tile.has_door()
    assert tile.door.is_horizontal
    assert not tile.walkable
    assert graphics.name_of(tile.door.sprite()) == "door_horizontal"
    tile.door.open()
    assert graphics.name_of(tile.door.sprite()) == "door_vertical"
    assert graphics.name_of(tile.sprite) in FLOOR_NAMES


def test_vertical_door():
    randomness.seed(1)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, make_layout(VERTICAL), []).create_dungeon()
    door = dungeon.tiles[2, 2].door
    assert not door.is_horizontal
    assert graphics.name_of(door.sprite()) == "door_vertical"


def test_corner_wall_sprite_name():
    randomness.seed(2)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, make_layout(HORIZONTAL), []).create_dungeon()
    assert graphics.name_of(dungeon.tiles[0, 0].sprite) == "wall_right_up"
    assert all(
        graphics.name_of(dungeon.tiles[p].sprite).startswith("wall")
        for p in dungeon.tiles
        if dungeon.tiles[p].is_wall()
    )


def test_floor_sprites_and_visibility():
    randomness.seed(4)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, make_layout(HORIZONTAL), []).create_dungeon()
    for position in dungeon.tiles:
        tile = dungeon.tiles[position]
        assert not tile.visible
        if tile.type is TileType.FLOOR:
            assert tile.walkable
            assert graphics.name_of(tile.sprite) in FLOOR_NAMES


def test_pillars_in_large_room():
    randomness.seed(5)
    builder = Builder(1)
    layout, rooms = builder.generate_test_dungeon(9, 9)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, layout, rooms).create_dungeon()
    tile = dungeon.tiles[rooms[0].position + Vec(1, 1)]
    assert tile.is_wall()
    assert not tile.walkable
    assert graphics.name_of(tile.sprite) == "wall_pillar"


@pytest.mark.parametrize("seed", [0, 7, 21])
def test_generated_layout_invariants(seed):
    randomness.seed(seed)
    layout, rooms = Builder(30).generate(19, 19)
    graphics = RecordingGraphics()
    dungeon = Decorator(graphics, layout, rooms).create_dungeon()
    assert dungeon.rooms == rooms
    for position in layout:
        tile = dungeon.tiles[position]
        value = layout[position]
        if value == -1:
            assert tile.type is TileType.NONE
        elif value == 2:
            assert tile.has_door() and not tile.door.is_open()
        assert tile.walkable == (tile.type is TileType.FLOOR)


def test_destroyed_wall_and_torches():
    rows = ["000000000", "011111110", "011111110", "000000000", "011111110", "011111110", "000000000"]
    placed = 0
    torches = 0
    for seed in range(20):
        randomness.seed(seed)
        graphics = RecordingGraphics()
        dungeon = Decorator(graphics, make_layout(rows), []).create_dungeon()
        for name, ticks, random_start, shuffle_order in graphics.animated:
            assert name in {"torch", "wall_destroyed_left", "wall_destroyed_center", "wall_destroyed_right"}
            if name == "torch":
                torches += 1
                assert (ticks, random_start, shuffle_order) == (2, True, True)
        tile = dungeon.tiles[2, 3]
        if tile.type is TileType.FLOOR:
            placed += 1
            assert tile.walkable
            names = [graphics.animation_name(dungeon.decorations[Vec(x, 3)]) for x in (1, 2, 3)]
            assert names == ["wall_destroyed_left", "wall_destroyed_center", "wall_destroyed_right"]
        else:
            assert tile.is_wall()
    assert placed > 0
    assert torches > 0