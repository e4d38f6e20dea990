import itertools
import wave

import pygame
import pytest

from dungeoncrawl.engine import Engine
from dungeoncrawl.entity import Team
from dungeoncrawl.settings import Settings
from dungeoncrawl.util.randomness import seed


def _sprite_names():
    names = {
        "wall_pillar",
        "floor_cracked_1",
        "floor_sunken",
        "floor_cracked_2",
        "floor_nice",
        "door_horizontal",
        "door_vertical",
        "wall_destroyed_left",
        "wall_destroyed_center",
        "wall_destroyed_right",
        "torch",
        "knight",
        "demon_big",
        "skeleton",
        "muddy",
    }
    for vertical in ("_bottom", "_center", "_top"):
        for horizontal in ("_left", "_center", "_right"):
            names.add("floor_broken" + vertical + horizontal)
    labels = ["_right", "_up", "_left", "_down"]
    for count in range(1, 5):
        for combo in itertools.combinations(labels, count):
            name = "wall" + "".join(combo)
            if name in ("wall_right_left", "wall_up_down"):
                names.update(name + suffix for suffix in ("_1", "_2", "_3"))
            else:
                names.add(name)
    return sorted(names)


@pytest.fixture
def engine(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    assets = tmp_path / "assets"
    assets.mkdir()

    pygame.image.save(pygame.Surface((16, 16)), str(assets / "sheet.bmp"))
    lines = ["sheet.bmp"] + [f"{name} 0 0 16 16" for name in _sprite_names()]
    (assets / "sheet.txt").write_text("\n".join(lines) + "\n")

    with wave.open(str(assets / "music.wav"), "wb") as sound:
        sound.setnchannels(2)
        sound.setsampwidth(2)
        sound.setframerate(44100)
        sound.writeframes(b"\x00\x00" * 2 * 441)
    (assets / "sounds.txt").write_text("background music.wav\n")

    (tmp_path / "settings.txt").write_text(
        "title Dungeon\n"
        "screen_width 320\n"
        "screen_height 240\n"
        "tile_size 16\n"
        "zoom 2\n"
        "tiles assets/sheet.txt\n"
        "heroes assets/sheet.txt\n"
        "monsters assets/sheet.txt\n"
        "items assets/sheet.txt\n"
        "effects assets/sheet.txt\n"
        "sounds assets/sounds.txt\n"
        "map_width 21\n"
        "map_height 21\n"
        "room_placement_attempts 40\n"
    )
    seed(7)
    game = Engine(Settings(tmp_path / "settings.txt"))
    yield game
    game.audio.close()
    game.graphics.close()


def test_run_without_hero_raises(engine):
    with pytest.raises(RuntimeError):
        engine.run()


def test_create_hero_places_and_reveals_hero(engine):
    hero = engine.create_hero()
    assert engine.hero is hero
    assert hero.team is Team.HERO
    assert engine.dungeon.get_tile(hero.position).entity is hero
    assert engine.dungeon.get_tile(hero.position).visible
    assert engine.camera.location == hero.position
    assert list(engine.entities) == [hero]


def test_camera_follows_hero_moves(engine):
    hero = engine.create_hero()
    target = engine.dungeon.neighbors(hero.position)[0]
    hero.move_to(target)
    assert engine.camera.location == target
    assert engine.dungeon.get_tile(target).visible


def test_create_monster_adds_entity(engine):
    hero = engine.create_hero()
    monsters = [engine.create_monster() for _ in range(3)]
    assert len(engine.entities) == 4
    assert all(monster.team is Team.MONSTER for monster in monsters)
    positions = {hero.position} | {monster.position for monster in monsters}
    assert len(positions) == 4


def test_remove_entity_clears_tile_and_kills(engine):
    engine.create_hero()
    monster = engine.create_monster()
    engine.remove_entity(monster)
    assert engine.dungeon.get_tile(monster.position).entity is None
    assert not monster.alive


def test_run_zooms_then_quits(engine):
    engine.create_hero()
    zoom = engine.camera.zoom
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_EQUALS))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.run()
    assert engine.camera.zoom == zoom + 1
    assert engine.hero.alive


def test_events_after_quit_are_ignored(engine):
    engine.create_hero()
    zoom = engine.camera.zoom
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_MINUS))
    engine.run()
    assert engine.camera.zoom == zoom


def test_other_keys_are_recorded(engine):
    engine.create_hero()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.run()
    assert engine.input.pop_last_keypress() == pygame.key.name(pygame.K_r, use_compat=False)