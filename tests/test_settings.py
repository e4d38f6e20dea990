import pytest

from dungeoncrawl.settings import Settings

VALUES = {
    "title": "Crawler",
    "screen_width": "1280",
    "screen_height": "720",
    "tile_size": "16",
    "zoom": "3",
    "tiles": "assets/tiles.txt",
    "heroes": "assets/heroes.txt",
    "monsters": "assets/monsters.txt",
    "items": "assets/items.txt",
    "effects": "assets/effects.txt",
    "sounds": "assets/sounds.txt",
    "map_width": "51",
    "map_height": "41",
    "room_placement_attempts": "30",
}


def write(tmp_path, values, extra=""):
    path = tmp_path / "settings.txt"
    body = "\n".join(f"{key} {value}" for key, value in values.items())
    path.write_text(body + "\n" + extra)
    return path


def test_reads_all_parameters(tmp_path):
    settings = Settings(write(tmp_path, VALUES))
    assert settings.title == VALUES["title"]
    assert settings.screen_width == int(VALUES["screen_width"])
    assert settings.screen_height == int(VALUES["screen_height"])
    assert settings.tile_size == int(VALUES["tile_size"])
    assert settings.zoom == int(VALUES["zoom"])
    assert settings.map_width == int(VALUES["map_width"])
    assert settings.map_height == int(VALUES["map_height"])
    assert settings.room_placement_attempts == int(VALUES["room_placement_attempts"])
    assert settings.tiles == VALUES["tiles"]
    assert settings.heroes == VALUES["heroes"]
    assert settings.monsters == VALUES["monsters"]
    assert settings.items == VALUES["items"]
    assert settings.effects == VALUES["effects"]
    assert settings.sounds == VALUES["sounds"]


def test_path_is_absolute(tmp_path, monkeypatch):
    write(tmp_path, VALUES)
    monkeypatch.chdir(tmp_path)
    settings = Settings("settings.txt")
    assert settings.path.is_absolute()
    assert settings.path == tmp_path / "settings.txt"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Could not open settings file"):
        Settings(tmp_path / "absent.txt")


@pytest.mark.parametrize("missing", ["title", "zoom", "sounds", "room_placement_attempts"])
def test_missing_parameter_raises(tmp_path, missing):
    values = {key: value for key, value in VALUES.items() if key != missing}
    with pytest.raises(KeyError, match=missing):
        Settings(write(tmp_path, values))


def test_non_integer_value_raises(tmp_path):
    values = dict(VALUES, zoom="big")
    with pytest.raises(ValueError, match="zoom"):
        Settings(write(tmp_path, values))


def test_later_duplicate_overrides_earlier(tmp_path):
    settings = Settings(write(tmp_path, VALUES, extra="zoom 5\n"))
    assert settings.zoom == 5


def test_pairs_may_share_lines(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(" ".join(f"{key} {value}" for key, value in VALUES.items()))
    settings = Settings(path)
    assert settings.map_width == int(VALUES["map_width"])
    assert settings.title == VALUES["title"]