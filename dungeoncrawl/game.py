"""Command-line entry point: build the dungeon, add a knight and monsters, and play."""

from __future__ import annotations

import argparse
from typing import Any, List, Optional, Sequence

from .content import heroes, monsters
from .engine import Engine
from .settings import Settings
from .util.randomness import probability

DEFAULT_MONSTERS = 20


def populate(engine: Any, count: int) -> List[Any]:
    """Add ``count`` monsters to the engine: skeletons half the time, else demons or muddies."""
    created = []
    for _ in range(count):
        monster = engine.create_monster()
        if probability(50):
            if probability(50):
                monsters.make_demon(monster)
            else:
                monsters.make_muddy(monster)
        else:
            monsters.make_skeleton(monster)
        created.append(monster)
    return created


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dungeoncrawl", description="Play the dungeon crawler.")
    parser.add_argument(
        "settings",
        nargs="?",
        default="settings.txt",
        help="path of the settings file (default: settings.txt)",
    )
    parser.add_argument(
        "--monsters",
        type=int,
        default=DEFAULT_MONSTERS,
        help=f"number of monsters to create (default: {DEFAULT_MONSTERS})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game; report any error on standard output."""
    args = _parse_args(argv)
    try:
        settings = Settings(args.settings)
        engine = Engine(settings)
        hero = engine.create_hero()
        heroes.make_knight(hero)
        populate(engine, args.monsters)
        engine.run()
    except Exception as error:  # the game reports any failure and exits
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())