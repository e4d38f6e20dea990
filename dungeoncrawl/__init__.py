"""A turn-based dungeon crawler with generated dungeons, fog of war and roaming monsters."""

__version__ = "0.1.0"