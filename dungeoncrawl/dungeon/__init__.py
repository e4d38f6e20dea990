"""Dungeon layout generation, decoration, tiles, doors, fog of war, field of view and pathfinding."""