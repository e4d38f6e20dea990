"""Sprites, animated sprites and the game window's drawing."""