"""Tile-based puzzle game: map validation, game rules, XPM sprites and a pygame window."""

__version__ = "0.1.0"
__all__ = ["colors", "xpm", "mapcheck", "game", "layout", "app"]