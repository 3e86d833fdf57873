"""Validation of game map files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

Position = tuple[int, int]

INVALID_MAP = "Invalid map... Retry !"
WRONG_MAP = "Wrong map sorry... Retry !"
IMPOSSIBLE_MAP = "Map is impossible... Sorry... Retry !"

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

_ALLOWED = frozenset("01CEP\n")
_PASSABLE = frozenset((FLOOR, COLLECTIBLE, PLAYER))
MIN_NEWLINES = 2
MAX_NEWLINES = 13


class MapError(ValueError):
    """Raised when a map is malformed or cannot be completed."""


@dataclass(frozen=True)
class GameMap:
    """A validated, rectangular, wall-enclosed map."""

    rows: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def find(self, tile: str) -> tuple[Position, ...]:
        """Return the (x, y) positions of ``tile`` in row-major order."""
        return tuple(
            (x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell == tile
        )

    @property
    def player(self) -> Position:
        return self.find(PLAYER)[0]

    @property
    def exit(self) -> Position:
        return self.find(EXIT)[0]

    @property
    def collectibles(self) -> int:
        return len(self.find(COLLECTIBLE))


def validate_layout(text: str) -> list[str]:
    """Check the map text's characters and shape; return its rows."""
    if (
        not text
        or text[0] == "\n"
        or text.endswith("\n")
        or "\n\n" in text
        or not set(text) <= _ALLOWED
    ):
        raise MapError(INVALID_MAP)
    rows = text.split("\n")
    if any(len(row) != len(rows[0]) for row in rows):
        raise MapError(INVALID_MAP)
    if text.count(EXIT) != 1 or text.count(PLAYER) != 1:
        raise MapError(INVALID_MAP)
    if not MIN_NEWLINES <= text.count("\n") <= MAX_NEWLINES:
        raise MapError(INVALID_MAP)
    return rows


def _solid(row: str) -> bool:
    return bool(row) and set(row) == {WALL}


def check_walls(rows: list[str] | tuple[str, ...]) -> None:
    """Raise MapError unless the map is closed by walls on every side."""
    if not rows or not (_solid(rows[0]) and _solid(rows[-1])):
        raise MapError(INVALID_MAP)
    for row in rows[1:-1]:
        if not row or row[0] != WALL or row[-1] != WALL:
            raise MapError(INVALID_MAP)


def flood_fill(rows: list[str] | tuple[str, ...], start: Position) -> frozenset[Position]:
    """Return the cells reachable from ``start``.

    Floor, collectibles and the player are walked through; an exit is
    reached but not passed through.
    """
    seen: set[Position] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if (x, y) in seen or not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        tile = rows[y][x]
        if tile in _PASSABLE:
            seen.add((x, y))
            stack.extend(((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)))
        elif tile == EXIT:
            seen.add((x, y))
    return frozenset(seen)


def parse_map(text: str) -> GameMap:
    """Validate map text and return the map it describes."""
    rows = validate_layout(text)
    check_walls(rows)
    game_map = GameMap(tuple(rows))
    reached = flood_fill(rows, game_map.player)
    targets = game_map.find(COLLECTIBLE) + game_map.find(EXIT)
    if not all(target in reached for target in targets):
        raise MapError(IMPOSSIBLE_MAP)
    return game_map


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read, validate and return the map stored at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as err:
        raise MapError(WRONG_MAP) from err
    if not text:
        raise MapError(WRONG_MAP)
    return parse_map(text)