"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from enum import Enum, IntEnum

from .mapcheck import COLLECTIBLE, EXIT, FLOOR, WALL, GameMap, Position


class Direction(Enum):
    """A step on the grid as (dx, dy); y grows downwards."""

    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESCAPE = 0xFF1B
    W = 0x77
    A = 0x61
    S = 0x73
    D = 0x64


_KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.A: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.S: Direction.DOWN,
}


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.rows: list[list[str]] = [list(row) for row in game_map.rows]
        self.player: Position = game_map.player
        self.total: int = game_map.collectibles
        self.collected: int = 0
        self.moves: int = 0
        self.running: bool = True
        self.won: bool = False

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile currently at column ``x`` of row ``y``."""
        return self.rows[y][x]

    @property
    def all_collected(self) -> bool:
        return self.collected == self.total

    def _finish(self, won: bool) -> None:
        self.running = False
        self.won = won

    def collect(self) -> bool:
        """Pick up a collectible under the player; return True if one was taken.

        Standing on the exit with everything collected ends the game.
        """
        x, y = self.player
        tile = self.rows[y][x]
        if self.all_collected and tile == EXIT:
            self._finish(won=True)
            return False
        if tile == COLLECTIBLE:
            self.collected += 1
            self.rows[y][x] = FLOOR
            return True
        return False

    def step(self, direction: Direction) -> bool:
        """Try to move one tile; return True if the player moved.

        Walking into the exit once everything is collected wins the game.
        Walls block, and so does the exit while collectibles remain.
        """
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        target = self.rows[ny][nx]
        if target == EXIT and self.all_collected:
            self._finish(won=True)
            return False
        if target == WALL or target == EXIT:
            return False
        self.moves += 1
        self.player = (nx, ny)
        return True

    def press_key(self, key: int) -> bool:
        """Handle a key symbol; return True if it moved the player.

        Collectibles are picked up at the start of every key press.
        """
        if not self.running:
            return False
        self.collect()
        if not self.running:
            return False
        try:
            known = Key(key)
        except ValueError:
            return False
        if known is Key.ESCAPE:
            self._finish(won=False)
            return False
        return self.step(_KEY_DIRECTIONS[known])

    def status_text(self) -> str:
        """Return the move counter text shown in the window."""
        return f"moves : {self.moves}"