"""Component types attached to entities in the snake world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Entity = int


@dataclass(frozen=True)
class Position:
    """A cell on the playing field."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Position:
        """Return the position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


@dataclass
class Velocity:
    """Cells travelled per tick along each axis."""

    dx: int
    dy: int


@dataclass(frozen=True)
class Collider:
    """Size of the area an entity occupies for collisions."""

    width: int
    height: int


class Color(Enum):
    """Terminal foreground colours used by the game."""

    RESET = "reset"
    WHITE = "white"
    YELLOW = "yellow"
    DARK_GREEN = "dark_green"
    GREEN = "green"
    RED = "red"


@dataclass(frozen=True)
class Renderable:
    """How an entity is drawn: a symbol spread over width and height."""

    width: int
    height: int
    symbol: str
    color: Color


class Direction(Enum):
    """A heading the snake can be steered towards."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        """The ``(dx, dy)`` step for this heading."""
        return self.value


@dataclass(frozen=True)
class Follows:
    """Marks an entity as trailing behind ``leader``."""

    leader: Entity


class GameState(Enum):
    """Overall state of a running game."""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"