"""Terminal drawing of the snake world using ANSI escape sequences."""

from __future__ import annotations

import sys
from typing import TextIO

from snakeworld.components import Color
from snakeworld.world import World

Cell = tuple[str, Color]
Frame = list[list[Cell]]

WALL_SYMBOL = "#"
WALL_COLOR = Color.WHITE
BLANK: Cell = (" ", Color.RESET)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ENTER_ALTERNATE_SCREEN = "\x1b[?1049h"
LEAVE_ALTERNATE_SCREEN = "\x1b[?1049l"
CLEAR_ALL = "\x1b[2J"

_COLOR_CODES = {
    Color.RESET: "\x1b[39m",
    Color.WHITE: "\x1b[38;5;15m",
    Color.YELLOW: "\x1b[38;5;11m",
    Color.DARK_GREEN: "\x1b[38;5;2m",
    Color.GREEN: "\x1b[38;5;10m",
    Color.RED: "\x1b[38;5;9m",
}


def _move_to(column: int, row: int) -> str:
    return f"\x1b[{row + 1};{column + 1}H"


def _draw(column: int, row: int, symbol: str, color: Color) -> str:
    return f"{_move_to(column, row)}{_COLOR_CODES[color]}{symbol}"


def compose_frame(world: World) -> Frame:
    """Build the screen grid for ``world``: a score line, walls and entities.

    The grid is indexed ``frame[row][column]``; row 0 is kept for the score.
    """
    total_columns = world.field_width + 2
    total_rows = world.field_height + 3
    frame: Frame = [[BLANK] * total_columns for _ in range(total_rows)]
    wall: Cell = (WALL_SYMBOL, WALL_COLOR)

    for row in frame[1:]:
        row[0] = wall
        row[-1] = wall
    frame[1] = [wall] * total_columns
    frame[-1] = [wall] * total_columns

    for entity, renderable in world.renderables.items():
        position = world.positions.get(entity)
        if position is None:
            continue
        x = abs(position.x) + 1
        y = abs(position.y) + 2
        cell: Cell = (renderable.symbol, renderable.color)
        for w in range(renderable.width):
            frame[y][x + w] = cell
        for h in range(renderable.height):
            frame[y + h][x] = cell
    return frame


class Renderer:
    """Draws frames to a text stream, repainting only the cells that changed."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._previous: Frame | None = None
        self._active = False

    def render(self, world: World, score: int) -> None:
        """Draw the current state of ``world`` and the score."""
        frame = compose_frame(world)
        if self._previous is None:
            self._previous = [[(" ", Color.WHITE)] * len(row) for row in frame]

        parts = []
        rows = zip(self._previous, frame)
        next(rows, None)  # the score line is drawn separately
        for y, (old_row, new_row) in enumerate(rows, start=1):
            for x, (old, new) in enumerate(zip(old_row, new_row)):
                if old != new:
                    parts.append(_draw(x, y, *new))
        parts.append(f"{_move_to(1, 0)}{_COLOR_CODES[Color.YELLOW]}score: {score}")

        self.stream.write("".join(parts))
        self._previous = frame
        self.stream.flush()

    def initialize(self) -> None:
        """Switch to the alternate screen, clear it and hide the cursor."""
        self.stream.write(ENTER_ALTERNATE_SCREEN + CLEAR_ALL + HIDE_CURSOR)
        self.stream.flush()
        self._active = True

    def shutdown(self) -> None:
        """Restore the cursor and leave the alternate screen."""
        self.stream.write(SHOW_CURSOR + LEAVE_ALTERNATE_SCREEN + CLEAR_ALL)
        self.stream.flush()
        self._active = False

    def game_over_screen(self, score: int) -> None:
        """Restore the terminal and report the final score."""
        self.shutdown()
        self.stream.write(f"game over, your final score was: {score}\n")
        self.stream.flush()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._active:
            self.shutdown()