"""Game loop, keyboard input and the command-line entry point."""

from __future__ import annotations

import argparse
import os
import random
import select
import sys
import time
from collections.abc import Callable
from typing import TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - non-POSIX systems
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:
    msvcrt = None  # type: ignore[assignment]

from snakeworld.components import GameState
from snakeworld.renderer import Renderer
from snakeworld.systems import (
    QuitRequested,
    collision_system,
    eating_system,
    input_system,
    movement_system,
)
from snakeworld.world import World

TARGET_FPS = 8.0
ESCAPE_BYTE = b"\x1b"


def _ready(fd: int) -> bool:
    readable, _, _ = select.select([fd], [], [], 0)
    return bool(readable)


class KeyReader:
    """Non-blocking keyboard reader; puts a terminal into cbreak mode while open."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved = None

    def __enter__(self) -> KeyReader:
        if termios is not None:
            fd = self._stream.fileno()
            if os.isatty(fd):
                self._saved = termios.tcgetattr(fd)
                tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def poll(self) -> str | None:
        """Return the key pressed since the last call, or None."""
        if termios is None and msvcrt is not None:
            return self._poll_console()
        fd = self._stream.fileno()
        if not _ready(fd):
            return None
        data = os.read(fd, 1)
        if not data:
            return None
        if data == ESCAPE_BYTE:
            while _ready(fd):
                chunk = os.read(fd, 16)
                if not chunk:
                    break
                data += chunk
        return data.decode("utf-8", errors="replace")

    @staticmethod
    def _poll_console() -> str | None:
        if not msvcrt.kbhit():
            return None
        key = msvcrt.getwch()
        if key in ("\x00", "\xe0"):
            return key + msvcrt.getwch()
        return key


class Game:
    """A snake game: a world, the score, and a renderer to show them."""

    def __init__(
        self,
        field_width: int,
        field_height: int,
        renderer: Renderer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = World(field_width, field_height, rng)
        self.renderer = renderer if renderer is not None else Renderer()
        self.score = 0
        self.frame_duration = 1.0 / TARGET_FPS

    def initialize(self) -> None:
        """Prepare the screen and spawn the snake and the first food."""
        self.renderer.initialize()
        self.world.spawn_head()
        self.world.spawn_follower()
        self.world.spawn_food()

    def update(self, key: str | None) -> GameState:
        """Advance the game by one tick given the key pressed, if any."""
        input_system(self.world, key)
        movement_system(self.world)
        if collision_system(self.world) is GameState.GAME_OVER:
            return GameState.GAME_OVER
        self.score += eating_system(self.world)
        return GameState.PLAYING

    def run(self, keys: Callable[[], str | None]) -> int:
        """Play until the snake collides with itself; return the final score.

        ``keys`` is called once per tick and gives the key pressed, or None.
        QuitRequested propagates when the player presses Escape.
        """
        self.initialize()
        self.renderer.render(self.world, self.score)
        while True:
            frame_start = time.monotonic()
            if self.update(keys()) is GameState.GAME_OVER:
                self.renderer.game_over_screen(self.score)
                return self.score
            self.renderer.render(self.world, self.score)
            elapsed = time.monotonic() - frame_start
            if elapsed < self.frame_duration:
                time.sleep(self.frame_duration - elapsed)


def main(argv: list[str] | None = None) -> int:
    """Play snake in the terminal."""
    parser = argparse.ArgumentParser(prog="snakeworld", description="Play snake in the terminal.")
    parser.add_argument("--width", type=int, default=30, help="field width in cells")
    parser.add_argument("--height", type=int, default=20, help="field height in cells")
    args = parser.parse_args(argv)
    if args.width < 3 or args.height < 3:
        parser.error("the field must be at least 3 cells wide and high")

    try:
        with KeyReader() as reader, Renderer(sys.stdout) as renderer:
            Game(args.width, args.height, renderer).run(reader.poll)
    except QuitRequested:
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())