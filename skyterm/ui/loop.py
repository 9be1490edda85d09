"""Render loop: draw one frame, poll input briefly, repeat until quit."""

import curses
import logging
from enum import StrEnum
from typing import Any

from skyterm.ui.views import FrameRenderer

logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT_MS = 50
DEFAULT_QUIT_KEY = "q"


class LoopState(StrEnum):
    RUNNING = "running"
    TERMINATING = "terminating"


class RenderLoop:
    """Redraws the same snapshot every poll interval until the quit key.

    ``window`` is a curses window (or anything with the same methods).
    Each ``getch`` waits at most ``poll_timeout_ms``, which bounds input
    latency; there is no dirty-checking, every iteration redraws.
    """

    def __init__(
        self,
        window: Any,
        render: FrameRenderer,
        poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS,
        quit_key: str = DEFAULT_QUIT_KEY,
    ):
        self.window = window
        self.render = render
        self.poll_timeout_ms = poll_timeout_ms
        self.quit_key = quit_key
        self.state = LoopState.RUNNING
        self.frames_drawn = 0

    def run(self) -> int:
        """Loop until terminated. Returns the number of frames drawn."""
        self.window.timeout(self.poll_timeout_ms)
        logger.info(
            "Render loop started (poll=%dms, quit=%r)",
            self.poll_timeout_ms, self.quit_key,
        )
        while self.state is LoopState.RUNNING:
            self.draw()
            self.poll()
        logger.info("Render loop stopped after %d frames", self.frames_drawn)
        return self.frames_drawn

    def draw(self) -> None:
        height, width = self.window.getmaxyx()
        frame = self.render(max(0, width - 2), max(0, height - 2))

        self.window.erase()
        try:
            self.window.box()
        except curses.error:
            pass
        self._put(0, 2, f" {frame.title} ", width)
        for i, line in enumerate(frame.lines[: max(0, height - 2)]):
            self._put(i + 1, 1, line, width - 1)
        self.window.refresh()
        self.frames_drawn += 1

    def poll(self) -> LoopState:
        key = self.window.getch()
        if key == ord(self.quit_key):
            logger.info("Quit key pressed")
            self.state = LoopState.TERMINATING
        return self.state

    def _put(self, y: int, x: int, text: str, limit: int) -> None:
        room = limit - x
        if room <= 0:
            return
        try:
            self.window.addstr(y, x, text[:room])
        except curses.error:
            # Writing into the last cell of the window raises; the text is still drawn
            pass
