"""Curses terminal lifecycle: alternate screen plus cbreak input."""

import curses
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from skyterm.errors import TerminalError

logger = logging.getLogger(__name__)


@contextmanager
def terminal_session() -> Iterator[Any]:
    """Enter curses mode and yield the screen window.

    ``initscr`` switches to the alternate screen on terminals that have
    one. Input uses cbreak rather than full raw mode: keys arrive unbuffered
    and unechoed, but Ctrl-C still raises KeyboardInterrupt, which the app
    turns into a clean teardown and exit code 130.

    Setup failures raise TerminalError; teardown failures are only logged
    since the process is exiting anyway.
    """
    try:
        stdscr = curses.initscr()
    except curses.error as e:
        raise TerminalError(f"Could not initialise terminal: {e}", cause=e) from e

    try:
        curses.noecho()
        curses.cbreak()
        stdscr.keypad(True)
    except curses.error as e:
        _restore(stdscr)
        raise TerminalError(f"Could not enter raw input mode: {e}", cause=e) from e

    try:
        curses.curs_set(0)
    except curses.error:
        pass  # not every terminal can hide the cursor

    logger.info("Terminal session started")
    try:
        yield stdscr
    finally:
        _restore(stdscr)


def _restore(stdscr: Any) -> None:
    failed = False
    for step in (
        lambda: stdscr.keypad(False),
        curses.nocbreak,
        curses.echo,
        curses.endwin,
    ):
        try:
            step()
        except curses.error as e:
            failed = True
            logger.warning("Terminal teardown step failed: %s", e)
    if not failed:
        logger.info("Terminal restored")
