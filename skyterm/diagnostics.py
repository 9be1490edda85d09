"""Process-wide diagnostic log file, opened at startup and closed at exit."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@contextmanager
def diagnostic_log(path: str | Path, level: str = "INFO") -> Iterator[logging.FileHandler]:
    """Append log records to ``path`` for the duration of the block.

    The handler is attached to the root logger so module loggers reach it
    without being passed a handle; it is removed and closed on exit.
    """
    path = Path(path)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setLevel(level.upper())
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(level.upper())
    root_logger.addHandler(file_handler)
    try:
        yield file_handler
    finally:
        root_logger.removeHandler(file_handler)
        root_logger.setLevel(previous_level)
        file_handler.close()
