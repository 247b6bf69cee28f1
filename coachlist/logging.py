"""
Logging for the waitlist server. Our own `coachlist` logger and uvicorn's
loggers share a single handler, so request logs and enrollment logs end up
interleaved in one consistent format.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import Final, TextIO

from dotenv import load_dotenv

LOGGER_NAMES: Final = ("coachlist", "uvicorn")

LEVEL_COLORS: Final = {
    logging.DEBUG: "\x1b[38;5;40m",
    logging.INFO: "\x1b[38;5;39m",
    logging.WARNING: "\x1b[38;5;214m",
    logging.ERROR: "\x1b[38;5;196m",
    logging.CRITICAL: "\x1b[1m\x1b[38;5;196m",
}

RESET: Final = "\x1b[0m"


class CoachlistFormatter(logging.Formatter):
    """
    `[time] [LEVEL] [logger] [file:line]: message`, where the file is shown
    relative to the project root when possible. Only the level is colored, and
    only when `color` is set.
    """

    project_root: Path = Path(__file__).parent.parent

    def __init__(self, *, color: bool = False) -> None:
        super().__init__(
            "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(name)s] "
            "[%(source)s:%(lineno)d]: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        path = Path(record.pathname)

        record.source = (
            path.relative_to(self.project_root).as_posix()
            if path.is_relative_to(self.project_root)
            else path.name
        )

        line = super().format(record)

        if self.color and (color := LEVEL_COLORS.get(record.levelno)):
            level = f"[{record.levelname}]"

            return line.replace(level, f"{color}{level}{RESET}", 1)

        return line


def setup(stream: TextIO | None = None) -> None:
    """
    Attach a handler to the coachlist and uvicorn loggers. Calling this again
    replaces the handler instead of adding a second one.
    """

    load_dotenv()

    stream = stream or sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(CoachlistFormatter(color=stream.isatty()))

    log_level = getenv("COACHLIST_LOG_LEVEL", "WARNING").upper()

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.propagate = False

        for old in list(logger.handlers):
            if isinstance(old.formatter, CoachlistFormatter):
                logger.removeHandler(old)

        logger.addHandler(handler)
