"""
Logging for the clock server and sketch hosts.

INFO and DEBUG go to stdout, WARNING and ERROR to stderr.
Level comes from LOG_LEVEL. The frame loop logs to the "gvm.sketches"
child so a host can quieten it without touching clock logs.
"""

import logging
import sys
from gvm.config import LOG_LEVEL


class LevelFilter(logging.Filter):
    """Pass records with level_min <= levelno <= level_max."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def setup_logging(name: str = "gvm", level: str = LOG_LEVEL) -> logging.Logger:
    """
    Attach stdout/stderr handlers to the named logger.

    Args:
        name: Logger name; a sketch host embedding gvm can pass its own
        level: Level name, e.g. "DEBUG"

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Sketch hosts often configure the root logger themselves
    logger.propagate = False

    # Reload safety
    logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(LevelFilter(logging.DEBUG, logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    # Format: "2025-01-15 14:30:45 - gvm.sketches - INFO - Starting sketch loop"
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    return logger


logger = setup_logging()
sketch_logger = logger.getChild("sketches")
