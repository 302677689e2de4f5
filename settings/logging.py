"""loguru sinks for the context engine: console, daily file, and an error file for failed refreshes."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Replace loguru's default sink.

    With `to_file`, everything from DEBUG up goes to a daily file and
    errors (loader failures, unexpected API errors) are also kept in
    `feedback_context_errors.log`, which is retained longer.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "feedback_context_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.add(
            log_dir / "feedback_context_errors.log",
            format=FILE_FORMAT,
            level="ERROR",
            rotation="10 MB",
            retention="30 days",
            enqueue=True,
        )
        logger.info("Logging to {}", log_dir)

    return logger
