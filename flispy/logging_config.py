"""Logging setup for the interpreter and REPL.

Log records never go to stdout, which is reserved for printed results: they
go to stderr, or to a file when one is given.
"""
import logging
from pathlib import Path
from typing import Optional

from flispy.errors import FlispyConfigError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_log_level(name: str) -> int:
    """Numeric level for one of LOG_LEVELS, matched case-insensitively."""
    key = name.strip().upper()
    if key not in LOG_LEVELS:
        raise FlispyConfigError(
            f"log level must be one of {', '.join(LOG_LEVELS)}, got {name!r}"
        )
    return logging.getLevelName(key)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Route every flispy logger through one handler on the root logger.

    Args:
        level: one of LOG_LEVELS; anything else raises FlispyConfigError
        log_file: append records to this file, creating its directory,
                  instead of writing them to stderr
    """
    numeric_level = parse_log_level(level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    # force drops handlers installed by an earlier call
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, handlers=[handler], force=True)
    logging.getLogger(__name__).debug("Logging initialized at %s", logging.getLevelName(numeric_level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
