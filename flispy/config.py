from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from flispy.errors import FlispyConfigError
from flispy.logging_config import parse_log_level

ENGINE_NAMES = ('recursive', 'iterative')

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_HISTORY_FILE = Path.home() / '.flispy_history'
_DEFAULT_HISTORY_LENGTH = 1000


def get_engine() -> Optional[str]:
    """Engine named by FLISPY_ENGINE, or None to use the interpreter default."""
    raw = os.environ.get('FLISPY_ENGINE', '').strip()
    if not raw:
        return None
    if raw not in ENGINE_NAMES:
        raise FlispyConfigError(
            f"FLISPY_ENGINE must be one of {', '.join(ENGINE_NAMES)}, got {raw!r}"
        )
    return raw


def get_log_level() -> str:
    raw = os.environ.get('FLISPY_LOG_LEVEL', '').strip()
    if not raw:
        return _DEFAULT_LOG_LEVEL
    try:
        parse_log_level(raw)
    except FlispyConfigError as e:
        raise FlispyConfigError(f"FLISPY_LOG_LEVEL: {e}") from None
    return raw.upper()


def get_history_file() -> Optional[Path]:
    # An explicitly empty FLISPY_HISTORY_FILE turns history persistence off
    raw = os.environ.get('FLISPY_HISTORY_FILE')
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_history_length() -> int:
    raw = os.environ.get('FLISPY_HISTORY_LENGTH')
    if not raw:
        return _DEFAULT_HISTORY_LENGTH
    try:
        length = int(raw)
    except ValueError:
        raise FlispyConfigError(f"FLISPY_HISTORY_LENGTH must be an integer, got {raw!r}") from None
    if length < 0:
        raise FlispyConfigError(f"FLISPY_HISTORY_LENGTH must not be negative, got {length}")
    return length
