from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_log_level() -> int:
    name = os.environ.get('STACKLANG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_prelude_path() -> Optional[Path]:
    return path_from_env('STACKLANG_PRELUDE_PATH')


def get_recursion_limit() -> int:
    # 0 leaves the interpreter default untouched
    return int_from_env('STACKLANG_RECURSION_LIMIT', 0)


def configure_logging() -> None:
    """Set the stacklang logger level from STACKLANG_LOG_LEVEL."""
    logging.getLogger('stacklang').setLevel(get_log_level())
