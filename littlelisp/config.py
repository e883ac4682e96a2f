from __future__ import annotations
import logging
import os

_FALSE_WORDS = ("0", "false", "no", "off")

_DEFAULT_LOG_LEVEL = logging.WARNING


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_WORDS


def print_echo_enabled() -> bool:
    """Whether the print built-in writes to stdout (LITTLELISP_PRINT_ECHO)."""
    return flag_from_env('LITTLELISP_PRINT_ECHO', True)


def get_log_level() -> int:
    raw = os.environ.get('LITTLELISP_LOG_LEVEL', '').strip().upper()
    if not raw:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL
