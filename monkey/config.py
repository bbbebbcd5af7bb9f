from __future__ import annotations
import logging
import os
from typing import Optional


# Defaults
_DEFAULT_PROMPT = ">> "
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_prompt() -> str:
    # keep trailing whitespace the user asked for
    raw = os.environ.get("MONKEY_PROMPT")
    return raw if raw else _DEFAULT_PROMPT


def get_log_level() -> int:
    name = value_from_env("MONKEY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = value_from_env("MONKEY_RECURSION_LIMIT")
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


def use_color() -> bool:
    return value_from_env("MONKEY_NO_COLOR") is None
