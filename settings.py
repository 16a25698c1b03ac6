from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_LOG_LEVEL_ENV = "LOG_LEVEL"
_NUMERIC_STATS_ENV = "REPORT_NUMERIC_STATS"
_INDENT_ENV = "REPORT_INDENT"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    numeric_stats: bool
    report_indent: Optional[int]


def _read_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    return default


def _read_indent(default: Optional[int]) -> Optional[int]:
    value = os.getenv(_INDENT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def normalize_log_level(value: str) -> Optional[str]:
    """Return the upper-cased level name, or None when logging does not know it."""
    candidate = value.strip().upper()
    if not candidate:
        return None
    return candidate if isinstance(logging.getLevelName(candidate), int) else None


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    return normalize_log_level(value) or default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("INFO"),
        numeric_stats=_read_bool_env(_NUMERIC_STATS_ENV, False),
        report_indent=_read_indent(None),
    )
