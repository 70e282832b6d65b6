"""provider_dto.config.env
=======================

Environment variable helpers for logging configuration.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; they fall back to the
  supplied default so callers always receive a usable value.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from .defaults import (
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    LOG_JSON_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
)

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    case-insensitively. Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def get_log_level(default: Optional[int] = None) -> int:
    """Return the logger level requested via ``PROVIDER_DTO_LOG_LEVEL``.

    Parameters
    ----------
    default: Optional[int]
        Level used when the variable is unset or unrecognized. When ``None``,
        :data:`~provider_dto.config.defaults.DEFAULT_LOG_LEVEL` applies.
    """
    fallback = default if default is not None else _LEVELS[DEFAULT_LOG_LEVEL]
    return parse_level(os.environ.get(LOG_LEVEL_ENV_VAR), default=fallback)


def get_json_mode(default: bool = DEFAULT_LOG_JSON) -> bool:
    """Return whether JSON log output is enabled via ``PROVIDER_DTO_LOG_JSON``."""
    raw = os.environ.get(LOG_JSON_ENV_VAR)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return default


__all__ = [
    "parse_level",
    "get_log_level",
    "get_json_mode",
]
