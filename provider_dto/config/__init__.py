"""Configuration helpers for the provider_dto package.

Constants live in :mod:`provider_dto.config.defaults`; environment lookups
live in :mod:`provider_dto.config.env`.
"""

from .defaults import (
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    LOG_JSON_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    LOGGER_NAME,
)
from .env import get_json_mode, get_log_level

__all__ = [
    "DEFAULT_LOG_JSON",
    "DEFAULT_LOG_LEVEL",
    "LOG_JSON_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "LOGGER_NAME",
    "get_json_mode",
    "get_log_level",
]
