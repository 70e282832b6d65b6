"""provider_dto.config.defaults
============================

Central place for small, stable default values used across the provider_dto
package. These defaults can be overridden via environment variables, but
provide sensible fallbacks for local development and tests.

This module intentionally avoids importing from other provider_dto packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Logging ----

# Name of the shared package logger; child loggers hang below it.
LOGGER_NAME = "provider_dto"
# Environment variable overriding the shared logger level (e.g. "DEBUG").
LOG_LEVEL_ENV_VAR = "PROVIDER_DTO_LOG_LEVEL"
# Environment variable toggling JSON output ("1"/"0", "true"/"false").
LOG_JSON_ENV_VAR = "PROVIDER_DTO_LOG_JSON"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_JSON = True
# Plain-text format used when JSON mode is disabled.
PLAIN_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Rotating file handler limits (10MB x 5 backups).
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


__all__ = [
    "LOGGER_NAME",
    "LOG_LEVEL_ENV_VAR",
    "LOG_JSON_ENV_VAR",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
    "PLAIN_LOG_FORMAT",
    "LOG_FILE_MAX_BYTES",
    "LOG_FILE_BACKUP_COUNT",
]
