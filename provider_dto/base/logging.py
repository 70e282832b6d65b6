"""Base structured logging utilities for the provider_dto package.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the DTO helpers.

All package loggers are children of the shared ``provider_dto`` logger, which
owns the single console handler. Level and output mode can be driven from the
environment (see :mod:`provider_dto.config.env`).
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config.defaults import (
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_LEVEL_ENV_VAR,
    LOGGER_NAME,
    PLAIN_LOG_FORMAT,
)
from ..config.env import get_json_mode, get_log_level, parse_level
from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_provider_dto_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_provider_dto_console_handler"
_FILE_HANDLER_ATTR = "_provider_dto_file_handler"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_LOG_FORMAT)


def _make_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``provider_dto`` logger."""

    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        # A level set through configure_logger wins unless the environment overrides it.
        if os.environ.get(LOG_LEVEL_ENV_VAR):
            logger.setLevel(get_log_level(default=logger.level))
        desired_level = logger.level
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                logger.addHandler(_make_console_handler(json_mode, desired_level))
                continue
            existing.setLevel(desired_level)
            # Re-bind to the current stderr so captured streams (pytest capsys) work.
            if hasattr(existing, "setStream"):
                with contextlib.suppress(ValueError):
                    existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    desired_level = get_log_level(default=level)
    logger.setLevel(desired_level)
    logger.handlers[:] = [_make_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = LOGGER_NAME, json_mode: bool | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return a logger wired to the shared ``provider_dto`` handler.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so each event is emitted exactly once. When ``json_mode`` is
    ``None`` the ``PROVIDER_DTO_LOG_JSON`` environment toggle decides.
    """
    if json_mode is None:
        json_mode = get_json_mode()
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool | None = None,
) -> logging.Logger:
    """Reconfigure the shared provider_dto logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or updated). When ``None``, any file handler previously
        attached by this function is removed.
    json_mode: bool | None
        Whether to use the JSON formatter or a plain text formatter. ``None``
        defers to the ``PROVIDER_DTO_LOG_JSON`` environment toggle.

    Returns
    -------
    logging.Logger
        The configured base logger.

    Notes
    -----
    Handlers not attached by this module are left untouched.
    """
    if json_mode is None:
        json_mode = get_json_mode()
    logger = logging.getLogger(LOGGER_NAME)
    if not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger = get_logger(LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path and existing is None:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()

    if existing is None:
        fh = RotatingFileHandler(
            abs_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (should be obtained through ``get_logger``).
    event: str
        Event name (e.g. ``dto.validation.failed``).
    ctx: LogContext | None
        DTO/field context; merged shallowly.
    level: int
        Logging level of the emitted record.
    keep_none: bool
        When ``True``, keys whose values are ``None`` are preserved (as JSON
        ``null``); otherwise they are dropped.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
