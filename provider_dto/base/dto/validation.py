"""
Required-field validation shared by every DTO ``from_array``.

Purpose
-------
Report missing keys uniformly and early, before construction reads them,
instead of letting a ``KeyError`` surface from deep inside a constructor.

Failure modes & side effects
----------------------------
- Raises :class:`MissingFieldError` naming the first missing key.
- Emits a ``dto.validation.failed`` warning event before raising.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Union

from ..errors import MissingFieldError
from ..logging import LogContext, get_logger, log_event

_logger = get_logger(__name__)


def owner_name(owner: Union[type, str]) -> str:
    """Return a display name for the DTO type that owns a field."""
    return owner if isinstance(owner, str) else owner.__name__


def validate_fields_present(
    flat_record: Mapping[str, Any],
    required_keys: Iterable[str],
    owner: Union[type, str],
) -> None:
    """Ensure every key in ``required_keys`` is present in ``flat_record``.

    Presence is checked on the key only; a key mapped to ``None`` counts as
    present.

    Parameters
    ----------
    flat_record:
        Untrusted input mapping.
    required_keys:
        Keys the owning DTO cannot be built without, in declaration order.
    owner:
        The DTO class (or its name) used in error reports.

    Raises
    ------
    TypeError
        If ``flat_record`` is not a mapping.
    MissingFieldError
        If any required key is absent.
    """
    name = owner_name(owner)
    if not isinstance(flat_record, Mapping):
        raise TypeError(f"{name}.from_array() expects a mapping, got {type(flat_record).__name__}")
    missing = tuple(k for k in required_keys if k not in flat_record)
    if not missing:
        return
    log_event(
        _logger,
        "dto.validation.failed",
        LogContext(dto=name, field=missing[0]),
        level=logging.WARNING,
        reason="missing_field",
        missing=list(missing),
    )
    raise MissingFieldError(dto=name, field=missing[0], missing=missing)


__all__ = ["owner_name", "validate_fields_present"]
