"""Structured logging context object for DTO events.

:class:`LogContext` carries the fields common to DTO logging events (owning
DTO type, field name, extra metadata). ``to_dict`` merges ``extra`` and prunes
``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field as dc_field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for DTO logging events."""

    dto: Optional[str] = None
    field: Optional[str] = None
    extra: Dict[str, Any] = dc_field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
