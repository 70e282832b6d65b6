"""
Normalized error codes (taxonomy).

Values are lowercase snake_case and are considered a stable public contract
for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    MISSING_FIELD = "missing_field"
    INVALID_ENUM_VALUE = "invalid_enum_value"


__all__ = ["ErrorCode"]
