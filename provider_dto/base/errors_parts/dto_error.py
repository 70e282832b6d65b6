"""
Structured DTO error exception type.

Base class for failures raised while building a DTO from a flat record. It is
a ``ValueError`` so boundary code can treat malformed input generically.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode


@dataclass
class DataTransferObjectError(ValueError):
    """Represents a structured DTO error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        dto: Name of the DTO type being constructed (e.g., ``"ProviderMetadata"``).
    """

    code: ErrorCode
    message: str
    dto: str

    def __str__(self) -> str:
        return f"{self.dto} {self.code.value}: {self.message}"


__all__ = ["DataTransferObjectError"]
