"""Error raised when a required key is absent from a flat record."""
from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Tuple

from .dto_error import DataTransferObjectError
from .error_code import ErrorCode


@dataclass
class MissingFieldError(DataTransferObjectError):
    """A required flat-record key is missing.

    Attributes:
        field: The first missing key, in the order the DTO declares them.
        missing: Every required key absent from the input.
    """

    code: ErrorCode = dc_field(default=ErrorCode.MISSING_FIELD, init=False)
    message: str = dc_field(default="", init=False)
    dto: str = ""
    field: str = ""
    missing: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.missing:
            self.missing = (self.field,)
        self.message = f"missing required key '{self.field}'"
        if len(self.missing) > 1:
            self.message += f" (all missing: {', '.join(self.missing)})"


__all__ = ["MissingFieldError"]
