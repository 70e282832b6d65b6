"""Error raised when a flat-record string matches no enumeration member."""
from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import Any, Optional, Type

from .dto_error import DataTransferObjectError
from .error_code import ErrorCode


@dataclass
class InvalidEnumValueError(DataTransferObjectError):
    """An enum-valued field holds an unrecognized value.

    Attributes:
        value: The offending input value, verbatim.
        field: Flat-record key the value was read from.
        enum: Enumeration type the value was decoded against.
    """

    code: ErrorCode = dc_field(default=ErrorCode.INVALID_ENUM_VALUE, init=False)
    message: str = dc_field(default="", init=False)
    dto: str = ""
    value: Any = None
    field: str = ""
    enum: Optional[Type[Enum]] = None

    def __post_init__(self) -> None:
        enum_name = self.enum.__name__ if self.enum is not None else "enum"
        allowed = ", ".join(repr(m.value) for m in self.enum) if self.enum is not None else ""
        self.message = f"{self.value!r} is not a valid {enum_name} for '{self.field}'"
        if allowed:
            self.message += f" (expected one of: {allowed})"


__all__ = ["InvalidEnumValueError"]
