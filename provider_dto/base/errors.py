"""DTO error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``provider_dto.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.dto_error import DataTransferObjectError
from .errors_parts.missing_field_error import MissingFieldError
from .errors_parts.invalid_enum_value_error import InvalidEnumValueError

__all__ = [
    "ErrorCode",
    "DataTransferObjectError",
    "MissingFieldError",
    "InvalidEnumValueError",
]
