"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `provider_dto.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .dto_error import DataTransferObjectError
from .missing_field_error import MissingFieldError
from .invalid_enum_value_error import InvalidEnumValueError

__all__ = [
    "ErrorCode",
    "DataTransferObjectError",
    "MissingFieldError",
    "InvalidEnumValueError",
]
