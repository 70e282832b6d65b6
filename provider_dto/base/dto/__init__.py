"""DTO contract helpers shared by every record type."""

from .validation import validate_fields_present
from .enum_codec import decode_enum, encode_enum, require_enum
from .serialization import dto_from_json, dto_to_json

__all__ = [
    "validate_fields_present",
    "decode_enum",
    "encode_enum",
    "require_enum",
    "dto_from_json",
    "dto_to_json",
]
