"""
JSON helpers for data-transfer objects.

A DTO's JSON form is exactly its flat record, so these helpers only bridge
``to_array``/``from_array`` and the :mod:`json` module.
"""
from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from ..interfaces import DataTransferObject

DtoT = TypeVar("DtoT", bound=DataTransferObject[Any])


def dto_to_json(dto: DataTransferObject[Any], **dumps_kwargs: Any) -> str:
    """Encode ``dto`` as a JSON object string.

    Extra keyword arguments are forwarded to :func:`json.dumps`.
    """
    return json.dumps(dict(dto.to_array()), **dumps_kwargs)


def dto_from_json(dto_cls: Type[DtoT], text: str | bytes) -> DtoT:
    """Decode a JSON object string into an instance of ``dto_cls``.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        TypeError: If the document is not a JSON object.
        MissingFieldError, InvalidEnumValueError: Propagated from ``from_array``.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"{dto_cls.__name__} JSON must be an object, got {type(data).__name__}")
    return dto_cls.from_array(data)


__all__ = ["dto_to_json", "dto_from_json"]
