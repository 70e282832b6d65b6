"""Pytest configuration for the provider_dto test suite.

Provides a fixture that captures structured events from the shared
``provider_dto`` logger without touching the real console handler.
"""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from provider_dto.base.log_support import JsonFormatter
from provider_dto.base.logging import get_logger


class CapturedEvents:
    """Collects JSON log lines written by the shared logger."""

    def __init__(self, stream: io.StringIO) -> None:
        self._stream = stream

    def events(self) -> List[Dict[str, Any]]:
        return [json.loads(ln) for ln in self._stream.getvalue().splitlines() if ln]


@pytest.fixture(autouse=True)
def rebind_console_handler() -> Iterator[None]:
    """Point the shared console handler at the stderr captured for this test."""

    base_logger = get_logger()
    saved_level = base_logger.level
    yield
    base_logger.setLevel(saved_level)


@pytest.fixture()
def captured_events() -> Iterator[CapturedEvents]:
    """Route the shared logger into an in-memory JSON stream for one test."""

    base_logger = get_logger()
    saved_handlers = list(base_logger.handlers)
    saved_level = base_logger.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    handler.setLevel(logging.DEBUG)
    base_logger.handlers[:] = [handler]
    base_logger.setLevel(logging.DEBUG)
    yield CapturedEvents(stream)
    base_logger.handlers[:] = saved_handlers
    base_logger.setLevel(saved_level)


@pytest.fixture()
def openai_record() -> Dict[str, Any]:
    """Full flat record for a cloud provider using API key authentication."""

    return {
        "id": "openai",
        "name": "OpenAI",
        "description": "Hosted GPT models.",
        "type": "cloud",
        "credentialsUrl": "https://platform.openai.com/api-keys",
        "authenticationMethod": "api_key",
    }
