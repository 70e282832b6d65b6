"""
Request authentication method enumeration.

Names how requests to a provider are authenticated. The HTTP layer that maps
each method onto concrete request headers lives outside this package.
"""
from __future__ import annotations

from .string_enum import StringEnum


class RequestAuthenticationMethod(StringEnum):
    """Closed set of request authentication methods."""

    API_KEY = "api_key"


__all__ = ["RequestAuthenticationMethod"]
