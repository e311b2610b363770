"""
campfire_access.client

Python side of the entry-check form.

Responsibilities:
- Call the check endpoint and decide which screen the form shows.
"""

from __future__ import annotations

from campfire_access.client.access_http import (
    AccessCheckClient,
    ClientConfig,
    NetworkError,
    ResponseParseError,
    Screen,
    ScreenView,
    validate_identifier,
)

__all__ = [
    "AccessCheckClient",
    "ClientConfig",
    "NetworkError",
    "ResponseParseError",
    "Screen",
    "ScreenView",
    "validate_identifier",
]
