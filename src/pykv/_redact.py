"""Helpers for safe debug logging.

Stored values can be arbitrarily large.  This module provides a small
utility to shorten them before emitting DEBUG logs.
"""

from __future__ import annotations

from typing import Any


def redact_for_log(value: Any, *, max_string: int = 128) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if value is None:
        return None

    if isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text
