"""Textual commands written to the command log.

Each mutating store call is rendered as one line::

    <OPERATION> [<key> [<value>]]

Backslashes, spaces and line breaks inside keys or values are escaped
(``\\\\``, ``\\s``, ``\\n``, ``\\r``) so a single call is always one line and
splits into exactly its operation, key and value on spaces.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

_MISSING: Any = object()

_ESCAPES = str.maketrans({"\\": "\\\\", " ": "\\s", "\n": "\\n", "\r": "\\r"})


class Command(StrEnum):
    SET = "SET"
    SETNX = "SETNX"
    UPDATE = "UPDATE"
    DEL = "DEL"
    INCR = "INCR"
    DECR = "DECR"
    LPUSH = "LPUSH"
    RPUSH = "RPUSH"
    LPOP = "LPOP"
    RPOP = "RPOP"
    CLEAR = "CLEAR"
    CLEARLIST = "CLEARLIST"
    CLEARALL = "CLEARALL"


def escape_token(value: Any) -> str:
    """Render *value* as a single-line token without spaces."""
    return str(value).translate(_ESCAPES)


def format_command(command: Command, key: Any = _MISSING, value: Any = _MISSING) -> str:
    """Build the log line for *command*.

    *value* is only rendered when a *key* is given.
    """
    parts = [command.value]
    if key is not _MISSING:
        parts.append(escape_token(key))
        if value is not _MISSING:
            parts.append(escape_token(value))
    return " ".join(parts)
