"""Numeric coercion for ``incr`` / ``decr``.

Stored values are classified into a :class:`NumericKind` tag and the step is
dispatched on that tag rather than on the concrete Python type.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pykv._redact import redact_for_log
from pykv.result import ErrorKind, Ok, Result, err

# Base-10 integer text: optional sign, ASCII digits, surrounding blanks allowed.
_INT_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*")


class NumericKind(StrEnum):
    INTEGER = "integer"
    TEXT = "text"
    UNSUPPORTED = "unsupported"


def classify(value: Any) -> NumericKind:
    """Return the coercion tag for *value*."""
    # bool is an int subclass but is not a counter.
    if isinstance(value, bool):
        return NumericKind.UNSUPPORTED
    if isinstance(value, int):
        return NumericKind.INTEGER
    if isinstance(value, str):
        return NumericKind.TEXT
    return NumericKind.UNSUPPORTED


def parse_int_text(value: str) -> int | None:
    """Parse *value* as a base-10 integer, or return ``None``."""
    if _INT_TEXT.fullmatch(value) is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        # Beyond the interpreter's int/str conversion digit limit.
        return None


def step(value: Any, delta: int) -> Result[Any]:
    """Add *delta* to *value* according to its :class:`NumericKind`.

    Integers stay integers and integer text stays text.
    """
    kind = classify(value)
    if kind is NumericKind.INTEGER:
        return Ok(value + delta)
    if kind is NumericKind.TEXT:
        parsed = parse_int_text(value)
        if parsed is None:
            return err(ErrorKind.INVALID_NUMBER, "Value is not a base-10 integer", cause=redact_for_log(value))
        try:
            return Ok(str(parsed + delta))
        except ValueError as exc:
            return err(ErrorKind.INVALID_NUMBER, "Value is not a base-10 integer", cause=exc)
    return err(
        ErrorKind.UNSUPPORTED_TYPE,
        "Value type isn't supported for increment/decrement",
        cause=type(value).__name__,
    )
