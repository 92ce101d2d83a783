from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest

_DIGIT_LIMIT = 4300


@pytest.fixture()
def int_digit_limit() -> Iterator[int]:
    """Pin the interpreter's int/str conversion limit for the test."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(_DIGIT_LIMIT)
    yield _DIGIT_LIMIT
    sys.set_int_max_str_digits(previous)
