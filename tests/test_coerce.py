from __future__ import annotations

import pytest

from pykv._coerce import NumericKind, classify, parse_int_text, step
from pykv.result import ErrorKind


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (5, NumericKind.INTEGER),
        (-3, NumericKind.INTEGER),
        ("10", NumericKind.TEXT),
        ("abc", NumericKind.TEXT),
        (True, NumericKind.UNSUPPORTED),
        (1.5, NumericKind.UNSUPPORTED),
        (None, NumericKind.UNSUPPORTED),
        ([1], NumericKind.UNSUPPORTED),
    ],
)
def test_classify(value: object, kind: NumericKind) -> None:
    assert classify(value) is kind


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("10", 10),
        ("-7", -7),
        ("+3", 3),
        (" 42 ", 42),
        ("007", 7),
        ("", None),
        ("12abc", None),
        ("1_000", None),
        ("1.5", None),
        ("٣", None),
    ],
)
def test_parse_int_text(text: str, expected: int | None) -> None:
    assert parse_int_text(text) == expected


def test_step_integer_stays_integer() -> None:
    assert step(5, -1).unwrap() == 4


def test_step_text_stays_text() -> None:
    assert step("10", 1).unwrap() == "11"
    assert step("-1", 1).unwrap() == "0"


def test_step_non_numeric_text_is_invalid_number() -> None:
    result = step("alex", 1)
    assert result.is_err()
    assert result.unwrap_err().kind is ErrorKind.INVALID_NUMBER


def test_step_other_types_unsupported() -> None:
    result = step(2.5, 1)
    assert result.is_err()
    assert result.unwrap_err().kind is ErrorKind.UNSUPPORTED_TYPE
    assert result.unwrap_err().cause == "float"


def test_parse_int_text_beyond_digit_limit(int_digit_limit: int) -> None:
    assert parse_int_text("1" * (int_digit_limit + 1)) is None


def test_step_text_beyond_digit_limit_is_invalid_number(int_digit_limit: int) -> None:
    too_long = step("1" * (int_digit_limit + 1), 1)
    assert too_long.unwrap_err().kind is ErrorKind.INVALID_NUMBER

    # Parses at the limit, but the incremented value no longer fits.
    overflow = step("9" * int_digit_limit, 1)
    assert overflow.unwrap_err().kind is ErrorKind.INVALID_NUMBER
