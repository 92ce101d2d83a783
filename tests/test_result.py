from __future__ import annotations

import pytest

from pykv.exceptions import KvUnwrapError
from pykv.result import Err, ErrorKind, Ok, StoreError, err


def test_ok_unwraps_value() -> None:
    result = Ok(("name1", "alex"))
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == ("name1", "alex")


def test_ok_unwrap_err_raises() -> None:
    with pytest.raises(KvUnwrapError):
        Ok(1).unwrap_err()


def test_err_unwrap_raises_with_descriptor() -> None:
    result = err(ErrorKind.NOT_FOUND, "Not Found", cause="name1")

    with pytest.raises(KvUnwrapError) as exc_info:
        result.unwrap()

    assert exc_info.value.error == result.error
    assert "name1" in str(exc_info.value)


def test_err_default_codes() -> None:
    assert err(ErrorKind.NOT_FOUND, "x").error.code == 404
    assert err(ErrorKind.EMPTY_NAMESPACE, "x").error.code == 404
    assert err(ErrorKind.CONFLICT, "x").error.code == 409
    assert err(ErrorKind.LOGGING_FAILURE, "x").error.code == -1


def test_err_kind_shortcut_and_match() -> None:
    result = err(ErrorKind.CONFLICT, "Duplicate Key Found")

    match result:
        case Err(error=StoreError(kind=ErrorKind.CONFLICT)):
            matched = True
        case _:
            matched = False

    assert matched
    assert result.kind is ErrorKind.CONFLICT
    assert result.unwrap_err().message == "Duplicate Key Found"


def test_store_error_str_includes_cause() -> None:
    error = StoreError(kind=ErrorKind.LOGGING_FAILURE, message="Failed to open Logger", cause="denied")
    assert str(error) == "Failed to open Logger: denied"
    assert str(StoreError(kind=ErrorKind.NOT_FOUND, message="Not Found")) == "Not Found"
