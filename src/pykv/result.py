"""Two-case result type returned by every fallible store operation.

A successful call yields :class:`Ok` wrapping its payload; a failed call
yields :class:`Err` wrapping a :class:`StoreError`.  Both variants expose the
same small API so callers can either branch on ``is_ok()`` or use structural
pattern matching::

    match store.get("name"):
        case Ok(value=(key, value)):
            ...
        case Err(error=error) if error.kind is ErrorKind.NOT_FOUND:
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, NoReturn, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pykv._constants import CODE_CONFLICT, CODE_GENERIC, CODE_NOT_FOUND
from pykv.exceptions import KvUnwrapError

T = TypeVar("T")


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    EMPTY_NAMESPACE = "empty_namespace"
    UNSUPPORTED_TYPE = "unsupported_type"
    INVALID_NUMBER = "invalid_number"
    LOGGING_FAILURE = "logging_failure"
    CONFIGURATION_ERROR = "configuration_error"


_DEFAULT_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: CODE_NOT_FOUND,
    ErrorKind.EMPTY_NAMESPACE: CODE_NOT_FOUND,
    ErrorKind.CONFLICT: CODE_CONFLICT,
}


class StoreError(BaseModel):
    """Error descriptor carried by :class:`Err`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ErrorKind
    message: str
    code: int = CODE_GENERIC
    cause: str | None = Field(default=None, description="Underlying error text, if any.")

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise KvUnwrapError("called unwrap_err() on an Ok result")


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result."""

    error: StoreError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise KvUnwrapError(str(self.error), error=self.error)

    def unwrap_err(self) -> StoreError:
        return self.error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Result: TypeAlias = Ok[T] | Err


def err(kind: ErrorKind, message: str, *, cause: Any = None) -> Err:
    """Build an :class:`Err` with the default code for *kind*."""
    return Err(
        StoreError(
            kind=kind,
            message=message,
            code=_DEFAULT_CODES.get(kind, CODE_GENERIC),
            cause=None if cause is None else str(cause),
        )
    )
