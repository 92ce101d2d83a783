"""Custom exception hierarchy for pykv.

Expected failures (missing keys, conflicts, log sink errors) are returned as
:class:`pykv.result.Err` values and never raised across the store boundary.
The exceptions below cover programmer errors only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pykv.result import StoreError


class KvError(Exception):
    """Base exception for all pykv errors."""


class KvConfigError(KvError):
    """Invalid or missing configuration."""


class KvUnwrapError(KvError):
    """A :class:`~pykv.result.Result` was unwrapped as the wrong variant.

    When raised from ``Err.unwrap()`` the original error descriptor is
    available on :attr:`error` so callers that prefer exceptions lose
    nothing.
    """

    def __init__(self, message: str, *, error: StoreError | None = None) -> None:
        self.error = error
        super().__init__(message)
