"""Append-only command log.

The :class:`CommandLogger` owns a single text file opened in append mode.
The file is opened lazily on the first write (or immediately when the
location is reconfigured) and is closed by :meth:`CommandLogger.close`,
which the store calls on teardown.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from pykv._constants import DEFAULT_DIRNAME, DEFAULT_DIRPATH, DEFAULT_LOG_FILE_NAME
from pykv._redact import redact_for_log
from pykv.result import ErrorKind, Ok, Result, err

_logger = logging.getLogger(__name__)


class SinkLocation(BaseModel):
    """Where the command log lives: ``<root>/<dirpath>/<dirname>/<log_file_name>``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root_path: Path
    dirpath: str = DEFAULT_DIRPATH
    dirname: str = DEFAULT_DIRNAME
    log_file_name: str = DEFAULT_LOG_FILE_NAME

    @field_validator("dirpath", "dirname", "log_file_name")
    @classmethod
    def _no_nul(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("path contains a NUL character")
        return value

    @field_validator("dirpath")
    @classmethod
    def _relative_dirpath(cls, value: str) -> str:
        if not value:
            raise ValueError("new dirpath is empty")
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).is_absolute() or value[0] in "/\\":
            raise ValueError("dirpath must be relative")
        return value

    @field_validator("log_file_name")
    @classmethod
    def _non_empty_file_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("log file name is empty")
        return value

    @property
    def base_path(self) -> Path:
        return self.root_path / self.dirpath / self.dirname

    @property
    def log_path(self) -> Path:
        return self.base_path / self.log_file_name


class CommandLogger:
    """Append-and-flush sink for command lines.

    Usage::

        with CommandLogger(location) as sink:
            sink.append("SET name1 alex")
    """

    def __init__(self, location: SinkLocation) -> None:
        self._location = location
        self._stream: TextIO | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> CommandLogger:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the sink.  Safe to call more than once."""
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.close()
            _logger.debug("Closed command log %s", self._location.log_path)

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    @property
    def location(self) -> SinkLocation:
        return self._location

    @property
    def path(self) -> Path:
        return self._location.log_path

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def configure(self, *, dirpath: str | None = None, dirname: str | None = None) -> Result[None]:
        """Move the sink to a new location and reopen it there.

        An invalid *dirpath* leaves the current location untouched and
        returns a ``CONFIGURATION_ERROR``.
        """
        updates: dict[str, Any] = {}
        if dirpath is not None:
            updates["dirpath"] = dirpath
        if dirname is not None:
            updates["dirname"] = dirname
        try:
            location = SinkLocation.model_validate({**self._location.model_dump(), **updates})
        except ValidationError as exc:
            message = exc.errors()[0]["msg"].removeprefix("Value error, ")
            _logger.warning("Rejected persistor location %s: %s", updates, message)
            return err(ErrorKind.CONFIGURATION_ERROR, message)

        self.close()
        self._location = location
        return self._open()

    def change_dirpath(self, dirpath: str) -> Result[None]:
        return self.configure(dirpath=dirpath)

    def change_dirname(self, dirname: str) -> Result[None]:
        return self.configure(dirname=dirname)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def append(self, line: str) -> Result[None]:
        """Write *line* to the log and flush it."""
        if self._stream is None:
            opened = self._open()
            if opened.is_err():
                return opened
        assert self._stream is not None  # noqa: S101

        try:
            self._stream.write(line + "\n")
            self._stream.flush()
        except (OSError, ValueError) as exc:
            _logger.warning("Failed to write command log %s: %s", self.path, exc)
            return err(ErrorKind.LOGGING_FAILURE, "Failed to write Logger", cause=exc)

        _logger.debug("Logged %s", redact_for_log(line))
        return Ok(None)

    def _open(self) -> Result[None]:
        base_path = self._location.base_path
        try:
            base_path.mkdir(parents=True, exist_ok=True)
            self._stream = self._location.log_path.open("a", encoding="utf-8")
        except (OSError, ValueError) as exc:
            _logger.warning("Failed to open command log %s: %s", self.path, exc)
            return err(ErrorKind.LOGGING_FAILURE, "Failed to open Logger", cause=exc)
        _logger.debug("Opened command log %s", self.path)
        return Ok(None)
