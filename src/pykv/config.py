"""Store configuration for pykv."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pykv._constants import DEFAULT_DIRNAME, DEFAULT_DIRPATH, DEFAULT_LOG_FILE_NAME
from pykv.exceptions import KvConfigError
from pykv.persistor import SinkLocation


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class KvConfig:
    """Store configuration.

    Parameters
    ----------
    root_path : Path
        Base directory every persistor path is resolved against.
        Defaults to the user's home directory.
    dirpath : str
        Relative path below *root_path* holding the persistor directory.
    dirname : str
        Name of the persistor directory.
    log_file_name : str
        File name of the command log inside the persistor directory.
    persist : bool
        Write every mutating call to the command log.  Off by default.
    """

    root_path: Path = dataclasses.field(default_factory=Path.home)
    dirpath: str = DEFAULT_DIRPATH
    dirname: str = DEFAULT_DIRNAME
    log_file_name: str = DEFAULT_LOG_FILE_NAME
    persist: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_path", Path(self.root_path))
        # Fail fast on a bad location rather than on the first write.
        self.sink_location()

    def sink_location(self) -> SinkLocation:
        """Return the validated log sink location for this configuration."""
        try:
            return SinkLocation(
                root_path=self.root_path,
                dirpath=self.dirpath,
                dirname=self.dirname,
                log_file_name=self.log_file_name,
            )
        except ValidationError as exc:
            message = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise KvConfigError(f"Invalid persistor location: {message}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> KvConfig:
        """Create configuration from environment variables.

        Reads ``PYKV_ROOT``, ``PYKV_DIRPATH``, ``PYKV_DIRNAME``,
        ``PYKV_LOG_FILE`` and ``PYKV_PERSIST``.  Explicit keyword
        arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYKV_DIRPATH": "dirpath",
            "PYKV_DIRNAME": "dirname",
            "PYKV_LOG_FILE": "log_file_name",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        root_env = env.get("PYKV_ROOT")
        if root_env is not None and "root_path" not in overrides:
            config_kwargs["root_path"] = Path(root_env).expanduser()

        if "persist" not in overrides:
            config_kwargs["persist"] = _env_bool(env.get("PYKV_PERSIST"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
