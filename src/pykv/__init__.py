"""pykv - In-process key-value store with an optional command log."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pykv")
except PackageNotFoundError:
    __version__ = "0+local"
from pykv._coerce import NumericKind
from pykv.command import Command, format_command
from pykv.config import KvConfig
from pykv.exceptions import KvConfigError, KvError, KvUnwrapError
from pykv.persistor import CommandLogger, SinkLocation
from pykv.result import Err, ErrorKind, Ok, Result, StoreError
from pykv.store import KvStore

__all__ = [
    "__version__",
    "Command",
    "CommandLogger",
    "Err",
    "ErrorKind",
    "KvConfig",
    "KvConfigError",
    "KvError",
    "KvStore",
    "KvUnwrapError",
    "NumericKind",
    "Ok",
    "Result",
    "SinkLocation",
    "StoreError",
    "format_command",
]
