"""In-memory key-value store with scalar and list namespaces.

The store keeps two independent keyspaces: a scalar mapping and a mapping of
double-ended lists.  Every fallible operation returns a
:class:`~pykv.result.Result` instead of raising.

When persistence is enabled, each successful mutation is written to the
command log before the call returns.  A failed log write does not undo the
mutation; the call then returns a ``LOGGING_FAILURE`` error meaning
"committed but unaudited".
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable
from typing import Any, Generic, TypeVar

from pykv._coerce import step
from pykv.command import _MISSING, Command, format_command
from pykv.config import KvConfig
from pykv.persistor import CommandLogger
from pykv.result import ErrorKind, Ok, Result, err

_logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class KvStore(Generic[K, V]):
    """Generic in-process key-value store.

    Usage::

        with KvStore[str, str](KvConfig(persist=True)) as store:
            store.set("name1", "alex")
            key, value = store.get("name1").unwrap()
    """

    def __init__(self, config: KvConfig | None = None, *, persistor: CommandLogger | None = None) -> None:
        self._config = config if config is not None else KvConfig()
        self._map: dict[K, V] = {}
        self._lists: dict[K, deque[V]] = {}
        self._persistor = persistor if persistor is not None else CommandLogger(self._config.sink_location())
        self._use_persistor = self._config.persist

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> KvStore[K, V]:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the command log sink."""
        self._persistor.close()

    # ------------------------------------------------------------------
    # Persistence controls
    # ------------------------------------------------------------------

    def set_persistor(self, enabled: bool) -> None:
        """Turn the command log on or off (off by default)."""
        self._use_persistor = enabled
        _logger.debug("Command log %s", "enabled" if enabled else "disabled")

    def is_using_persistor(self) -> bool:
        return self._use_persistor

    def change_persistor_dirpath(self, dirpath: str) -> Result[None]:
        """Move the command log below another directory relative to the root."""
        return self._persistor.change_dirpath(dirpath)

    def change_persistor_dirname(self, dirname: str) -> Result[None]:
        """Rename the directory holding the command log."""
        return self._persistor.change_dirname(dirname)

    def get_persistor_path(self) -> str:
        return str(self._persistor.location.base_path)

    def _record(self, command: Command, key: Any = _MISSING, value: Any = _MISSING) -> Result[None]:
        if not self._use_persistor:
            return Ok(None)
        try:
            line = format_command(command, key, value)
        except ValueError as exc:
            # The mutation is already applied; report it as unaudited.
            _logger.warning("Failed to format %s command: %s", command, exc)
            return err(ErrorKind.LOGGING_FAILURE, "Failed to format command", cause=exc)
        return self._persistor.append(line)

    # ------------------------------------------------------------------
    # Scalar namespace
    # ------------------------------------------------------------------

    def get_keys(self) -> Result[list[K]]:
        if not self._map:
            return err(ErrorKind.EMPTY_NAMESPACE, "No Keys Found")
        return Ok(list(self._map))

    def set(self, key: K, value: V) -> Result[None]:
        """Set *key* to *value*, overwriting any existing value."""
        self._map[key] = value
        return self._record(Command.SET, key, value)

    def setnx(self, key: K, value: V) -> Result[None]:
        """Set *key* only if it is not present yet."""
        if key in self._map:
            return err(ErrorKind.CONFLICT, "Duplicate Key Found", cause=key)
        self._map[key] = value
        return self._record(Command.SETNX, key, value)

    def update(self, key: K, value: V) -> Result[None]:
        """Replace the value of an existing *key*."""
        if key not in self._map:
            return err(ErrorKind.NOT_FOUND, "Not Found", cause=key)
        self._map[key] = value
        return self._record(Command.UPDATE, key, value)

    def get(self, key: K) -> Result[tuple[K, V]]:
        if key not in self._map:
            return err(ErrorKind.NOT_FOUND, "Not Found", cause=key)
        return Ok((key, self._map[key]))

    def exists(self, key: K) -> bool:
        return key in self._map

    def delete(self, key: K) -> Result[None]:
        """Remove *key* from the scalar namespace."""
        if key not in self._map:
            return err(ErrorKind.NOT_FOUND, "Not Found", cause=key)
        del self._map[key]
        return self._record(Command.DEL, key)

    def incr(self, key: K) -> Result[V]:
        """Add one to the value at *key*.

        Integers are incremented in place; text holding a base-10 integer is
        parsed, incremented and stored back as text.
        """
        return self._step(key, 1, Command.INCR)

    def decr(self, key: K) -> Result[V]:
        """Subtract one from the value at *key*.  See :meth:`incr`."""
        return self._step(key, -1, Command.DECR)

    def _step(self, key: K, delta: int, command: Command) -> Result[V]:
        if key not in self._map:
            return err(ErrorKind.NOT_FOUND, "Not Found", cause=key)
        stepped = step(self._map[key], delta)
        if stepped.is_err():
            return stepped
        value: V = stepped.unwrap()
        self._map[key] = value
        recorded = self._record(command, key)
        if recorded.is_err():
            return recorded
        return Ok(value)

    def clear(self) -> Result[None]:
        """Drop every scalar entry.  Lists are untouched."""
        self._map.clear()
        return self._record(Command.CLEAR)

    def size(self) -> int:
        return len(self._map)

    # ------------------------------------------------------------------
    # List namespace
    # ------------------------------------------------------------------

    def get_lkeys(self) -> Result[list[K]]:
        if not self._lists:
            return err(ErrorKind.EMPTY_NAMESPACE, "No Keys Found")
        return Ok(list(self._lists))

    def lpush(self, key: K, value: V) -> Result[None]:
        """Push *value* to the front of the list at *key*, creating it if needed."""
        self._lists.setdefault(key, deque()).appendleft(value)
        return self._record(Command.LPUSH, key, value)

    def rpush(self, key: K, value: V) -> Result[None]:
        """Push *value* to the back of the list at *key*, creating it if needed."""
        self._lists.setdefault(key, deque()).append(value)
        return self._record(Command.RPUSH, key, value)

    def lpop(self, key: K) -> Result[V]:
        """Pop from the front of the list at *key*.

        The list stays present (empty) after its last value is popped.
        """
        return self._pop(key, front=True)

    def rpop(self, key: K) -> Result[V]:
        """Pop from the back of the list at *key*.  See :meth:`lpop`."""
        return self._pop(key, front=False)

    def _pop(self, key: K, *, front: bool) -> Result[V]:
        if not self._lists:
            return err(ErrorKind.EMPTY_NAMESPACE, "Empty list")
        values = self._lists.get(key)
        if values is None:
            return err(ErrorKind.NOT_FOUND, "List Not Found", cause=key)
        if not values:
            return err(ErrorKind.EMPTY_NAMESPACE, "List is empty", cause=key)
        value = values.popleft() if front else values.pop()
        recorded = self._record(Command.LPOP if front else Command.RPOP, key, value)
        if recorded.is_err():
            return recorded
        return Ok(value)

    def lexists(self, key: K) -> bool:
        return key in self._lists

    def clear_list(self) -> Result[None]:
        """Drop every list.  Scalar entries are untouched."""
        self._lists.clear()
        return self._record(Command.CLEARLIST)

    def size_list(self) -> int:
        return len(self._lists)

    # ------------------------------------------------------------------
    # Both namespaces
    # ------------------------------------------------------------------

    def clear_all(self) -> Result[None]:
        """Drop every scalar entry and every list."""
        self._map.clear()
        self._lists.clear()
        return self._record(Command.CLEARALL)
