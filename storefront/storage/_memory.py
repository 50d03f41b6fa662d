"""
Memory storage — for tests and ephemeral sessions.
"""

from __future__ import annotations

import json

from kungfu import Result, Ok, Error

from storefront._types import JsonValue
from storefront.storage._types import StorageError


class MemoryStorage:
    """
    In-memory storage.

    Note: values are kept as JSON text, so a round-trip behaves like the
    durable backend (no shared references, no non-JSON types slipping in).
    Data does not survive a restart.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def save(self, namespace: str, value: JsonValue) -> Result[None, StorageError]:
        try:
            self._data[namespace] = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Error(StorageError(f"Failed to save {namespace}: {e}", e))
        return Ok(None)

    def load(self, namespace: str) -> Result[JsonValue | None, StorageError]:
        raw = self._data.get(namespace)
        if raw is None:
            return Ok(None)
        return Ok(json.loads(raw))

    def namespaces(self) -> tuple[str, ...]:
        return tuple(self._data)


__all__ = ("MemoryStorage",)
