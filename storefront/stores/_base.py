"""
Persistent store base — snapshot state + commit protocol.

Every store holds one immutable state value. A mutation builds the next
value, saves it, and only then swaps it in. A failed save leaves the store
exactly as it was.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from kungfu import Result, Ok, Error
from pydantic import TypeAdapter, ValidationError

from storefront.storage import Storage, StorageError

logger = logging.getLogger(__name__)


class PersistentStore[S]:
    """
    State container persisted under `namespace`.

    Subclasses set `namespace`, pass a TypeAdapter for their state type and
    a default state used when nothing (or nothing valid) was persisted.
    """

    namespace: ClassVar[str]

    def __init__(self, storage: Storage, adapter: TypeAdapter[S], default: S) -> None:
        self._storage = storage
        self._adapter = adapter
        self._state = self._restore(default)

    @property
    def state(self) -> S:
        return self._state

    # ───────────────────────────────────────────────────────────────────────────
    # Load
    # ───────────────────────────────────────────────────────────────────────────

    def _restore(self, default: S) -> S:
        match self._storage.load(self.namespace):
            case Ok(None):
                return default
            case Ok(payload):
                try:
                    return self._normalize(self._adapter.validate_python(payload))
                except ValidationError as e:
                    logger.warning(
                        "discarding corrupt %s snapshot (%d errors)",
                        self.namespace,
                        e.error_count(),
                    )
                    return default
            case Error(err):
                logger.warning("could not load %s: %s", self.namespace, err.message)
                return default

    def _normalize(self, state: S) -> S:
        """Repair invariants of freshly loaded state. Identity by default."""
        return state

    # ───────────────────────────────────────────────────────────────────────────
    # Commit
    # ───────────────────────────────────────────────────────────────────────────

    def _commit(self, state: S) -> Result[S, StorageError]:
        """Persist state, then make it current."""
        if state == self._state:
            return Ok(state)

        payload = self._adapter.dump_python(state, mode="json")
        match self._storage.save(self.namespace, payload):
            case Ok(_):
                self._state = state
                self._on_commit(state)
                logger.debug("%s committed", self.namespace)
                return Ok(state)
            case Error(err):
                logger.warning("%s not saved, keeping previous state: %s", self.namespace, err.message)
                return Error(err)

    def _on_commit(self, state: S) -> None:
        """Hook for derived indexes. No-op by default."""


__all__ = ("PersistentStore",)
