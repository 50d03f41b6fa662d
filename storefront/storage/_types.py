"""
Storage types — namespaced durable persistence protocol.

Storage — one JSON-compatible value per namespace.
All methods return Result for explicit error handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kungfu import Result

from storefront._types import JsonValue

# ═══════════════════════════════════════════════════════════════════════════════
# Namespaces
# ═══════════════════════════════════════════════════════════════════════════════

CART = "cart"
FAVORITES = "favorites"
REVIEWS = "reviews"
USER = "user"

# ═══════════════════════════════════════════════════════════════════════════════
# Storage Error
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StorageError:
    """Storage operation error."""

    message: str
    cause: Exception | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Storage Protocol — Result-based
# ═══════════════════════════════════════════════════════════════════════════════


class Storage(Protocol):
    """
    Durable storage protocol.

    `save` must be all-or-nothing: after a failed save, `load` returns the
    previous value. Values must survive a save/load round-trip unchanged.

    Example — file implementation:

        class FileStorage:
            def __init__(self, root: Path):
                self.root = root

            def save(self, namespace: str, value: JsonValue) -> Result[None, StorageError]:
                try:
                    tmp = self.root / f"{namespace}.tmp"
                    tmp.write_text(json.dumps(value))
                    tmp.replace(self.root / f"{namespace}.json")
                    return Ok(None)
                except OSError as e:
                    return Error(StorageError("Failed to save", e))

            # ... load
    """

    def save(self, namespace: str, value: JsonValue) -> Result[None, StorageError]:
        """Replace the value stored under namespace."""
        ...

    def load(self, namespace: str) -> Result[JsonValue | None, StorageError]:
        """Get stored value. Returns Ok(None) if nothing was saved."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "CART",
    "FAVORITES",
    "REVIEWS",
    "USER",
    "StorageError",
    "Storage",
)
