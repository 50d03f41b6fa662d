"""
Storage — namespaced durable persistence.

    from storefront import storage as D

    durable = D.SQLAlchemyStorage.from_url("sqlite:///storefront.db")
    durable.save(D.CART, {"lines": []})
"""

from __future__ import annotations

from storefront.storage._types import (
    CART,
    FAVORITES,
    REVIEWS,
    USER,
    StorageError,
    Storage,
)
from storefront.storage._memory import MemoryStorage
from storefront.storage._sqlalchemy import Base, SnapshotTable, SQLAlchemyStorage

__all__ = (
    "CART",
    "FAVORITES",
    "REVIEWS",
    "USER",
    "StorageError",
    "Storage",
    "MemoryStorage",
    "Base",
    "SnapshotTable",
    "SQLAlchemyStorage",
)
