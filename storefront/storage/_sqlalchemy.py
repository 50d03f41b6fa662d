"""
SQLAlchemy integration — durable storage in any SQL database.

Usage:
    1. Create storage from a URL (tables are created on first use):

        storage = SQLAlchemyStorage.from_url("sqlite:///storefront.db")

    2. Or share an existing session factory:

        engine = create_engine(url)
        Base.metadata.create_all(engine)
        storage = SQLAlchemyStorage(sessionmaker(engine))

Each namespace is one row holding the JSON snapshot of a store's state.
Writes run inside a single transaction, so readers only ever see a complete
snapshot.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from kungfu import Result, Ok, Error

from storefront._types import JsonValue
from storefront.storage._types import StorageError

# ═══════════════════════════════════════════════════════════════════════════════
# Base
# ═══════════════════════════════════════════════════════════════════════════════


class Base(DeclarativeBase):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Snapshots Table
# ═══════════════════════════════════════════════════════════════════════════════


class SnapshotTable(Base):
    """One row per store namespace."""

    __tablename__ = "store_snapshots"

    namespace: Mapped[str] = mapped_column(String(64), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# SQLAlchemy Storage
# ═══════════════════════════════════════════════════════════════════════════════


class SQLAlchemyStorage:
    """
    Durable storage backed by SQLAlchemy.

    Example:
        storage = SQLAlchemyStorage.from_url("sqlite:///:memory:")
        storage.save("cart", {"lines": []})
        storage.load("cart")  # Ok({"lines": []})
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        engine: Engine | None = None,
    ) -> None:
        """
        Args:
            session_factory: SQLAlchemy session factory
            engine: Owned engine, disposed by close()
        """
        self._session_factory = session_factory
        self._engine = engine

    @classmethod
    def from_url(cls, url: str) -> SQLAlchemyStorage:
        """Create engine, create tables, return storage owning the engine."""
        engine = create_engine(url, echo=False)
        Base.metadata.create_all(engine)
        return cls(sessionmaker(engine, expire_on_commit=False), engine)

    def save(self, namespace: str, value: JsonValue) -> Result[None, StorageError]:
        """Upsert namespace snapshot in one transaction."""
        try:
            payload = json.dumps(value)
            with self._session_factory.begin() as session:
                row = session.get(SnapshotTable, namespace)
                now = datetime.now(timezone.utc)
                if row is None:
                    session.add(
                        SnapshotTable(namespace=namespace, payload=payload, updated_at=now)
                    )
                else:
                    row.payload = payload
                    row.updated_at = now
            return Ok(None)

        except (SQLAlchemyError, TypeError, ValueError) as e:
            return Error(StorageError(f"Failed to save {namespace}: {e}", e))

    def load(self, namespace: str) -> Result[JsonValue | None, StorageError]:
        """Get namespace snapshot."""
        try:
            with self._session_factory() as session:
                row = session.get(SnapshotTable, namespace)
                if row is None:
                    return Ok(None)
                return Ok(json.loads(row.payload))

        except (SQLAlchemyError, ValueError) as e:
            return Error(StorageError(f"Failed to load {namespace}: {e}", e))

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


__all__ = (
    "Base",
    "SnapshotTable",
    "SQLAlchemyStorage",
)
