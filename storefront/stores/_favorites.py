"""
Favorites store — insertion-ordered set of product ids.
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result, Ok, Error
from pydantic import TypeAdapter

from storefront.storage import FAVORITES, Storage, StorageError
from storefront.stores._base import PersistentStore


@dataclass(frozen=True, slots=True)
class FavoritesState:
    items: tuple[str, ...] = ()


def _dedupe(items: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


_adapter = TypeAdapter(FavoritesState)


class FavoritesStore(PersistentStore[FavoritesState]):
    namespace = FAVORITES

    def __init__(self, storage: Storage) -> None:
        self._index: frozenset[str] = frozenset()
        super().__init__(storage, _adapter, FavoritesState())
        self._index = frozenset(self._state.items)

    def _normalize(self, state: FavoritesState) -> FavoritesState:
        return FavoritesState(_dedupe(state.items))

    def _on_commit(self, state: FavoritesState) -> None:
        self._index = frozenset(state.items)

    @property
    def items(self) -> tuple[str, ...]:
        return self._state.items

    @property
    def count(self) -> int:
        return len(self._index)

    def has_item(self, product_id: str) -> bool:
        return product_id in self._index

    def add_item(self, product_id: str) -> Result[bool, StorageError]:
        """Returns Ok(True) if the id was added, Ok(False) if already present."""
        if product_id in self._index:
            return Ok(False)
        return self._apply(FavoritesState((*self._state.items, product_id)), True)

    def remove_item(self, product_id: str) -> Result[bool, StorageError]:
        """Returns Ok(True) if the id was present."""
        if product_id not in self._index:
            return Ok(False)
        items = tuple(i for i in self._state.items if i != product_id)
        return self._apply(FavoritesState(items), True)

    def toggle(self, product_id: str) -> Result[bool, StorageError]:
        """Flip membership. Returns Ok(new membership)."""
        if product_id not in self._index:
            return self.add_item(product_id)
        match self.remove_item(product_id):
            case Ok(_):
                return Ok(False)
            case Error(err):
                return Error(err)

    def _apply(self, state: FavoritesState, changed: bool) -> Result[bool, StorageError]:
        match self._commit(state):
            case Ok(_):
                return Ok(changed)
            case Error(err):
                return Error(err)


__all__ = ("FavoritesState", "FavoritesStore")
