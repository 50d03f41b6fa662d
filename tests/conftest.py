from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest
from kungfu import Result, Ok, Error

from storefront.catalog import MemoryCatalog, seed_products
from storefront.checkout import Checkout
from storefront.confirmation import ConfirmationInbox
from storefront.storage import MemoryStorage, SQLAlchemyStorage, StorageError
from storefront.stores import CartLine, CartStore, FavoritesStore, ReviewsStore, UserStore

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)

# ═══════════════════════════════════════════════════════════════════════════════
# Result helpers
# ═══════════════════════════════════════════════════════════════════════════════


def ok[T](result: Result[T, Any]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def err[E](result: Result[Any, E]) -> E:
    match result:
        case Error(e):
            return e
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")


# ═══════════════════════════════════════════════════════════════════════════════
# Test doubles
# ═══════════════════════════════════════════════════════════════════════════════


class BrokenStorage(MemoryStorage):
    """Memory storage whose writes can be switched off."""

    def __init__(self) -> None:
        super().__init__()
        self.failing = False

    def save(self, namespace, value):
        if self.failing:
            return Error(StorageError(f"disk full while saving {namespace}"))
        return super().save(namespace, value)


class FailingHandoff:
    def __init__(self) -> None:
        self.calls = 0

    def deliver(self, order) -> None:
        self.calls += 1
        raise RuntimeError("confirmation unavailable")


# ═══════════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def catalog() -> MemoryCatalog:
    return MemoryCatalog(seed_products())


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def broken_storage() -> BrokenStorage:
    return BrokenStorage()


@pytest.fixture
def sqlite_storage(tmp_path):
    storage = SQLAlchemyStorage.from_url(f"sqlite:///{tmp_path / 'storefront.db'}")
    yield storage
    storage.close()


@pytest.fixture
def cart(storage, catalog) -> CartStore:
    return CartStore(storage, catalog)


@pytest.fixture
def favorites(storage) -> FavoritesStore:
    return FavoritesStore(storage)


@pytest.fixture
def reviews(storage, catalog) -> ReviewsStore:
    return ReviewsStore(storage, catalog)


@pytest.fixture
def users(storage) -> UserStore:
    return UserStore(storage)


@pytest.fixture
def inbox() -> ConfirmationInbox:
    return ConfirmationInbox()


@pytest.fixture
def line_of(catalog) -> Callable[..., CartLine]:
    def make(product_id: str, quantity: int = 1) -> CartLine:
        return CartLine.of(catalog.get_product(product_id), quantity)

    return make


@pytest.fixture
def make_checkout(cart, users, catalog, inbox) -> Callable[..., Checkout]:
    def make(**kwargs: Any) -> Checkout:
        kwargs.setdefault("handoff", inbox)
        return Checkout(cart, users, catalog, clock=lambda: FIXED_NOW, **kwargs)

    return make


# ═══════════════════════════════════════════════════════════════════════════════
# Form data
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def contact_data() -> dict[str, str]:
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@mail.com",
        "phone": "5551234567",
    }


@pytest.fixture
def address_data() -> dict[str, str]:
    return {
        "street": "12 Main Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "country": "US",
        "shipping_method": "express",
    }


@pytest.fixture
def payment_data() -> dict[str, str]:
    return {
        "card_number": "4111111111114242",
        "card_holder": "Jane Doe",
        "expiry_date": "12/29",
        "cvv": "123",
    }
