"""
Composition root — builds every collaborator and wires them together.

    shop = Storefront.create(Settings.from_env())

    shop.cart.add_item(CartLine.of(shop.catalog.get_product("p1")))
    flow = shop.checkout()
    ...
    view = render(shop.inbox.take())

    shop.close()
"""

from __future__ import annotations

import logging

from storefront.catalog import Catalog, MemoryCatalog, SearchIndex, seed_products
from storefront.checkout import Checkout
from storefront.config import MEMORY_URL, Settings
from storefront.confirmation import ConfirmationInbox
from storefront.storage import MemoryStorage, SQLAlchemyStorage, Storage
from storefront.stores import CartLine, CartStore, FavoritesStore, ReviewsStore, UserStore

logger = logging.getLogger(__name__)


def storage_from_url(url: str) -> Storage:
    if url == MEMORY_URL:
        return MemoryStorage()
    return SQLAlchemyStorage.from_url(url)


class Storefront:
    """
    One user's storefront session.

    Stores share a single storage; the catalog is read-only. Nothing here is
    global, so tests can build as many independent sessions as they need.
    """

    def __init__(
        self,
        settings: Settings,
        catalog: Catalog,
        storage: Storage,
    ) -> None:
        self.settings = settings
        self.catalog = catalog
        self.storage = storage

        self.cart = CartStore(storage, catalog)
        self.favorites = FavoritesStore(storage)
        self.reviews = ReviewsStore(storage, catalog)
        self.users = UserStore(storage)

        self.search = SearchIndex(catalog)
        self.inbox = ConfirmationInbox()

    @classmethod
    def create(cls, settings: Settings | None = None, catalog: Catalog | None = None) -> Storefront:
        if settings is None:
            settings = Settings()
        if catalog is None:
            catalog = MemoryCatalog(seed_products())
        storage = storage_from_url(settings.database_url)
        logger.debug("storefront created (storage: %s)", type(storage).__name__)
        return cls(settings, catalog, storage)

    def checkout(self, buy_now: CartLine | None = None) -> Checkout:
        """Start a checkout of the cart, or of a single buy-now line."""
        return Checkout(
            self.cart,
            self.users,
            self.catalog,
            self.inbox,
            buy_now=buy_now,
            recheck_stock=self.settings.recheck_stock,
        )

    def rating(self, product_id: str) -> float:
        return self.reviews.rating(product_id)

    def close(self) -> None:
        if isinstance(self.storage, SQLAlchemyStorage):
            self.storage.close()


__all__ = ("storage_from_url", "Storefront")
