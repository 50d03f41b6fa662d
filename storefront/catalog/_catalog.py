"""
Catalog — read-only product source.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from storefront.catalog._types import Product

# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class Catalog(Protocol):
    """
    Read-only catalog protocol.

    The core never mutates a catalog. Implement this to serve products from
    a fixture file, an API client or a database.

    Example:
        class ApiCatalog:
            def __init__(self, client: ShopClient):
                self.client = client

            def get_product(self, product_id: str) -> Product | None:
                return self.client.fetch_product(product_id)

            def list(self) -> tuple[Product, ...]:
                return tuple(self.client.fetch_all())
    """

    def get_product(self, product_id: str) -> Product | None:
        """Get product by id. Returns None when absent."""
        ...

    def list(self) -> tuple[Product, ...]:
        """All products, in catalog order."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Catalog — Default
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryCatalog:
    """
    In-memory catalog over a fixed product list.

    Example:
        catalog = MemoryCatalog(seed_products())
        catalog.get_product("p1")
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products = tuple(products)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("duplicate product ids in catalog")

    def get_product(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def list(self) -> tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Catalog",
    "MemoryCatalog",
)
