"""
Catalog — immutable products and search.

    from storefront import catalog as K

    catalog = K.MemoryCatalog(K.seed_products())
    hits = K.SearchIndex(catalog).search("watch")
"""

from __future__ import annotations

from storefront.catalog._types import Review, Product, SortOption
from storefront.catalog._catalog import Catalog, MemoryCatalog
from storefront.catalog._seed import seed_products
from storefront.catalog._search import RatingFn, matches, search, SearchIndex

__all__ = (
    "Review",
    "Product",
    "SortOption",
    "Catalog",
    "MemoryCatalog",
    "seed_products",
    "RatingFn",
    "matches",
    "search",
    "SearchIndex",
)
