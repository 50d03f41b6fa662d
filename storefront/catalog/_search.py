"""
Search — derived views over the catalog.

`search` answers the search box: an empty query means "no search active"
and yields nothing. `SearchIndex.browse` answers the listing page, where an
empty query means "no text filter".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from storefront.catalog._catalog import Catalog
from storefront.catalog._types import Product, SortOption

type RatingFn = Callable[[str], float]
"""Product id -> average rating."""


def matches(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, description or category."""
    needle = query.lower()
    return (
        needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.category.lower()
    )


def search(products: Iterable[Product], query: str) -> tuple[Product, ...]:
    if not query:
        return ()
    return tuple(p for p in products if matches(p, query))


class SearchIndex:
    """
    Stateless search over a catalog.

    Example:
        index = SearchIndex(catalog)
        index.search("watch")
        index.browse(category="fashion", sort=SortOption.PRICE_DESC)
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def search(self, query: str) -> tuple[Product, ...]:
        return search(self._catalog.list(), query)

    def browse(
        self,
        query: str = "",
        category: str | None = None,
        subcategory: str | None = None,
        sort: SortOption = SortOption.PRICE_ASC,
        rating_of: RatingFn | None = None,
    ) -> list[Product]:
        """
        Filtered and sorted product listing.

        Rating sorts need `rating_of`; without it every product rates 0 and
        catalog order is kept (the sort is stable).
        """
        found = [
            p
            for p in self._catalog.list()
            if (not query or matches(p, query))
            and (not category or p.category == category)
            and (not subcategory or p.subcategory == subcategory)
        ]

        rate = rating_of or (lambda _id: 0.0)
        match sort:
            case SortOption.PRICE_ASC:
                found.sort(key=lambda p: p.price)
            case SortOption.PRICE_DESC:
                found.sort(key=lambda p: p.price, reverse=True)
            case SortOption.RATING_ASC:
                found.sort(key=lambda p: rate(p.id))
            case SortOption.RATING_DESC:
                found.sort(key=lambda p: rate(p.id), reverse=True)
        return found


__all__ = ("RatingFn", "matches", "search", "SearchIndex")
