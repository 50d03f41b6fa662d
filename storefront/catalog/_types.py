"""
Catalog types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

# ═══════════════════════════════════════════════════════════════════════════════
# Review — denormalized onto products, owned by ReviewsStore at runtime
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Review:
    id: str
    user_id: str
    user_name: str
    rating: int
    comment: str
    date: str  # ISO date, YYYY-MM-DD


# ═══════════════════════════════════════════════════════════════════════════════
# Product
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Product:
    """
    Catalog product.

    Immutable. `images` is ordered and never empty; the first image is the
    one snapshotted onto cart lines.
    """

    id: str
    name: str
    description: str
    price: Decimal
    category: str
    subcategory: str
    images: tuple[str, ...]
    stock: int
    reviews: tuple[Review, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"{self.id}: price must be non-negative")
        if self.stock < 0:
            raise ValueError(f"{self.id}: stock must be non-negative")
        if not self.images:
            raise ValueError(f"{self.id}: at least one image is required")

    @property
    def image(self) -> str:
        return self.images[0]


# ═══════════════════════════════════════════════════════════════════════════════
# Listing sort order
# ═══════════════════════════════════════════════════════════════════════════════


class SortOption(Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_ASC = "rating-asc"
    RATING_DESC = "rating-desc"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Review",
    "Product",
    "SortOption",
)
