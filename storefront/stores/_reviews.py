"""
Reviews store — append-only reviews per product.

The average rating is never stored. `average_rating` recomputes it from the
current reviews on every call.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field

from kungfu import Result, Ok, Error
from pydantic import TypeAdapter

from storefront.catalog import Catalog, Review
from storefront.storage import REVIEWS, Storage, StorageError
from storefront.stores._base import PersistentStore


@dataclass(frozen=True, slots=True)
class ReviewsState:
    by_product: dict[str, tuple[Review, ...]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NewReview:
    """Review as submitted; ids are assigned by the store."""

    user_name: str
    rating: int
    comment: str
    date: str


def average_rating(reviews: Sequence[Review]) -> float:
    """Mean rating, 0.0 when there are no reviews. Unrounded."""
    if not reviews:
        return 0.0
    return sum(r.rating for r in reviews) / len(reviews)


def seed_state(catalog: Catalog) -> ReviewsState:
    return ReviewsState({p.id: p.reviews for p in catalog.list()})


_adapter = TypeAdapter(ReviewsState)


class ReviewsStore(PersistentStore[ReviewsState]):
    """
    Note: rating range is not checked here; submissions go through
    `forms.ReviewForm` first.
    """

    namespace = REVIEWS

    def __init__(self, storage: Storage, catalog: Catalog) -> None:
        super().__init__(storage, _adapter, seed_state(catalog))

    def get_reviews(self, product_id: str) -> tuple[Review, ...]:
        return self._state.by_product.get(product_id, ())

    def rating(self, product_id: str) -> float:
        return average_rating(self.get_reviews(product_id))

    def add_review(self, product_id: str, review: NewReview) -> Result[Review, StorageError]:
        token = uuid.uuid4().hex[:12]
        stored = Review(
            id=f"r{token}",
            user_id=f"u{token}",
            user_name=review.user_name,
            rating=review.rating,
            comment=review.comment,
            date=review.date,
        )
        by_product = {
            **self._state.by_product,
            product_id: (*self.get_reviews(product_id), stored),
        }
        match self._commit(ReviewsState(by_product)):
            case Ok(_):
                return Ok(stored)
            case Error(err):
                return Error(err)


__all__ = ("ReviewsState", "NewReview", "average_rating", "seed_state", "ReviewsStore")
