"""
Stores — independently persisted state containers.

    from storefront import stores as S

    cart = S.CartStore(storage, catalog)
    cart.add_item(S.CartLine.of(product, 2))
    cart.subtotal
"""

from __future__ import annotations

from storefront.stores._base import PersistentStore
from storefront.stores._cart import (
    CartLine,
    CartState,
    subtotal,
    AddItem,
    UpdateQuantity,
    RemoveItem,
    ClearCart,
    CartCommand,
    CartNotice,
    CartOutcome,
    CartStore,
)
from storefront.stores._favorites import FavoritesState, FavoritesStore
from storefront.stores._reviews import (
    ReviewsState,
    NewReview,
    average_rating,
    ReviewsStore,
)
from storefront.stores._user import (
    Address,
    PaymentMethod,
    UserProfile,
    UserState,
    UserStore,
)

__all__ = (
    "PersistentStore",
    # Cart
    "CartLine",
    "CartState",
    "subtotal",
    "AddItem",
    "UpdateQuantity",
    "RemoveItem",
    "ClearCart",
    "CartCommand",
    "CartNotice",
    "CartOutcome",
    "CartStore",
    # Favorites
    "FavoritesState",
    "FavoritesStore",
    # Reviews
    "ReviewsState",
    "NewReview",
    "average_rating",
    "ReviewsStore",
    # User
    "Address",
    "PaymentMethod",
    "UserProfile",
    "UserState",
    "UserStore",
)
