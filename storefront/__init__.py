"""
storefront — commerce state core for an online shop.

    from storefront import catalog as K   # Products and search
    from storefront import stores as S    # Cart, favorites, reviews, profile
    from storefront import checkout as C  # Contact → address → payment → order
    from storefront.app import Storefront

    shop = Storefront.create()
"""

from storefront import catalog
from storefront import storage
from storefront import stores
from storefront import forms
from storefront import saga
from storefront import checkout
from storefront import confirmation
from storefront import accounts
from storefront._types import (
    ProductId,
    Money,
    JsonValue,
    ZERO,
)

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "storage",
    "stores",
    "forms",
    "saga",
    "checkout",
    "confirmation",
    "accounts",
    "ProductId",
    "Money",
    "JsonValue",
    "ZERO",
)
