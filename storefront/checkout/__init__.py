"""
Checkout — staged form pipeline that turns a cart into an order.

    from storefront import checkout as C

    flow = C.Checkout(cart, users, catalog, inbox)

    match flow.submit_contact(data):
        case Ok(stage): ...
        case Error(C.CheckoutError(kind=C.CheckoutErrorKind.VALIDATION, fields=fields)): ...
"""

from __future__ import annotations

from storefront.checkout._types import (
    Stage,
    TRANSITIONS,
    Contact,
    CheckoutDraft,
    OrderSource,
    Order,
    OrderHandoff,
    CheckoutErrorKind,
    CheckoutError,
)
from storefront.checkout._pipeline import Checkout, new_order_id

__all__ = (
    "Stage",
    "TRANSITIONS",
    "Contact",
    "CheckoutDraft",
    "OrderSource",
    "Order",
    "OrderHandoff",
    "CheckoutErrorKind",
    "CheckoutError",
    "Checkout",
    "new_order_id",
)
