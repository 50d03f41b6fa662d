"""
Confirmation — order handoff and display projection.

    from storefront import confirmation as V

    inbox = V.ConfirmationInbox()
    view = V.render(inbox.take())
"""

from __future__ import annotations

from storefront.checkout import OrderHandoff
from storefront.confirmation._handoff import ConfirmationInbox
from storefront.confirmation._view import (
    ConfirmationLine,
    ConfirmationView,
    InvalidOrder,
    render,
)

__all__ = (
    "OrderHandoff",
    "ConfirmationInbox",
    "ConfirmationLine",
    "ConfirmationView",
    "InvalidOrder",
    "render",
)
