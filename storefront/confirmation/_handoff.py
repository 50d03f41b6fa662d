"""
Order handoff — how a placed order reaches the confirmation view.
"""

from __future__ import annotations

from storefront.checkout import Order


class ConfirmationInbox:
    """
    Holds the most recent order until the confirmation view takes it.

    Implements `checkout.OrderHandoff`.

    Example:
        inbox = ConfirmationInbox()
        ...checkout places an order...
        view = render(inbox.take())
    """

    def __init__(self) -> None:
        self._order: Order | None = None

    def deliver(self, order: Order) -> None:
        self._order = order

    def peek(self) -> Order | None:
        return self._order

    def take(self) -> Order | None:
        order, self._order = self._order, None
        return order


__all__ = ("ConfirmationInbox",)
