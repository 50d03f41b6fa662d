"""
Confirmation view — pure projection of a placed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.checkout import Order


@dataclass(frozen=True, slots=True)
class ConfirmationLine:
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    image: str


@dataclass(frozen=True, slots=True)
class ConfirmationView:
    order_id: str
    order_date: str
    customer_name: str
    email: str
    phone: str
    address_lines: tuple[str, ...]
    shipping_method: str
    lines: tuple[ConfirmationLine, ...]
    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    card: str


@dataclass(frozen=True, slots=True)
class InvalidOrder:
    """Shown when the view is opened without an order."""

    reason: str = "No order data found"


def render(order: Order | None) -> ConfirmationView | InvalidOrder:
    if order is None:
        return InvalidOrder()

    a = order.address
    return ConfirmationView(
        order_id=order.order_id,
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M"),
        customer_name=order.contact.full_name,
        email=order.contact.email,
        phone=order.contact.phone,
        address_lines=(a.street, f"{a.city}, {a.state} {a.zip_code}", a.country),
        shipping_method=order.shipping_method.value,
        lines=tuple(
            ConfirmationLine(
                name=line.name,
                quantity=line.quantity,
                unit_price=line.price,
                line_total=line.line_total,
                image=line.image,
            )
            for line in order.items
        ),
        subtotal=order.subtotal,
        shipping=order.shipping_cost,
        total=order.total,
        card=order.masked_card,
    )


__all__ = ("ConfirmationLine", "ConfirmationView", "InvalidOrder", "render")
