"""
Checkout types — stages, draft, order, errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum, auto
from types import MappingProxyType
from typing import Protocol

from storefront.forms import FieldErrors, PaymentForm, ShippingMethod
from storefront.stores import Address, CartLine

# ═══════════════════════════════════════════════════════════════════════════════
# Stages
# ═══════════════════════════════════════════════════════════════════════════════


class Stage(Enum):
    CONTACT = "contact"
    ADDRESS = "address"
    PAYMENT = "payment"
    PLACED = "placed"


TRANSITIONS = MappingProxyType({
    Stage.CONTACT: Stage.ADDRESS,
    Stage.ADDRESS: Stage.PAYMENT,
    Stage.PAYMENT: Stage.PLACED,
})
"""Successful submission of a stage moves to the mapped stage."""

# ═══════════════════════════════════════════════════════════════════════════════
# Draft
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Contact:
    first_name: str
    last_name: str
    email: str
    phone: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, slots=True)
class CheckoutDraft:
    """Validated stage data accumulated so far. Never persisted."""

    contact: Contact | None = None
    address: Address | None = None
    shipping_method: ShippingMethod | None = None
    payment: PaymentForm | None = None

    def completed(self, stage: Stage) -> bool:
        match stage:
            case Stage.CONTACT:
                return self.contact is not None
            case Stage.ADDRESS:
                return self.address is not None
            case Stage.PAYMENT:
                return self.payment is not None
            case Stage.PLACED:
                return False


# ═══════════════════════════════════════════════════════════════════════════════
# Order
# ═══════════════════════════════════════════════════════════════════════════════


class OrderSource(Enum):
    CART = "cart"
    BUY_NOW = "buy_now"


@dataclass(frozen=True, slots=True)
class Order:
    """Finalized order. Never mutated after creation."""

    order_id: str
    items: tuple[CartLine, ...]
    contact: Contact
    address: Address
    shipping_method: ShippingMethod
    shipping_cost: Decimal
    subtotal: Decimal
    total: Decimal
    masked_card: str  # "****" + last 4 digits
    card_holder: str
    order_date: datetime
    source: OrderSource


# ═══════════════════════════════════════════════════════════════════════════════
# Handoff
# ═══════════════════════════════════════════════════════════════════════════════


class OrderHandoff(Protocol):
    """Receives the finalized order. Raising aborts placement."""

    def deliver(self, order: Order) -> None: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CheckoutErrorKind(Enum):
    """Checkout error kinds."""
    VALIDATION = auto()
    STAGE_LOCKED = auto()
    CLOSED = auto()
    EMPTY = auto()
    OUT_OF_STOCK = auto()
    PLACEMENT = auto()


@dataclass(frozen=True, slots=True)
class CheckoutError:
    """Checkout operation error."""
    kind: CheckoutErrorKind
    message: str
    fields: FieldErrors = ()


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
)
