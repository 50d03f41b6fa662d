"""
Checkout pipeline — contact → address → payment → placed.

    checkout = Checkout(cart, users, catalog, inbox)

    checkout.submit_contact({...})     # Ok(Stage.ADDRESS)
    checkout.submit_address({...})     # Ok(Stage.PAYMENT)
    checkout.submit_payment({...})     # Ok(Stage.PLACED)
    checkout.order                     # Order

Every submission validates its stage before the draft changes. A stage can
be (re)submitted only once every stage before it is complete; revisiting an
earlier stage and submitting it again re-validates and moves forward.
After placement the pipeline is closed and the draft is gone.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from kungfu import Result, Ok, Error

from storefront import saga as S
from storefront.catalog import Catalog
from storefront.forms import (
    SHIPPING_RATES,
    AddressForm,
    ContactForm,
    PaymentForm,
    ShippingMethod,
    validate,
)
from storefront.stores import Address, CartLine, CartStore, PaymentMethod, UserStore, subtotal
from storefront.checkout._types import (
    TRANSITIONS,
    CheckoutDraft,
    CheckoutError,
    CheckoutErrorKind,
    Contact,
    Order,
    OrderHandoff,
    OrderSource,
    Stage,
)

logger = logging.getLogger(__name__)

_STAGE_ORDER = (Stage.CONTACT, Stage.ADDRESS, Stage.PAYMENT)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_order_id() -> str:
    return f"ORD{uuid.uuid4().hex[:12].upper()}"


class Checkout:
    """
    One checkout session.

    Args:
        cart: Cart store; source of items unless `buy_now` is given
        users: Profile store, used for form defaults and saved cards
        catalog: Stock lookup for buy-now lines and `recheck_stock`
        handoff: Receives the placed order
        buy_now: Single line bought directly; the cart is never touched
        recheck_stock: Re-validate cart quantities against stock at placement
        clock: Order timestamp source
    """

    def __init__(
        self,
        cart: CartStore,
        users: UserStore,
        catalog: Catalog,
        handoff: OrderHandoff,
        buy_now: CartLine | None = None,
        recheck_stock: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cart = cart
        self._users = users
        self._catalog = catalog
        self._handoff = handoff
        self._buy_now = buy_now
        self._recheck_stock = recheck_stock
        self._clock = clock

        self._stage = Stage.CONTACT
        self._draft: CheckoutDraft | None = CheckoutDraft()
        self._shipping = ShippingMethod.STANDARD
        self._payment_fields: dict[str, str] = {}
        self._order: Order | None = None

    # ───────────────────────────────────────────────────────────────────────────
    # State
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def draft(self) -> CheckoutDraft | None:
        """Accumulated stage data; None once the order is placed."""
        return self._draft

    @property
    def order(self) -> Order | None:
        return self._order

    @property
    def is_closed(self) -> bool:
        return self._stage is Stage.PLACED

    @property
    def source(self) -> OrderSource:
        return OrderSource.BUY_NOW if self._buy_now is not None else OrderSource.CART

    def reachable(self, stage: Stage) -> bool:
        if self._draft is None or stage is Stage.PLACED:
            return False
        before = _STAGE_ORDER[: _STAGE_ORDER.index(stage)]
        return all(self._draft.completed(s) for s in before)

    # ───────────────────────────────────────────────────────────────────────────
    # Totals
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def items(self) -> tuple[CartLine, ...]:
        if self._buy_now is not None:
            return (self._buy_now,)
        return self._cart.lines

    @property
    def shipping_method(self) -> ShippingMethod:
        return self._shipping

    @property
    def subtotal(self) -> Decimal:
        return subtotal(self.items)

    @property
    def shipping_cost(self) -> Decimal:
        return SHIPPING_RATES[self._shipping]

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.shipping_cost

    def select_shipping(self, method: ShippingMethod) -> None:
        """
        Change the shipping method.

        Before the address stage this is a preview. Afterwards it also
        replaces the method in the draft, so the order is charged what
        `total` shows.
        """
        if self._draft is None:
            return
        self._shipping = ShippingMethod(method)
        if self._draft.address is not None:
            self._draft = replace(self._draft, shipping_method=self._shipping)

    # ───────────────────────────────────────────────────────────────────────────
    # Form defaults
    # ───────────────────────────────────────────────────────────────────────────

    def contact_defaults(self) -> dict[str, str]:
        user = self._users.user
        if user is None:
            return {}
        return {
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "phone": user.phone,
        }

    def address_defaults(self) -> dict[str, str]:
        defaults = {"shipping_method": ShippingMethod.STANDARD.value}
        user = self._users.user
        if user is not None and user.address is not None:
            a = user.address
            defaults |= {
                "street": a.street,
                "city": a.city,
                "state": a.state,
                "zip_code": a.zip_code,
                "country": a.country,
            }
        return defaults

    @property
    def payment_fields(self) -> Mapping[str, str]:
        return dict(self._payment_fields)

    def autofill_payment(self, method: PaymentMethod) -> Mapping[str, str]:
        """Copy a saved card into the payment fields. Validated on submit."""
        self._payment_fields = {
            "card_number": method.card_number,
            "card_holder": method.card_holder,
            "expiry_date": method.expiry_date,
            "cvv": method.cvv,
        }
        return self.payment_fields

    # ───────────────────────────────────────────────────────────────────────────
    # Transitions
    # ───────────────────────────────────────────────────────────────────────────

    def go_to(self, stage: Stage) -> Result[Stage, CheckoutError]:
        """Revisit a stage whose predecessors are complete."""
        match self._guard(stage):
            case Error(e):
                return Error(e)
            case Ok(_):
                self._stage = stage
                return Ok(stage)

    def submit_contact(self, data: Mapping[str, Any]) -> Result[Stage, CheckoutError]:
        match self._validated(Stage.CONTACT, ContactForm, data):
            case Error(e):
                return Error(e)
            case Ok((draft, form)):
                contact = Contact(form.first_name, form.last_name, form.email, form.phone)
                return self._advance(Stage.CONTACT, replace(draft, contact=contact))

    def submit_address(self, data: Mapping[str, Any]) -> Result[Stage, CheckoutError]:
        match self._validated(Stage.ADDRESS, AddressForm, data):
            case Error(e):
                return Error(e)
            case Ok((draft, form)):
                address = Address(form.street, form.city, form.state, form.zip_code, form.country)
                self._shipping = form.shipping_method
                return self._advance(
                    Stage.ADDRESS,
                    replace(draft, address=address, shipping_method=form.shipping_method),
                )

    def submit_payment(self, data: Mapping[str, Any] | None = None) -> Result[Stage, CheckoutError]:
        """
        Validate payment and place the order.

        With no data, submits the autofilled fields.
        """
        fields = self._payment_fields if data is None else data
        match self._validated(Stage.PAYMENT, PaymentForm, fields):
            case Error(e):
                return Error(e)
            case Ok((draft, form)):
                self._draft = replace(draft, payment=form)
                return self._place(self._draft, form)

    def _guard(self, stage: Stage) -> Result[CheckoutDraft, CheckoutError]:
        draft = self._draft
        if draft is None or self.is_closed:
            return Error(CheckoutError(CheckoutErrorKind.CLOSED, "Order already placed"))
        if not self.reachable(stage):
            return Error(CheckoutError(
                CheckoutErrorKind.STAGE_LOCKED,
                f"Complete the steps before {stage.value} first",
            ))
        return Ok(draft)

    def _validated[F](
        self,
        stage: Stage,
        form: type[F],
        data: Mapping[str, Any],
    ) -> Result[tuple[CheckoutDraft, F], CheckoutError]:
        match self._guard(stage):
            case Error(e):
                return Error(e)
            case Ok(draft):
                match validate(form, data):  # type: ignore[type-var]
                    case Ok(valid):
                        return Ok((draft, valid))
                    case Error(errors):
                        return Error(CheckoutError(
                            CheckoutErrorKind.VALIDATION,
                            f"Invalid {stage.value} details",
                            errors,
                        ))

    def _advance(self, stage: Stage, draft: CheckoutDraft) -> Result[Stage, CheckoutError]:
        self._draft = draft
        self._stage = TRANSITIONS[stage]
        return Ok(self._stage)

    # ───────────────────────────────────────────────────────────────────────────
    # Placement
    # ───────────────────────────────────────────────────────────────────────────

    def _place(self, draft: CheckoutDraft, payment: PaymentForm) -> Result[Stage, CheckoutError]:
        items = self.items
        if not items:
            return Error(CheckoutError(CheckoutErrorKind.EMPTY, "Nothing to check out"))
        # a buy-now line never went through the cart's clamping
        if self._buy_now is not None or self._recheck_stock:
            match self._check_stock(items):
                case Error(e):
                    return Error(e)
                case Ok(_):
                    pass

        match draft:
            case CheckoutDraft(
                contact=Contact() as contact,
                address=Address() as address,
                shipping_method=ShippingMethod() as method,
            ):
                pass
            case _:
                return Error(CheckoutError(
                    CheckoutErrorKind.STAGE_LOCKED, "Contact and address are required"
                ))

        sub = subtotal(items)
        cost = SHIPPING_RATES[method]
        order = Order(
            order_id=new_order_id(),
            items=items,
            contact=contact,
            address=address,
            shipping_method=method,
            shipping_cost=cost,
            subtotal=sub,
            total=sub + cost,
            masked_card=payment.masked,
            card_holder=payment.card_holder,
            order_date=self._clock(),
            source=self.source,
        )

        deliver = S.from_callable(
            lambda: self._handoff.deliver(order),
            on_error=lambda e: CheckoutError(
                CheckoutErrorKind.PLACEMENT, f"Order handoff failed: {e}"
            ),
        )
        if self._buy_now is None:
            placement = S.step(self._clear_cart, self._restore_cart).then(lambda _: deliver)
        else:
            placement = deliver

        match S.run(placement):
            case Ok(_):
                self._order = order
                self._stage = Stage.PLACED
                self._draft = None
                self._payment_fields = {}
                logger.info(
                    "order %s placed: %d item(s), total %s (%s)",
                    order.order_id, len(order.items), order.total, order.source.value,
                )
                return Ok(Stage.PLACED)
            case Error(failure):
                logger.warning(
                    "order placement failed at step %d: %s",
                    failure.step_failed, failure.error.message,
                )
                return Error(failure.error)

    def _check_stock(self, items: tuple[CartLine, ...]) -> Result[None, CheckoutError]:
        """Every line must hold between 1 and the current stock."""
        invalid = [line.name for line in items if line.quantity < 1]
        if invalid:
            return Error(CheckoutError(
                CheckoutErrorKind.OUT_OF_STOCK,
                "Quantity must be at least 1 for: " + ", ".join(invalid),
            ))
        short = [
            line.name
            for line in items
            if (p := self._catalog.get_product(line.product_id)) is None
            or line.quantity > p.stock
        ]
        if short:
            return Error(CheckoutError(
                CheckoutErrorKind.OUT_OF_STOCK,
                "Not enough stock for: " + ", ".join(short),
            ))
        return Ok(None)

    def _clear_cart(self) -> Result[tuple[CartLine, ...], CheckoutError]:
        snapshot = self._cart.lines
        match self._cart.clear():
            case Ok(_):
                return Ok(snapshot)
            case Error(err):
                return Error(CheckoutError(
                    CheckoutErrorKind.PLACEMENT, f"Cart could not be cleared: {err.message}"
                ))

    def _restore_cart(self, snapshot: tuple[CartLine, ...]) -> None:
        match self._cart.restore(snapshot):
            case Ok(_):
                logger.warning("cart restored after failed placement")
            case Error(err):
                raise RuntimeError(f"cart restore failed: {err.message}")


__all__ = ("Checkout", "new_order_id")
