"""
Cart store — stock-bounded line items.

Quantities are always clamped into [1, stock]. Asking for more than is in
stock is not an error: the request is clamped and the outcome carries a
notice for the presentation layer to show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum, auto

from kungfu import Result, Ok, Error
from pydantic import TypeAdapter

from storefront._types import ZERO
from storefront.catalog import Catalog, Product
from storefront.storage import CART, Storage, StorageError
from storefront.stores._base import PersistentStore

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# State
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartLine:
    product_id: str
    name: str
    price: Decimal  # snapshot at add time
    quantity: int
    image: str

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    @classmethod
    def of(cls, product: Product, quantity: int = 1) -> CartLine:
        return cls(product.id, product.name, product.price, quantity, product.image)


@dataclass(frozen=True, slots=True)
class CartState:
    lines: tuple[CartLine, ...] = ()


def subtotal(lines: tuple[CartLine, ...]) -> Decimal:
    return sum((line.line_total for line in lines), ZERO)


# ═══════════════════════════════════════════════════════════════════════════════
# Commands
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class AddItem:
    line: CartLine


@dataclass(frozen=True, slots=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True, slots=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True, slots=True)
class ClearCart:
    pass


type CartCommand = AddItem | UpdateQuantity | RemoveItem | ClearCart

# ═══════════════════════════════════════════════════════════════════════════════
# Outcome
# ═══════════════════════════════════════════════════════════════════════════════


class CartNotice(Enum):
    NONE = auto()
    CLAMPED_TO_STOCK = auto()
    OUT_OF_STOCK = auto()
    UNKNOWN_PRODUCT = auto()
    NOT_IN_CART = auto()


@dataclass(frozen=True, slots=True)
class CartOutcome:
    """Line after the command (None if removed or untouched) + notice."""

    line: CartLine | None
    notice: CartNotice = CartNotice.NONE


def _clamp(quantity: int, stock: int) -> int:
    return max(1, min(stock, quantity))


_adapter = TypeAdapter(CartState)

# ═══════════════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════════════


class CartStore(PersistentStore[CartState]):
    """
    Example:
        cart = CartStore(storage, catalog)
        match cart.add_item(CartLine.of(product, 2)):
            case Ok(CartOutcome(notice=CartNotice.CLAMPED_TO_STOCK)):
                warn("only so many left")
    """

    namespace = CART

    def __init__(self, storage: Storage, catalog: Catalog) -> None:
        self._catalog = catalog
        super().__init__(storage, _adapter, CartState())

    def _normalize(self, state: CartState) -> CartState:
        # one line per product, 1 <= quantity <= current stock
        merged: dict[str, CartLine] = {}
        for ln in state.lines:
            if ln.quantity < 1:
                continue
            if ln.product_id in merged:
                prev = merged[ln.product_id]
                merged[ln.product_id] = replace(prev, quantity=prev.quantity + ln.quantity)
            else:
                merged[ln.product_id] = ln

        lines: list[CartLine] = []
        for ln in merged.values():
            product = self._catalog.get_product(ln.product_id)
            if product is None:
                lines.append(ln)
            elif product.stock < 1:
                logger.info("dropping %s from restored cart: out of stock", ln.product_id)
            elif ln.quantity > product.stock:
                logger.info("clamped restored %s to stock %d", ln.product_id, product.stock)
                lines.append(replace(ln, quantity=product.stock))
            else:
                lines.append(ln)
        return CartState(tuple(lines))

    # ───────────────────────────────────────────────────────────────────────────
    # Reads
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._state.lines

    @property
    def subtotal(self) -> Decimal:
        return subtotal(self._state.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._state.lines)

    def line(self, product_id: str) -> CartLine | None:
        return next((ln for ln in self._state.lines if ln.product_id == product_id), None)

    def at_capacity(self, product_id: str) -> bool:
        """True when the line already holds all available stock."""
        line = self.line(product_id)
        product = self._catalog.get_product(product_id)
        if line is None or product is None:
            return False
        return line.quantity >= product.stock

    # ───────────────────────────────────────────────────────────────────────────
    # Commands
    # ───────────────────────────────────────────────────────────────────────────

    def add_item(self, line: CartLine) -> Result[CartOutcome, StorageError]:
        return self.dispatch(AddItem(line))

    def update_quantity(self, product_id: str, quantity: int) -> Result[CartOutcome, StorageError]:
        return self.dispatch(UpdateQuantity(product_id, quantity))

    def remove_item(self, product_id: str) -> Result[CartOutcome, StorageError]:
        return self.dispatch(RemoveItem(product_id))

    def clear(self) -> Result[CartOutcome, StorageError]:
        return self.dispatch(ClearCart())

    def restore(self, lines: tuple[CartLine, ...]) -> Result[CartOutcome, StorageError]:
        """Put back a previous line snapshot verbatim (order rollback)."""
        return self._apply(CartState(lines), CartOutcome(None))

    def dispatch(self, command: CartCommand) -> Result[CartOutcome, StorageError]:
        match command:
            case AddItem(line):
                return self._add(line)
            case UpdateQuantity(product_id, quantity):
                return self._update(product_id, quantity)
            case RemoveItem(product_id):
                lines = tuple(ln for ln in self._state.lines if ln.product_id != product_id)
                return self._apply(CartState(lines), CartOutcome(None))
            case ClearCart():
                return self._apply(CartState(), CartOutcome(None))

    def _add(self, line: CartLine) -> Result[CartOutcome, StorageError]:
        product = self._catalog.get_product(line.product_id)
        if product is None:
            return Ok(CartOutcome(None, CartNotice.UNKNOWN_PRODUCT))
        if product.stock < 1:
            return Ok(CartOutcome(self.line(line.product_id), CartNotice.OUT_OF_STOCK))

        existing = self.line(line.product_id)
        wanted = line.quantity + (existing.quantity if existing else 0)
        quantity = _clamp(wanted, product.stock)
        notice = CartNotice.CLAMPED_TO_STOCK if wanted > product.stock else CartNotice.NONE

        if existing is None:
            added = replace(line, quantity=quantity)
            lines = (*self._state.lines, added)
        else:
            added = replace(existing, quantity=quantity)
            lines = tuple(added if ln.product_id == line.product_id else ln for ln in self._state.lines)

        if notice is CartNotice.CLAMPED_TO_STOCK:
            logger.info("clamped %s to stock %d (wanted %d)", line.product_id, product.stock, wanted)
        return self._apply(CartState(lines), CartOutcome(added, notice))

    def _update(self, product_id: str, quantity: int) -> Result[CartOutcome, StorageError]:
        existing = self.line(product_id)
        if existing is None:
            return Ok(CartOutcome(None, CartNotice.NOT_IN_CART))
        product = self._catalog.get_product(product_id)
        if product is None:
            return Ok(CartOutcome(existing, CartNotice.UNKNOWN_PRODUCT))
        if product.stock < 1:
            return Ok(CartOutcome(existing, CartNotice.OUT_OF_STOCK))

        clamped = _clamp(quantity, product.stock)
        notice = CartNotice.CLAMPED_TO_STOCK if quantity > product.stock else CartNotice.NONE
        updated = replace(existing, quantity=clamped)
        lines = tuple(updated if ln.product_id == product_id else ln for ln in self._state.lines)
        return self._apply(CartState(lines), CartOutcome(updated, notice))

    def _apply(self, state: CartState, outcome: CartOutcome) -> Result[CartOutcome, StorageError]:
        match self._commit(state):
            case Ok(_):
                return Ok(outcome)
            case Error(err):
                return Error(err)


__all__ = (
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
)
