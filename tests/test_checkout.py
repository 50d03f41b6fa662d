from dataclasses import replace
from decimal import Decimal

import pytest

from storefront.catalog import MemoryCatalog
from storefront.checkout import Checkout, CheckoutErrorKind, OrderSource, Stage
from storefront.forms import ShippingMethod
from storefront.stores import Address, CartStore, PaymentMethod, UserProfile

from tests.conftest import FIXED_NOW, FailingHandoff, err, ok


@pytest.fixture
def filled_cart(cart, line_of):
    # 8 x 12.50 = 100.00
    ok(cart.add_item(line_of("p5", 8)))
    return cart


def _through_address(flow, contact_data, address_data):
    assert ok(flow.submit_contact(contact_data)) is Stage.ADDRESS
    assert ok(flow.submit_address(address_data)) is Stage.PAYMENT


def test_happy_path(filled_cart, make_checkout, inbox, contact_data, address_data, payment_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    assert ok(flow.submit_payment(payment_data)) is Stage.PLACED

    order = inbox.take()
    assert order is flow.order
    assert order.order_id.startswith("ORD")
    assert len(order.order_id) == 15
    assert order.order_id[3:] == order.order_id[3:].upper()
    assert order.subtotal == Decimal("100.00")
    assert order.shipping_cost == Decimal("25")
    assert order.total == Decimal("125.00")
    assert order.masked_card == "****4242"
    assert order.card_holder == "Jane Doe"
    assert order.order_date == FIXED_NOW
    assert order.source is OrderSource.CART
    assert order.contact.full_name == "Jane Doe"


def test_cart_checkout_clears_cart(storage, catalog, filled_cart, make_checkout, contact_data, address_data, payment_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)
    ok(flow.submit_payment(payment_data))

    assert filled_cart.lines == ()
    assert CartStore(storage, catalog).lines == ()


def test_buy_now_leaves_cart(storage, catalog, filled_cart, make_checkout, line_of, inbox, contact_data, address_data, payment_data):
    before = filled_cart.lines
    flow = make_checkout(buy_now=line_of("p1", 1))
    _through_address(flow, contact_data, address_data)

    ok(flow.submit_payment(payment_data))

    order = inbox.take()
    assert [ln.product_id for ln in order.items] == ["p1"]
    assert order.source is OrderSource.BUY_NOW
    assert order.total == Decimal("224.99")
    assert filled_cart.lines == before
    assert CartStore(storage, catalog).lines == before


def test_invalid_stage_leaves_draft(make_checkout, contact_data):
    flow = make_checkout()

    error = err(flow.submit_contact(contact_data | {"phone": "123"}))

    assert error.kind is CheckoutErrorKind.VALIDATION
    assert [f.field for f in error.fields] == ["phone"]
    assert flow.stage is Stage.CONTACT
    assert flow.draft.contact is None


def test_stage_locked_until_previous_complete(make_checkout, address_data, payment_data):
    flow = make_checkout()

    assert err(flow.submit_address(address_data)).kind is CheckoutErrorKind.STAGE_LOCKED
    assert err(flow.submit_payment(payment_data)).kind is CheckoutErrorKind.STAGE_LOCKED
    assert err(flow.go_to(Stage.PAYMENT)).kind is CheckoutErrorKind.STAGE_LOCKED
    assert not flow.reachable(Stage.ADDRESS)


def test_revisit_and_resubmit(filled_cart, make_checkout, contact_data, address_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    assert ok(flow.go_to(Stage.CONTACT)) is Stage.CONTACT
    assert ok(flow.submit_contact(contact_data | {"first_name": "Janet"})) is Stage.ADDRESS

    assert flow.draft.contact.first_name == "Janet"
    assert flow.draft.address is not None
    assert flow.reachable(Stage.PAYMENT)


def test_live_totals_follow_shipping(filled_cart, make_checkout):
    flow = make_checkout()

    assert flow.total == Decimal("110.00")
    flow.select_shipping(ShippingMethod.OVERNIGHT)
    assert flow.shipping_cost == Decimal("50")
    assert flow.total == Decimal("150.00")


def test_closed_after_placement(filled_cart, make_checkout, contact_data, address_data, payment_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)
    ok(flow.submit_payment(payment_data))

    assert flow.is_closed
    assert flow.draft is None
    assert err(flow.submit_contact(contact_data)).kind is CheckoutErrorKind.CLOSED
    assert err(flow.submit_payment(payment_data)).kind is CheckoutErrorKind.CLOSED
    assert err(flow.go_to(Stage.CONTACT)).kind is CheckoutErrorKind.CLOSED


def test_empty_cart(make_checkout, contact_data, address_data, payment_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    assert err(flow.submit_payment(payment_data)).kind is CheckoutErrorKind.EMPTY
    assert flow.stage is Stage.PAYMENT


def test_handoff_failure_restores_cart(storage, catalog, filled_cart, make_checkout, contact_data, address_data, payment_data):
    before = filled_cart.lines
    handoff = FailingHandoff()
    flow = make_checkout(handoff=handoff)
    _through_address(flow, contact_data, address_data)

    error = err(flow.submit_payment(payment_data))

    assert error.kind is CheckoutErrorKind.PLACEMENT
    assert handoff.calls == 1
    assert filled_cart.lines == before
    assert CartStore(storage, catalog).lines == before
    assert flow.stage is Stage.PAYMENT
    assert flow.order is None


def test_recheck_stock_catches_cart_lines(cart, users, catalog, inbox, line_of, contact_data, address_data, payment_data):
    ok(cart.add_item(line_of("p2", 6)))
    before = cart.lines
    sold_down = MemoryCatalog(
        replace(p, stock=2) if p.id == "p2" else p for p in catalog.list()
    )
    flow = Checkout(cart, users, sold_down, inbox, recheck_stock=True)
    _through_address(flow, contact_data, address_data)

    error = err(flow.submit_payment(payment_data))

    assert error.kind is CheckoutErrorKind.OUT_OF_STOCK
    assert "Smart Watch" in error.message
    assert cart.lines == before
    assert inbox.take() is None


def test_buy_now_over_stock_rejected_without_recheck(line_of, make_checkout, inbox, contact_data, address_data, payment_data):
    flow = make_checkout(buy_now=replace(line_of("p3"), quantity=10))
    _through_address(flow, contact_data, address_data)

    error = err(flow.submit_payment(payment_data))

    assert error.kind is CheckoutErrorKind.OUT_OF_STOCK
    assert flow.stage is Stage.PAYMENT
    assert inbox.take() is None


@pytest.mark.parametrize("quantity", [0, -2])
def test_buy_now_quantity_below_one_rejected(line_of, make_checkout, inbox, contact_data, address_data, payment_data, quantity):
    flow = make_checkout(buy_now=replace(line_of("p1"), quantity=quantity))
    _through_address(flow, contact_data, address_data)

    error = err(flow.submit_payment(payment_data))

    assert error.kind is CheckoutErrorKind.OUT_OF_STOCK
    assert "Wireless Headphones" in error.message
    assert flow.order is None
    assert inbox.take() is None


def test_buy_now_at_stock_is_placed(line_of, make_checkout, inbox, contact_data, address_data, payment_data):
    flow = make_checkout(buy_now=line_of("p3", 3))
    _through_address(flow, contact_data, address_data)

    assert ok(flow.submit_payment(payment_data)) is Stage.PLACED
    assert inbox.take().items[0].quantity == 3


def test_shipping_changed_after_address_is_charged(filled_cart, make_checkout, inbox, contact_data, address_data, payment_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    flow.select_shipping(ShippingMethod.OVERNIGHT)
    shown = flow.total
    ok(flow.submit_payment(payment_data))

    order = inbox.take()
    assert shown == Decimal("150.00")
    assert order.total == shown
    assert order.shipping_method is ShippingMethod.OVERNIGHT
    assert order.shipping_cost == Decimal("50")


def test_defaults_from_profile(users, make_checkout):
    flow = make_checkout()
    assert flow.contact_defaults() == {}
    assert flow.address_defaults() == {"shipping_method": "standard"}

    users.set_user(UserProfile(id="user-1", email="jane@mail.com", first_name="Jane", last_name="Doe", phone="5551234567"))
    users.update_address(Address("12 Main Street", "Springfield", "IL", "62701", "US"))

    assert flow.contact_defaults()["email"] == "jane@mail.com"
    assert flow.address_defaults()["zip_code"] == "62701"


def test_autofill_submits_saved_card(filled_cart, make_checkout, inbox, contact_data, address_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    flow.autofill_payment(PaymentMethod("5500000000000004", "Jane Doe", "07/28", "321"))

    assert ok(flow.submit_payment()) is Stage.PLACED
    assert inbox.take().masked_card == "****0004"


def test_autofill_is_validated_on_submit(filled_cart, make_checkout, contact_data, address_data):
    flow = make_checkout()
    _through_address(flow, contact_data, address_data)

    fields = flow.autofill_payment(PaymentMethod("1234", "J", "7/28", "1"))

    assert fields["card_number"] == "1234"
    error = err(flow.submit_payment())
    assert error.kind is CheckoutErrorKind.VALIDATION
    assert {f.field for f in error.fields} == {"card_number", "card_holder", "expiry_date", "cvv"}
