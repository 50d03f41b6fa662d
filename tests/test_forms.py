import pytest

from storefront.forms import (
    AddressForm,
    ContactForm,
    PaymentForm,
    ReviewForm,
    ShippingMethod,
    SignUpForm,
    format_expiry_date,
    validate,
)

from tests.conftest import err, ok


def _messages(errors):
    return {e.field: e.message for e in errors}


def test_contact_valid(contact_data):
    form = ok(validate(ContactForm, contact_data))

    assert form.email == "jane.doe@mail.com"


def test_contact_errors_per_field(contact_data):
    data = contact_data | {"first_name": "J", "email": "not-an-email", "phone": "555"}

    fields = _messages(err(validate(ContactForm, data)))

    assert set(fields) == {"first_name", "email", "phone"}


def test_address_defaults_to_standard(address_data):
    data = {k: v for k, v in address_data.items() if k != "shipping_method"}

    assert ok(validate(AddressForm, data)).shipping_method is ShippingMethod.STANDARD


def test_address_rejects_unknown_shipping(address_data):
    fields = _messages(err(validate(AddressForm, address_data | {"shipping_method": "drone"})))

    assert "shipping_method" in fields


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("card_number", "4111 1111 1111 1111", "Invalid card number"),
        ("card_number", "411111111111", "Invalid card number"),
        ("expiry_date", "13/29", "Invalid expiry date"),
        ("expiry_date", "1229", "Invalid expiry date"),
        ("cvv", "12", "Invalid CVV"),
        ("cvv", "12a", "Invalid CVV"),
    ],
)
def test_payment_rules(payment_data, field, value, message):
    fields = _messages(err(validate(PaymentForm, payment_data | {field: value})))

    assert fields == {field: message}


def test_payment_masking(payment_data):
    assert ok(validate(PaymentForm, payment_data)).masked == "****4242"


def test_four_digit_cvv(payment_data):
    ok(validate(PaymentForm, payment_data | {"cvv": "1234"}))


def test_format_expiry_date():
    assert format_expiry_date("1226") == "12/26"
    assert format_expiry_date("12/2") == "12/2"
    assert format_expiry_date("1") == "1"


def test_sign_up_password_mismatch():
    data = {
        "name": "Jane Doe",
        "email": "jane@mail.com",
        "password": "secret1",
        "confirm_password": "secret2",
    }

    assert _messages(err(validate(SignUpForm, data))) == {"confirm_password": "Passwords don't match"}


def test_review_form():
    form = ok(validate(ReviewForm, {"user_name": "Kai", "rating": 4}))
    assert form.comment == ""
    assert len(form.date) == 10

    fields = _messages(err(validate(ReviewForm, {"user_name": "  ", "rating": 6})))
    assert fields["user_name"] == "Name is required"
    assert "rating" in fields
