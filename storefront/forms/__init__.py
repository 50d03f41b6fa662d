"""
Forms — validation schemas for everything the user types.

    from storefront import forms as F

    match F.validate(F.ContactForm, data):
        case Ok(contact): ...
        case Error(errors): ...
"""

from __future__ import annotations

from storefront.forms._validate import FieldError, FieldErrors, field_errors, validate
from storefront.forms._checkout import (
    ShippingMethod,
    SHIPPING_RATES,
    ContactForm,
    AddressForm,
    PaymentForm,
    format_expiry_date,
)
from storefront.forms._account import (
    SignInForm,
    SignUpForm,
    ResetPasswordForm,
    ReviewForm,
)

__all__ = (
    "FieldError",
    "FieldErrors",
    "field_errors",
    "validate",
    "ShippingMethod",
    "SHIPPING_RATES",
    "ContactForm",
    "AddressForm",
    "PaymentForm",
    "format_expiry_date",
    "SignInForm",
    "SignUpForm",
    "ResetPasswordForm",
    "ReviewForm",
)
