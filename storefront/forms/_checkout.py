"""
Checkout stage schemas.
"""

from __future__ import annotations

import re
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

_CARD_NUMBER = re.compile(r"[0-9]{16}")
_EXPIRY_DATE = re.compile(r"(0[1-9]|1[0-2])/[0-9]{2}")
_CVV = re.compile(r"[0-9]{3,4}")

# ═══════════════════════════════════════════════════════════════════════════════
# Shipping
# ═══════════════════════════════════════════════════════════════════════════════


class ShippingMethod(StrEnum):
    STANDARD = "standard"
    EXPRESS = "express"
    OVERNIGHT = "overnight"


SHIPPING_RATES = MappingProxyType({
    ShippingMethod.STANDARD: Decimal("10"),
    ShippingMethod.EXPRESS: Decimal("25"),
    ShippingMethod.OVERNIGHT: Decimal("50"),
})

# ═══════════════════════════════════════════════════════════════════════════════
# Stage Forms
# ═══════════════════════════════════════════════════════════════════════════════


class ContactForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., min_length=2)
    last_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., min_length=10)


class AddressForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    zip_code: str = Field(..., min_length=5)
    country: str = Field(..., min_length=2)
    shipping_method: ShippingMethod = ShippingMethod.STANDARD


class PaymentForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    card_number: str
    card_holder: str = Field(..., min_length=2)
    expiry_date: str = Field(..., description="MM/YY")
    cvv: str

    @field_validator("card_number")
    @classmethod
    def check_card_number(cls, v: str) -> str:
        if not _CARD_NUMBER.fullmatch(v):
            raise PydanticCustomError("card_number", "Invalid card number")
        return v

    @field_validator("expiry_date")
    @classmethod
    def check_expiry_date(cls, v: str) -> str:
        if not _EXPIRY_DATE.fullmatch(v):
            raise PydanticCustomError("expiry_date", "Invalid expiry date")
        return v

    @field_validator("cvv")
    @classmethod
    def check_cvv(cls, v: str) -> str:
        if not _CVV.fullmatch(v):
            raise PydanticCustomError("cvv", "Invalid CVV")
        return v

    @property
    def masked(self) -> str:
        return "****" + self.card_number[-4:]


def format_expiry_date(raw: str) -> str:
    """Keystroke formatter for the expiry input: '1226' -> '12/26'."""
    digits = re.sub(r"\D", "", raw)
    if len(digits) >= 2:
        return digits[:2] + "/" + digits[2:4]
    return digits


__all__ = (
    "ShippingMethod",
    "SHIPPING_RATES",
    "ContactForm",
    "AddressForm",
    "PaymentForm",
    "format_expiry_date",
)
