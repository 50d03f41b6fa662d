"""
User store — the single active profile.

A profile being present means the user is signed in. Every mutation except
`set_user` and `logout` is a no-op while signed out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields, replace
from typing import Any

from kungfu import Result, Ok, Error
from pydantic import TypeAdapter

from storefront.storage import USER, Storage, StorageError
from storefront.stores._base import PersistentStore

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Profile
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    card_number: str
    card_holder: str
    expiry_date: str  # MM/YY
    cvv: str

    @property
    def last4(self) -> str:
        return self.card_number[-4:]


@dataclass(frozen=True, slots=True)
class UserProfile:
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    address: Address | None = None
    payment_methods: tuple[PaymentMethod, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


_PROFILE_FIELDS = frozenset(f.name for f in fields(UserProfile))


@dataclass(frozen=True, slots=True)
class UserState:
    user: UserProfile | None = None
    is_authenticated: bool = False


_adapter = TypeAdapter(UserState)

# ═══════════════════════════════════════════════════════════════════════════════
# Store
# ═══════════════════════════════════════════════════════════════════════════════


class UserStore(PersistentStore[UserState]):
    namespace = USER

    def __init__(self, storage: Storage) -> None:
        super().__init__(storage, _adapter, UserState())

    def _normalize(self, state: UserState) -> UserState:
        return UserState(state.user, state.user is not None)

    @property
    def user(self) -> UserProfile | None:
        return self._state.user

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    def set_user(self, profile: UserProfile) -> Result[UserProfile | None, StorageError]:
        return self._apply(UserState(profile, True))

    def update_profile(self, **changes: Any) -> Result[UserProfile | None, StorageError]:
        """Shallow-merge fields into the current profile."""
        unknown = changes.keys() - _PROFILE_FIELDS
        if unknown:
            logger.warning("ignoring unknown profile fields: %s", sorted(unknown))
        known = {k: v for k, v in changes.items() if k in _PROFILE_FIELDS}
        return self._edit(lambda u: replace(u, **known))

    def update_address(self, address: Address) -> Result[UserProfile | None, StorageError]:
        return self._edit(lambda u: replace(u, address=address))

    def add_payment_method(self, method: PaymentMethod) -> Result[UserProfile | None, StorageError]:
        return self._edit(lambda u: replace(u, payment_methods=(*u.payment_methods, method)))

    def remove_payment_method(self, card_number: str) -> Result[UserProfile | None, StorageError]:
        return self._edit(
            lambda u: replace(
                u,
                payment_methods=tuple(
                    m for m in u.payment_methods if m.card_number != card_number
                ),
            )
        )

    def logout(self) -> Result[UserProfile | None, StorageError]:
        return self._apply(UserState())

    def _edit(self, change: Callable[[UserProfile], UserProfile]) -> Result[UserProfile | None, StorageError]:
        user = self._state.user
        if user is None:
            return Ok(None)
        return self._apply(UserState(change(user), True))

    def _apply(self, state: UserState) -> Result[UserProfile | None, StorageError]:
        match self._commit(state):
            case Ok(committed):
                return Ok(committed.user)
            case Error(err):
                return Error(err)


__all__ = (
    "Address",
    "PaymentMethod",
    "UserProfile",
    "UserState",
    "UserStore",
)
