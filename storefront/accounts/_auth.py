"""
Sign-in, sign-up and password reset.

There is no credential check; a valid form signs the user in with a fresh
profile. Passwords are validated and then dropped.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from kungfu import Result, Ok, Error

from storefront.forms import FieldErrors, ResetPasswordForm, SignInForm, SignUpForm, validate
from storefront.stores import UserProfile, UserStore

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class AccountErrorKind(Enum):
    """Account error kinds."""
    VALIDATION = auto()
    STORAGE = auto()


@dataclass(frozen=True, slots=True)
class AccountError:
    """Account operation error."""
    kind: AccountErrorKind
    message: str
    fields: FieldErrors = ()


def _invalid(errors: FieldErrors) -> AccountError:
    return AccountError(AccountErrorKind.VALIDATION, "Invalid account details", errors)


# ═══════════════════════════════════════════════════════════════════════════════
# Flows
# ═══════════════════════════════════════════════════════════════════════════════


def new_user_id() -> str:
    return f"user-{uuid.uuid4().hex[:12]}"


def split_name(name: str) -> tuple[str, str]:
    """'Ada King Lovelace' -> ('Ada', 'King Lovelace')."""
    first, _, rest = name.strip().partition(" ")
    return first, rest.strip()


def _activate(users: UserStore, profile: UserProfile) -> Result[UserProfile, AccountError]:
    match users.set_user(profile):
        case Ok(_):
            logger.info("signed in %s", profile.id)
            return Ok(profile)
        case Error(err):
            return Error(AccountError(AccountErrorKind.STORAGE, err.message))


def sign_in(users: UserStore, data: Mapping[str, Any]) -> Result[UserProfile, AccountError]:
    match validate(SignInForm, data):
        case Error(errors):
            return Error(_invalid(errors))
        case Ok(form):
            return _activate(users, UserProfile(id=new_user_id(), email=form.email))


def sign_up(users: UserStore, data: Mapping[str, Any]) -> Result[UserProfile, AccountError]:
    match validate(SignUpForm, data):
        case Error(errors):
            return Error(_invalid(errors))
        case Ok(form):
            first, last = split_name(form.name)
            return _activate(
                users,
                UserProfile(id=new_user_id(), email=form.email, first_name=first, last_name=last),
            )


def reset_password(data: Mapping[str, Any]) -> Result[str, AccountError]:
    """Validate a reset request. Returns the email; nothing is changed."""
    match validate(ResetPasswordForm, data):
        case Error(errors):
            return Error(_invalid(errors))
        case Ok(form):
            logger.info("password reset requested")
            return Ok(form.email)


__all__ = (
    "AccountErrorKind",
    "AccountError",
    "new_user_id",
    "split_name",
    "sign_in",
    "sign_up",
    "reset_password",
)
