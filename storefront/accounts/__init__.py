"""
Accounts — sign-in, sign-up and password reset flows.

    from storefront import accounts as A

    match A.sign_up(users, {"name": "Ada Lovelace", ...}):
        case Ok(profile): ...
        case Error(A.AccountError(fields=fields)): ...
"""

from __future__ import annotations

from storefront.accounts._auth import (
    AccountErrorKind,
    AccountError,
    new_user_id,
    split_name,
    sign_in,
    sign_up,
    reset_password,
)

__all__ = (
    "AccountErrorKind",
    "AccountError",
    "new_user_id",
    "split_name",
    "sign_in",
    "sign_up",
    "reset_password",
)
