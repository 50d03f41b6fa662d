"""
Core types for storefront.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from decimal import Decimal

# Re-export from kungfu
from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type ProductId = str
"""Catalog key of a product."""

type Money = Decimal
"""Prices, subtotals and totals."""

type JsonValue = (
    None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
)
"""Structure accepted by storage backends."""

ZERO = Decimal("0")

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Aliases
    "ProductId",
    "Money",
    "JsonValue",
    "ZERO",
)
