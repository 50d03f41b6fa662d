"""
Saga types — core data structures.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Result

# ═══════════════════════════════════════════════════════════════════════════════
# Action / Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type Action[T, E] = Callable[[], Result[T, E]]
"""Deferred operation that may fail."""

type Compensator[T] = Callable[[T], None]
"""Compensation function that receives the action result and undoes it."""

# ═══════════════════════════════════════════════════════════════════════════════
# SagaStep — Single Step with Compensation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SagaStep[T, E]:
    """
    A single saga step: action + compensator.

    When action succeeds, compensator is recorded.
    If later step fails, compensators run in reverse.
    """

    action: Action[T, E]
    compensate: Compensator[T] | None

    def then[U](self, f: Callable[[T], SagaStep[U, E]]) -> Then[T, U, E]:
        """Chain another saga step after this one."""
        return Then(self, f)


# ═══════════════════════════════════════════════════════════════════════════════
# Saga AST — Composition
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Then[T, U, E]:
    """Sequential composition (monadic bind)."""

    inner: SagaStep[T, E] | Then[object, T, E]
    f: Callable[[T], SagaStep[U, E]]

    def then[V](self, g: Callable[[U], SagaStep[V, E]]) -> Then[U, V, E]:
        return Then(self, g)


type SagaExpr[T, E] = SagaStep[T, E] | Then[object, T, E]

# ═══════════════════════════════════════════════════════════════════════════════
# Result Types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SagaResult[T]:
    """Successful saga result with metadata."""

    value: T
    steps_executed: int
    compensators_recorded: int


@dataclass(frozen=True, slots=True)
class SagaError[E]:
    """Saga error with rollback status."""

    error: E
    step_failed: int
    compensators_run: int
    compensators_failed: int
    rollback_complete: bool


__all__ = (
    "Action",
    "Compensator",
    "SagaStep",
    "Then",
    "SagaExpr",
    "SagaResult",
    "SagaError",
)
