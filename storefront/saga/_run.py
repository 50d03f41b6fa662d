"""
Saga execution with automatic rollback.
"""

from __future__ import annotations

import logging
from typing import Any

from kungfu import Result, Ok, Error

from storefront.saga._types import (
    SagaStep,
    SagaExpr,
    SagaResult,
    SagaError,
    Then,
    Compensator,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Recorded Compensator
# ═══════════════════════════════════════════════════════════════════════════════

type RecordedCompensator = tuple[Any, Compensator[Any]]

# ═══════════════════════════════════════════════════════════════════════════════
# run_step() — Execute single step
# ═══════════════════════════════════════════════════════════════════════════════


def run_step[T, E](
    step: SagaStep[T, E],
    compensators: list[RecordedCompensator],
) -> Result[T, E]:
    """Execute single step, recording compensator on success."""
    result = step.action()
    match result:
        case Ok(value):
            if step.compensate is not None:
                compensators.append((value, step.compensate))
            return Ok(value)
        case Error(e):
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# run_compensators() — Rollback
# ═══════════════════════════════════════════════════════════════════════════════


def run_compensators(compensators: list[RecordedCompensator]) -> tuple[int, int]:
    """Run compensators in reverse. Returns (run, failed)."""
    comp_run = 0
    comp_failed = 0

    for value, comp in reversed(compensators):
        try:
            comp(value)
            comp_run += 1
        except Exception:
            logger.exception("compensator failed")
            comp_failed += 1

    return comp_run, comp_failed


# ═══════════════════════════════════════════════════════════════════════════════
# run() — Execute Saga
# ═══════════════════════════════════════════════════════════════════════════════


def run[T, E](saga: SagaExpr[T, E]) -> Result[SagaResult[T], SagaError[E]]:
    """
    Execute saga with automatic rollback on failure.

    On success: returns SagaResult with value and metadata.
    On failure: runs compensators in reverse, returns SagaError.

    Example:
        from storefront import saga as S

        placed = (
            S.step(clear_cart, restore_cart)
            .then(lambda _: S.step(deliver_order))
        )

        match S.run(placed):
            case Ok(r):
                print(f"Success: {r.value}")
            case Error(e):
                print(f"Failed at step {e.step_failed}")
    """
    compensators: list[RecordedCompensator] = []
    steps = 0

    def execute(expr: SagaExpr[Any, E]) -> Result[Any, E]:
        nonlocal steps
        match expr:
            case SagaStep():
                steps += 1
                return run_step(expr, compensators)
            case Then(inner, f):
                match execute(inner):
                    case Ok(value):
                        return execute(f(value))
                    case Error(e):
                        return Error(e)

    match execute(saga):
        case Ok(value):
            return Ok(SagaResult(
                value=value,
                steps_executed=steps,
                compensators_recorded=len(compensators),
            ))

        case Error(error):
            comp_run, comp_failed = run_compensators(compensators)
            if comp_run:
                logger.warning("rolled back %d step(s) after failure at step %d", comp_run, steps)

            return Error(SagaError(
                error=error,
                step_failed=steps,
                compensators_run=comp_run,
                compensators_failed=comp_failed,
                rollback_complete=comp_failed == 0,
            ))


__all__ = ("run", "run_step", "run_compensators")
