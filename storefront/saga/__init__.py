"""
Saga — multi-step commits with compensation.

    from storefront import saga as S

    saga = S.step(action, compensate).then(lambda v: S.step(action2, compensate2))
    result = S.run(saga)
"""

from __future__ import annotations

from storefront.saga._types import (
    Action,
    Compensator,
    SagaStep,
    SagaExpr,
    SagaResult,
    SagaError,
    Then,
)
from storefront.saga._step import step, from_callable
from storefront.saga._run import run, run_step, run_compensators

__all__ = (
    "Action",
    "Compensator",
    "SagaStep",
    "SagaExpr",
    "SagaResult",
    "SagaError",
    "Then",
    "step",
    "from_callable",
    "run",
    "run_step",
    "run_compensators",
)
