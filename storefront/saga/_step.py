"""
Saga step creation.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result, Ok, Error

from storefront.saga._types import Action, Compensator, SagaStep


def step[T, E](
    action: Action[T, E],
    compensate: Compensator[T] | None = None,
) -> SagaStep[T, E]:
    """
    Create a compensated saga step.

    Args:
        action: The operation to perform, returning a Result
        compensate: The compensation action if rollback needed

    Example:
        from storefront import saga as S

        clear = S.step(
            action=lambda: cart.clear(),
            compensate=lambda _: cart.restore(snapshot),
        )
        placed = clear.then(lambda _: S.step(lambda: deliver(order)))
    """
    return SagaStep(action=action, compensate=compensate)


def from_callable[T, E](
    fn: Callable[[], T],
    on_error: Callable[[Exception], E],
    compensate: Compensator[T] | None = None,
) -> SagaStep[T, E]:
    """
    Create step from a plain callable; exceptions become Error(on_error(e)).

    Example:
        S.from_callable(
            lambda: inbox.deliver(order),
            on_error=lambda e: PlacementError(str(e)),
        )
    """

    def action() -> Result[T, E]:
        try:
            return Ok(fn())
        except Exception as e:
            return Error(on_error(e))

    return SagaStep(action=action, compensate=compensate)


__all__ = ("step", "from_callable")
