from kungfu import Error, Ok

from storefront import saga as S

from tests.conftest import err, ok


def test_steps_run_in_order():
    log = []

    def record(name, value):
        def action():
            log.append(name)
            return Ok(value)

        return S.step(action)

    saga = (
        record("a", 1)
        .then(lambda a: record("b", a + 1))
        .then(lambda b: S.step(lambda: Ok(b * 10)))
    )

    result = ok(S.run(saga))

    assert result.value == 20
    assert result.steps_executed == 3
    assert log == ["a", "b"]


def test_failure_compensates_in_reverse():
    undone = []

    saga = (
        S.step(lambda: Ok("first"), compensate=undone.append)
        .then(lambda _: S.step(lambda: Ok("second"), compensate=undone.append))
        .then(lambda _: S.step(lambda: Error("boom")))
    )

    failure = err(S.run(saga))

    assert failure.error == "boom"
    assert failure.step_failed == 3
    assert undone == ["second", "first"]
    assert failure.compensators_run == 2
    assert failure.rollback_complete


def test_failing_compensator_is_counted():
    def explode(_):
        raise RuntimeError("cannot undo")

    saga = S.step(lambda: Ok(1), compensate=explode).then(lambda _: S.step(lambda: Error("x")))

    failure = err(S.run(saga))

    assert failure.compensators_failed == 1
    assert not failure.rollback_complete


def test_from_callable_wraps_exceptions():
    def deliver():
        raise ValueError("no inbox")

    failure = err(S.run(S.from_callable(deliver, on_error=lambda e: f"handoff: {e}")))

    assert failure.error == "handoff: no inbox"
    assert failure.compensators_run == 0


def test_from_callable_success():
    assert ok(S.run(S.from_callable(lambda: 42, on_error=str))).value == 42
