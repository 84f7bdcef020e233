"""
Tests for the single-assignment Future / Promise.

Validates:
- a future settles exactly once and never changes afterwards
- continuations never miss a settlement
- chaining and the asyncio bridge
"""

from __future__ import annotations

import asyncio
import logging
import threading

from kungfu import Error, Nothing, Ok

from conftest import settle
from funclient import Future, create


def test_create_returns_pending_future_and_its_promise():
    future, promise = create()

    assert promise.future is future
    assert isinstance(future.wait(0.01), Nothing)


def test_resolve_settles_with_ok():
    future, promise = create()

    assert promise.resolve(42) is True
    assert settle(future) == Ok(42)


def test_reject_settles_with_error():
    future, promise = create()

    assert promise.reject("boom") is True
    assert settle(future) == Error("boom")


def test_second_settlement_is_a_noop():
    future, promise = create()
    promise.resolve(1)

    assert promise.resolve(2) is False
    assert promise.reject("late") is False
    assert promise.complete(Ok(3)) is False
    assert settle(future) == Ok(1)


def test_continuation_attached_after_settlement_runs_immediately():
    future, promise = create()
    promise.resolve("done")
    seen = []

    future.on_settle(seen.append)

    assert seen == [Ok("done")]


def test_continuations_run_once_in_attachment_order():
    future, promise = create()
    seen = []
    future.on_settle(lambda result: seen.append(("first", result)))
    future.on_settle(lambda result: seen.append(("second", result)))

    promise.resolve(7)
    promise.resolve(8)

    assert seen == [("first", Ok(7)), ("second", Ok(7))]


def test_failing_continuation_does_not_block_the_others(caplog):
    future, promise = create()
    seen = []

    def explode(result):
        raise RuntimeError("continuation bug")

    future.on_settle(explode)
    future.on_settle(seen.append)

    with caplog.at_level(logging.ERROR, logger="funclient.future.promise"):
        promise.resolve(1)

    assert seen == [Ok(1)]
    assert "continuation" in caplog.text


def test_concurrent_settlement_has_exactly_one_winner():
    future, promise = create()
    barrier = threading.Barrier(16)
    wins = []

    def contender(value):
        barrier.wait()
        if promise.resolve(value):
            wins.append(value)

    threads = [threading.Thread(target=contender, args=(n,)) for n in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(wins) == 1
    assert settle(future) == Ok(wins[0])


def test_attach_racing_settlement_never_misses_a_notification():
    future, promise = create()
    calls = []
    lock = threading.Lock()
    barrier = threading.Barrier(33)

    def observer():
        barrier.wait()

        def record(result):
            with lock:
                calls.append(result)

        future.on_settle(record)

    def settler():
        barrier.wait()
        promise.resolve("value")

    threads = [threading.Thread(target=observer) for _ in range(32)]
    threads.append(threading.Thread(target=settler))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [Ok("value")] * 32


def test_wait_returns_result_settled_from_another_thread():
    future, promise = create()
    timer = threading.Timer(0.05, promise.resolve, args=("late",))
    timer.start()

    assert settle(future) == Ok("late")
    timer.join()


def test_settled_future_is_already_settled():
    future = Future.settled(Error("nope"))

    assert future.wait(0).unwrap() == Error("nope")


def test_map_and_map_err():
    ok_future, ok_promise = create()
    err_future, err_promise = create()
    doubled = ok_future.map(lambda n: n * 2)
    labelled = err_future.map_err(lambda e: f"wrapped: {e}")

    ok_promise.resolve(21)
    err_promise.reject("boom")

    assert settle(doubled) == Ok(42)
    assert settle(labelled) == Error("wrapped: boom")


def test_then_result_short_circuits_on_error():
    future, promise = create()
    steps = []

    def step(value):
        steps.append(value)
        return Ok(value + 1)

    chained = future.then_result(step)
    promise.reject("transport down")

    assert settle(chained) == Error("transport down")
    assert steps == []


def test_then_chains_another_future():
    first, first_promise = create()
    second, second_promise = create()
    chained = first.then(lambda value: second.map(lambda other: value + other))

    first_promise.resolve(1)
    assert isinstance(chained.wait(0.01), Nothing)
    second_promise.resolve(2)

    assert settle(chained) == Ok(3)


def test_future_can_be_awaited():
    future, promise = create()

    async def main():
        threading.Timer(0.05, promise.resolve, args=("async",)).start()
        return await future

    assert asyncio.run(main()) == Ok("async")


def test_to_lazy_composes_with_kungfu():
    async def main():
        future, promise = create()
        lazy = future.to_lazy().map(lambda n: n + 1)
        asyncio.get_running_loop().call_later(0.01, promise.resolve, 10)
        return await lazy

    assert asyncio.run(main()) == Ok(11)


def test_raising_step_rejects_the_derived_future(caplog):
    future, promise = create()
    looked_up = future.map(lambda value: value["missing"])
    relabelled = future.map_err(lambda error: error.missing)
    decoded = future.then_result(lambda value: Ok(1 // 0))

    with caplog.at_level(logging.ERROR, logger="funclient.future.promise"):
        promise.resolve({})

    assert isinstance(settle(looked_up).unwrap_err(), KeyError)
    assert settle(relabelled) == Ok({})
    assert isinstance(settle(decoded).unwrap_err(), ZeroDivisionError)
    assert "step failed" in caplog.text


def test_raising_error_mapper_rejects_the_derived_future():
    future, promise = create()
    relabelled = future.map_err(lambda error: error.missing)

    promise.reject("boom")

    assert isinstance(settle(relabelled).unwrap_err(), AttributeError)


def test_then_step_that_raises_rejects_instead_of_hanging():
    future, promise = create()

    def broken(value):
        raise LookupError(value)

    chained = future.then(broken)
    promise.resolve("id")

    err = settle(chained).unwrap_err()
    assert isinstance(err, LookupError)
    assert err.args == ("id",)
