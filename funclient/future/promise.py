"""
Future / Promise
================

Single-assignment result container.

A `Promise` is the write side (resolve / reject, exactly once), a `Future`
is the read side (continuations, scoped blocking wait, await). The settled
state is a kungfu `Result`: `Ok(value)` or `Error(error)`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .._types import Continuation

logger = logging.getLogger(__name__)


class Future[T, E]:
    """
    Read side of a single-assignment result.

    Pending until its promise settles it, then `Ok(value)` or `Error(error)`
    forever. There is no polling accessor: observe it with `on_settle`,
    `wait`, or `await`.
    """

    __slots__ = ("_lock", "_result", "_continuations", "_settled")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result: Result[T, E] | None = None
        self._continuations: list[Continuation[T, E]] = []
        self._settled = threading.Event()

    @staticmethod
    def settled[V, Err](result: Result[V, Err]) -> Future[V, Err]:
        """Future that is already settled with `result`."""
        future: Future[V, Err] = Future()
        future._settle(result)
        return future

    # Settlement (used by Promise)

    def _settle(self, result: Result[T, E]) -> bool:
        with self._lock:
            if self._result is not None:
                return False
            self._result = result
            continuations, self._continuations = self._continuations, []
        self._settled.set()
        for continuation in continuations:
            _run_continuation(continuation, result)
        return True

    # Observation

    def on_settle(self, continuation: Continuation[T, E], /) -> None:
        """
        Call `continuation(result)` once the future is settled.

        If it is already settled, the continuation runs right away in the
        calling thread, so a notification is never missed.
        """
        with self._lock:
            if self._result is None:
                self._continuations.append(continuation)
                return
            result = self._result
        _run_continuation(continuation, result)

    def wait(self, timeout: float | None = None) -> Option[Result[T, E]]:
        """
        Block until settled. `Nothing()` if `timeout` elapsed first.

        NOTE: never call this from the thread that is expected to settle the
        future (e.g. inside a continuation run by the client's executor).
        """
        if not self._settled.wait(timeout):
            return Nothing()
        return Some(typing.cast("Result[T, E]", self._result))

    # Chaining
    #
    # A step that raises rejects the derived future with the exception, so a
    # derived future settles whenever its source does.

    def map[U](self, f: Callable[[T], U], /) -> Future[U, E]:
        """Apply `f` to the value once resolved."""
        promise: Promise[U, E] = Promise()
        self.on_settle(lambda result: _complete_with(promise, lambda: result.map(f)))
        return promise.future

    def map_err[F](self, f: Callable[[E], F], /) -> Future[T, F]:
        """Apply `f` to the error once rejected."""
        promise: Promise[T, F] = Promise()
        self.on_settle(lambda result: _complete_with(promise, lambda: result.map_err(f)))
        return promise.future

    def then_result[U](self, f: Callable[[T], Result[U, E]], /) -> Future[U, E]:
        """Chain a synchronous Result-returning step (e.g. a decoder)."""
        promise: Promise[U, E] = Promise()
        self.on_settle(lambda result: _complete_with(promise, lambda: result.then(f)))
        return promise.future

    def then[U](self, f: Callable[[T], Future[U, E]], /) -> Future[U, E]:
        """Monadic bind: chain another asynchronous step."""
        promise: Promise[U, E] = Promise()

        def step(result: Result[T, E]) -> None:
            match result:
                case Ok(value):
                    try:
                        following = f(value)
                    except Exception as exc:
                        logger.exception("Future step %r failed", f)
                        promise.complete(Error(typing.cast("E", exc)))
                        return
                    following.on_settle(promise.complete)
                case Error(_):
                    promise.complete(result)

        self.on_settle(step)
        return promise.future

    # Async bridge

    def to_lazy(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult, settled on the awaiting loop."""

        async def wrapper() -> Result[T, E]:
            loop = asyncio.get_running_loop()
            waiter: asyncio.Future[Result[T, E]] = loop.create_future()

            def deliver(result: Result[T, E]) -> None:
                loop.call_soon_threadsafe(_set_waiter, waiter, result)

            self.on_settle(deliver)
            return await waiter

        return LazyCoroResult(wrapper)

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await on the future."""
        return self.to_lazy()().__await__()

    def __repr__(self) -> str:
        state = "pending" if self._result is None else repr(self._result)
        return f"Future({state})"


class Promise[T, E]:
    """
    Write side of a `Future`.

    The first of resolve / reject / complete wins; later calls return False
    and leave the settled result untouched.
    """

    __slots__ = ("_future",)

    def __init__(self) -> None:
        self._future: Future[T, E] = Future()

    @property
    def future(self) -> Future[T, E]:
        return self._future

    def complete(self, result: Result[T, E], /) -> bool:
        settled = self._future._settle(result)
        if not settled:
            logger.debug("Ignoring %r: future already settled", result)
        return settled

    def resolve(self, value: T, /) -> bool:
        return self.complete(Ok(value))

    def reject(self, error: E, /) -> bool:
        return self.complete(Error(error))


def create[T, E]() -> tuple[Future[T, E], Promise[T, E]]:
    """Fresh pending future plus the promise that settles it."""
    promise: Promise[T, E] = Promise()
    return promise.future, promise


def _run_continuation[T, E](continuation: Continuation[T, E], result: Result[T, E]) -> None:
    try:
        continuation(result)
    except Exception:
        logger.exception("Future continuation %r failed", continuation)


def _complete_with[T, E](promise: Promise[T, E], compute: Callable[[], Result[T, E]]) -> None:
    try:
        outcome = compute()
    except Exception as exc:
        logger.exception("Future step failed")
        promise.complete(Error(typing.cast("E", exc)))
        return
    promise.complete(outcome)


def _set_waiter[T, E](waiter: asyncio.Future[Result[T, E]], result: Result[T, E]) -> None:
    if not waiter.done():
        waiter.set_result(result)


__all__ = (
    "Future",
    "Promise",
    "create",
)
