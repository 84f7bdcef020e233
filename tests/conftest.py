from __future__ import annotations

import threading
import typing
from collections.abc import Iterator

import pytest
from kungfu import Result

from funclient import CompletionHandler, Future, HTTPClient, SerialExecutor

WAIT_SECONDS = 5.0


class ManualTransport:
    """Records sends; the test decides when and how each request completes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.sent: list[tuple[typing.Any, CompletionHandler]] = []
        self.closed = False

    def send(self, request: typing.Any, on_complete: CompletionHandler, /) -> None:
        with self._lock:
            self.sent.append((request, on_complete))

    def close(self) -> None:
        self.closed = True

    def complete(
        self,
        index: int,
        body: bytes | None = None,
        metadata: typing.Any = None,
        error: Exception | None = None,
    ) -> None:
        """Deliver the completion from a foreign thread, like a real transport."""
        _, on_complete = self.sent[index]
        worker = threading.Thread(target=on_complete, args=(body, metadata, error))
        worker.start()
        worker.join()


class FailingTransport:
    def send(self, request: typing.Any, on_complete: CompletionHandler, /) -> None:
        raise ConnectionError("no route to host")

    def close(self) -> None:
        pass


def settle[T, E](future: Future[T, E]) -> Result[T, E]:
    """Block until `future` settles; fails the test on timeout."""
    return future.wait(WAIT_SECONDS).unwrap()


def drain(executor: SerialExecutor) -> None:
    """Wait until every task already queued on `executor` has run."""
    executor.submit(lambda: None).result(timeout=WAIT_SECONDS)


@pytest.fixture
def transport() -> ManualTransport:
    return ManualTransport()


@pytest.fixture
def executor() -> Iterator[SerialExecutor]:
    serial = SerialExecutor()
    yield serial
    serial.shutdown()


@pytest.fixture
def client(transport: ManualTransport, executor: SerialExecutor) -> Iterator[HTTPClient]:
    http = HTTPClient(transport, executor=executor)
    yield http
    http.close()
