"""
HTTP client
===========

Turns a fire-and-forget transport call into a future that settles exactly once.

    request_data:
        1. create a promise, register it -> handle
        2. transport.send(request, on_complete)
        3. on_complete (any thread) -> serial executor:
           unregister(handle); duplicate delivery stops here
        4. verification pipeline settles the promise

Build one client at startup and pass it where it is needed.
"""

from __future__ import annotations

import logging
import typing

from kungfu import Error, LazyCoroResult, Some

from .._errors import ClientClosedError, DecodeError, RequestError
from .._types import Decoder, ErrorMapper, RequestHandle
from ..decode import decode_body
from ..future import Future, create
from .registry import RequestRegistry
from .response import WireResponse
from .serial import SerialExecutor
from .transport import Transport
from .verify import Completion, run_verification

logger = logging.getLogger(__name__)


def default_error_mapper(error: Exception, metadata: typing.Any) -> RequestError:
    """Wrap the low-level error and its metadata into `RequestError`."""
    return RequestError(error, metadata)


class HTTPClient:
    """
    Issues requests through a transport and tracks each one until settled.

    Registry removal and future settlement all happen on one serial executor,
    so concurrent completions from transport threads are linearized.
    """

    __slots__ = ("_transport", "_registry", "_executor", "_closed")

    def __init__(
        self,
        transport: Transport,
        *,
        registry: RequestRegistry[WireResponse, typing.Any] | None = None,
        executor: SerialExecutor | None = None,
    ) -> None:
        self._transport = transport
        self._registry: RequestRegistry[WireResponse, typing.Any] = registry or RequestRegistry()
        self._executor = executor or SerialExecutor()
        self._closed = False

    @property
    def pending_requests(self) -> int:
        """Number of requests still in flight."""
        return len(self._registry)

    def request_data[E](
        self,
        request: typing.Any,
        error_mapper: ErrorMapper[E] = default_error_mapper,
    ) -> Future[WireResponse, E]:
        """
        Send `request`; the future resolves with the raw response.

        Rejections go through `error_mapper`: transport failures first, then
        `EmptyBodyError` for a successful call that carried no content. A closed
        client rejects right away with `ClientClosedError` and registers nothing.
        """
        if self._closed:
            logger.debug("Request refused: client is closed")
            return Future.settled(Error(error_mapper(ClientClosedError(), None)))

        future, promise = create()
        handle = self._registry.register(promise)
        logger.debug("Request %d registered", handle)

        def on_complete(body: bytes | None, metadata: typing.Any, error: Exception | None) -> None:
            completion = Completion(body, metadata, error)
            try:
                self._executor.submit(self._complete, handle, completion, error_mapper)
            except RuntimeError:
                # late delivery after close: the executor is gone
                self._complete(handle, completion, error_mapper)

        try:
            self._transport.send(request, on_complete)
        except Exception as exc:
            logger.debug("Request %d could not be sent: %s", handle, exc)
            on_complete(None, None, exc)
        return future

    def fetch[E](
        self,
        request: typing.Any,
        error_mapper: ErrorMapper[E] = default_error_mapper,
    ) -> LazyCoroResult[WireResponse, E]:
        """`request_data` for asyncio code: `result = await client.fetch(request)`."""
        return self.request_data(request, error_mapper).to_lazy()

    def request_json[T, E](
        self,
        request: typing.Any,
        decoder: Decoder[T],
        error_mapper: ErrorMapper[E] = default_error_mapper,
    ) -> Future[T, E | DecodeError]:
        """Send `request`, parse the body as JSON and run `decoder` on it."""
        return self.request_data(request, error_mapper).then_result(
            lambda response: decode_body(response.body, decoder)
        )

    def _complete[E](
        self,
        handle: RequestHandle,
        completion: Completion,
        error_mapper: ErrorMapper[E],
    ) -> None:
        match self._registry.unregister(handle):
            case Some(promise):
                run_verification(promise, completion, error_mapper)
                logger.debug("Request %d settled", handle)
            case _:
                logger.warning("Request %d completed more than once, ignoring", handle)

    def close(self) -> None:
        """Stop the transport, then drain pending completions."""
        self._closed = True
        self._transport.close()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = (
    "HTTPClient",
    "default_error_mapper",
)
