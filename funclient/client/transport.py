"""
Transport
=========

The network collaborator: perform a request, report `(body, metadata, error)`
exactly once through a completion callback, from any thread.
"""

from __future__ import annotations

import concurrent.futures
import logging
import typing

import httpx

from .._types import CompletionHandler
from .config import TransportConfig

logger = logging.getLogger(__name__)


class Transport(typing.Protocol):
    """Anything that can carry a request and call back once with the outcome."""

    def send(self, request: typing.Any, on_complete: CompletionHandler, /) -> None: ...

    def close(self) -> None: ...


class HttpxTransport:
    """
    Transport over a synchronous `httpx.Client` run on a thread pool.

    With an injected `client`, only `max_workers` and `raise_for_status` are
    taken from `config`; timeouts, headers and redirects are the client's.

    `send` returns immediately; the request runs on one of `max_workers`
    threads and `on_complete` is called from that thread:
    - success: `(response.content, response, None)`
    - any failure: `(None, response or None, error)`; the response is only
      known for `httpx.HTTPStatusError` (see `raise_for_status`)
    """

    __slots__ = ("_config", "_client", "_executor")

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._client = client or httpx.Client(
            timeout=self._config.timeout_seconds,
            headers=dict(self._config.headers),
            follow_redirects=self._config.follow_redirects,
        )
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=self._config.max_workers,
            thread_name_prefix="funclient-transport",
        )

    @property
    def config(self) -> TransportConfig:
        return self._config

    def send(self, request: httpx.Request, on_complete: CompletionHandler, /) -> None:
        self._executor.submit(self._perform, request, on_complete)

    def _perform(self, request: httpx.Request, on_complete: CompletionHandler) -> None:
        try:
            response = self._client.send(request)
            if self._config.raise_for_status:
                response.raise_for_status()
        except Exception as exc:
            logger.debug("%s %s failed: %s", request.method, request.url, exc)
            on_complete(None, _response_of(exc), exc)
        else:
            logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
            on_complete(response.content, response, None)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self._client.close()


def _response_of(exc: Exception) -> httpx.Response | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response
    return None


__all__ = (
    "Transport",
    "HttpxTransport",
)
