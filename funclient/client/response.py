"""
Successful wire responses and generic post-processing.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Result

from ..future import Future


@dataclass(frozen=True, slots=True)
class WireResponse:
    """Raw body of a completed request plus whatever metadata the transport gave."""

    body: bytes
    metadata: typing.Any = None


def process_response[T, E](
    response: WireResponse,
    process_data: Callable[[bytes], Result[T, E]],
) -> Future[T, E]:
    """
    Run a synchronous body processor and wrap its Result in a settled future.

    Example:
        client.request_data(request).then(
            lambda response: process_response(response, partial(decode_body, decoder=decode_user))
        )
    """
    return Future.settled(process_data(response.body))


__all__ = (
    "WireResponse",
    "process_response",
)
