"""
Core type definitions for funclient.

Aliases shared by the decode layer, the futures and the client.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

if typing.TYPE_CHECKING:
    from ._errors import DecodeError

# ============================================================================
# Untyped JSON
# ============================================================================

# JSON = what json.loads hands back, before any typed decoding
type JSON = None | bool | int | float | str | list[JSON] | dict[str, JSON]

# JSONObject = the object-shaped subset of JSON
type JSONObject = dict[str, JSON]

# Decoder = pure narrowing of an untyped value
type Decoder[T] = Callable[[JSON], Result[T, DecodeError]]

# ============================================================================
# Requests
# ============================================================================

# RequestHandle = index of an outstanding request in the registry
type RequestHandle = int

# ErrorMapper = (low-level error, transport metadata) -> caller's error
type ErrorMapper[E] = Callable[[Exception, typing.Any], E]

# CompletionHandler = transport callback: (body, metadata, error)
type CompletionHandler = Callable[[bytes | None, typing.Any, Exception | None], None]

# Continuation = observer of a settled future
type Continuation[T, E] = Callable[[Result[T, E]], object]

__all__ = (
    # JSON
    "JSON",
    "JSONObject",
    "Decoder",
    # Requests
    "RequestHandle",
    "ErrorMapper",
    "CompletionHandler",
    "Continuation",
)
