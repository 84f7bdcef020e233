"""
Functional HTTP client.

Requests settle single-assignment futures; responses are narrowed from
untyped JSON into typed values by pure decode combinators. Every failure
is a value (kungfu `Result`), never an exception.

Architecture:
- future: Promise / Future, settled exactly once
- client: registry + serial executor + verification pipeline over a transport
- decode: parse bytes, extract paths, decode shapes
"""

import logging

# Core types
from ._types import JSON, CompletionHandler, Continuation, Decoder, ErrorMapper, JSONObject, RequestHandle

# Errors
from ._errors import ClientClosedError, DecodeError, DecodeErrorKind, EmptyBodyError, RequestError, TargetKind

# Result chaining
from ._helpers import and_then, pipe

# Futures
from . import future
from .future import Future, Promise, create

# Decoding
from . import decode
from .decode import (
    at,
    decode_body,
    decode_bool,
    decode_dict,
    decode_dict_list,
    decode_float,
    decode_int,
    decode_str,
    decode_str_list,
    extract,
    extract_path,
    field,
    list_of,
    nullable,
    parse_to_untyped_value,
)

# Client
from . import client
from .client import (
    HTTPClient,
    HttpxTransport,
    RequestRegistry,
    SerialExecutor,
    Transport,
    TransportConfig,
    WireResponse,
    default_error_mapper,
    process_response,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "JSON",
    "JSONObject",
    "Decoder",
    "RequestHandle",
    "ErrorMapper",
    "CompletionHandler",
    "Continuation",
    # Errors
    "DecodeError",
    "DecodeErrorKind",
    "TargetKind",
    "ClientClosedError",
    "EmptyBodyError",
    "RequestError",
    # Result chaining
    "and_then",
    "pipe",
    # Futures
    "future",
    "Future",
    "Promise",
    "create",
    # Decoding
    "decode",
    "parse_to_untyped_value",
    "decode_body",
    "decode_int",
    "decode_float",
    "decode_bool",
    "decode_str",
    "decode_dict",
    "decode_str_list",
    "decode_dict_list",
    "extract",
    "extract_path",
    "list_of",
    "nullable",
    "field",
    "at",
    # Client
    "client",
    "HTTPClient",
    "default_error_mapper",
    "RequestRegistry",
    "SerialExecutor",
    "WireResponse",
    "process_response",
    "Transport",
    "HttpxTransport",
    "TransportConfig",
)
