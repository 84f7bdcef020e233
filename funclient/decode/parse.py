"""
Bytes -> untyped JSON.

Bridges the exception-based `json` parser into Result values, the way
`lift.up.catching` bridges exception-based code into combinator pipelines.
"""

from __future__ import annotations

import json
import typing

from kungfu import Error, Ok, Result

from .._errors import DecodeError
from .._helpers import and_then
from .._types import JSON, Decoder


def parse_to_untyped_value(data: bytes) -> Result[JSON, DecodeError]:
    """
    Parse raw bytes into an untyped JSON value (top-level scalars allowed).

    On failure returns BAD_PAYLOAD whose diagnostic is the parser message
    followed by the payload text. Payloads that are not valid UTF-8 get an
    empty diagnostic; parser position details are kept either way. Nesting too
    deep for the parser is a BAD_PAYLOAD too, without details.
    """
    try:
        return Ok(json.loads(data))
    except (ValueError, RecursionError) as exc:
        text = _render(data)
        diagnostic = ""
        if text is not None:
            diagnostic = " ".join(part for part in (_parser_message(exc), text) if part)
        return Error(DecodeError.bad_payload(diagnostic, text=text, details=_parser_details(exc)))


def decode_body[T](data: bytes, decoder: Decoder[T]) -> Result[T, DecodeError]:
    """Parse `data`, then run `decoder` on the parsed value."""
    return and_then(parse_to_untyped_value(data), decoder)


def _render(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _parser_message(exc: Exception) -> str:
    if isinstance(exc, json.JSONDecodeError):
        return exc.msg
    return str(exc)


def _parser_details(exc: Exception) -> dict[str, typing.Any] | None:
    if isinstance(exc, json.JSONDecodeError):
        return {"pos": exc.pos, "lineno": exc.lineno, "colno": exc.colno}
    if isinstance(exc, UnicodeDecodeError):
        return {"pos": exc.start, "reason": exc.reason}
    return None


__all__ = (
    "parse_to_untyped_value",
    "decode_body",
)
