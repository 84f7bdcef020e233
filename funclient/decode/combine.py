"""
Composite decoders
==================

Build decoders out of decoders. Every combinator here returns a plain
`Decoder[T]` (JSON -> Result[T, DecodeError]), so they nest freely:

    decode_users = at(["data", "users"], list_of(field("name", decode_str)))
"""

from __future__ import annotations

from collections.abc import Sequence

from kungfu import Error, Ok, Result

from .._errors import DecodeError, TargetKind
from .._types import JSON, Decoder
from .path import extract, extract_path


def list_of[T](decoder: Decoder[T]) -> Decoder[list[T]]:
    """
    Decode a JSON array element by element.

    A non-array fails WRONG_TYPE(list). The first failing element stops the
    decode and its error is located under the element index.
    """

    def decode(value: JSON) -> Result[list[T], DecodeError]:
        if not isinstance(value, list):
            return Error(DecodeError.wrong_type(TargetKind.LIST, value))
        items: list[T] = []
        for index, item in enumerate(value):
            match decoder(item):
                case Ok(decoded):
                    items.append(decoded)
                case Error(err):
                    return Error(err.under([str(index)]))
        return Ok(items)

    return decode


def nullable[T](decoder: Decoder[T]) -> Decoder[T | None]:
    """JSON null decodes to None, anything else goes through `decoder`."""

    def decode(value: JSON) -> Result[T | None, DecodeError]:
        if value is None:
            return Ok(None)
        return decoder(value)

    return decode


def field[T](key: str, decoder: Decoder[T]) -> Decoder[T]:
    """Extract `key` from an object, then decode what was found."""

    def decode(value: JSON) -> Result[T, DecodeError]:
        return extract(key, value).then(
            lambda found: decoder(found).map_err(lambda err: err.under([key]))
        )

    return decode


def at[T](keys: Sequence[str], decoder: Decoder[T]) -> Decoder[T]:
    """
    Walk `keys` into nested objects, then decode what was found.

    Example:
        at(["user", "id"], decode_int)({"user": {"id": 7}})    # Ok(7)
        at(["user", "id"], decode_int)({"user": {"id": "7"}})  # Error(WRONG_TYPE(integer))
    """
    path = tuple(keys)

    def decode(value: JSON) -> Result[T, DecodeError]:
        return extract_path(path, value).then(
            lambda found: decoder(found).map_err(lambda err: err.under(path))
        )

    return decode


__all__ = (
    "list_of",
    "nullable",
    "field",
    "at",
)
