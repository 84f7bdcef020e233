"""
Dictionary path extraction
==========================

Look up a key, or a chain of keys, inside an untyped JSON object.

Two distinct failures:
- NOT_AN_OBJECT(key): the value being searched is not a JSON object
- KEY_NOT_FOUND(key): it is an object, but the key is absent
"""

from __future__ import annotations

from collections.abc import Sequence

from kungfu import Error, Ok, Result

from .._errors import DecodeError
from .._types import JSON


def extract(key: str, value: JSON) -> Result[JSON, DecodeError]:
    """
    Value mapped to `key` inside `value`.

    Example:
        extract("name", {"name": "Ada"})  # Ok("Ada")
        extract("age", {"name": "Ada"})   # Error(KEY_NOT_FOUND(age))
        extract("name", 42)               # Error(NOT_AN_OBJECT(name))
    """
    if not isinstance(value, dict):
        return Error(DecodeError.not_an_object(key, value))
    if key not in value:
        return Error(DecodeError.key_not_found(key, value))
    return Ok(value[key])


def extract_path(keys: Sequence[str], value: JSON) -> Result[JSON, DecodeError]:
    """
    Apply `extract` along `keys`, threading each step into the next.

    Stops at the first failing key; the error's `path` holds every key up
    to and including that one. An empty `keys` returns `value` itself.
    """
    current = value
    for depth, key in enumerate(keys):
        match extract(key, current):
            case Ok(found):
                current = found
            case Error(err):
                return Error(err.under(keys[:depth]))
    return Ok(current)


__all__ = (
    "extract",
    "extract_path",
)
