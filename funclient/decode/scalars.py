"""
Primitive decoders
==================

Each decoder narrows an untyped JSON value to one shape and nothing else:
no coercion (a numeric string is not an integer, `True` is not an integer,
`7.0` is not an integer). Only `decode_float` widens an integral number.
On mismatch the result is `Error(DecodeError(WRONG_TYPE, target))` carrying
the original value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import DecodeError, TargetKind
from .._types import JSON, JSONObject


def decode_int(value: JSON) -> Result[int, DecodeError]:
    # bool is an int subclass in Python, JSON keeps them apart
    if isinstance(value, int) and not isinstance(value, bool):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.INTEGER, value))


def decode_float(value: JSON) -> Result[float, DecodeError]:
    # JSON has one number kind: an integral number is a float too
    if isinstance(value, float):
        return Ok(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Ok(float(value))
    return Error(DecodeError.wrong_type(TargetKind.FLOAT, value))


def decode_bool(value: JSON) -> Result[bool, DecodeError]:
    if isinstance(value, bool):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.BOOLEAN, value))


def decode_str(value: JSON) -> Result[str, DecodeError]:
    if isinstance(value, str):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.TEXT, value))


def decode_dict(value: JSON) -> Result[JSONObject, DecodeError]:
    if _is_object(value):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.DICTIONARY, value))


def decode_str_list(value: JSON) -> Result[list[str], DecodeError]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.TEXT_LIST, value))


def decode_dict_list(value: JSON) -> Result[list[JSONObject], DecodeError]:
    if isinstance(value, list) and all(_is_object(item) for item in value):
        return Ok(value)
    return Error(DecodeError.wrong_type(TargetKind.DICTIONARY_LIST, value))


def _is_object(value: JSON) -> bool:
    return isinstance(value, dict) and all(isinstance(key, str) for key in value)


__all__ = (
    "decode_int",
    "decode_float",
    "decode_bool",
    "decode_str",
    "decode_dict",
    "decode_str_list",
    "decode_dict_list",
)
