"""
Typed decoding of untyped JSON.

Pure functions only: every decoder maps a JSON value to
`Result[T, DecodeError]` and can be replayed freely.
"""

from .combine import at, field, list_of, nullable
from .parse import decode_body, parse_to_untyped_value
from .path import extract, extract_path
from .scalars import (
    decode_bool,
    decode_dict,
    decode_dict_list,
    decode_float,
    decode_int,
    decode_str,
    decode_str_list,
)

__all__ = (
    # Parse
    "parse_to_untyped_value",
    "decode_body",
    # Scalars
    "decode_int",
    "decode_float",
    "decode_bool",
    "decode_str",
    "decode_dict",
    "decode_str_list",
    "decode_dict_list",
    # Paths
    "extract",
    "extract_path",
    # Composite
    "list_of",
    "nullable",
    "field",
    "at",
)
