"""
Tests for the primitive decoders.

Validates:
- a matching shape decodes to the very same value, no coercion
- any other shape fails WRONG_TYPE(target) and keeps the original value
- decoding is pure and can be replayed
"""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

from funclient import (
    DecodeError,
    DecodeErrorKind,
    TargetKind,
    decode_bool,
    decode_dict,
    decode_dict_list,
    decode_float,
    decode_int,
    decode_str,
    decode_str_list,
)

ACCEPTED = [
    (decode_int, 7),
    (decode_int, -3),
    (decode_int, 0),
    (decode_float, 2.5),
    (decode_float, 0.0),
    (decode_bool, True),
    (decode_bool, False),
    (decode_str, "Ada"),
    (decode_str, ""),
    (decode_dict, {"name": "Ada", "tags": []}),
    (decode_dict, {}),
    (decode_str_list, ["a", "b"]),
    (decode_str_list, []),
    (decode_dict_list, [{"id": 1}, {}]),
    (decode_dict_list, []),
]

REJECTED = [
    (decode_int, "7", TargetKind.INTEGER),
    (decode_int, 7.0, TargetKind.INTEGER),
    (decode_int, True, TargetKind.INTEGER),
    (decode_int, None, TargetKind.INTEGER),
    (decode_float, True, TargetKind.FLOAT),
    (decode_float, "2.5", TargetKind.FLOAT),
    (decode_bool, 1, TargetKind.BOOLEAN),
    (decode_bool, "true", TargetKind.BOOLEAN),
    (decode_str, 42, TargetKind.TEXT),
    (decode_str, ["Ada"], TargetKind.TEXT),
    (decode_dict, [("name", "Ada")], TargetKind.DICTIONARY),
    (decode_dict, "{}", TargetKind.DICTIONARY),
    (decode_str_list, ["a", 1], TargetKind.TEXT_LIST),
    (decode_str_list, "ab", TargetKind.TEXT_LIST),
    (decode_dict_list, [{"id": 1}, 2], TargetKind.DICTIONARY_LIST),
    (decode_dict_list, {"id": 1}, TargetKind.DICTIONARY_LIST),
]


@pytest.mark.parametrize(("decoder", "value"), ACCEPTED)
def test_matching_shape_is_returned_unchanged(decoder, value):
    result = decoder(value)

    assert result == Ok(value)
    assert result.unwrap() is value


@pytest.mark.parametrize(("decoder", "value", "target"), REJECTED)
def test_other_shapes_fail_with_wrong_type(decoder, value, target):
    match decoder(value):
        case Error(err):
            assert err.kind is DecodeErrorKind.WRONG_TYPE
            assert err.target is target
            assert err.value is value
            assert err.path == ()
        case other:
            pytest.fail(f"expected a decode error, got {other!r}")


def test_float_accepts_integral_numbers():
    result = decode_float(7)

    assert result == Ok(7.0)
    assert isinstance(result.unwrap(), float)


def test_decoding_is_replayable():
    value = {"id": "7"}

    assert decode_dict(value) == decode_dict(value)
    assert decode_int(value) == decode_int(value) == Error(DecodeError.wrong_type(TargetKind.INTEGER, value))


def test_wrong_type_message_names_target_and_value():
    err = decode_int("7").unwrap_err()

    assert str(err) == "Error 'wrong_type(integer)': can't parse object ''7''"
