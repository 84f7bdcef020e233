"""Internal helpers for funclient.

Small Result-chaining utilities used by the decode layer and the client.
They replace operator-style chaining with plain function calls."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result


def and_then[T, U, E](
    result: Result[T, E],
    step: Callable[[T], Result[U, E]],
) -> Result[U, E]:
    """
    Feed a successful value into the next step, short-circuit on Error.

    Same as `result.then(step)`, spelled as a function so it can be passed
    around and partially applied.
    """
    match result:
        case Ok(value):
            return step(value)
        case Error(_):
            return result


def pipe[E](
    value: typing.Any,
    *steps: Callable[[typing.Any], Result[typing.Any, E]],
) -> Result[typing.Any, E]:
    """
    Thread `value` through Result-returning steps, left to right.

    Usage:
        pipe(payload, parse_to_untyped_value, at(["user", "id"], decode_int))
    """
    result: Result[typing.Any, E] = Ok(value)
    for step in steps:
        result = and_then(result, step)
    return result


__all__ = (
    "and_then",
    "pipe",
)
