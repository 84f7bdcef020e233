"""
Verification pipeline
=====================

Decides how a completed request settles its promise.

Three stages, in this order, each short-circuiting:
    A. transport error     -> reject(error_mapper(error, metadata))
    B. no / empty body     -> reject(error_mapper(EmptyBodyError(), metadata))
    C. otherwise           -> resolve(WireResponse(body, metadata))

A stage receives the promise and returns `Some(promise)` to hand it on, or
`Nothing()` once it has settled it. Transport errors take priority over the
empty-body classification.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .._errors import EmptyBodyError
from .._types import ErrorMapper
from ..future import Promise
from .response import WireResponse

# Stage = promise -> Some(promise) to continue | Nothing() once settled
type Stage[E] = Callable[[Promise[WireResponse, E]], Option[Promise[WireResponse, E]]]


@dataclass(frozen=True, slots=True)
class Completion:
    """What the transport delivered for one request."""

    body: bytes | None
    metadata: typing.Any
    error: Exception | None


def verify_transport_error[E](completion: Completion, error_mapper: ErrorMapper[E]) -> Stage[E]:
    def stage(promise: Promise[WireResponse, E]) -> Option[Promise[WireResponse, E]]:
        if completion.error is not None:
            promise.reject(error_mapper(completion.error, completion.metadata))
            return Nothing()
        return Some(promise)

    return stage


def verify_empty_body[E](completion: Completion, error_mapper: ErrorMapper[E]) -> Stage[E]:
    def stage(promise: Promise[WireResponse, E]) -> Option[Promise[WireResponse, E]]:
        if completion.error is None and not completion.body:
            promise.reject(error_mapper(EmptyBodyError(), completion.metadata))
            return Nothing()
        return Some(promise)

    return stage


def publish_response[E](completion: Completion) -> Stage[E]:
    def stage(promise: Promise[WireResponse, E]) -> Option[Promise[WireResponse, E]]:
        if completion.error is None and completion.body:
            promise.resolve(WireResponse(completion.body, completion.metadata))
            return Nothing()
        return Some(promise)

    return stage


def run_verification[E](
    promise: Promise[WireResponse, E],
    completion: Completion,
    error_mapper: ErrorMapper[E],
) -> Option[Promise[WireResponse, E]]:
    """Run stages A, B, C. `Nothing()` means the promise got settled."""
    return (
        Some(promise)
        .then(verify_transport_error(completion, error_mapper))
        .then(verify_empty_body(completion, error_mapper))
        .then(publish_response(completion))
    )


__all__ = (
    "Completion",
    "Stage",
    "verify_transport_error",
    "verify_empty_body",
    "publish_response",
    "run_verification",
)
