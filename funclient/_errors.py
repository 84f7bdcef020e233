from __future__ import annotations

import dataclasses
import enum
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from ._types import JSON


class DecodeErrorKind(enum.StrEnum):
    """Why a decode step failed."""

    BAD_PAYLOAD = "bad_payload"
    WRONG_TYPE = "wrong_type"
    KEY_NOT_FOUND = "key_not_found"
    NOT_AN_OBJECT = "not_an_object"


class TargetKind(enum.StrEnum):
    """Shape a decoder narrows to."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TEXT = "text"
    DICTIONARY = "dictionary"
    TEXT_LIST = "text_list"
    DICTIONARY_LIST = "dictionary_list"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    Structured decode failure.

    Returned inside `Error(...)`, never raised. Keeps the offending value so
    a message can be rebuilt without losing what was actually received.

    - `kind`: what went wrong
    - `value`: offending value (for BAD_PAYLOAD: best-effort text of the bytes)
    - `target`: requested shape, set for WRONG_TYPE
    - `key`: failing key, set for KEY_NOT_FOUND / NOT_AN_OBJECT
    - `path`: keys walked from the root to the failure
    - `diagnostic`: parser message, set for BAD_PAYLOAD
    - `details`: structured parser detail (position, line, column)
    """

    kind: DecodeErrorKind
    value: JSON = None
    target: TargetKind | None = None
    key: str | None = None
    path: tuple[str, ...] = ()
    diagnostic: str = ""
    details: Mapping[str, typing.Any] | None = None

    @classmethod
    def bad_payload(
        cls,
        diagnostic: str,
        *,
        text: str | None = None,
        details: Mapping[str, typing.Any] | None = None,
    ) -> DecodeError:
        return cls(DecodeErrorKind.BAD_PAYLOAD, value=text, diagnostic=diagnostic, details=details)

    @classmethod
    def wrong_type(cls, target: TargetKind, value: JSON) -> DecodeError:
        return cls(DecodeErrorKind.WRONG_TYPE, value=value, target=target)

    @classmethod
    def key_not_found(cls, key: str, value: JSON) -> DecodeError:
        return cls(DecodeErrorKind.KEY_NOT_FOUND, value=value, key=key, path=(key,))

    @classmethod
    def not_an_object(cls, key: str, value: JSON) -> DecodeError:
        return cls(DecodeErrorKind.NOT_AN_OBJECT, value=value, key=key, path=(key,))

    def under(self, prefix: Sequence[str], /) -> DecodeError:
        """Same error, located below `prefix`."""
        if not prefix:
            return self
        return dataclasses.replace(self, path=(*prefix, *self.path))

    @property
    def label(self) -> str:
        match self.kind:
            case DecodeErrorKind.WRONG_TYPE:
                return f"{self.kind}({self.target})"
            case DecodeErrorKind.KEY_NOT_FOUND | DecodeErrorKind.NOT_AN_OBJECT:
                return f"{self.kind}({self.key})"
            case _:
                return str(self.kind)

    def __str__(self) -> str:
        where = f" at {'.'.join(self.path)}" if self.path else ""
        if self.kind is DecodeErrorKind.BAD_PAYLOAD:
            return f"Error '{self.label}'{where}: {self.diagnostic or 'unreadable payload'}"
        return f"Error '{self.label}'{where}: can't parse object '{self.value!r}'"


class EmptyBodyError(Exception):
    """Transport reported no error but delivered no content."""

    def __init__(self) -> None:
        super().__init__("received empty data")


class ClientClosedError(Exception):
    """Request issued after the client was closed."""

    def __init__(self) -> None:
        super().__init__("client is closed")


class RequestError(Exception):
    """Transport-level failure, as produced by the default error mapper."""

    cause: Exception
    metadata: typing.Any

    def __init__(self, cause: Exception, metadata: typing.Any = None) -> None:
        self.cause = cause
        self.metadata = metadata
        super().__init__(f"Request failed: {cause}")


__all__ = (
    "ClientClosedError",
    "DecodeError",
    "DecodeErrorKind",
    "EmptyBodyError",
    "RequestError",
    "TargetKind",
)
