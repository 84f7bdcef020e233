"""
Request registry
================

Bookkeeping of outstanding requests: handle -> promise that settles them.
"""

from __future__ import annotations

import itertools
import threading

from kungfu import Nothing, Option, Some

from .._types import RequestHandle
from ..future import Promise


class RequestRegistry[T, E]:
    """
    Maps outstanding request handles to their pending promises.

    Handles come from one process-lifetime counter starting at 0 and are
    never reused. A handle is present exactly while its request is in
    flight: it is removed once, when the request completes.
    """

    __slots__ = ("_lock", "_counter", "_pending")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = itertools.count()
        self._pending: dict[RequestHandle, Promise[T, E]] = {}

    def register(self, promise: Promise[T, E], /) -> RequestHandle:
        """Store `promise` under the next handle and return that handle."""
        with self._lock:
            handle = next(self._counter)
            self._pending[handle] = promise
        return handle

    def unregister(self, handle: RequestHandle, /) -> Option[Promise[T, E]]:
        """
        Remove and return the promise for `handle`.

        `Nothing()` if the handle is unknown or was already removed, so a
        duplicate completion cannot settle anything twice.
        """
        with self._lock:
            promise = self._pending.pop(handle, None)
        if promise is None:
            return Nothing()
        return Some(promise)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)

    def __contains__(self, handle: object) -> bool:
        with self._lock:
            return handle in self._pending


__all__ = ("RequestRegistry",)
