"""Single serialized execution context.

Completion handling (unregister + settle) for every request runs here, one
task at a time, so registry removals and future transitions are linearized
no matter which transport thread delivered the completion."""

from __future__ import annotations

import concurrent.futures
import logging
import typing
from collections.abc import Callable

logger = logging.getLogger(__name__)


class SerialExecutor:
    """One worker thread, tasks run in submission order."""

    __slots__ = ("_executor",)

    def __init__(self, *, name: str = "funclient-serial") -> None:
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix=name,
        )

    def submit[**P, R](
        self,
        fn: Callable[P, R],
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> concurrent.futures.Future[R]:
        task = self._executor.submit(fn, *args, **kwargs)
        task.add_done_callback(_report_failure)
        return task

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def _report_failure(task: concurrent.futures.Future[typing.Any]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Serial task failed", exc_info=exc)


__all__ = ("SerialExecutor",)
