"""
Single-assignment futures.

`Promise` settles, `Future` observes. Settled state is a kungfu `Result`.
"""

from .promise import Future, Promise, create

__all__ = (
    "Future",
    "Promise",
    "create",
)
