"""
Transport configuration
=======================

Frozen policy object for the httpx transport, validated on construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


def _no_headers() -> Mapping[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class TransportConfig:
    """
    How the default transport talks to the network.

    - `timeout_seconds`: per-request httpx timeout
    - `max_workers`: threads performing requests concurrently
    - `follow_redirects`: let httpx follow 3xx responses
    - `raise_for_status`: report 4xx/5xx responses as transport errors
    - `headers`: sent with every request
    """

    timeout_seconds: float = 20.0
    max_workers: int = 4
    follow_redirects: bool = True
    raise_for_status: bool = False
    headers: Mapping[str, str] = field(default_factory=_no_headers)

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0.0:
            raise ValueError("TransportConfig.timeout_seconds must be > 0")
        if self.max_workers < 1:
            raise ValueError("TransportConfig.max_workers must be >= 1")

    @classmethod
    def strict(
        cls,
        timeout_seconds: float = 20.0,
        max_workers: int = 4,
        headers: Mapping[str, str] | None = None,
    ) -> TransportConfig:
        """Treat HTTP error statuses as failed requests."""
        return cls(
            timeout_seconds=timeout_seconds,
            max_workers=max_workers,
            raise_for_status=True,
            headers=dict(headers or {}),
        )


__all__ = ("TransportConfig",)
