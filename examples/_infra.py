from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

import httpx

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from funclient import HTTPClient, HttpxTransport, TransportConfig  # noqa: E402

BASE_URL = "https://api.example.test"

USERS = {
    1: {"id": 1, "name": "Ada", "tags": ["math", "engines"], "manager": None},
    2: {"id": 2, "name": "Grace", "tags": ["compilers"], "manager": {"id": 1}},
}


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    status: int | None = None

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def to_failure(error: Exception, metadata: object) -> Failure:
    status = metadata.status_code if isinstance(metadata, httpx.Response) else None
    return Failure(f"request failed: {error}", status=status)


def _fake_api(request: httpx.Request) -> httpx.Response:
    match request.url.path.strip("/").split("/"):
        case ["users"]:
            return httpx.Response(200, json={"users": list(USERS.values())})
        case ["users", user_id] if user_id.isdigit() and int(user_id) in USERS:
            return httpx.Response(200, json={"user": USERS[int(user_id)]})
        case ["ping"]:
            return httpx.Response(204)
        case _:
            return httpx.Response(404, json={"error": "not found"})


def offline_client(config: TransportConfig | None = None) -> HTTPClient:
    """HTTPClient whose transport answers from USERS instead of the network."""
    mock = httpx.Client(transport=httpx.MockTransport(_fake_api), base_url=BASE_URL)
    return HTTPClient(HttpxTransport(config, client=mock))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
