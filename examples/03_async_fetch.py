from __future__ import annotations

import asyncio

import httpx
from _infra import BASE_URL, banner, offline_client, run, to_failure

from funclient import TransportConfig, WireResponse
from kungfu import Error, Ok, Result


async def main() -> None:
    banner("03_async_fetch: fetch + await + empty body + strict status")

    with offline_client(TransportConfig.strict()) as client:
        paths = ("/users/1", "/ping", "/users/404")
        results: list[Result[WireResponse, object]] = await asyncio.gather(
            *(client.fetch(httpx.Request("GET", f"{BASE_URL}{path}"), to_failure) for path in paths)
        )

    for path, result in zip(paths, results):
        match result:
            case Ok(response):
                print(f"{path}: {len(response.body)} bytes")
            case Error(err):
                print(f"{path}: {err} (status={err.status})")


if __name__ == "__main__":
    run(main)
