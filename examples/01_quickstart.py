from __future__ import annotations

import httpx
from _infra import BASE_URL, banner, offline_client, to_failure

from funclient import at, decode_str
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: request_json + at + blocking wait")

    with offline_client() as client:
        request = httpx.Request("GET", f"{BASE_URL}/users/2")
        future = client.request_json(request, at(["user", "name"], decode_str), to_failure)

        match future.wait(timeout=5.0).unwrap():
            case Ok(name):
                print(f"hello, {name}")
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    main()
