from __future__ import annotations

from dataclasses import dataclass

from _infra import banner

from funclient import (
    DecodeError,
    JSON,
    at,
    decode_int,
    decode_str,
    decode_str_list,
    field,
    list_of,
    nullable,
    parse_to_untyped_value,
    pipe,
)
from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    tags: list[str]
    manager_id: int | None


def decode_user(value: JSON) -> Result[User, DecodeError]:
    # Locality: plain Result chaining, each step short-circuits on Error.
    return field("id", decode_int)(value).then(
        lambda user_id: field("name", decode_str)(value).then(
            lambda name: field("tags", decode_str_list)(value).then(
                lambda tags: field("manager", nullable(field("id", decode_int)))(value).map(
                    lambda manager_id: User(user_id, name, tags, manager_id)
                )
            )
        )
    )


PAYLOADS = [
    b'{"users": [{"id": 1, "name": "Ada", "tags": [], "manager": null}]}',
    b'{"users": [{"id": 1, "name": "Ada", "tags": [], "manager": {"id": "7"}}]}',
    b'{"users": {"id": 1}}',
    b'{"users": [',
]


def main() -> None:
    banner("02_decoding: parse + at + list_of + field")

    decode_users = at(["users"], list_of(decode_user))
    for payload in PAYLOADS:
        match pipe(payload, parse_to_untyped_value, decode_users):
            case Ok(users):
                print(f"ok: {users}")
            case Error(err):
                print(f"{err.kind}: {err}")


if __name__ == "__main__":
    main()
