from __future__ import annotations

import asyncio

from _infra import banner
from kungfu import Error, Ok

from haskellite import Left, Right, catching, from_awaitable, head, partition_eithers
from haskellite import maybe, result


def parse_port(raw: str):
    return Right(int(raw)) if raw.isdigit() else Left(f"not a port: {raw!r}")


async def fetch_greeting(name: str) -> str:
    await asyncio.sleep(0.01)
    if not name:
        raise LookupError("nobody to greet")
    return f"hello, {name}"


async def main() -> None:
    banner("02_containers: Maybe, Either, Result")

    errors, ports = partition_eithers(parse_port(raw) for raw in ["80", "http", "8080"])
    print("ports:", ports, "errors:", errors)

    first = head(ports)
    print("first port:", maybe.get_or_default(first, lambda: 443))

    parsed = result.resolve_errors(catching(lambda: int("eighty")), lambda _: 80)
    print("resolved:", result.get_or_raise(parsed))

    for name in ("world", ""):
        match await from_awaitable(fetch_greeting(name)):
            case Ok(greeting):
                print(greeting)
            case Error(err):
                print(f"error: {err!r}")


if __name__ == "__main__":
    asyncio.run(main())
