"""Demo driver that exercises every endpoint scenario against a running server.

Usage:
    python -m api.server      # in one terminal
    python -m client.main     # in another
"""

import asyncio
import sys

import httpx

from api.config import settings
from api.logging_config import get_client_logger, setup_logging
from api.result import AppError, Err, Ok, Result
from client.playground_client import PlaygroundClient

log = get_client_logger()


def describe(label: str, result: Result[object, AppError]) -> str:
    """One-line summary of a scenario outcome."""
    match result:
        case Ok(value):
            return f"{label}: ok {value!r}"
        case Err(error):
            return f"{label}: {error.status} {error.message}"


async def run_scenarios(client: PlaygroundClient) -> list[str]:
    """Run the demo scenarios in order and return their summaries."""
    scenarios = [
        ("missing post", lambda: client.get_post("2")),
        ("existing post", lambda: client.get_post("1")),
        ("invalid age", lambda: client.validate(17, "test@example.com")),
        ("invalid email", lambda: client.validate(20, "invalid-email")),
        ("age out of range", lambda: client.validate(101, "test@example.com")),
        ("valid request", lambda: client.validate(25, "valid@example.com")),
    ]

    lines = []
    for label, call in scenarios:
        result = await call()
        line = describe(label, result)
        log.info("scenario", label=label, ok=result.ok)
        print(line)
        lines.append(line)
    return lines


async def run_demo() -> None:
    async with PlaygroundClient() as client:
        await run_scenarios(client)


def main() -> None:
    """Entry point for the demo."""
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    try:
        asyncio.run(run_demo())
    except httpx.TransportError as e:
        log.error("server_unreachable", base_url=settings.client_base_url, error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
