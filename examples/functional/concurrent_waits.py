"""
Concurrent waits example

Runs several waits side by side and then the full action against an
in-memory host, printing what the host received.
"""

import asyncio
import time

from delayaction import configure_logging, run, wait
from delayaction.testing import InMemoryHost


async def timed_wait(label: str, milliseconds: int) -> None:
    start = time.monotonic()
    await wait(milliseconds)
    print(f"{label}: waited {time.monotonic() - start:.3f}s")


async def main():
    configure_logging(level="WARNING", show_context=False)

    # Waits do not block each other
    await asyncio.gather(
        timed_wait("short", 100),
        timed_wait("medium", 250),
        timed_wait("long", 500),
    )

    host = InMemoryHost(inputs={"milliseconds": "200"}, payload={"event": "example"})
    action_run = await run(host)

    print(f"\nRun {action_run.run_id}: {action_run.status.value}")
    for message in host.messages("info"):
        print(f"  info: {message}")
    print(f"  output time = {host.outputs.get('time')}")


if __name__ == "__main__":
    asyncio.run(main())
