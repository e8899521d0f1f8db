"""Test client that streams metric lines to the sidecar's Unix socket."""

import argparse
import asyncio
import random
import signal
import sys
import time
from typing import Optional, Sequence

from .config import unix_domain_socket_path

_TAGS = '{method="post",code="200",region="us-ashburn-1"}'
_METRIC_NAME = "http_requests_total"


def build_metric_line(index: int, value: int, timestamp_ms: int) -> str:
    """Build the line sent for the given index; every tenth line has no name."""
    name = "" if index % 10 == 0 else _METRIC_NAME
    return f"{name}{_TAGS} {value} {timestamp_ms}\n"


async def send_metrics(
    socket_path: str,
    count: int = 1_000_000,
    interval: float = 3.0,
    initial_delay: float = 3.0,
) -> int:
    """Send up to ``count`` metric lines, stopping early on SIGTERM.

    Returns the number of lines sent.
    """
    print(f"Client will be started with initial delay of {initial_delay:g} seconds...")
    await asyncio.sleep(initial_delay)

    try:
        _, writer = await asyncio.open_unix_connection(socket_path)
    except OSError as exc:
        raise ConnectionError("failed to connect to metrics server") from exc

    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    try:
        loop.add_signal_handler(signal.SIGTERM, stop.set)
    except (NotImplementedError, RuntimeError) as exc:
        writer.close()
        raise RuntimeError("failed to register SIGTERM handler") from exc

    sent = 0
    try:
        for index in range(count):
            if stop.is_set():
                print("SIGTERM received")
                break

            timestamp_ms = time.time_ns() // 1_000_000
            line = build_metric_line(index, random.randint(1, 1000), timestamp_ms)
            try:
                writer.write(line.encode())
                await writer.drain()
            except OSError as exc:
                raise ConnectionError("Failed to send message") from exc
            sent += 1
            print(f"Metric {index + 1} sent")

            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass
        else:
            pass
    finally:
        loop.remove_signal_handler(signal.SIGTERM)

    try:
        if writer.can_write_eof():
            writer.write_eof()
        writer.close()
        await writer.wait_closed()
    except OSError as exc:
        raise ConnectionError("Failed to shut down properly") from exc

    print("All metrics sent!!!")
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Stream metric lines to the sidecar.")
    parser.add_argument("--socket-path", default=None)
    parser.add_argument("--count", type=int, default=1_000_000)
    parser.add_argument("--interval", type=float, default=3.0)
    parser.add_argument("--initial-delay", type=float, default=3.0)
    args = parser.parse_args(argv)

    socket_path = args.socket_path or unix_domain_socket_path()
    try:
        asyncio.run(
            send_metrics(socket_path, args.count, args.interval, args.initial_delay)
        )
    except (ConnectionError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())