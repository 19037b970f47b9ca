#!/usr/bin/env python3
"""
Run the design pattern demos

Usage:
    python scripts/run_demo.py markdown

    # Monitor a slow service (calls slower than the threshold are logged):
    python scripts/run_demo.py monitor --delay-ms 150 --threshold-ms 100
"""

import argparse
import asyncio
import sys
from datetime import timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from designpatterns.logging_config import setup_logging
from designpatterns.markdown import FluentMarkdownBuilder
from designpatterns.monitoring import Service, SlowService, create
from designpatterns.settings import settings


def run_markdown() -> None:
    """Print a sample document."""
    document = (
        FluentMarkdownBuilder()
        .add_header(1, "Design Patterns")
        .add_text("A ")
        .add_bold("fluent")
        .add_text(" builder and a ")
        .add_italic("monitoring")
        .add_text(" proxy.")
        .new_line()
        .new_line()
        .add_table(["Pattern", "Kind"], [["Builder", "Creational"], ["Proxy", "Structural"]])
        .new_line()
        .add_table(
            ["Pattern", "Reference"],
            lambda table: table.add_row(
                lambda row: row.add_cell(lambda cell: cell.add_bold("Proxy")).add_cell(
                    lambda cell: cell.add_link(
                        lambda link: link.add_bold("Wikipedia"),
                        "https://en.wikipedia.org/wiki/Proxy_pattern",
                    )
                )
            ),
        )
    )
    print(document)


async def _run_async_calls(service: Service) -> bool:
    _, result = await asyncio.gather(
        service.do_something_async(), service.get_result_async()
    )
    return result


def run_monitor(delay_ms: float, threshold_ms: float) -> None:
    """Run every Service operation through a monitoring proxy."""
    service = create(
        SlowService(timedelta(milliseconds=delay_ms)),
        timedelta(milliseconds=threshold_ms),
    )

    print(f"Delay {delay_ms:g}ms, threshold {threshold_ms:g}ms")
    service.do_something()
    result = asyncio.run(_run_async_calls(service))
    print(f"get_result_async returned {result}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Design pattern demos")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("markdown", help="Print a sample Markdown document")

    monitor_parser = subparsers.add_parser(
        "monitor", help="Time a slow service through the monitoring proxy"
    )
    monitor_parser.add_argument(
        "--delay-ms",
        type=float,
        default=settings.monitoring.demo_delay_ms,
        help="How long each service call takes",
    )
    monitor_parser.add_argument(
        "--threshold-ms",
        type=float,
        default=settings.monitoring.threshold_ms,
        help="Log calls slower than this",
    )

    args = parser.parse_args()
    setup_logging()

    if args.command == "markdown":
        run_markdown()
    else:
        run_monitor(args.delay_ms, args.threshold_ms)


if __name__ == "__main__":
    main()
