"""
Command-line entry point for sysbar. With no arguments it prints the status-bar
plugin output (summary line, then dropdown); --format selects json or a rich table.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import NoReturn

from config import load_settings
from metrics import collect
from models import HostReport
from report import render
from utils import format_gb_pair, format_percent, format_rpm, get_logger, setup_logging

logger = get_logger(__name__)


def print_table(report: HostReport) -> None:
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    table = Table(title="Host health")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Model", report.model)
    table.add_row("Temperature", report.temperature)
    table.add_row("CPU usage", format_percent(report.cpu_percent, 2))
    table.add_row("Memory", format_gb_pair(report.memory.used_gb, report.memory.total_gb, 3))
    if report.fan.present:
        table.add_row(
            "Fan",
            f"{format_rpm(report.fan.rpm)} ({format_percent(report.fan.percent, 1)} of {format_rpm(report.fan.max_rpm)})",
        )
    else:
        table.add_row("Fan", "not present")
    Console().print(Panel(table, title="sysbar"))


class LenientParser(argparse.ArgumentParser):
    """Raises instead of exiting with status 2, so main() can fall back to defaults."""

    def error(self, message: str) -> NoReturn:
        raise argparse.ArgumentError(None, message)


def build_parser() -> argparse.ArgumentParser:
    parser = LenientParser(prog="sysbar", description="Host health for a status-bar plugin")
    parser.add_argument(
        "--format",
        choices=("bar", "json", "table"),
        default="bar",
        help="Output format (default: status-bar plugin text)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        logger.warning("Bad arguments (%s); using defaults", e)
        args, extra = parser.parse_known_args([])
    if extra:
        logger.warning("Ignoring unknown arguments: %s", " ".join(extra))
    settings = load_settings(args.config)
    setup_logging(settings.log_level, settings.log_file)

    report = collect(settings)
    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2 if args.pretty else None, ensure_ascii=False))
    elif args.format == "table":
        print_table(report)
    else:
        sys.stdout.write(render(report))
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
