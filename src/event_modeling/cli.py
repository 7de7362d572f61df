"""Command-line interface for the event store.

This module provides a CLI that loads a JSON Lines file of candidate events
into a fresh in-memory log and prints reads and projections over it. Each
non-blank line of the file is one JSON object with the keys stream_id, type,
payload, metadata and version.
"""

import argparse
import json
import sys
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

import structlog

from event_modeling.config import load_config
from event_modeling.events import Event
from event_modeling.logging_config import configure_logging
from event_modeling.projections import (
    build_dashboard,
    busiest_hour,
    cancelled_in_month,
    customer_lifetime_total,
    customer_order_history,
)
from event_modeling.store import EventLog, ValidationError, create_store

logger = structlog.get_logger(__name__)


def load_event_file(path: str) -> EventLog:
    """Append every event of a JSON Lines file to a new log.

    Args:
        path: Path of the file to load

    Returns:
        EventLog holding the file's events in file order

    Raises:
        OSError: If the file cannot be read
        ValueError: If a line is not a JSON object or is rejected by the log;
            the message carries the line number
    """
    log = create_store()
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{line_number}: invalid JSON: {e.msg}") from e
            if not isinstance(record, dict):
                raise ValueError(f"{path}:{line_number}: expected a JSON object")
            try:
                log.append(record)
            except ValidationError as e:
                raise ValueError(f"{path}:{line_number}: {e}") from e

    logger.info("Loaded event file", path=path, event_count=len(log))
    return log


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured argument parser with all subcommands
    """
    parser = argparse.ArgumentParser(
        prog="event-modeling",
        description="Append-only event log with projections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file (.env format)",
        metavar="FILE",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show command - display events
    show_parser = subparsers.add_parser("show", help="Display the events of a file")
    show_parser.add_argument("file", type=str, help="JSON Lines file of events")
    selection = show_parser.add_mutually_exclusive_group()
    selection.add_argument("--stream", type=str, help="Only show events of this stream")
    selection.add_argument("--type", type=str, help="Only show events of this type")
    show_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    # Report command - display projections
    report_parser = subparsers.add_parser("report", help="Display order projections for a file")
    report_parser.add_argument("file", type=str, help="JSON Lines file of events")
    report_parser.add_argument("--customer", type=str, help="Include this customer's order history")
    report_parser.add_argument("--year", type=int, help="Year for the cancellation count")
    report_parser.add_argument(
        "--month", type=int, choices=range(1, 13), help="Month for the cancellation count"
    )
    report_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    return parser


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command - print selected events.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        log = load_event_file(args.file)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stream is not None:
        events = log.read_stream(args.stream)
    elif args.type is not None:
        events = log.read_by_type(args.type)
    else:
        events = log.read_all()

    if args.format == "json":
        print(json.dumps([event.to_dict() for event in events], indent=2))
        return 0

    print(f"Events: {len(events)} of {len(log)}")
    print("=" * 80)
    for event in events:
        _print_event(event)
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command - print order projections.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if (args.year is None) != (args.month is None):
        print("Error: --year and --month must be given together", file=sys.stderr)
        return 1

    try:
        log = load_event_file(args.file)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    events = log.read_all()
    dashboard = build_dashboard(events)
    report: dict[str, Any] = {
        "dashboard": asdict(dashboard),
        "busiest_hour": busiest_hour(events),
    }
    if args.customer is not None:
        history = customer_order_history(events, args.customer)
        report["customer"] = {
            "customer_id": args.customer,
            "orders": [
                {
                    "order_id": order.order_id,
                    "amount": order.amount,
                    "timestamp": order.timestamp.isoformat() if order.timestamp else None,
                }
                for order in history
            ],
            "lifetime_total": customer_lifetime_total(events, args.customer),
        }
    if args.year is not None:
        report["cancelled_in_month"] = {
            "year": args.year,
            "month": args.month,
            "count": cancelled_in_month(events, args.year, args.month),
        }

    if args.format == "json":
        print(json.dumps(report, indent=2, default=_json_default))
        return 0

    print("ORDER DASHBOARD")
    print("=" * 80)
    print(f"Total orders: {dashboard.total_orders}")
    print(f"Total cancelled: {dashboard.total_cancelled}")
    print(f"Busiest hour (UTC): {_format_hour(report['busiest_hour'])}")
    for hour, count in sorted(dashboard.orders_by_hour.items()):
        print(f"  {_format_hour(hour)}  {count}")

    if "customer" in report:
        customer = report["customer"]
        print()
        print(f"Orders for {customer['customer_id']}: {len(customer['orders'])}")
        print("-" * 80)
        for order in customer["orders"]:
            print(f"  {order['order_id']:<20} {order['amount']!s:>12}  {order['timestamp']}")
        print(f"Lifetime total: {customer['lifetime_total']:.2f}")

    if "cancelled_in_month" in report:
        period = report["cancelled_in_month"]
        print()
        print(f"Cancelled in {period['year']:04d}-{period['month']:02d}: {period['count']}")

    return 0


def _print_event(event: Event) -> None:
    print(f"\n[{event.id}] {event.type}")
    print(f"  Stream: {event.stream_id}")
    print(f"  Version: {event.version}")
    if event.payload:
        print("  Payload:")
        for key, value in event.payload.items():
            print(f"    {key}: {value}")
    if event.metadata:
        print("  Metadata:")
        for key, value in event.metadata.items():
            print(f"    {key}: {value}")


def _format_hour(hour: int | None) -> str:
    return "-" if hour is None else f"{hour:02d}:00"


def _json_default(value: Any) -> Any:
    # Stored payload values are read-only mappings, tuples and frozensets
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, frozenset):
        return list(value)
    return str(value)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    configure_logging(config.logging)

    if args.command == "show":
        return cmd_show(args)
    elif args.command == "report":
        return cmd_report(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
