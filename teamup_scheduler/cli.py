#!/usr/bin/env python3
"""
Command line access to a room's Teamup calendar.

Reads TEAMUP_* settings from the environment (or .env) through TeamupSettings
and either lists the room's events or creates a new one.
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import List, Optional

from pydantic import TypeAdapter

from .calendars import Event
from .logging_conf import configure_json_logging
from .teamup import TeamupAPIError, TeamupCalendar, TeamupConfig, TeamupSettings


logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


def parse_datetime(value: str) -> datetime:
    """ISO-8601 argument, accepting a trailing Z for UTC"""
    return _DATETIME.validate_python(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List or create events on a Teamup room calendar")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--timeout", type=float, default=None, help="Deadline for the whole operation, in seconds")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Print the room's events")

    create = commands.add_parser("create", help="Create an event in the room")
    create.add_argument("--title", required=True, help="Event title")
    create.add_argument("--start", required=True, type=parse_datetime,
                        help="Start time, ISO-8601 (e.g. 2024-01-01T09:00:00+00:00)")
    create.add_argument("--end", required=True, type=parse_datetime,
                        help="End time, ISO-8601")
    return parser


async def run(args: argparse.Namespace, config: TeamupConfig) -> List[Event]:
    async with TeamupCalendar(config) as calendar:
        if args.command == "create":
            event = Event(title=args.title, start_time=args.start, end_time=args.end)
            await calendar.create_event(event, timeout=args.timeout)
            return [event]
        return await calendar.get_events(timeout=args.timeout)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = TeamupSettings()
    configure_json_logging(args.log_level or settings.LOG_LEVEL)

    try:
        config = TeamupConfig.from_settings(settings)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        events = asyncio.run(run(args, config))
    except TeamupAPIError as e:
        logger.error(f"Teamup request failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for event in events:
        print(f"{event.start_time.isoformat()}  {event.end_time.isoformat()}  {event.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
