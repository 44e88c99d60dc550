#!/usr/bin/env python3

import sys
from datetime import date
from cli.helpers import find_by_prefix, parse_day, short_id
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List reminders, optionally for one day."""
    reminders = (
        services.reminders.for_day(args.day) if args.day else services.reminders.items
    )

    if not reminders:
        logger.info("No reminders found.")
        return

    for reminder in reminders:
        logger.info(
            f"{short_id(reminder.id)}  {reminder.date.isoformat()}  {reminder.description}"
        )


def cmd_add(args, services):
    """Add a reminder for a day."""
    try:
        reminder = services.reminders.add_reminder(
            args.description, args.date or date.today()
        )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to add reminder. Please try again. ({e})")
        sys.exit(1)

    logger.info(
        f"✓ Added reminder for {reminder.date.isoformat()} (ID: {short_id(reminder.id)})"
    )


def cmd_delete(args, services):
    """Delete a reminder."""
    reminder = find_by_prefix(services.reminders, args.reminder_id)
    if not reminder:
        logger.error(f"Reminder with ID '{args.reminder_id}' not found.")
        sys.exit(1)

    services.reminders.delete(reminder.id)
    if services.reminders.error:
        logger.error(services.reminders.error)
        sys.exit(1)
    logger.info(f"✓ Deleted reminder '{reminder.description}'")


def setup_parser(subparsers):
    """Setup reminders subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "reminders",
        help="Manage reminders",
        description="Add, list and delete calendar reminders",
    )

    reminders_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available reminder commands",
        dest="subcommand",
        required=True,
    )

    list_parser = reminders_subparsers.add_parser("list", help="List reminders")
    list_parser.add_argument("--day", type=parse_day, help="Only this day (YYYY-MM-DD)")
    list_parser.set_defaults(func=cmd_list)

    add_parser = reminders_subparsers.add_parser("add", help="Add a reminder")
    add_parser.add_argument("description", help="Reminder text")
    add_parser.add_argument("--date", type=parse_day, help="Day (default: today)")
    add_parser.set_defaults(func=cmd_add)

    delete_parser = reminders_subparsers.add_parser("delete", help="Delete a reminder")
    delete_parser.add_argument(
        "reminder_id", help="Reminder ID (or a unique prefix of it)"
    )
    delete_parser.set_defaults(func=cmd_delete)
