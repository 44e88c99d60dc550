#!/usr/bin/env python3

from datetime import date
from cli.helpers import parse_day, short_id
from tools.aggregates import day_overview
from logger import get_logger

logger = get_logger()


def cmd_day(args, services):
    """Show transactions, to-dos and reminders for one day."""
    day = args.day or date.today()
    overview = day_overview(services, day)
    fmt = services.currency.format

    logger.info(f"\n{day.strftime('%A, %B %d, %Y')}")
    logger.info("=" * 80)
    logger.info(f"Income:   {fmt(overview.summary.income)}")
    logger.info(f"Expenses: {fmt(overview.summary.expenses)}")

    logger.info("\nTransactions")
    logger.info("-" * 80)
    if not overview.transactions:
        logger.info("  None")
    for t in overview.transactions:
        logger.info(f"  {t.description} ({t.category}) {fmt(t.amount)}")

    logger.info("\nTo-dos")
    logger.info("-" * 80)
    if not overview.todos:
        logger.info("  None")
    for todo in overview.todos:
        mark = "x" if todo.completed else " "
        logger.info(f"  [{mark}] {short_id(todo.id)}  {todo.description}")

    logger.info("\nReminders")
    logger.info("-" * 80)
    if not overview.reminders:
        logger.info("  None")
    for reminder in overview.reminders:
        logger.info(f"  {short_id(reminder.id)}  {reminder.description}")


def setup_parser(subparsers):
    """Setup day command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "day",
        help="Show one calendar day",
        description="Daily income, expenses, to-dos and reminders",
    )
    parser.add_argument(
        "day", nargs="?", type=parse_day, help="Day to show (YYYY-MM-DD, default: today)"
    )
    parser.set_defaults(func=cmd_day)
