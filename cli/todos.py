#!/usr/bin/env python3

import sys
from datetime import date
from cli.helpers import find_by_prefix, parse_day, short_id
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List to-dos, optionally for one day."""
    todos = services.todos.for_day(args.day) if args.day else services.todos.items

    if not todos:
        logger.info("No to-dos found.")
        return

    for todo in todos:
        mark = "x" if todo.completed else " "
        logger.info(
            f"[{mark}] {short_id(todo.id)}  {todo.date.isoformat()}  {todo.description}"
        )


def cmd_add(args, services):
    """Add a to-do for a day."""
    try:
        todo = services.todos.add_todo(args.description, args.date or date.today())
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to add to-do. Please try again. ({e})")
        sys.exit(1)

    logger.info(f"✓ Added to-do for {todo.date.isoformat()} (ID: {short_id(todo.id)})")


def cmd_toggle(args, services):
    """Mark a to-do done, or not done again."""
    todo = find_by_prefix(services.todos, args.todo_id)
    if not todo:
        logger.error(f"To-do with ID '{args.todo_id}' not found.")
        sys.exit(1)

    updated = services.todos.toggle_completed(todo.id)
    if services.todos.error:
        logger.error(services.todos.error)
        sys.exit(1)

    state = "done" if updated.completed else "not done"
    logger.info(f"✓ Marked '{updated.description}' as {state}")


def cmd_delete(args, services):
    """Delete a to-do."""
    todo = find_by_prefix(services.todos, args.todo_id)
    if not todo:
        logger.error(f"To-do with ID '{args.todo_id}' not found.")
        sys.exit(1)

    services.todos.delete(todo.id)
    if services.todos.error:
        logger.error(services.todos.error)
        sys.exit(1)
    logger.info(f"✓ Deleted to-do '{todo.description}'")


def setup_parser(subparsers):
    """Setup todos subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "todos",
        help="Manage to-dos",
        description="Add, list, complete and delete calendar to-dos",
    )

    todos_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available to-do commands",
        dest="subcommand",
        required=True,
    )

    list_parser = todos_subparsers.add_parser("list", help="List to-dos")
    list_parser.add_argument("--day", type=parse_day, help="Only this day (YYYY-MM-DD)")
    list_parser.set_defaults(func=cmd_list)

    add_parser = todos_subparsers.add_parser("add", help="Add a to-do")
    add_parser.add_argument("description", help="What needs doing")
    add_parser.add_argument("--date", type=parse_day, help="Day (default: today)")
    add_parser.set_defaults(func=cmd_add)

    toggle_parser = todos_subparsers.add_parser(
        "toggle", help="Toggle a to-do between done and not done"
    )
    toggle_parser.add_argument("todo_id", help="To-do ID (or a unique prefix of it)")
    toggle_parser.set_defaults(func=cmd_toggle)

    delete_parser = todos_subparsers.add_parser("delete", help="Delete a to-do")
    delete_parser.add_argument("todo_id", help="To-do ID (or a unique prefix of it)")
    delete_parser.set_defaults(func=cmd_delete)
