#!/usr/bin/env python3

import sys
from models.category import expense_categories
from tools.aggregates import budget_progress
from logger import get_logger

logger = get_logger()


def _warn_if_not_saved(services):
    if not services.budgets.persistent:
        logger.info("(Budgets are not saved between runs; set [budgets] persist = true)")


def cmd_list(args, services):
    """List budgets with how much of each has been spent."""
    budgets = services.budgets.budgets
    if not budgets:
        logger.info("No budgets set.")
        _warn_if_not_saved(services)
        return

    fmt = services.currency.format
    transactions = services.transactions.items

    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for budget in budgets:
        progress = budget_progress(budget, transactions)
        logger.info(f"{progress.category}")
        logger.info(
            f"  Spent: {fmt(progress.spent)} / {fmt(progress.limit)} "
            f"({progress.progress_percent:.0f}%)"
        )
        if progress.is_over_budget:
            logger.info(f"  Over budget by {fmt(-progress.remaining)}")
        else:
            logger.info(f"  Remaining: {fmt(progress.remaining)}")
        logger.info("-" * 80)
    _warn_if_not_saved(services)


def cmd_available(args, services):
    """Show categories a budget can still be added for."""
    available = services.budgets.available_categories()
    if not available:
        logger.info("Every category already has a budget.")
        return
    logger.info(", ".join(available))


def cmd_add(args, services):
    """Add a budget for a category."""
    try:
        budget = services.budgets.add_budget(args.category, args.limit)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if services.budgets.error:
        logger.warning(services.budgets.error)
    logger.info(
        f"✓ Budget for {budget.category} set to {services.currency.format(budget.limit)}"
    )
    _warn_if_not_saved(services)


def cmd_edit(args, services):
    """Change a budget's limit, confirming before it is saved."""
    registry = services.budgets
    try:
        current = registry.begin_edit(args.category)
        draft = registry.set_draft(args.category, args.limit)
    except ValueError as e:
        registry.cancel_edit(args.category)
        logger.error(str(e))
        sys.exit(1)

    fmt = services.currency.format
    logger.info(f"{args.category}: {fmt(current)} -> {fmt(draft)}")

    if not args.yes:
        confirm = input("Save this change? (yes/no): ").strip().lower()
        if confirm != "yes":
            registry.cancel_edit(args.category)
            logger.info("Edit cancelled.")
            return

    registry.save_edit(args.category)
    if registry.error:
        logger.warning(registry.error)
    logger.info(f"✓ Budget for {args.category} updated")


def cmd_delete(args, services):
    """Delete the budget for a category."""
    if not services.budgets.delete_budget(args.category):
        logger.error(f"No budget set for '{args.category}'.")
        sys.exit(1)
    if services.budgets.error:
        logger.warning(services.budgets.error)
    logger.info(f"✓ Budget for {args.category} deleted")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Manage budgets",
        description="Set and manage monthly spending limits per category",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    list_parser = budgets_subparsers.add_parser(
        "list", help="List budgets and their progress"
    )
    list_parser.set_defaults(func=cmd_list)

    available_parser = budgets_subparsers.add_parser(
        "available", help="List categories without a budget"
    )
    available_parser.set_defaults(func=cmd_available)

    add_parser = budgets_subparsers.add_parser("add", help="Add a budget")
    add_parser.add_argument("category", choices=expense_categories())
    add_parser.add_argument("limit", help="Spending limit (greater than 0)")
    add_parser.set_defaults(func=cmd_add)

    edit_parser = budgets_subparsers.add_parser("edit", help="Change a budget's limit")
    edit_parser.add_argument("category", choices=expense_categories())
    edit_parser.add_argument("limit", help="New spending limit")
    edit_parser.add_argument(
        "--yes", action="store_true", help="Save without asking for confirmation"
    )
    edit_parser.set_defaults(func=cmd_edit)

    delete_parser = budgets_subparsers.add_parser("delete", help="Delete a budget")
    delete_parser.add_argument("category", choices=expense_categories())
    delete_parser.set_defaults(func=cmd_delete)
