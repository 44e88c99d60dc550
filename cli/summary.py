#!/usr/bin/env python3

from tools.aggregates import (
    BudgetStatus,
    category_breakdown,
    net_balance,
    overall_budget_status,
    total_expenses,
    total_income,
)
from logger import get_logger

logger = get_logger()


def cmd_summary(args, services):
    """Print the dashboard: totals, budget status and spending by category."""
    transactions = services.transactions.items
    fmt = services.currency.format

    for error in services.errors:
        logger.warning(error)

    status = overall_budget_status(services.budgets.budgets, transactions)

    logger.info("\nOverview")
    logger.info("=" * 80)
    logger.info(f"Total income:   {fmt(total_income(transactions))}")
    logger.info(f"Total expenses: {fmt(total_expenses(transactions))}")
    logger.info(f"Net balance:    {fmt(net_balance(transactions))}")
    logger.info(f"Budget status:  {status.value}")
    if status is BudgetStatus.NO_BUDGETS:
        logger.info("  Add one with 'python -m cli budgets add'.")

    breakdown = category_breakdown(transactions)
    if not breakdown:
        logger.info("\nNo expenses recorded yet.")
        return

    logger.info("\nSpending by category")
    logger.info("-" * 80)
    for insight in breakdown:
        logger.info(
            f"{insight.category:<14} {fmt(insight.total_spent):>14}  "
            f"{insight.percentage:5.1f}%"
        )


def setup_parser(subparsers):
    """Setup summary command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "summary",
        help="Show the spending overview",
        description="Income, expenses, budget status and spending by category",
    )
    parser.set_defaults(func=cmd_summary)
