#!/usr/bin/env python3

import sys
from cli.helpers import find_by_prefix, parse_day, short_id
from models.category import editable_categories, expense_categories
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List transactions, newest first."""
    transactions = services.transactions.items
    if args.day:
        transactions = [t for t in transactions if t.day == args.day]

    if not transactions:
        logger.info("No transactions found.")
        return

    fmt = services.currency.format
    logger.info("\nTransactions:")
    logger.info("=" * 80)
    for t in transactions:
        logger.info(
            f"{short_id(t.id)}  {t.day.isoformat()}  {t.description[:30]:<30}  "
            f"{t.category:<13} {fmt(t.amount):>14}"
        )
    logger.info("-" * 80)
    logger.info(f"Total transactions: {len(transactions)}")


def cmd_add_income(args, services):
    """Record an income transaction."""
    try:
        transaction = services.transactions.add_income(
            args.description, args.amount, args.date
        )
    except ValueError as e:
        logger.error(f"Please fill all fields correctly: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to add income. Please try again. ({e})")
        sys.exit(1)

    logger.info(
        f"✓ Added income '{transaction.description}' "
        f"{services.currency.format(transaction.amount)} (ID: {short_id(transaction.id)})"
    )


def cmd_add_expense(args, services):
    """Record an expense transaction."""
    try:
        transaction = services.transactions.add_expense(
            args.description, args.category, args.amount, args.date
        )
    except ValueError as e:
        logger.error(f"Please fill all fields correctly: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to add expense. Please try again. ({e})")
        sys.exit(1)

    logger.info(
        f"✓ Added expense '{transaction.description}' ({transaction.category}) "
        f"{services.currency.format(transaction.amount)} (ID: {short_id(transaction.id)})"
    )


def cmd_categorize(args, services):
    """Change the category of a transaction."""
    transaction = find_by_prefix(services.transactions, args.transaction_id)
    if not transaction:
        logger.error(f"Transaction with ID '{args.transaction_id}' not found.")
        sys.exit(1)

    try:
        updated = services.transactions.update_category(transaction.id, args.category)
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    if services.transactions.error:
        logger.error(services.transactions.error)
        sys.exit(1)

    logger.info("✓ Transaction categorized successfully")
    logger.info(f"  Transaction: {updated.description[:50]}")
    logger.info(f"  Category: {updated.category}")


def cmd_clear(args, services):
    """Delete the entire transaction history."""
    if not args.yes:
        confirm = (
            input("\nThis will delete ALL transactions. Continue? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Clear cancelled.")
            return

    try:
        services.transactions.clear_all()
    except Exception as e:
        logger.error(f"Failed to clear transaction history: {e}")
        sys.exit(1)
    logger.info("✓ Transaction history cleared.")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Manage transactions",
        description="Record, list, re-categorize and clear income and expenses",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions list
    list_parser = transactions_subparsers.add_parser("list", help="List transactions")
    list_parser.add_argument(
        "--day", type=parse_day, help="Only show transactions on this day (YYYY-MM-DD)"
    )
    list_parser.set_defaults(func=cmd_list)

    # transactions add-income
    income_parser = transactions_subparsers.add_parser(
        "add-income", help="Record income"
    )
    income_parser.add_argument("description", help="What the income was for")
    income_parser.add_argument("amount", help="Amount received (greater than 0)")
    income_parser.add_argument(
        "--date", type=parse_day, help="Day of the income (default: now)"
    )
    income_parser.set_defaults(func=cmd_add_income)

    # transactions add-expense
    expense_parser = transactions_subparsers.add_parser(
        "add-expense", help="Record an expense"
    )
    expense_parser.add_argument("description", help="What the money was spent on")
    expense_parser.add_argument(
        "category", choices=expense_categories(), help="Expense category"
    )
    expense_parser.add_argument("amount", help="Amount spent (greater than 0)")
    expense_parser.add_argument(
        "--date", type=parse_day, help="Day of the expense (default: now)"
    )
    expense_parser.set_defaults(func=cmd_add_expense)

    # transactions categorize
    categorize_parser = transactions_subparsers.add_parser(
        "categorize", help="Change the category of a transaction"
    )
    categorize_parser.add_argument(
        "transaction_id", help="Transaction ID (or a unique prefix of it)"
    )
    categorize_parser.add_argument(
        "category", choices=editable_categories(), help="New category"
    )
    categorize_parser.set_defaults(func=cmd_categorize)

    # transactions clear
    clear_parser = transactions_subparsers.add_parser(
        "clear", help="Delete all transactions"
    )
    clear_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    clear_parser.set_defaults(func=cmd_clear)
