#!/usr/bin/env python3
"""
Spendwise CLI - Track income, expenses, budgets and daily to-dos.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    transactions Record and manage income and expenses
    budgets      Manage spending limits per category
    todos        Manage calendar to-dos
    reminders    Manage calendar reminders
    currency     Choose the display currency
    summary      Spending overview
    day          One calendar day at a glance
    insights     AI savings tips

Examples:
    python -m cli transactions add-expense "Lunch" Food 12.50
    python -m cli transactions add-income "Salary" 3000 --date 2024-05-01
    python -m cli budgets add Food 400
    python -m cli day 2024-05-01
    python -m cli currency set EUR
"""

import sys
import argparse
from cli import (
    budgets,
    currency,
    day,
    insights,
    reminders,
    summary,
    todos,
    transactions,
)
from config import load_config
from services.base import Services
from logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Spendwise - Personal finance tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    transactions.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    todos.setup_parser(subparsers)
    reminders.setup_parser(subparsers)
    currency.setup_parser(subparsers)
    summary.setup_parser(subparsers)
    day.setup_parser(subparsers)
    insights.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Builds every service and loads its stored state
            services = Services(config)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
