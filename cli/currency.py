#!/usr/bin/env python3

import sys
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List supported currencies, marking the selected one."""
    selected = services.currency.selected
    for currency in services.currency.supported:
        marker = "*" if currency.code == selected.code else " "
        logger.info(f"{marker} {currency.code}  {currency.symbol}  {currency.name}")


def cmd_show(args, services):
    """Show the selected currency."""
    currency = services.currency.selected
    logger.info(f"{currency.code} ({currency.name})")
    logger.info(f"Example: {services.currency.format(1234.5)}")


def cmd_set(args, services):
    """Select the display currency."""
    try:
        currency = services.currency.set_selected(args.code)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if services.currency.error:
        logger.warning(services.currency.error)
    logger.info(f"✓ Currency set to {currency.code} ({currency.name})")
    logger.info("Amounts are not converted, only displayed differently.")


def setup_parser(subparsers):
    """Setup currency subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "currency",
        help="Choose the display currency",
        description="Show, list and select the currency amounts are displayed in",
    )

    currency_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available currency commands",
        dest="subcommand",
        required=True,
    )

    list_parser = currency_subparsers.add_parser("list", help="List currencies")
    list_parser.set_defaults(func=cmd_list)

    show_parser = currency_subparsers.add_parser("show", help="Show selected currency")
    show_parser.set_defaults(func=cmd_show)

    set_parser = currency_subparsers.add_parser("set", help="Select a currency")
    set_parser.add_argument("code", help="Currency code, e.g. EUR")
    set_parser.set_defaults(func=cmd_set)
