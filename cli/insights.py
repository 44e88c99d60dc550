#!/usr/bin/env python3

import sys
from insights import InsightError, get_savings_tips
from logger import get_logger

logger = get_logger()


def cmd_insights(args, services):
    """Ask the LLM for savings tips based on recorded expenses."""
    if services.transactions.error:
        logger.error(
            f"Could not fetch transaction data: {services.transactions.error} "
            "Please try again."
        )
        sys.exit(1)

    logger.info("Generating savings tips...")
    try:
        tips = get_savings_tips(
            services.transactions.items, services.currency.selected, services.config
        )
    except InsightError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("\nSavings tips")
    logger.info("=" * 80)
    logger.info(tips)


def setup_parser(subparsers):
    """Setup insights command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "insights",
        help="Get AI savings tips",
        description="Personalized savings tips generated from your expenses",
    )
    parser.set_defaults(func=cmd_insights)
