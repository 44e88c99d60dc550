"""Shared argument parsing helpers for CLI commands."""

import argparse
from datetime import date


def parse_day(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def short_id(item_id: str) -> str:
    return item_id[:8]


def find_by_prefix(collection, id_prefix: str):
    """Find an item whose ID starts with ``id_prefix``.

    Returns:
        The single matching item, or None if zero or several items match.
    """
    matches = [item for item in collection if item.id.startswith(id_prefix)]
    if len(matches) != 1:
        return None
    return matches[0]
