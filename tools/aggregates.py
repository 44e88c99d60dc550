"""Spending aggregates derived from transactions.

Everything here is computed from scratch on each call; nothing is cached or
stored. Budgets only ever hold a limit, spent amounts always come from here.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, List, TypeVar
from models.budget import Budget
from models.transaction import Transaction

ZERO = Decimal("0")

T = TypeVar("T")


class BudgetStatus(Enum):
    NO_BUDGETS = "No budgets set"
    ON_TRACK = "On Track"
    OVER_BUDGET = "Over Budget"


@dataclass
class BudgetProgress:
    """Where a budget stands against actual spending."""

    category: str
    limit: Decimal
    spent: Decimal
    remaining: Decimal
    is_over_budget: bool
    progress_percent: Decimal


@dataclass
class DailySummary:
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass
class SpendingInsight:
    category: str
    total_spent: Decimal
    percentage: Decimal


@dataclass
class DayOverview:
    """Everything that happened on one calendar day."""

    day: date
    transactions: List[Transaction]
    todos: list
    reminders: list
    summary: DailySummary


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions if t.is_income), ZERO)


def total_expenses(transactions: Iterable[Transaction]) -> Decimal:
    """Total spent, as a positive number."""
    return sum((abs(t.amount) for t in transactions if t.is_expense), ZERO)


def net_balance(transactions: Iterable[Transaction]) -> Decimal:
    transactions = list(transactions)
    return total_income(transactions) - total_expenses(transactions)


def category_totals(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """Sum expenses by category.

    Returns:
        Mapping of category name to the absolute amount spent, in order of
        first appearance. Categories without expenses are absent.
    """
    totals: Dict[str, Decimal] = {}
    for t in transactions:
        if t.is_expense:
            totals[t.category] = totals.get(t.category, ZERO) + abs(t.amount)
    return totals


def category_breakdown(transactions: Iterable[Transaction]) -> List[SpendingInsight]:
    """Per-category spending with each category's share of total expenses.

    Returns:
        SpendingInsight list, biggest spend first.
    """
    totals = category_totals(transactions)
    grand_total = sum(totals.values(), ZERO)

    breakdown = []
    for category, spent in totals.items():
        percentage = spent / grand_total * 100 if grand_total > 0 else ZERO
        breakdown.append(
            SpendingInsight(category=category, total_spent=spent, percentage=percentage)
        )
    return sorted(breakdown, key=lambda insight: insight.total_spent, reverse=True)


def budget_progress(budget: Budget, transactions: Iterable[Transaction]) -> BudgetProgress:
    """Compute spent, remaining and percentage used for a budget.

    A zero limit reports 0% rather than dividing by zero.
    """
    spent = category_totals(transactions).get(budget.category, ZERO)
    limit = budget.limit
    return BudgetProgress(
        category=budget.category,
        limit=limit,
        spent=spent,
        remaining=limit - spent,
        is_over_budget=spent > limit,
        progress_percent=spent / limit * 100 if limit > 0 else ZERO,
    )


def overall_budget_status(
    budgets: Iterable[Budget], transactions: Iterable[Transaction]
) -> BudgetStatus:
    """Compare total spending in budgeted categories with the total limit."""
    budgets = list(budgets)
    total_limit = sum((b.limit for b in budgets), ZERO)
    if total_limit == 0:
        return BudgetStatus.NO_BUDGETS

    budgeted = {b.category for b in budgets}
    totals = category_totals(transactions)
    total_spent = sum((totals.get(c, ZERO) for c in budgeted), ZERO)

    if total_spent <= total_limit:
        return BudgetStatus.ON_TRACK
    return BudgetStatus.OVER_BUDGET


def transactions_on(transactions: Iterable[Transaction], day: date) -> List[Transaction]:
    """Transactions whose local calendar day is exactly ``day``."""
    return [t for t in transactions if t.day == day]


def items_on(items: Iterable[T], day: date) -> List[T]:
    """To-dos or reminders scheduled for ``day``."""
    return [item for item in items if item.date == day]


def daily_summary(transactions: Iterable[Transaction], day: date) -> DailySummary:
    """Income and expenses (both positive) for one calendar day."""
    todays = transactions_on(transactions, day)
    return DailySummary(income=total_income(todays), expenses=total_expenses(todays))


def day_overview(services, day: date) -> DayOverview:
    """Gather the transactions, to-dos, reminders and totals for a day.

    Args:
        services: Services container with transactions, todos and reminders.
        day: Calendar day to look at.
    """
    transactions = services.transactions.items
    return DayOverview(
        day=day,
        transactions=transactions_on(transactions, day),
        todos=items_on(services.todos.items, day),
        reminders=items_on(services.reminders.items, day),
        summary=daily_summary(transactions, day),
    )
