"""
Expense statistics: totals, per-category and per-month breakdowns.
"""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from expense_tracker.config import settings
from expense_tracker.core.validation import validate_date_range, validate_identifier
from expense_tracker.models.expense import Expense, ExpenseCategory
from expense_tracker.schemas.stats import CategoryStat, MonthlyStat, StatsSummary, StatsTotals
from expense_tracker.services.expense_service import ExpenseRepository

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def summarize_totals(expenses: Sequence[Expense]) -> StatsTotals:
    """Sum, count and mean amount; all zero for an empty set."""
    count = len(expenses)
    if count == 0:
        return StatsTotals(total=ZERO, count=0, average=ZERO)

    total = sum((e.amount for e in expenses), ZERO)
    return StatsTotals(total=total, count=count, average=total / count)


def group_by_category(expenses: Sequence[Expense]) -> List[CategoryStat]:
    """
    One entry per category present, largest total first.
    Equal totals are ordered by category name.
    """
    totals: Dict[ExpenseCategory, Decimal] = defaultdict(lambda: ZERO)
    counts: Dict[ExpenseCategory, int] = defaultdict(int)
    for e in expenses:
        totals[e.category] += e.amount
        counts[e.category] += 1

    ordered = sorted(totals, key=lambda cat: (-totals[cat], cat.value))
    return [
        CategoryStat(category=cat, total=totals[cat], count=counts[cat])
        for cat in ordered
    ]


def group_by_month(expenses: Sequence[Expense], limit: int) -> List[MonthlyStat]:
    """
    One entry per (year, month) present, most recent first, at most `limit`.
    Months without expenses are skipped, so entries need not be consecutive.
    """
    totals: Dict[Tuple[int, int], Decimal] = defaultdict(lambda: ZERO)
    counts: Dict[Tuple[int, int], int] = defaultdict(int)
    for e in expenses:
        key = (e.date.year, e.date.month)
        totals[key] += e.amount
        counts[key] += 1

    ordered = sorted(totals, reverse=True)[:limit]
    return [
        MonthlyStat(year=year, month=month, total=totals[(year, month)], count=counts[(year, month)])
        for year, month in ordered
    ]


class StatisticsAggregator:
    """Computes a StatsSummary for one user from the expenses repository."""

    def __init__(self, expenses: ExpenseRepository, month_limit: Optional[int] = None):
        self.expenses = expenses
        self.month_limit = month_limit if month_limit is not None else settings.stats_month_limit

    def compute_stats(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> StatsSummary:
        """
        Aggregate the user's expenses dated within the inclusive range.

        Raises InvalidInputError for a malformed user id or a reversed range
        before touching the database. Storage failures propagate as
        PersistenceError.
        """
        user_id = validate_identifier(user_id)
        validate_date_range(start_date, end_date)

        matching = self.expenses.find_matching(user_id, start_date, end_date)

        summary = StatsSummary(
            summary=summarize_totals(matching),
            by_category=group_by_category(matching),
            monthly_breakdown=group_by_month(matching, self.month_limit),
        )
        logger.debug(
            f"Stats for user {user_id}: {summary.summary.count} expenses, "
            f"{len(summary.by_category)} categories, {len(summary.monthly_breakdown)} months"
        )
        return summary
