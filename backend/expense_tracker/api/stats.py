"""
Statistics API endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from expense_tracker.dependencies import get_stats_aggregator
from expense_tracker.schemas.stats import StatsSummary
from expense_tracker.services.stats_service import StatisticsAggregator

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsSummary)
def get_stats(
    user_id: str = Query(..., alias="userId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    aggregator: StatisticsAggregator = Depends(get_stats_aggregator)
):
    """
    Totals, per-category and monthly breakdown of a user's expenses.
    Date bounds are inclusive; omit either for an open range.
    """
    return aggregator.compute_stats(user_id, start_date, end_date)
