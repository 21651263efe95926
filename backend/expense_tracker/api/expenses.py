"""
Expense API endpoints.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from expense_tracker.config import settings
from expense_tracker.core.exceptions import InvalidInputError
from expense_tracker.core.validation import validate_date_range, validate_identifier
from expense_tracker.dependencies import get_expense_repository, get_stats_aggregator
from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseMessageResponse,
    ExpenseResponse,
    ExpenseUpdate,
)
from expense_tracker.schemas.stats import StatsSummary
from expense_tracker.services.expense_service import ExpenseRepository
from expense_tracker.services.stats_service import StatisticsAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseMessageResponse, status_code=201)
def create_expense(
    data: ExpenseCreate,
    expenses: ExpenseRepository = Depends(get_expense_repository)
):
    """Create a new expense."""
    data.user_id = validate_identifier(data.user_id)
    expense = expenses.create(data)
    return ExpenseMessageResponse(
        message="Expense created successfully",
        expense=ExpenseResponse.model_validate(expense)
    )


@router.get("/stats/{user_id}", response_model=StatsSummary)
def get_user_stats(
    user_id: str,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    aggregator: StatisticsAggregator = Depends(get_stats_aggregator)
):
    """Expense statistics for a user."""
    return aggregator.compute_stats(user_id, start_date, end_date)


@router.get("/detail/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: str,
    expenses: ExpenseRepository = Depends(get_expense_repository)
):
    """Get a single expense."""
    return ExpenseResponse.model_validate(expenses.get(expense_id))


@router.get("/{user_id}", response_model=ExpenseListResponse)
def list_expenses(
    user_id: str,
    category: Optional[str] = None,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    limit: Optional[int] = Query(None, ge=1, le=settings.expense_list_max_limit),
    sort: Optional[str] = Query(None, description="'oldest' for ascending date, newest first otherwise"),
    expenses: ExpenseRepository = Depends(get_expense_repository)
):
    """List a user's expenses with optional filters."""
    user_id = validate_identifier(user_id)
    validate_date_range(start_date, end_date)

    category_filter = None
    if category and category != "all":
        category_filter = _parse_category(category)

    result = expenses.find_matching(
        user_id,
        start_date,
        end_date,
        category=category_filter,
        oldest_first=(sort == "oldest"),
        limit=limit,
    )
    return ExpenseListResponse(
        count=len(result),
        expenses=[ExpenseResponse.model_validate(e) for e in result]
    )


@router.put("/{expense_id}", response_model=ExpenseMessageResponse)
def update_expense(
    expense_id: str,
    update: ExpenseUpdate,
    expenses: ExpenseRepository = Depends(get_expense_repository)
):
    """Update an expense."""
    expense = expenses.update(expense_id, update)
    return ExpenseMessageResponse(
        message="Expense updated successfully",
        expense=ExpenseResponse.model_validate(expense)
    )


@router.delete("/{expense_id}", response_model=ExpenseMessageResponse)
def delete_expense(
    expense_id: str,
    expenses: ExpenseRepository = Depends(get_expense_repository)
):
    """Delete an expense."""
    expense = expenses.delete(expense_id)
    return ExpenseMessageResponse(
        message="Expense deleted successfully",
        expense=ExpenseResponse.model_validate(expense)
    )


def _parse_category(value: str) -> ExpenseCategory:
    try:
        return ExpenseCategory(value)
    except ValueError:
        logger.warning(f"Unknown expense category filter: {value}")
        raise InvalidInputError(
            f"Invalid category: {value!r}",
            details={"allowed": [c.value for c in ExpenseCategory]},
        )
