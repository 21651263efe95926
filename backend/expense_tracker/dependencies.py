"""
FastAPI dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from expense_tracker.database import get_db
from expense_tracker.services.expense_service import ExpenseRepository
from expense_tracker.services.stats_service import StatisticsAggregator
from expense_tracker.services.user_service import UserRepository


def get_expense_repository(db: Session = Depends(get_db)) -> ExpenseRepository:
    return ExpenseRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_stats_aggregator(
    expenses: ExpenseRepository = Depends(get_expense_repository),
) -> StatisticsAggregator:
    return StatisticsAggregator(expenses)
