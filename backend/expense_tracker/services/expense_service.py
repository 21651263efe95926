"""
Expense persistence.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from expense_tracker.core.exceptions import NotFoundError
from expense_tracker.models.expense import Expense, ExpenseCategory
from expense_tracker.schemas.expense import ExpenseCreate, ExpenseUpdate
from expense_tracker.services.persistence import storage_errors

logger = logging.getLogger(__name__)


class ExpenseRepository:
    """Reads and writes expense rows through one database session."""

    def __init__(self, db: Session):
        self.db = db

    def find_matching(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[ExpenseCategory] = None,
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Expense]:
        """
        Expenses owned by `user_id` dated within [start_date, end_date].
        Missing bounds are unbounded. Newest first unless `oldest_first`.
        """
        with storage_errors(self.db, "load expenses"):
            query = self.db.query(Expense).filter(Expense.user_id == user_id)

            if category:
                query = query.filter(Expense.category == category)
            if start_date:
                query = query.filter(Expense.date >= start_date)
            if end_date:
                query = query.filter(Expense.date <= end_date)

            if oldest_first:
                query = query.order_by(Expense.date.asc(), Expense.created_at.asc())
            else:
                query = query.order_by(Expense.date.desc(), Expense.created_at.desc())

            if limit:
                query = query.limit(limit)

            return query.all()

    def get(self, expense_id: str) -> Expense:
        with storage_errors(self.db, "load expense"):
            expense = self.db.query(Expense).filter(Expense.id == expense_id).first()
        if not expense:
            raise NotFoundError("Expense not found", details={"id": expense_id})
        return expense

    def create(self, data: ExpenseCreate) -> Expense:
        expense = Expense(
            user_id=data.user_id,
            title=data.title,
            amount=data.amount,
            category=data.category,
            date=data.date,
            description=data.description,
        )
        with storage_errors(self.db, "create expense"):
            self.db.add(expense)
            self.db.commit()
            self.db.refresh(expense)

        logger.info(f"Created expense {expense.id} for user {expense.user_id}")
        return expense

    def update(self, expense_id: str, data: ExpenseUpdate) -> Expense:
        expense = self.get(expense_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(expense, field, value)

        with storage_errors(self.db, "update expense"):
            self.db.commit()
            self.db.refresh(expense)

        logger.info(f"Updated expense {expense.id}: {sorted(update_data)}")
        return expense

    def delete(self, expense_id: str) -> Expense:
        expense = self.get(expense_id)

        with storage_errors(self.db, "delete expense"):
            self.db.delete(expense)
            self.db.commit()

        logger.info(f"Deleted expense {expense_id}")
        return expense
