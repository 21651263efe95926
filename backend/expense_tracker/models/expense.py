"""
Expense database model.
"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from expense_tracker.database import Base


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    food = "food"
    transport = "transport"
    shopping = "shopping"
    entertainment = "entertainment"
    bills = "bills"
    health = "health"
    other = "other"


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    title = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(Enum(ExpenseCategory), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="expenses")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_expense_amount_non_negative"),
        Index("idx_expense_user_date", "user_id", "date"),
    )
