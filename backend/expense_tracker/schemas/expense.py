"""
Expense schemas.
"""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.schemas.common import CamelModel, JsonDecimal


class ExpenseBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    category: ExpenseCategory
    date: dt.date
    description: str = ""

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        # Strip before length checks so blank titles are rejected
        return value.strip() if isinstance(value, str) else value


class ExpenseCreate(ExpenseBase):
    user_id: str


class ExpenseUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    category: Optional[ExpenseCategory] = None
    date: Optional[dt.date] = None
    description: Optional[str] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class ExpenseResponse(CamelModel):
    id: str
    user_id: str
    title: str
    amount: JsonDecimal
    category: ExpenseCategory
    date: dt.date
    description: str
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class ExpenseListResponse(CamelModel):
    count: int
    expenses: list[ExpenseResponse]


class ExpenseMessageResponse(CamelModel):
    message: str
    expense: ExpenseResponse
