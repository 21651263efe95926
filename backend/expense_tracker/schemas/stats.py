"""
Statistics schemas.
"""

from pydantic import Field

from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.schemas.common import CamelModel, JsonDecimal


class StatsTotals(CamelModel):
    total: JsonDecimal
    count: int
    average: JsonDecimal


class CategoryStat(CamelModel):
    category: ExpenseCategory
    total: JsonDecimal
    count: int


class MonthlyStat(CamelModel):
    year: int
    month: int = Field(..., ge=1, le=12)
    total: JsonDecimal
    count: int


class StatsSummary(CamelModel):
    summary: StatsTotals
    by_category: list[CategoryStat]
    monthly_breakdown: list[MonthlyStat]
