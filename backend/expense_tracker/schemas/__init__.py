"""
Pydantic schemas package.
"""

from expense_tracker.schemas.common import CamelModel, JsonDecimal
from expense_tracker.schemas.user import (
    UserCreate,
    UserLogin,
    UserResponse,
    UserAuthResponse,
)
from expense_tracker.schemas.expense import (
    ExpenseBase,
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseListResponse,
    ExpenseMessageResponse,
)
from expense_tracker.schemas.stats import (
    StatsTotals,
    CategoryStat,
    MonthlyStat,
    StatsSummary,
)

__all__ = [
    "CamelModel",
    "JsonDecimal",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserAuthResponse",
    "ExpenseBase",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "ExpenseListResponse",
    "ExpenseMessageResponse",
    "StatsTotals",
    "CategoryStat",
    "MonthlyStat",
    "StatsSummary",
]
