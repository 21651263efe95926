"""
Main API router.
"""

from fastapi import APIRouter
from expense_tracker.api import users, expenses, stats

api_router = APIRouter()

api_router.include_router(users.router)
api_router.include_router(expenses.router)
api_router.include_router(stats.router)
