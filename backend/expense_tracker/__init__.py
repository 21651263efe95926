"""
Expense tracker backend.
"""
