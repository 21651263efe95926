from typing import Optional, Dict, Any


class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker backend."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(ExpenseTrackerError):
    """Raised when a request carries a malformed identifier or date range."""

    pass


class NotFoundError(ExpenseTrackerError):
    """Raised when a requested resource is not found."""

    pass


class ConflictError(ExpenseTrackerError):
    """Raised when a resource with the same unique key already exists."""

    pass


class AuthenticationError(ExpenseTrackerError):
    """Raised when credentials do not match a registered user."""

    pass


class PersistenceError(ExpenseTrackerError):
    """Raised when the database is unreachable, times out or returns bad data."""

    pass
