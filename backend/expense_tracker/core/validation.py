"""
Input checks shared by the services.
"""

import uuid
from datetime import date
from typing import Optional

from expense_tracker.core.exceptions import InvalidInputError


def validate_identifier(value: str, field: str = "userId") -> str:
    """Return the canonical form of a UUID identifier or raise InvalidInputError."""
    try:
        parsed = uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        raise InvalidInputError(
            f"Invalid {field}: {value!r}",
            details={"field": field},
        )
    return str(parsed)


def validate_date_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    """Both bounds are inclusive; a missing bound is unbounded."""
    if start_date and end_date and start_date > end_date:
        raise InvalidInputError(
            "startDate must not be after endDate",
            details={"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
        )
