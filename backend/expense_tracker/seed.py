"""
Seed script for a demo user with sample expenses.
"""

import logging
from datetime import date
from decimal import Decimal

from expense_tracker.core.security import hash_password
from expense_tracker.database import SessionLocal, init_db
from expense_tracker.models import Expense, ExpenseCategory, User

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo1234"

SAMPLE_EXPENSES = [
    ("Groceries", "42.30", ExpenseCategory.food, date(2024, 1, 5)),
    ("Lunch with team", "18.75", ExpenseCategory.food, date(2024, 1, 20)),
    ("Metro card", "30.00", ExpenseCategory.transport, date(2024, 2, 1)),
    ("Electricity bill", "64.12", ExpenseCategory.bills, date(2024, 2, 10)),
    ("Cinema", "12.50", ExpenseCategory.entertainment, date(2024, 3, 2)),
    ("Pharmacy", "9.99", ExpenseCategory.health, date(2024, 3, 15)),
    ("Running shoes", "89.00", ExpenseCategory.shopping, date(2024, 4, 8)),
]


def seed_demo_data():
    """Create the demo user and its expenses unless it already exists."""
    init_db()
    db = SessionLocal()

    try:
        if db.query(User).filter(User.email == DEMO_EMAIL).first():
            logger.info(f"Demo user {DEMO_EMAIL} already seeded")
            return

        user = User(name="Demo User", email=DEMO_EMAIL, password_hash=hash_password(DEMO_PASSWORD))
        db.add(user)
        db.flush()  # Get the user ID

        for title, amount, category, spent_on in SAMPLE_EXPENSES:
            db.add(Expense(
                user_id=user.id,
                title=title,
                amount=Decimal(amount),
                category=category,
                date=spent_on,
            ))

        db.commit()
        logger.info(f"Seeded demo user {user.id} with {len(SAMPLE_EXPENSES)} expenses")

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_demo_data()
