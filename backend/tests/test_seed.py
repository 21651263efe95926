"""Tests for the demo data seed script."""

from expense_tracker.database import SessionLocal
from expense_tracker.models import Expense, User
from expense_tracker.seed import DEMO_EMAIL, SAMPLE_EXPENSES, seed_demo_data


def test_seed_is_idempotent():
    """Running the seed twice creates the demo user once."""
    seed_demo_data()
    seed_demo_data()

    db = SessionLocal()
    try:
        users = db.query(User).filter(User.email == DEMO_EMAIL).all()
        assert len(users) == 1
        assert db.query(Expense).filter(Expense.user_id == users[0].id).count() == len(SAMPLE_EXPENSES)
    finally:
        db.close()
