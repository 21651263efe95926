"""Shared test fixtures."""

import os

# Keep the app's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from expense_tracker.core.security import hash_password
from expense_tracker.database import Base, get_db
from expense_tracker.main import app
from expense_tracker.models.user import User
from expense_tracker.models.expense import Expense, ExpenseCategory


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user(db_session):
    """Create a sample user with password 'secret123'."""
    user = User(
        id=str(uuid.uuid4()),
        name="Test User",
        email="test@example.com",
        password_hash=hash_password("secret123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def add_expense(db_session):
    """Factory that stores an expense and returns it."""
    def _add(user_id, amount, category, spent_on, title="Expense"):
        expense = Expense(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            amount=Decimal(amount),
            category=category,
            date=spent_on,
            description="",
        )
        db_session.add(expense)
        db_session.commit()
        db_session.refresh(expense)
        return expense
    return _add


@pytest.fixture
def sample_expenses(sample_user, add_expense):
    """Two food expenses in January 2024 and one transport expense in February 2024."""
    return [
        add_expense(sample_user.id, "10.00", ExpenseCategory.food, date(2024, 1, 5), "Groceries"),
        add_expense(sample_user.id, "20.00", ExpenseCategory.food, date(2024, 1, 20), "Dinner"),
        add_expense(sample_user.id, "5.00", ExpenseCategory.transport, date(2024, 2, 1), "Bus"),
    ]
