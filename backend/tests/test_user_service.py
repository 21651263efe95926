"""Tests for user registration and authentication."""

import pytest
from unittest.mock import patch

from expense_tracker.core.exceptions import AuthenticationError, ConflictError
from expense_tracker.models.user import User
from expense_tracker.schemas.user import UserCreate, UserLogin
from expense_tracker.services.user_service import UserRepository, authenticate_user, register_user


@pytest.fixture
def users(db_session):
    return UserRepository(db_session)


class TestRegisterUser:
    """Test registration."""

    def test_concurrent_duplicate_is_conflict(self, users, db_session, sample_user):
        """An email inserted between the lookup and the insert is still a conflict."""
        data = UserCreate(name="Racer", email=sample_user.email, password="secret456")

        with patch.object(users, "get_by_email", return_value=None):
            with pytest.raises(ConflictError):
                register_user(users, data)

        # Session is rolled back and usable afterwards
        assert db_session.query(User).count() == 1

    def test_register_hashes_password(self, users):
        user = register_user(users, UserCreate(name="Ann", email="ann@example.com", password="secret456"))
        assert user.password_hash != "secret456"
        assert authenticate_user(users, UserLogin(email="ann@example.com", password="secret456")).id == user.id

    def test_wrong_password(self, users, sample_user):
        with pytest.raises(AuthenticationError):
            authenticate_user(users, UserLogin(email=sample_user.email, password="nope"))
