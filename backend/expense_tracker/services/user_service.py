"""
User registration and login.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_tracker.core.exceptions import AuthenticationError, ConflictError
from expense_tracker.core.security import hash_password, verify_password
from expense_tracker.models.user import User
from expense_tracker.schemas.user import UserCreate, UserLogin
from expense_tracker.services.persistence import storage_errors

logger = logging.getLogger(__name__)


class UserRepository:
    """Reads and writes user rows through one database session."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        with storage_errors(self.db, "load user"):
            return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        with storage_errors(self.db, "load user"):
            return self.db.query(User).filter(User.email == email).first()

    def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        with storage_errors(self.db, "create user"):
            try:
                self.db.add(user)
                self.db.commit()
            except IntegrityError as e:
                # Lost a race with another registration for the same email
                self.db.rollback()
                raise ConflictError("User already exists", details={"email": email}) from e
            self.db.refresh(user)
        return user


def register_user(users: UserRepository, data: UserCreate) -> User:
    """Create a user, rejecting an email that is already registered."""
    if users.get_by_email(data.email):
        logger.warning(f"Registration rejected, email already in use: {data.email}")
        raise ConflictError("User already exists", details={"email": data.email})

    user = users.create(data.name, data.email, hash_password(data.password))
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(users: UserRepository, credentials: UserLogin) -> User:
    """Return the user matching the credentials or raise AuthenticationError."""
    user = users.get_by_email(credentials.email)
    # Same message for unknown email and wrong password
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login for {credentials.email}")
        raise AuthenticationError("Invalid credentials")
    return user
