"""
User API endpoints.
"""

from fastapi import APIRouter, Depends

from expense_tracker.dependencies import get_user_repository
from expense_tracker.schemas.user import UserAuthResponse, UserCreate, UserLogin, UserResponse
from expense_tracker.services.user_service import UserRepository, authenticate_user, register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserAuthResponse, status_code=201)
def register(
    data: UserCreate,
    users: UserRepository = Depends(get_user_repository)
):
    """Register a new user."""
    user = register_user(users, data)
    return UserAuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=UserAuthResponse)
def login(
    credentials: UserLogin,
    users: UserRepository = Depends(get_user_repository)
):
    """Check credentials and return the user."""
    user = authenticate_user(users, credentials)
    return UserAuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user)
    )
