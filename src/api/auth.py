"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentIdentity, get_auth_service
from src.errors import AppError, ErrorKind
from src.schemas.auth import LoginResponse, UserLogin, UserRegister, UserResponse, UserUpdate
from src.schemas.common import ApiResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data.name, user_data.email, user_data.password)
    return ApiResponse(data=user, message="User registered successfully")


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    result = auth_service.login(credentials.email, credentials.password)
    return ApiResponse(data=result, message="Login successful")


@router.get("/me", response_model=ApiResponse[UserResponse])
def get_me(
    identity: CurrentIdentity,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get current user information."""
    user = auth_service.find_by_id(identity.id)
    if user is None:
        raise AppError(ErrorKind.USER_NOT_FOUND)
    return ApiResponse(data=user)


@router.put("/me", response_model=ApiResponse[UserResponse])
def update_me(
    user_data: UserUpdate,
    identity: CurrentIdentity,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Update name, email or password of the current user."""
    user = auth_service.update_profile(identity.id, user_data)
    return ApiResponse(data=user, message="Profile updated successfully")


@router.get("/users", response_model=ApiResponse[list[UserResponse]])
def list_users(
    identity: CurrentIdentity,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """List all users, newest first."""
    return ApiResponse(data=auth_service.list_all())
