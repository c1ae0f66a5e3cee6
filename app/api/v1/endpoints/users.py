"""
User endpoints - registration, login and the caller's own account (RESTful API).
Challenge: Secure auth, validation, clear status codes.
"""

from fastapi import APIRouter, status

from app.core.dependencies import AppSettings, CurrentUser
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.base import MessageResponse
from app.schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


def _get_user_service(session: DbSession, settings: AppSettings) -> UserService:
    return UserService(UserRepository(session), settings)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, settings: AppSettings, data: UserCreate):
    """Create new user. Returns user without password."""
    return await _get_user_service(session, settings).register(data)


@router.post("/login", response_model=TokenResponse)
async def login(session: DbSession, settings: AppSettings, data: LoginRequest):
    """Authenticate and return a bearer token valid for one hour."""
    token = await _get_user_service(session, settings).login(data)
    return TokenResponse(token=token)


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUser):
    return UserResponse.model_validate(user)


@router.delete("/me", response_model=MessageResponse)
async def delete_me(session: DbSession, settings: AppSettings, user: CurrentUser):
    """Delete the caller's account along with their reviews and comments."""
    await _get_user_service(session, settings).delete(user)
    return MessageResponse(message="User deleted successfully.")
