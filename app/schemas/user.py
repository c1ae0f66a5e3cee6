"""User request/response schemas - API contract and validation."""

from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    # bcrypt accepts max 72 bytes; longer passwords are rejected here rather than failing in the hasher
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class TokenResponse(CamelModel):
    token: str


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: int
    username: str
    email: str
    created_at: datetime


class UserSummary(CamelModel):
    """Author stub embedded in reviews and comments."""

    id: int
    username: str
