"""
FastAPI dependencies - injection for settings, DB and auth (SOLID: Dependency Inversion).
Challenge: Reusable auth gate, consistent error responses.
Design: The gate resolves the caller to a User and returns it; handlers receive it as a
parameter. Nothing is stashed on the request.
"""

import logging
from typing import Annotated, NamedTuple

from fastapi import Depends, Path, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import Settings
from app.core.errors import InvalidTokenError, MissingTokenError, UserNotFoundError, ValidationFailed
from app.core.security import resolve_token_subject
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.base import MAX_ID

logger = logging.getLogger(__name__)

# Keeps the row offset (page - 1) * limit inside a signed 64-bit integer.
MAX_PAGE = 2**31 - 1

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def authenticate(token: str | None, repo: UserRepository, settings: Settings) -> User:
    """
    Resolve a bearer token to a live user.

    No token -> MissingTokenError (401). Bad signature, garbage or expired -> InvalidTokenError (403).
    Valid token whose user has since been deleted -> UserNotFoundError (401).
    """
    if not token:
        raise MissingTokenError()
    user_id = resolve_token_subject(token, settings)
    if user_id is None:
        logger.warning("Rejected bearer token")
        raise InvalidTokenError()
    user = await repo.get_by_id(user_id)
    if user is None:
        logger.warning("Token for unknown user", extra={"user_id": user_id})
        raise UserNotFoundError()
    return user


async def get_current_user(
    session: DbSession,
    settings: AppSettings,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> User:
    """Authentication gate for protected routes."""
    token = credentials.credentials if credentials else None
    return await authenticate(token, UserRepository(session), settings)


CurrentUser = Annotated[User, Depends(get_current_user)]


class PageParams(NamedTuple):
    page: int
    limit: int


def get_page_params(
    settings: AppSettings,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(None, ge=1),
) -> PageParams:
    """1-based page and a limit capped by settings.max_page_size."""
    if limit is None:
        limit = settings.default_page_size
    elif limit > settings.max_page_size:
        raise ValidationFailed(f"limit must be at most {settings.max_page_size}")
    return PageParams(page=page, limit=limit)


Pagination = Annotated[PageParams, Depends(get_page_params)]

# Ids above the column range fail validation (400) instead of reaching the driver.
PathId = Annotated[int, Path(le=MAX_ID)]
