"""
User service - registration, login and account lifecycle.
Challenge: Never persist or echo plaintext passwords; don't reveal which login check failed.
"""

import logging

from app.config import Settings
from app.core.errors import DuplicateError, InvalidCredentialsError
from app.core.security import create_access_token, hash_password, verify_password
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.schemas.user import LoginRequest, UserCreate, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, settings: Settings):
        self.user_repo = user_repo
        self.settings = settings

    async def register(self, data: UserCreate) -> UserResponse:
        """Create a user. Email is checked first, so a reused email always reports as such."""
        if await self.user_repo.get_by_email(data.email):
            raise DuplicateError("Email already in use")
        if await self.user_repo.get_by_username(data.username):
            raise DuplicateError("Username already in use")
        user = await self.user_repo.create(
            username=data.username,
            email=data.email,
            hashed_password=hash_password(data.password),
        )
        logger.info("Registered user %s", user.id, extra={"user_id": user.id})
        return UserResponse.model_validate(user)

    async def login(self, data: LoginRequest) -> str:
        """Return a signed token for valid credentials."""
        user = await self.user_repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user.hashed_password):
            logger.info("Failed login for %s", data.email)
            raise InvalidCredentialsError()
        return create_access_token(user.id, self.settings)

    async def delete(self, user: User) -> None:
        """Remove the account; reviews and comments go with it."""
        user_id = user.id
        await self.user_repo.delete(user)
        logger.info("Deleted user %s", user_id, extra={"user_id": user_id})
