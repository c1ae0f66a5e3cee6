"""
User repository - the credential store. All user data access lives here.
Challenge: Uniqueness of email/username is enforced by the database; surface it distinctly.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.errors import DuplicateError
from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository, is_unique_violation


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with lookups used by auth."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for login."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def create(self, *, username: str, email: str, hashed_password: str) -> User:
        """Insert a user. A concurrent duplicate that slipped past the pre-checks fails here."""
        user = User(username=username, email=email, hashed_password=hashed_password)
        try:
            return await self.add(user)
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise DuplicateError("Email or username already in use") from exc
            raise
