"""
User model - identity and credentials. Owns reviews and comments.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.db.models.comment import Comment
    from app.db.models.review import Review


class User(Base):
    """User entity. Password is only ever stored as a bcrypt hash."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    # ON DELETE CASCADE removes children; ORM does not load them first
    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="user", cascade="all", passive_deletes=True
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="user", cascade="all", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
