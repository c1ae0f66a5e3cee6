"""
Review model - one per (user, item), enforced by a unique constraint.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.db.models.comment import Comment
    from app.db.models.item import Item
    from app.db.models.user import User


class Review(Base):
    """A user's rating (1-5) and text for an item."""

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_reviews_user_item"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    rating: Mapped[int] = mapped_column(nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_id: Mapped[int] = mapped_column(
        ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user: Mapped["User"] = relationship("User", back_populates="reviews")
    item: Mapped["Item"] = relationship("Item", back_populates="reviews")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="review",
        cascade="all",
        passive_deletes=True,
        order_by="[Comment.created_at, Comment.id]",
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, user_id={self.user_id}, item_id={self.item_id})>"
