"""
Item repository - item data access and the derived average rating.
Challenge: Database query performance; avoid N+1, aggregate in SQL for lists.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.orm import selectinload

from app.db.models.comment import Comment
from app.db.models.item import Item
from app.db.models.review import Review
from app.db.repositories.base_repository import BaseRepository


def round_rating(value: float | Decimal | None) -> float | None:
    """Two-decimal average, None when there is nothing to average."""
    if value is None:
        return None
    return round(float(value), 2)


def average_rating(ratings: list[int]) -> float | None:
    if not ratings:
        return None
    return round_rating(sum(ratings) / len(ratings))


class ItemRepository(BaseRepository[Item]):
    """Item-specific queries. Ratings never leave this layer as a raw list."""

    def __init__(self, session):
        super().__init__(session, Item)

    async def list_with_ratings(
        self,
        *,
        search: str | None = None,
        category: str | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[tuple[Item, float | None]]:
        """Filtered page of items, each paired with its average rating (one query)."""
        avg = func.avg(Review.rating).label("average_rating")
        stmt = select(Item, avg).outerjoin(Review, Review.item_id == Item.id)
        if search:
            stmt = stmt.where(
                or_(
                    Item.name.icontains(search, autoescape=True),
                    Item.description.icontains(search, autoescape=True),
                )
            )
        if category:
            stmt = stmt.where(Item.category == category)
        stmt = stmt.group_by(Item.id).order_by(Item.id).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [(item, round_rating(value)) for item, value in result.all()]

    async def get_with_details(self, id: int) -> Item | None:
        """Item with reviews, their authors, comments and comment authors (no N+1)."""
        result = await self.session.execute(
            select(Item)
            .where(Item.id == id)
            .options(
                selectinload(Item.reviews).selectinload(Review.user),
                selectinload(Item.reviews)
                .selectinload(Review.comments)
                .selectinload(Comment.user),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(
        self, *, name: str, description: str | None = None, category: str | None = None
    ) -> Item:
        return await self.add(Item(name=name, description=description, category=category))

    async def update(self, item: Item, fields: dict[str, Any]) -> Item:
        """Apply only the given fields."""
        for key, value in fields.items():
            setattr(item, key, value)
        return await self.save(item)
