"""
Review repository - review queries and the one-review-per-(user, item) rule.
Challenge: Friendly pre-check for duplicates, unique constraint as the real guarantee.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from app.core.errors import DuplicateError
from app.db.models.comment import Comment
from app.db.models.review import Review
from app.db.repositories.base_repository import BaseRepository, is_unique_violation

DUPLICATE_REVIEW_MESSAGE = "You have already reviewed this item."


class ReviewRepository(BaseRepository[Review]):
    def __init__(self, session):
        super().__init__(session, Review)

    async def get_by_user_and_item(self, user_id: int, item_id: int) -> Review | None:
        result = await self.session.execute(
            select(Review).where(Review.user_id == user_id, Review.item_id == item_id)
        )
        return result.scalar_one_or_none()

    async def get_with_user(self, id: int) -> Review | None:
        result = await self.session.execute(
            select(Review)
            .where(Review.id == id)
            .options(selectinload(Review.user))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_with_details(self, id: int) -> Review | None:
        """Review with author, item and comments (with their authors)."""
        result = await self.session.execute(
            select(Review)
            .where(Review.id == id)
            .options(
                selectinload(Review.user),
                selectinload(Review.item),
                selectinload(Review.comments).selectinload(Comment.user),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_reviews(
        self,
        *,
        item_id: int | None = None,
        user_id: int | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Review]:
        """Newest first; id breaks ties so pages never overlap."""
        stmt = select(Review).options(selectinload(Review.user), selectinload(Review.item))
        if item_id is not None:
            stmt = stmt.where(Review.item_id == item_id)
        if user_id is not None:
            stmt = stmt.where(Review.user_id == user_id)
        stmt = stmt.order_by(Review.created_at.desc(), Review.id.desc()).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_user(self, user_id: int) -> list[Review]:
        """All reviews written by a user, newest first, with item and comments."""
        result = await self.session.execute(
            select(Review)
            .where(Review.user_id == user_id)
            .options(
                selectinload(Review.item),
                selectinload(Review.comments).selectinload(Comment.user),
            )
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, *, user_id: int, item_id: int, rating: int, content: str) -> Review:
        review = Review(user_id=user_id, item_id=item_id, rating=rating, content=content)
        try:
            return await self.add(review)
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise DuplicateError(DUPLICATE_REVIEW_MESSAGE) from exc
            raise

    async def update(
        self, review: Review, *, rating: int | None = None, content: str | None = None
    ) -> Review:
        """Partial update: fields left as None keep their stored value."""
        if rating is not None:
            review.rating = rating
        if content is not None:
            review.content = content
        return await self.save(review)
