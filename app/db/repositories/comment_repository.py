"""
Comment repository - comments on reviews.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.models.comment import Comment
from app.db.repositories.base_repository import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    def __init__(self, session):
        super().__init__(session, Comment)

    async def get_with_relations(self, id: int) -> Comment | None:
        """Comment with its author and the review it belongs to."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == id)
            .options(selectinload(Comment.user), selectinload(Comment.review))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_for_review(self, review_id: int, *, skip: int = 0, limit: int = 10) -> list[Comment]:
        """Oldest first, as a conversation reads."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.review_id == review_id)
            .options(selectinload(Comment.user))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_for_user(self, user_id: int) -> list[Comment]:
        """Newest first, with the review each comment belongs to."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.user_id == user_id)
            .options(selectinload(Comment.review))
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, *, user_id: int, review_id: int, content: str) -> Comment:
        return await self.add(Comment(user_id=user_id, review_id=review_id, content=content))

    async def update(self, comment: Comment, *, content: str) -> Comment:
        comment.content = content
        return await self.save(comment)
