"""
Comment service - comments on reviews, author-only edits.
"""

from app.core.errors import NotFoundError
from app.core.ownership import ensure_owner
from app.db.models.user import User
from app.db.repositories.base_repository import page_to_skip
from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.review_repository import ReviewRepository
from app.schemas.comment import (
    CommentCreate,
    CommentDetail,
    CommentPage,
    CommentUpdate,
    CommentWithReview,
    CommentWithUser,
    UserComments,
)

COMMENT_NOT_FOUND = "Comment not found."
REVIEW_NOT_FOUND = "Review not found."


class CommentService:
    def __init__(self, comment_repo: CommentRepository, review_repo: ReviewRepository):
        self.comment_repo = comment_repo
        self.review_repo = review_repo

    async def create(self, user: User, data: CommentCreate) -> CommentDetail:
        """Comment on an existing review."""
        if not await self.review_repo.get_by_id(data.review_id):
            raise NotFoundError(REVIEW_NOT_FOUND)
        comment = await self.comment_repo.create(
            user_id=user.id, review_id=data.review_id, content=data.content
        )
        comment = await self.comment_repo.get_with_relations(comment.id)
        return CommentDetail.model_validate(comment)

    async def list_for_review(self, review_id: int, *, page: int = 1, limit: int = 10) -> CommentPage:
        if not await self.review_repo.get_by_id(review_id):
            raise NotFoundError(REVIEW_NOT_FOUND)
        comments = await self.comment_repo.list_for_review(
            review_id, skip=page_to_skip(page, limit), limit=limit
        )
        return CommentPage(
            page=page,
            limit=limit,
            comments=[CommentWithUser.model_validate(c) for c in comments],
        )

    async def get_comment(self, id: int) -> CommentDetail:
        comment = await self.comment_repo.get_with_relations(id)
        if not comment:
            raise NotFoundError(COMMENT_NOT_FOUND)
        return CommentDetail.model_validate(comment)

    async def list_for_user(self, user: User) -> UserComments:
        comments = await self.comment_repo.list_for_user(user.id)
        return UserComments(comments=[CommentWithReview.model_validate(c) for c in comments])

    async def update(self, user: User, id: int, data: CommentUpdate) -> CommentWithUser:
        comment = ensure_owner(
            await self.comment_repo.get_by_id(id),
            user.id,
            resource_name="comment",
            action="update",
            not_found_message=COMMENT_NOT_FOUND,
        )
        await self.comment_repo.update(comment, content=data.content)
        comment = await self.comment_repo.get_with_relations(id)
        return CommentWithUser.model_validate(comment)

    async def delete(self, user: User, id: int) -> None:
        comment = ensure_owner(
            await self.comment_repo.get_by_id(id),
            user.id,
            resource_name="comment",
            action="delete",
            not_found_message=COMMENT_NOT_FOUND,
        )
        await self.comment_repo.delete(comment)
