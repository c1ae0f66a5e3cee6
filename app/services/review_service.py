"""
Review service - create, read, update, delete reviews.
Challenge: One review per user per item; only the author may change or remove a review.
"""

import logging

from app.core.errors import DuplicateError, NotFoundError
from app.core.ownership import ensure_owner
from app.db.models.user import User
from app.db.repositories.base_repository import page_to_skip
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.review_repository import DUPLICATE_REVIEW_MESSAGE, ReviewRepository
from app.schemas.review import (
    ReviewCreate,
    ReviewDetail,
    ReviewListEntry,
    ReviewPage,
    ReviewUpdate,
    ReviewWithUser,
    UserReview,
    UserReviews,
)

logger = logging.getLogger(__name__)

REVIEW_NOT_FOUND = "Review not found"


class ReviewService:
    def __init__(self, review_repo: ReviewRepository, item_repo: ItemRepository):
        self.review_repo = review_repo
        self.item_repo = item_repo

    async def create(self, user: User, data: ReviewCreate) -> ReviewWithUser:
        """
        Create a review for the caller.

        The pre-check gives the friendly message; the unique constraint in the
        repository covers concurrent duplicates with the same message.
        """
        if await self.review_repo.get_by_user_and_item(user.id, data.item_id):
            raise DuplicateError(DUPLICATE_REVIEW_MESSAGE)
        if not await self.item_repo.get_by_id(data.item_id):
            raise NotFoundError("Item not found")
        review = await self.review_repo.create(
            user_id=user.id,
            item_id=data.item_id,
            rating=data.rating,
            content=data.content,
        )
        logger.info("User %s reviewed item %s", user.id, data.item_id, extra={"user_id": user.id})
        review = await self.review_repo.get_with_user(review.id)
        return ReviewWithUser.model_validate(review)

    async def list_reviews(
        self,
        *,
        item_id: int | None = None,
        user_id: int | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ReviewPage:
        reviews = await self.review_repo.list_reviews(
            item_id=item_id,
            user_id=user_id,
            skip=page_to_skip(page, limit),
            limit=limit,
        )
        return ReviewPage(
            page=page,
            limit=limit,
            reviews=[ReviewListEntry.model_validate(r) for r in reviews],
        )

    async def get_review(self, id: int) -> ReviewDetail:
        review = await self.review_repo.get_with_details(id)
        if not review:
            raise NotFoundError(REVIEW_NOT_FOUND)
        return ReviewDetail.model_validate(review)

    async def list_for_user(self, user: User) -> UserReviews:
        reviews = await self.review_repo.list_for_user(user.id)
        return UserReviews(reviews=[UserReview.model_validate(r) for r in reviews])

    async def update(self, user: User, id: int, data: ReviewUpdate) -> ReviewWithUser:
        review = ensure_owner(
            await self.review_repo.get_by_id(id),
            user.id,
            resource_name="review",
            action="update",
            not_found_message=REVIEW_NOT_FOUND,
        )
        await self.review_repo.update(review, rating=data.rating, content=data.content)
        review = await self.review_repo.get_with_user(id)
        return ReviewWithUser.model_validate(review)

    async def delete(self, user: User, id: int) -> None:
        review = ensure_owner(
            await self.review_repo.get_by_id(id),
            user.id,
            resource_name="review",
            action="delete",
            not_found_message=REVIEW_NOT_FOUND,
        )
        await self.review_repo.delete(review)
