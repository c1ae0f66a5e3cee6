"""
Review endpoints - public reads, authenticated writes, author-only changes.
"""

from fastapi import APIRouter, Query, status

from app.core.dependencies import CurrentUser, Pagination, PathId
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.review_repository import ReviewRepository
from app.db.session import DbSession
from app.schemas.base import MAX_ID, MessageResponse
from app.schemas.review import (
    ReviewCreate,
    ReviewDetail,
    ReviewPage,
    ReviewUpdate,
    ReviewWithUser,
    UserReviews,
)
from app.services.review_service import ReviewService

router = APIRouter()


def _get_review_service(session: DbSession) -> ReviewService:
    return ReviewService(ReviewRepository(session), ItemRepository(session))


@router.post("", response_model=ReviewWithUser, status_code=status.HTTP_201_CREATED)
async def create_review(session: DbSession, user: CurrentUser, data: ReviewCreate):
    """Review an item. One review per user per item."""
    return await _get_review_service(session).create(user, data)


@router.get("", response_model=ReviewPage)
async def list_reviews(
    session: DbSession,
    pagination: Pagination,
    item_id: int | None = Query(None, alias="itemId", le=MAX_ID),
    user_id: int | None = Query(None, alias="userId", le=MAX_ID),
):
    """Newest first, optionally filtered by item and/or author."""
    return await _get_review_service(session).list_reviews(
        item_id=item_id, user_id=user_id, page=pagination.page, limit=pagination.limit
    )


@router.get("/user/me", response_model=UserReviews)
async def my_reviews(session: DbSession, user: CurrentUser):
    return await _get_review_service(session).list_for_user(user)


@router.get("/{review_id}", response_model=ReviewDetail)
async def get_review(session: DbSession, review_id: PathId):
    return await _get_review_service(session).get_review(review_id)


@router.put("/{review_id}", response_model=ReviewWithUser)
async def update_review(
    session: DbSession, user: CurrentUser, review_id: PathId, data: ReviewUpdate
):
    """Partial update by the author."""
    return await _get_review_service(session).update(user, review_id, data)


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(session: DbSession, user: CurrentUser, review_id: PathId):
    """Delete by the author; comments on the review go with it."""
    await _get_review_service(session).delete(user, review_id)
    return MessageResponse(message="Review deleted successfully.")
