"""
Comment endpoints - comments scoped to a review.
"""

from fastapi import APIRouter, Query, status

from app.core.dependencies import CurrentUser, Pagination, PathId
from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.review_repository import ReviewRepository
from app.db.session import DbSession
from app.schemas.base import MAX_ID, MessageResponse
from app.schemas.comment import (
    CommentCreate,
    CommentDetail,
    CommentPage,
    CommentUpdate,
    CommentWithUser,
    UserComments,
)
from app.services.comment_service import CommentService

router = APIRouter()


def _get_comment_service(session: DbSession) -> CommentService:
    return CommentService(CommentRepository(session), ReviewRepository(session))


@router.post("", response_model=CommentDetail, status_code=status.HTTP_201_CREATED)
async def create_comment(session: DbSession, user: CurrentUser, data: CommentCreate):
    return await _get_comment_service(session).create(user, data)


@router.get("", response_model=CommentPage)
async def list_comments(
    session: DbSession,
    pagination: Pagination,
    review_id: int = Query(..., alias="reviewId", le=MAX_ID),
):
    """Comments on one review, oldest first."""
    return await _get_comment_service(session).list_for_review(
        review_id, page=pagination.page, limit=pagination.limit
    )


@router.get("/user/me", response_model=UserComments)
async def my_comments(session: DbSession, user: CurrentUser):
    return await _get_comment_service(session).list_for_user(user)


@router.get("/{comment_id}", response_model=CommentDetail)
async def get_comment(session: DbSession, comment_id: PathId):
    return await _get_comment_service(session).get_comment(comment_id)


@router.put("/{comment_id}", response_model=CommentWithUser)
async def update_comment(
    session: DbSession, user: CurrentUser, comment_id: PathId, data: CommentUpdate
):
    return await _get_comment_service(session).update(user, comment_id, data)


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(session: DbSession, user: CurrentUser, comment_id: PathId):
    await _get_comment_service(session).delete(user, comment_id)
    return MessageResponse(message="Comment deleted successfully.")
