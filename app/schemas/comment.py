"""Comment request/response schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import MAX_ID, CamelModel
from app.schemas.user import UserSummary


class CommentCreate(CamelModel):
    review_id: int = Field(..., le=MAX_ID)
    content: str = Field(..., min_length=1)


class CommentUpdate(CamelModel):
    content: str = Field(..., min_length=1)


class ReviewSummary(CamelModel):
    id: int
    content: str


class CommentResponse(CamelModel):
    id: int
    content: str
    user_id: int
    review_id: int
    created_at: datetime
    updated_at: datetime


class CommentWithUser(CommentResponse):
    user: UserSummary


class CommentWithReview(CommentResponse):
    review: ReviewSummary


class CommentDetail(CommentWithUser):
    review: ReviewSummary


class CommentPage(CamelModel):
    page: int
    limit: int
    comments: list[CommentWithUser]


class UserComments(CamelModel):
    comments: list[CommentWithReview]
