"""Review request/response schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import MAX_ID, CamelModel
from app.schemas.comment import CommentWithUser
from app.schemas.user import UserSummary


class ReviewCreate(CamelModel):
    item_id: int = Field(..., le=MAX_ID)
    rating: int = Field(..., ge=1, le=5)
    content: str = Field(..., min_length=1)


class ReviewUpdate(CamelModel):
    """Partial update. Omitted fields keep their stored value."""

    rating: int | None = Field(None, ge=1, le=5)
    content: str | None = Field(None, min_length=1)


class ItemSummary(CamelModel):
    id: int
    name: str


class ItemBrief(ItemSummary):
    description: str | None = None
    category: str | None = None


class ReviewResponse(CamelModel):
    id: int
    rating: int
    content: str
    user_id: int
    item_id: int
    created_at: datetime
    updated_at: datetime


class ReviewWithUser(ReviewResponse):
    user: UserSummary


class ReviewListEntry(ReviewWithUser):
    item: ItemSummary


class ReviewWithComments(ReviewWithUser):
    comments: list[CommentWithUser] = []


class ReviewDetail(ReviewWithComments):
    item: ItemBrief


class UserReview(ReviewResponse):
    item: ItemSummary
    comments: list[CommentWithUser] = []


class ReviewPage(CamelModel):
    page: int
    limit: int
    reviews: list[ReviewListEntry]


class UserReviews(CamelModel):
    reviews: list[UserReview]
