"""Item response schemas - REST API contract."""

from datetime import datetime

from app.schemas.base import CamelModel
from app.schemas.review import ReviewWithComments


class ItemResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    category: str | None = None
    created_at: datetime
    average_rating: float | None = None  # Populated by service layer


class ItemDetail(ItemResponse):
    reviews: list[ReviewWithComments] = []


class ItemPage(CamelModel):
    page: int
    limit: int
    items: list[ItemResponse]
