"""
Item service - business logic for items (SOLID: Single Responsibility).
Challenge: Attach the derived average rating without leaking raw ratings; keep controllers thin.
"""

from app.core.errors import NotFoundError
from app.db.models.item import Item
from app.db.repositories.base_repository import page_to_skip
from app.db.repositories.item_repository import ItemRepository, average_rating
from app.schemas.item import ItemDetail, ItemPage, ItemResponse

ITEM_NOT_FOUND = "Item not found"


def _item_to_response(item: Item, rating: float | None) -> ItemResponse:
    """Map model to API response with its average rating."""
    return ItemResponse(
        id=item.id,
        name=item.name,
        description=item.description,
        category=item.category,
        created_at=item.created_at,
        average_rating=rating,
    )


class ItemService:
    """Item use cases. Items are created by seeding, read by everyone."""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def list_items(
        self,
        *,
        search: str | None = None,
        category: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ItemPage:
        rows = await self.item_repo.list_with_ratings(
            search=search,
            category=category,
            skip=page_to_skip(page, limit),
            limit=limit,
        )
        return ItemPage(
            page=page,
            limit=limit,
            items=[_item_to_response(item, rating) for item, rating in rows],
        )

    async def get_item(self, id: int) -> ItemDetail:
        """Full item: reviews with authors and comments, plus average rating."""
        item = await self.item_repo.get_with_details(id)
        if not item:
            raise NotFoundError(ITEM_NOT_FOUND)
        detail = ItemDetail.model_validate(item)
        detail.average_rating = average_rating([review.rating for review in item.reviews])
        return detail

