"""
Item endpoints - public, read-only catalogue with derived average rating.
Challenge: Pagination, filtering, 404 handling.
Design: Thin controller; service layer holds business logic.
"""

from fastapi import APIRouter, Query

from app.core.dependencies import Pagination, PathId
from app.db.repositories.item_repository import ItemRepository
from app.db.session import DbSession
from app.schemas.item import ItemDetail, ItemPage
from app.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return ItemService(ItemRepository(session))


@router.get("", response_model=ItemPage)
async def list_items(
    session: DbSession,
    pagination: Pagination,
    search: str | None = Query(None),
    category: str | None = Query(None),
):
    """List items. REST: GET /items?search=&category=&page=1&limit=10."""
    svc = _get_item_service(session)
    return await svc.list_items(
        search=search, category=category, page=pagination.page, limit=pagination.limit
    )


@router.get("/{item_id}", response_model=ItemDetail)
async def get_item(session: DbSession, item_id: PathId):
    """Single item with reviews, comments and average rating."""
    svc = _get_item_service(session)
    return await svc.get_item(item_id)
