"""
Item API tests - listing, filtering, pagination and the derived average rating.
Challenge: Ensure endpoints return correct status codes and shape.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.db.models import Review
from app.db.repositories import CommentRepository, ItemRepository

ITEMS = "/api/v1/items"


@pytest.mark.asyncio
async def test_list_items_empty(client: AsyncClient):
    """GET /api/v1/items returns the page envelope with defaults."""
    response = await client.get(ITEMS)
    assert response.status_code == 200
    assert response.json() == {"page": 1, "limit": 10, "items": []}


@pytest.mark.asyncio
async def test_average_rating_null_without_reviews(client: AsyncClient, test_item):
    response = await client.get(ITEMS)
    item = response.json()["items"][0]
    assert item["id"] == test_item.id
    assert item["averageRating"] is None
    assert "reviews" not in item


@pytest.mark.asyncio
async def test_average_rating_rounded(client: AsyncClient, make_user, make_item, make_review):
    half = await make_item("Half")
    third = await make_item("Third")
    users = [await make_user(name) for name in ("ann", "ben", "cat")]
    await make_review(users[0], half, rating=5)
    await make_review(users[1], half, rating=4)
    for user, rating in zip(users, (5, 4, 4)):
        await make_review(user, third, rating=rating)

    items = {i["name"]: i for i in (await client.get(ITEMS)).json()["items"]}
    assert items["Half"]["averageRating"] == 4.5
    assert items["Third"]["averageRating"] == 4.33

    detail = (await client.get(f"{ITEMS}/{half.id}")).json()
    assert detail["averageRating"] == 4.5


@pytest.mark.asyncio
async def test_search_and_category_filters(client: AsyncClient, make_item):
    await make_item("Mechanical Keyboard", "Clicky", "Electronics")
    await make_item("Coffee Maker", "Makes COFFEE fast", "Kitchen")
    await make_item("Kettle", "Boils water", "Kitchen")

    by_name = (await client.get(ITEMS, params={"search": "keyboard"})).json()["items"]
    assert [i["name"] for i in by_name] == ["Mechanical Keyboard"]

    by_description = (await client.get(ITEMS, params={"search": "coffee"})).json()["items"]
    assert [i["name"] for i in by_description] == ["Coffee Maker"]

    kitchen = (await client.get(ITEMS, params={"category": "Kitchen"})).json()["items"]
    assert [i["name"] for i in kitchen] == ["Coffee Maker", "Kettle"]

    both = (await client.get(ITEMS, params={"category": "Kitchen", "search": "water"})).json()
    assert [i["name"] for i in both["items"]] == ["Kettle"]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(client: AsyncClient, make_item):
    await make_item("100% Cotton")
    await make_item("Polyester")
    names = [i["name"] for i in (await client.get(ITEMS, params={"search": "%"})).json()["items"]]
    assert names == ["100% Cotton"]


@pytest.mark.asyncio
async def test_pagination_is_stable(client: AsyncClient, make_item):
    created = [await make_item(f"Item {n}") for n in range(1, 26)]

    response = await client.get(ITEMS, params={"page": 2, "limit": 10})
    data = response.json()
    assert data["page"] == 2
    assert data["limit"] == 10
    assert [i["id"] for i in data["items"]] == [item.id for item in created[10:20]]

    last = (await client.get(ITEMS, params={"page": 3, "limit": 10})).json()["items"]
    assert len(last) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "abc"}, {"page": 10**20}, {"page": 2**31}],
)
async def test_pagination_bounds(client: AsyncClient, params):
    response = await client.get(ITEMS, params=params)
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_get_item_nested_details(
    client: AsyncClient, session, test_user, other_user, test_item, make_review
):
    review = await make_review(test_user, test_item, rating=5, content="Excellent product!")
    await CommentRepository(session).create(
        user_id=other_user.id, review_id=review.id, content="I agree with this review."
    )
    await session.commit()

    response = await client.get(f"{ITEMS}/{test_item.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Test Item 1"
    assert data["category"] == "Category A"
    assert data["averageRating"] == 5
    [r] = data["reviews"]
    assert r["user"] == {"id": test_user.id, "username": "testuser"}
    [c] = r["comments"]
    assert c["content"] == "I agree with this review."
    assert c["user"]["username"] == "otheruser"


@pytest.mark.asyncio
async def test_get_item_not_found(client: AsyncClient):
    response = await client.get(f"{ITEMS}/9999")
    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}


@pytest.mark.asyncio
async def test_get_item_non_numeric_id(client: AsyncClient):
    response = await client.get(f"{ITEMS}/abc")
    assert response.status_code == 400
    assert isinstance(response.json()["error"], list)


@pytest.mark.asyncio
async def test_delete_item_cascades_reviews(session, test_user, test_item, make_review):
    review = await make_review(test_user, test_item)
    repo = ItemRepository(session)
    await repo.delete(test_item)
    await session.commit()

    result = await session.execute(select(Review).where(Review.id == review.id))
    assert result.scalar_one_or_none() is None


@pytest.mark.asyncio
async def test_repository_update_is_partial(session, test_item):
    repo = ItemRepository(session)
    updated = await repo.update(test_item, {"category": "Category B"})
    await session.commit()

    assert updated.category == "Category B"
    assert updated.name == "Test Item 1"
    assert updated.description == "Description for Test Item 1"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", [f"{ITEMS}/{10**20}", f"/api/v1/reviews/{2**31}", f"/api/v1/comments/{10**20}"])
async def test_oversized_path_id_is_a_validation_error(client: AsyncClient, path):
    response = await client.get(path)
    assert response.status_code == 400
    assert isinstance(response.json()["error"], list)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, params",
    [
        ("/api/v1/reviews", {"itemId": 10**20}),
        ("/api/v1/reviews", {"userId": 10**20}),
        ("/api/v1/comments", {"reviewId": 10**20}),
    ],
)
async def test_oversized_query_id_is_a_validation_error(client: AsyncClient, path, params):
    response = await client.get(path, params=params)
    assert response.status_code == 400
