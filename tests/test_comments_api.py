"""
Comment API tests - comments scoped to a review, author-only changes.
"""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy import select

from app.db.models import Comment
from app.db.repositories import CommentRepository

COMMENTS = "/api/v1/comments"


@pytest_asyncio.fixture
async def review(other_user, test_item, make_review):
    # Written by the other user; test_user comments on it
    return await make_review(other_user, test_item, content="This is a test review.")


@pytest.fixture
def make_comment(session):
    async def _make(user, review, content="A comment"):
        comment = await CommentRepository(session).create(
            user_id=user.id, review_id=review.id, content=content
        )
        await session.commit()
        return comment

    return _make


@pytest.mark.asyncio
async def test_create_comment(client: AsyncClient, test_user, review, auth_headers):
    response = await client.post(
        COMMENTS, headers=auth_headers, json={"reviewId": review.id, "content": "This is a test comment."}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["content"] == "This is a test comment."
    assert data["user"] == {"id": test_user.id, "username": "testuser"}
    assert data["review"] == {"id": review.id, "content": "This is a test review."}


@pytest.mark.asyncio
async def test_create_comment_on_missing_review(client: AsyncClient, auth_headers):
    response = await client.post(COMMENTS, headers=auth_headers, json={"reviewId": 9999, "content": "Hello"})
    assert response.status_code == 404
    assert response.json() == {"error": "Review not found."}


@pytest.mark.asyncio
async def test_create_comment_requires_content(client: AsyncClient, review, auth_headers):
    response = await client.post(COMMENTS, headers=auth_headers, json={"reviewId": review.id, "content": ""})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_comments_oldest_first(client: AsyncClient, test_user, other_user, review, make_comment):
    first = await make_comment(test_user, review, "first")
    second = await make_comment(other_user, review, "second")
    third = await make_comment(test_user, review, "third")

    response = await client.get(COMMENTS, params={"reviewId": review.id, "page": 1, "limit": 10})
    assert response.status_code == 200
    data = response.json()
    assert [c["id"] for c in data["comments"]] == [first.id, second.id, third.id]
    assert data["comments"][1]["user"]["username"] == "otheruser"

    page_two = (await client.get(COMMENTS, params={"reviewId": review.id, "page": 2, "limit": 2})).json()
    assert [c["id"] for c in page_two["comments"]] == [third.id]


@pytest.mark.asyncio
async def test_list_comments_needs_existing_review(client: AsyncClient):
    response = await client.get(COMMENTS, params={"reviewId": 9999})
    assert response.status_code == 404
    assert response.json() == {"error": "Review not found."}

    response = await client.get(COMMENTS)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_comment_by_owner(client: AsyncClient, test_user, review, make_comment, auth_headers):
    comment = await make_comment(test_user, review)

    response = await client.put(f"{COMMENTS}/{comment.id}", headers=auth_headers, json={"content": "Updated comment content."})
    assert response.status_code == 200
    assert response.json()["id"] == comment.id
    assert response.json()["content"] == "Updated comment content."


@pytest.mark.asyncio
async def test_non_owner_cannot_update_or_delete(
    client: AsyncClient, test_user, other_user, review, make_comment, headers_for
):
    comment = await make_comment(test_user, review)
    intruder = headers_for(other_user)

    response = await client.put(f"{COMMENTS}/{comment.id}", headers=intruder, json={"content": "Hijack"})
    assert response.status_code == 403
    assert response.json() == {"error": "You are not authorized to update this comment."}

    response = await client.delete(f"{COMMENTS}/{comment.id}", headers=intruder)
    assert response.status_code == 403
    assert response.json() == {"error": "You are not authorized to delete this comment."}


@pytest.mark.asyncio
async def test_missing_comment_is_404(client: AsyncClient, auth_headers):
    response = await client.put(f"{COMMENTS}/9999", headers=auth_headers, json={"content": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Comment not found."}


@pytest.mark.asyncio
async def test_delete_comment(client: AsyncClient, test_user, review, make_comment, auth_headers):
    comment = await make_comment(test_user, review)

    response = await client.delete(f"{COMMENTS}/{comment.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully."}

    response = await client.get(f"{COMMENTS}/{comment.id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Comment not found."}


@pytest.mark.asyncio
async def test_my_comments_newest_first(
    client: AsyncClient, test_user, other_user, review, make_comment, auth_headers
):
    older = await make_comment(test_user, review, "First comment by user.")
    await make_comment(other_user, review, "Not mine")
    newer = await make_comment(test_user, review, "Second comment by user.")

    response = await client.get(f"{COMMENTS}/user/me", headers=auth_headers)
    assert response.status_code == 200
    comments = response.json()["comments"]
    assert [c["id"] for c in comments] == [newer.id, older.id]
    assert comments[0]["review"] == {"id": review.id, "content": "This is a test review."}


@pytest.mark.asyncio
async def test_deleting_review_removes_its_comments(
    client: AsyncClient, session, test_user, review, make_comment, headers_for, other_user
):
    comment = await make_comment(test_user, review)

    response = await client.delete(f"/api/v1/reviews/{review.id}", headers=headers_for(other_user))
    assert response.status_code == 200

    result = await session.execute(select(Comment).where(Comment.id == comment.id))
    assert result.scalar_one_or_none() is None


@pytest.mark.asyncio
async def test_nested_comments_read_oldest_first(
    client: AsyncClient, session, test_user, other_user, test_item, review, make_comment
):
    first = await make_comment(test_user, review, "first")
    second = await make_comment(other_user, review, "second")
    backdated = await make_comment(test_user, review, "backdated")
    backdated.created_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
    await session.commit()
    expected = [backdated.id, first.id, second.id]

    detail = (await client.get(f"/api/v1/reviews/{review.id}")).json()
    assert [c["id"] for c in detail["comments"]] == expected

    item = (await client.get(f"/api/v1/items/{test_item.id}")).json()
    [nested] = item["reviews"]
    assert [c["id"] for c in nested["comments"]] == expected
