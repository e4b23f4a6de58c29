"""Integration tests for Comments API."""

from collections.abc import Callable

import pytest
from httpx import AsyncClient

Headers = Callable[..., dict[str, str]]


@pytest.fixture
async def post_id(api_client: AsyncClient, auth_headers: dict[str, str]) -> str:
    response = await api_client.post(
        "/api/v1/posts", json={"content": "a post"}, headers=auth_headers
    )
    return response.json()["data"]["id"]


async def _comment(
    client: AsyncClient, headers: dict[str, str], post_id: str, comment_id: str, content: str = "nice"
) -> dict:
    response = await client.post(
        "/api/v1/comments",
        json={"id": comment_id, "postId": post_id, "content": content},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCommentsAPI:
    """Integration tests for Comments API."""

    @pytest.mark.asyncio
    async def test_create_comment(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        """Test POST /api/v1/comments."""
        data = await _comment(api_client, auth_headers, post_id, "c1")

        assert data == {"id": "c1", "content": "nice", "postId": post_id, "authorId": "user-alice"}

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(
        self, api_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await api_client.post(
            "/api/v1/comments",
            json={"postId": "nope", "content": "hi"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "POST_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_duplicate_comment_id(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1")

        response = await api_client.post(
            "/api/v1/comments",
            json={"id": "c1", "postId": post_id, "content": "again"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "COMMENT_EXISTS"

    @pytest.mark.asyncio
    async def test_update_comment(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1")

        response = await api_client.put(
            "/api/v1/comments",
            params={"id": "c1"},
            json={"id": "c1", "content": "edited"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "edited"
        assert response.json()["data"]["postId"] == post_id

    @pytest.mark.asyncio
    async def test_delete_with_mismatched_id_removes_nothing(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1")

        response = await api_client.request(
            "DELETE",
            "/api/v1/comments",
            params={"id": "c1"},
            json={"id": "c2", "content": "nice"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "COMMENT_ID_MISMATCH"
        still_there = await api_client.get(
            "/api/v1/comments", params={"id": "c1"}, headers=auth_headers
        )
        assert still_there.status_code == 200

    @pytest.mark.asyncio
    async def test_delete_comment(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1")

        response = await api_client.request(
            "DELETE",
            "/api/v1/comments",
            params={"id": "c1"},
            json={"id": "c1", "content": "nice"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        gone = await api_client.get("/api/v1/comments", params={"id": "c1"}, headers=auth_headers)
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_only_author_can_delete(
        self,
        api_client: AsyncClient,
        auth_headers: dict[str, str],
        make_headers: Headers,
        post_id: str,
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1")

        response = await api_client.request(
            "DELETE",
            "/api/v1/comments",
            params={"id": "c1"},
            json={"id": "c1", "content": "nice"},
            headers=make_headers("user-bob"),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_comments(
        self, api_client: AsyncClient, auth_headers: dict[str, str], post_id: str
    ) -> None:
        await _comment(api_client, auth_headers, post_id, "c1", "one")
        await _comment(api_client, auth_headers, post_id, "c2", "two")

        by_post = await api_client.get(
            "/api/v1/comments/post", params={"postId": post_id}, headers=auth_headers
        )
        everything = await api_client.get("/api/v1/comments/all", headers=auth_headers)

        assert {c["id"] for c in by_post.json()["data"]} == {"c1", "c2"}
        assert len(everything.json()["data"]) == 2
