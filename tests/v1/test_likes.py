# tests/v1/test_likes.py
"""Tests for like endpoints and the post like counter."""

from fastapi import status

from meetback.api.v1.dependencies import REFRESHED_TOKEN_HEADER
from meetback.core.security import decode_access_token
from meetback.models import PostLike


def _likes_count(client, post_id: int) -> int:
    return client.get(f"/api/post/{post_id}").json()["data"]["likesCount"]


def test_like_and_unlike(client, test_post, auth_token) -> None:
    response = client.post(f"/api/like/{test_post.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Post liked"
    assert _likes_count(client, test_post.id) == 1

    response = client.delete(f"/api/like/{test_post.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert _likes_count(client, test_post.id) == 0


def test_duplicate_like_is_noop(client, db_session, test_post, auth_token) -> None:
    client.post(f"/api/like/{test_post.id}", headers=auth_token)
    response = client.post(f"/api/like/{test_post.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Post already liked"
    assert _likes_count(client, test_post.id) == 1
    assert db_session.query(PostLike).count() == 1


def test_unlike_without_like_keeps_counter(client, test_post, auth_token) -> None:
    response = client.delete(f"/api/like/{test_post.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Post was not liked"
    assert _likes_count(client, test_post.id) == 0


def test_like_missing_post(client, auth_token) -> None:
    response = client.post("/api/like/31337", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"]["code"] == "POST_NOT_FOUND"


def test_like_deleted_post(client, test_post, auth_token) -> None:
    client.delete(f"/api/post/{test_post.id}", headers=auth_token)
    response = client.post(f"/api/like/{test_post.id}", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_likes(client, test_user, other_user, test_post, auth_token, other_auth_token) -> None:
    client.post(f"/api/like/{test_post.id}", headers=auth_token)
    client.post(f"/api/like/{test_post.id}", headers=other_auth_token)

    response = client.get(f"/api/like/{test_post.id}/users?limit=1")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["total"] == 2
    assert data["page"] == 1
    assert data["limit"] == 1
    assert [u["id"] for u in data["users"]] == [other_user.id]


def test_failed_authenticated_call_still_refreshes_token(client, test_user, auth_token) -> None:
    response = client.post("/api/like/999999", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    refreshed = response.headers[REFRESHED_TOKEN_HEADER]
    assert decode_access_token(refreshed) == test_user.id


def test_anonymous_error_has_no_refreshed_token(client) -> None:
    response = client.post("/api/like/999999")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert REFRESHED_TOKEN_HEADER not in response.headers
