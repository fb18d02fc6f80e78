# tests/v1/test_follow.py
"""Tests for the follow graph endpoints."""

from fastapi import status

from meetback.models import Follow


class TestFollow:
    def test_follow_user(self, client, test_user, other_user, auth_token) -> None:
        response = client.post(f"/api/follow/{other_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_201_CREATED
        edge = response.json()["data"]
        assert edge["followerId"] == test_user.id
        assert edge["followingId"] == other_user.id

    def test_self_follow_rejected(self, client, test_user, auth_token) -> None:
        response = client.post(f"/api/follow/{test_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "INVALID_ACTION"

    def test_duplicate_follow(self, client, db_session, test_user, other_user, auth_token) -> None:
        client.post(f"/api/follow/{other_user.id}", headers=auth_token)
        response = client.post(f"/api/follow/{other_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "DUPLICATE_FOLLOW"
        assert db_session.query(Follow).count() == 1

    def test_follow_unknown_user(self, client, auth_token) -> None:
        response = client.post("/api/follow/999999", headers=auth_token)
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    def test_follow_requires_auth(self, client, other_user) -> None:
        response = client.post(f"/api/follow/{other_user.id}")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_non_numeric_id_is_validation_error(self, client, auth_token) -> None:
        response = client.post("/api/follow/abc", headers=auth_token)
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestUnfollow:
    def test_follow_then_unfollow(self, client, other_user, auth_token) -> None:
        client.post(f"/api/follow/{other_user.id}", headers=auth_token)
        status_before = client.get(f"/api/follow/status/{other_user.id}", headers=auth_token)
        assert status_before.json()["data"] == {"isFollowing": True}

        response = client.delete(f"/api/follow/{other_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_200_OK

        status_after = client.get(f"/api/follow/status/{other_user.id}", headers=auth_token)
        assert status_after.json()["data"] == {"isFollowing": False}

    def test_unfollow_without_edge(self, client, other_user, auth_token) -> None:
        response = client.delete(f"/api/follow/{other_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "NOT_FOLLOWING"

    def test_unfollow_self(self, client, test_user, auth_token) -> None:
        response = client.delete(f"/api/follow/{test_user.id}", headers=auth_token)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "INVALID_ACTION"


def test_status_for_self_is_false(client, test_user, auth_token) -> None:
    response = client.get(f"/api/follow/status/{test_user.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["isFollowing"] is False


def test_follow_lists(
    client, make_user, auth_headers, test_user, other_user, auth_token, other_auth_token
) -> None:
    third = make_user()
    client.post(f"/api/follow/{other_user.id}", headers=auth_token)
    client.post(f"/api/follow/{third.id}", headers=auth_token)
    client.post(f"/api/follow/{test_user.id}", headers=other_auth_token)

    following = client.get("/api/follow/following/me", headers=auth_token).json()["data"]
    assert {u["id"] for u in following} == {other_user.id, third.id}
    assert set(following[0]) == {"id", "handle", "displayName", "avatar"}

    followers = client.get("/api/follow/followers/me", headers=auth_token).json()["data"]
    assert [u["id"] for u in followers] == [other_user.id]

    public_followers = client.get(f"/api/follow/followers/{third.id}").json()["data"]
    assert [u["id"] for u in public_followers] == [test_user.id]

    public_following = client.get(f"/api/follow/following/{other_user.id}").json()["data"]
    assert [u["handle"] for u in public_following] == [test_user.handle]

    third_view = client.get("/api/follow/following/me", headers=auth_headers(third))
    assert third_view.json()["data"] == []
