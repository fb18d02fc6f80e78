# tests/v1/test_full_flow.py
"""End-to-end walk through registration, posting, liking and deletion."""

from fastapi import status


def test_register_post_reply_like_delete(client) -> None:
    registered = client.post(
        "/api/auth/register",
        json={
            "email": "u@test.com",
            "password": "password1",
            "handle": "u1",
            "displayName": "U",
        },
    )
    assert registered.status_code == status.HTTP_201_CREATED

    login = client.post("/api/auth/login", json={"email": "u@test.com", "password": "password1"})
    assert login.status_code == status.HTTP_200_OK
    headers = {"Authorization": f"Bearer {login.json()['data']['token']}"}

    created = client.post("/api/post", json={"content": "hello"}, headers=headers)
    assert created.status_code == status.HTTP_201_CREATED
    post = created.json()["data"]
    assert post["deleted"] is False

    reply = client.post(
        "/api/post", json={"content": "hi", "replyTo": post["id"]}, headers=headers
    ).json()["data"]
    assert reply["threadRoot"] == post["id"]
    assert client.get(f"/api/post/{post['id']}").json()["data"]["repliesCount"] == 1

    assert client.post(f"/api/like/{post['id']}", headers=headers).status_code == status.HTTP_200_OK
    assert client.get(f"/api/post/{post['id']}").json()["data"]["likesCount"] == 1
    assert client.delete(f"/api/like/{post['id']}", headers=headers).status_code == status.HTTP_200_OK
    assert client.get(f"/api/post/{post['id']}").json()["data"]["likesCount"] == 0

    deleted = client.delete("/api/auth/delete", headers=headers)
    assert deleted.status_code == status.HTTP_200_OK
    assert deleted.json()["data"]["email"] == "u@test.com"

    after = client.get(f"/api/post/{post['id']}")
    assert after.status_code == status.HTTP_200_OK
    assert after.json()["data"]["content"] == "hello"
