import pytest
from httpx import AsyncClient

from helpers import bearer, register


@pytest.mark.asyncio
async def test_profile_and_update(client: AsyncClient):
    auth = await register(client, "alice@example.com", name="Alice")
    await client.post("/workspaces", json={"name": "Acme"}, headers=bearer(auth))

    profile = await client.get("/users/me", headers=bearer(auth))
    assert profile.status_code == 200
    assert profile.json()["name"] == "Alice"
    assert profile.json()["workspace_count"] == 1

    updated = await client.patch("/users/me", json={"name": "Alice B"}, headers=bearer(auth))
    assert updated.status_code == 200
    assert updated.json()["name"] == "Alice B"


@pytest.mark.asyncio
async def test_change_password_ends_every_session(client: AsyncClient):
    first = await register(client, "alice@example.com", password="old-password")
    second = (
        await client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "old-password"}
        )
    ).json()

    response = await client.post(
        "/users/me/password",
        json={"current_password": "old-password", "new_password": "new-password"},
        headers=bearer(first),
    )

    assert response.status_code == 200
    assert response.json()["revoked_sessions"] == 2

    for auth in (first, second):
        refresh = await client.post("/auth/refresh", json={"refresh_token": auth["refresh_token"]})
        assert refresh.status_code == 401

    old_login = await client.post(
        "/auth/login", json={"email": "alice@example.com", "password": "old-password"}
    )
    new_login = await client.post(
        "/auth/login", json={"email": "alice@example.com", "password": "new-password"}
    )
    assert old_login.status_code == 401
    assert new_login.status_code == 200

    # Access tokens are stateless and outlive the password change
    me = await client.get("/auth/me", headers=bearer(first))
    assert me.status_code == 200


@pytest.mark.asyncio
async def test_change_password_with_wrong_current_password(client: AsyncClient):
    auth = await register(client, "alice@example.com")

    response = await client.post(
        "/users/me/password",
        json={"current_password": "wrong-password", "new_password": "new-password"},
        headers=bearer(auth),
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CURRENT_PASSWORD"

    refresh = await client.post("/auth/refresh", json={"refresh_token": auth["refresh_token"]})
    assert refresh.status_code == 200
