"""Token guard: bearer header, api_token query parameter, user tokens."""

import pytest

from src.core import exceptions
from src.core.security import hash_token


async def test_bearer_token_is_accepted(client, auth_headers):
    res = await client.get("/api/posts", headers=auth_headers)
    assert res.status_code == 200


async def test_api_token_query_parameter_is_accepted(client, user_token):
    res = await client.get("/api/posts", params={"api_token": user_token})
    assert res.status_code == 200


async def test_unknown_token_is_rejected(client, user_token):
    res = await client.get(
        "/api/posts", headers={"Authorization": "Bearer not-a-real-token"}
    )
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"


async def test_guard_runs_before_body_validation(client):
    res = await client.post("/api/posts", json={"title": ""})
    assert res.status_code == 401


async def test_health_endpoints_are_public(client):
    assert (await client.get("/")).status_code == 200
    assert (await client.get("/health")).json()["status"] == "healthy"


async def test_token_is_stored_hashed(user_service, user_token):
    user = await user_service.repository.get_by_email("user@example.com")
    assert user.api_token == hash_token(user_token)
    assert user.api_token != user_token


async def test_duplicate_email_is_a_conflict(user_service, user_token):
    with pytest.raises(exceptions.ConflictException) as exc_info:
        await user_service.create_user("Other", "user@example.com")
    assert exc_info.value.errors == {"email": ["The email has already been taken."]}


async def test_issue_token_rotates_credentials(client, user_service, user_token):
    new_token = await user_service.issue_token("user@example.com")

    assert new_token != user_token
    old = await client.get("/api/posts", headers={"Authorization": f"Bearer {user_token}"})
    new = await client.get("/api/posts", headers={"Authorization": f"Bearer {new_token}"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_issue_token_for_unknown_user(user_service):
    with pytest.raises(exceptions.NotFoundException):
        await user_service.issue_token("nobody@example.com")


async def test_authenticate_without_credential(user_service):
    with pytest.raises(exceptions.UnauthorizedException):
        await user_service.authenticate(None)


async def test_list_users_reads_every_page(user_service, user_token):
    await user_service.create_user("Second", "second@example.com")
    await user_service.create_user("Third", "third@example.com")

    users = await user_service.list_users(batch_size=2)

    assert [u.email for u in users] == [
        "user@example.com",
        "second@example.com",
        "third@example.com",
    ]
