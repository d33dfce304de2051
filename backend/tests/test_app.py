"""
Tests for app-level behaviour: health, metrics, request ids, error shaping,
and an end-to-end register/login/book walkthrough.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from meetx.main import app
from meetx.db.session import get_db
from meetx.models.user import User


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient, auth_headers, test_activity):
    await client.post("/api/v1/bookings/", json={"activity_id": test_activity.id}, headers=auth_headers)

    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "booking_attempts_total" in response.text
    assert "token_rejections_total" in response.text


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    generated = await client.get("/")
    assert len(generated.headers["x-request-id"]) == 8

    echoed = await client.get("/", headers={"X-Request-ID": "trace-abc-123"})
    assert echoed.headers["x-request-id"] == "trace-abc-123"


@pytest.mark.asyncio
async def test_corrupted_password_hash_is_generic_500(client: AsyncClient, db_session):
    db_session.add(User(name="Broken", email="broken@example.com", phone="5551234", hashed_password="plain"))
    await db_session.commit()

    response = await client.post("/api/v1/auth/login", json={
        "email": "broken@example.com",
        "password": "Passw0rd",
    })
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
async def test_unexpected_error_does_not_leak():
    async def broken_db():
        raise RuntimeError("connection string with password=hunter2")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/api/v1/activities/")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "hunter2" not in response.text


@pytest.mark.asyncio
async def test_register_login_book_walkthrough(client: AsyncClient, test_activity):
    """Register, log in, book once, fail on rebook, then flip status back and forth."""
    registered = await client.post("/api/v1/auth/register", json={
        "name": "Ann",
        "email": "ann@x.com",
        "phone": "5551234",
        "password": "Passw0rd",
    })
    assert registered.status_code == 201

    login = await client.post("/api/v1/auth/login", json={"email": "ann@x.com", "password": "Passw0rd"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    first = await client.post("/api/v1/bookings/", json={"activity_id": test_activity.id}, headers=headers)
    assert first.status_code == 201
    second = await client.post("/api/v1/bookings/", json={"activity_id": test_activity.id}, headers=headers)
    assert second.status_code == 409

    booking_url = f"/api/v1/bookings/{first.json()['id']}"
    cancelled = await client.patch(booking_url, json={"status": "cancelled"}, headers=headers)
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"

    confirmed = await client.patch(booking_url, json={"status": "confirmed"}, headers=headers)
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"
