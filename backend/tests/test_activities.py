"""
Tests for activity CRUD endpoints.
"""

import datetime as dt

import pytest
from httpx import AsyncClient

from meetx.models.booking import Booking

ACTIVITY_PAYLOAD = {
    "title": "Sunset Kayaking",
    "description": "Paddle along the coast at dusk",
    "location": "Harbour Pier",
    "date": (dt.date.today() + dt.timedelta(days=5)).isoformat(),
    "time": "19:15",
    "capacity": 8,
}


@pytest.mark.asyncio
async def test_create_activity(client: AsyncClient, auth_headers, test_user):
    """Authenticated user can create an activity and is recorded as creator."""
    response = await client.post("/api/v1/activities/", json=ACTIVITY_PAYLOAD, headers=auth_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Sunset Kayaking"
    assert data["capacity"] == 8
    assert data["created_by"] == test_user.id


@pytest.mark.asyncio
async def test_create_activity_default_capacity(client: AsyncClient, auth_headers):
    payload = {k: v for k, v in ACTIVITY_PAYLOAD.items() if k != "capacity"}
    response = await client.post("/api/v1/activities/", json=payload, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["capacity"] == 10


@pytest.mark.asyncio
async def test_create_activity_unauthenticated(client: AsyncClient):
    response = await client.post("/api/v1/activities/", json=ACTIVITY_PAYLOAD)
    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("field, value", [
    ("title", "Yo"),
    ("description", "Too short"),
    ("time", "25:00"),
    ("time", "7pm"),
    ("date", "next tuesday"),
    ("capacity", 0),
])
async def test_create_activity_invalid(client: AsyncClient, auth_headers, field, value):
    response = await client.post(
        "/api/v1/activities/",
        json={**ACTIVITY_PAYLOAD, field: value},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_activities_sorted_by_date(client: AsyncClient, test_activity, second_activity):
    """Public listing, soonest first, display fields only."""
    response = await client.get("/api/v1/activities/")
    assert response.status_code == 200
    data = response.json()
    assert [a["id"] for a in data] == [second_activity.id, test_activity.id]
    assert set(data[0]) == {"id", "title", "description", "location", "date", "time"}


@pytest.mark.asyncio
async def test_list_activities_same_day_sorted_by_time(client: AsyncClient, auth_headers):
    day = (dt.date.today() + dt.timedelta(days=3)).isoformat()
    for time in ("18:00", "7:30", "09:00", "12:30"):
        await client.post(
            "/api/v1/activities/",
            json={**ACTIVITY_PAYLOAD, "date": day, "time": time},
            headers=auth_headers,
        )

    data = (await client.get("/api/v1/activities/")).json()
    assert [a["time"] for a in data] == ["07:30", "09:00", "12:30", "18:00"]


@pytest.mark.asyncio
async def test_get_activity(client: AsyncClient, test_activity):
    response = await client.get(f"/api/v1/activities/{test_activity.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_activity.id
    assert data["title"] == "Morning Yoga"


@pytest.mark.asyncio
async def test_get_activity_not_found(client: AsyncClient):
    response = await client.get("/api/v1/activities/99999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_activity_partial(client: AsyncClient, auth_headers, test_activity):
    response = await client.put(
        f"/api/v1/activities/{test_activity.id}",
        json={"location": "Riverside Lawn"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["location"] == "Riverside Lawn"
    assert data["title"] == "Morning Yoga"


@pytest.mark.asyncio
async def test_update_activity_not_found(client: AsyncClient, auth_headers):
    response = await client.put("/api/v1/activities/99999", json={"title": "Anything"}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_activity_removes_its_bookings(client: AsyncClient, auth_headers, session_factory, test_activity):
    booked = await client.post("/api/v1/bookings/", json={"activity_id": test_activity.id}, headers=auth_headers)
    assert booked.status_code == 201

    response = await client.delete(f"/api/v1/activities/{test_activity.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Activity removed"}

    assert (await client.get(f"/api/v1/activities/{test_activity.id}")).status_code == 404
    async with session_factory() as session:
        assert await session.get(Booking, booked.json()["id"]) is None


@pytest.mark.asyncio
async def test_update_activity_pads_single_digit_hour(client: AsyncClient, auth_headers, test_activity):
    response = await client.put(
        f"/api/v1/activities/{test_activity.id}",
        json={"time": "6:05"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["time"] == "06:05"
