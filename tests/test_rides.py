import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.schemas.ride import (
    DEFAULT_DURATION,
    DEFAULT_PASSENGER_COUNT,
    MISSION_RIDE_CATEGORIES,
    RideCategory,
    RideStatus,
)


def test_ride_status_vocabulary():
    assert [s.value for s in RideStatus] == [
        "SCHEDULED", "ASSIGNED", "IN_PROGRESS", "COMPLETED", "CANCELLED",
    ]


def test_mission_categories_match_ride_categories():
    assert list(MISSION_RIDE_CATEGORIES) == list(RideCategory)


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        RideStatus("PARKED")


@pytest.mark.asyncio
async def test_ride_options_endpoint():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/rides/options")

    assert response.status_code == 200
    data = response.json()
    assert data["milestoneTypes"] == ["PICKUP", "DROPOFF"]
    assert data["airportTransferSubtypes"] == ["AIRPORT_PICKUP", "AIRPORT_DROPOFF"]
    assert "BOOK_BY_HOUR" in data["categories"]
    assert data["defaultDuration"] == DEFAULT_DURATION == 12
    assert data["defaultPassengerCount"] == DEFAULT_PASSENGER_COUNT == 1
