import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.seed import SEED_PARTNERS, SEED_USER_ID

AUTH = {"X-User-Id": SEED_USER_ID}


@pytest.mark.asyncio
async def test_create_partner():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/api/partners",
            json={"name": "Paris Prestige", "email": "hello@paris-prestige.fr"},
            headers=AUTH,
        )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Paris Prestige"
    assert data["email"] == "hello@paris-prestige.fr"
    assert "id" in data
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_create_partner_missing_name():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/partners", json={"email": "x@y.fr"}, headers=AUTH)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: name"}


@pytest.mark.asyncio
async def test_list_partners():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/partners", headers=AUTH)

    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert "Elite Chauffeurs" in names
    assert names == sorted(names)


@pytest.mark.asyncio
async def test_get_partner_with_vehicle_count():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/partners", json={"name": "Count Fleet"}, headers=AUTH)
        partner_id = created.json()["id"]
        await client.post(
            f"/api/partners/{partner_id}/vehicles",
            json={"brand": "Rolls-Royce", "model": "Ghost", "year": 2022, "licensePlate": "COUNT-0001"},
            headers=AUTH,
        )
        response = await client.get(f"/api/partners/{partner_id}", headers=AUTH)

    assert response.status_code == 200
    assert response.json()["vehicleCount"] == 1


@pytest.mark.asyncio
async def test_get_unknown_partner():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/partners/nonexistent", headers=AUTH)

    assert response.status_code == 404
    assert response.json() == {"error": "Partner not found"}


@pytest.mark.asyncio
async def test_partners_require_identity():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(f"/api/partners/{SEED_PARTNERS[0]['id']}")

    assert response.status_code == 401
