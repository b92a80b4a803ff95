from __future__ import annotations

from httpx import ASGITransport, AsyncClient

from animal_shelter.config.settings import Settings
from animal_shelter.interfaces.http.main import create_app


async def test_list_kennels_serializes_sizes_and_occupants(client):
    await client.post("/api/v1/animals/", json={"type": "Cat", "name": "Kitty", "weight": 8.6})

    response = await client.get("/api/v1/kennels/")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": 1,
            "size": "Small",
            "occupant": {"id": 0, "kennel_id": 1, "type": "Cat", "name": "Kitty", "weight": 8.6},
        },
        {"id": 2, "size": "Medium", "occupant": None},
        {"id": 3, "size": "Large", "occupant": None},
    ]


async def test_available_kennels(client):
    await client.post("/api/v1/animals/", json={"type": "Dog", "name": "Max", "weight": 34.5})
    response = await client.get("/api/v1/kennels/available")
    assert [k["id"] for k in response.json()] == [1, 3]


async def test_reorganize_via_get_and_post(client):
    for name in ("A", "B", "C"):
        await client.post("/api/v1/animals/", json={"type": "Cat", "name": name, "weight": 5.0})
    await client.delete("/api/v1/animals/0")
    await client.delete("/api/v1/animals/1")

    first = await client.post("/api/v1/kennels/reorganize")
    assert first.status_code == 200
    assert [k["occupant"]["name"] if k["occupant"] else None for k in first.json()] == [
        "C",
        None,
        None,
    ]
    assert first.json()[0]["occupant"]["kennel_id"] == 1

    second = await client.get("/api/v1/kennels/reorganize")
    assert second.status_code == 200
    assert second.json() == first.json()


async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.json() == {"status": "ok"}


async def test_app_builds_shelter_from_settings_and_seeds():
    settings = Settings.model_validate(
        {
            "seed_demo_data": True,
            "small_kennels": 16,
            "medium_kennels": 10,
            "large_kennels": 8,
        }
    )
    app = create_app(settings=settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        kennels = (await client.get("/api/v1/kennels/")).json()
        available = (await client.get("/api/v1/kennels/available")).json()

    assert len(kennels) == 34
    assert [k["id"] for k in available] == [34]
    assert kennels[0]["occupant"]["name"] == "Sam"
