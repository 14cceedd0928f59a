from __future__ import annotations

from sqlalchemy import select

from src.infrastructure.db.orm.dog import DogORM


async def test_list_dogs_without_filters(client, seeded):
    response = await client.get("/api/dogs")
    assert response.status_code == 200
    body = response.json()
    assert [d["name"] for d in body] == ["Buddy", "Max", "Daisy", "Rocky"]
    assert body[0] == {
        "id": seeded["Buddy"],
        "name": "Buddy",
        "breed": "Labrador Retriever",
        "status": "AVAILABLE",
    }


async def test_list_dogs_filters_by_breed_and_status(client, seeded):
    by_breed = await client.get("/api/dogs", params={"breed_id": seeded["beagle"]})
    assert [d["name"] for d in by_breed.json()] == ["Daisy", "Rocky"]

    by_status = await client.get("/api/dogs", params={"status": "AVAILABLE"})
    assert [d["name"] for d in by_status.json()] == ["Buddy", "Daisy"]

    both = await client.get(f"/api/dogs?breed_id={seeded['lab']}&status=PENDING")
    assert both.status_code == 200
    assert [d["name"] for d in both.json()] == ["Max"]


async def test_list_dogs_empty_result_is_ok(client, seeded):
    response = await client.get("/api/dogs", params={"breed_id": 9999})
    assert response.status_code == 200
    assert response.json() == []


async def test_list_dogs_rejects_unknown_status(client, seeded):
    response = await client.get("/api/dogs", params={"status": "LOST"})
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"]["allowed"] == ["AVAILABLE", "PENDING", "ADOPTED"]


async def test_get_dog_detail_and_missing(client, seeded):
    response = await client.get(f"/api/dogs/{seeded['Daisy']}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Daisy"
    assert body["breed"] == "Beagle"
    assert body["age"] == 4
    assert body["gender"] == "Female"
    assert body["description"] == "Loves snacks"
    assert body["version"] == 1

    missing = await client.get("/api/dogs/424242")
    assert missing.status_code == 404
    assert missing.json() == {"code": "not_found", "message": "Dog not found"}


async def test_dog_crud_flow(app, client, seeded):
    create_response = await client.post(
        "/api/dogs",
        json={"name": "Nova", "breed_id": seeded["beagle"], "age": 3, "gender": "female"},
    )
    assert create_response.status_code == 201
    created = create_response.json()
    assert created["status"] == "AVAILABLE"
    assert created["gender"] == "Female"
    assert created["breed"] == "Beagle"
    dog_id = created["id"]

    update_response = await client.patch(
        f"/api/dogs/{dog_id}", json={"version": created["version"], "status": "PENDING"}
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["status"] == "PENDING"
    assert updated["version"] == created["version"] + 1

    stale = await client.patch(
        f"/api/dogs/{dog_id}", json={"version": created["version"], "status": "ADOPTED"}
    )
    assert stale.status_code == 409

    delete_response = await client.delete(f"/api/dogs/{dog_id}")
    assert delete_response.status_code == 204

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        result = await session.execute(select(DogORM).where(DogORM.id == dog_id))
        row = result.scalar_one()
        assert row.deleted_at is not None

    assert (await client.get(f"/api/dogs/{dog_id}")).status_code == 404
    listed = await client.get("/api/dogs")
    assert dog_id not in [d["id"] for d in listed.json()]
    assert (await client.delete(f"/api/dogs/{dog_id}")).status_code == 404


async def test_create_dog_with_unknown_breed(client, seeded):
    response = await client.post("/api/dogs", json={"name": "Ghost", "breed_id": 9999})
    assert response.status_code == 422
    assert response.json()["message"] == "Invalid breed_id"


async def test_create_dog_validates_payload(client, seeded):
    response = await client.post(
        "/api/dogs", json={"name": "Rex", "breed_id": seeded["lab"], "status": "LOST"}
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


async def test_health(client):
    response = await client.get("/api/health")
    assert response.json() == {"status": "ok"}
