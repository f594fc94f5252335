"""Resource Routes — HTTP tests for edu centers, students and health probes."""

from uuid import uuid4


async def _create_center(client, name="Bright Future Academy") -> dict:
    res = await client.post("/api/v1/edu-centers", json={"name": name})
    assert res.status_code == 201
    return res.json()


async def _create_student(client, edu_center_id, full_name="Aziza Karimova") -> dict:
    res = await client.post(
        "/api/v1/students",
        json={"full_name": full_name, "edu_center_id": edu_center_id},
    )
    assert res.status_code == 201
    return res.json()


async def test_health_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_health_readiness_uses_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_create_and_get_edu_center(client):
    center = await _create_center(client, "  Tashkent Language School  ")
    assert center["name"] == "Tashkent Language School"

    res = await client.get(f"/api/v1/edu-centers/{center['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == center["id"]


async def test_create_edu_center_rejects_blank_name(client):
    res = await client.post("/api/v1/edu-centers", json={"name": "   "})
    assert res.status_code == 400


async def test_list_edu_centers(client):
    await _create_center(client, "A")
    await _create_center(client, "B")
    res = await client.get("/api/v1/edu-centers")
    assert sorted(c["name"] for c in res.json()) == ["A", "B"]


async def test_unknown_edu_center_returns_404(client):
    res = await client.get(f"/api/v1/edu-centers/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_student_requires_existing_edu_center(client):
    res = await client.post(
        "/api/v1/students",
        json={"full_name": "Nobody", "edu_center_id": str(uuid4())},
    )
    assert res.status_code == 404


async def test_list_students_by_edu_center(client):
    center = await _create_center(client)
    other = await _create_center(client, "Other")
    await _create_student(client, center["id"], "Bobur")
    await _create_student(client, center["id"], "Aziza")
    await _create_student(client, other["id"], "Dilnoza")

    res = await client.get(
        "/api/v1/students", params={"edu_center_id": center["id"]},
    )

    assert [s["full_name"] for s in res.json()] == ["Aziza", "Bobur"]


async def test_delete_student(client):
    center = await _create_center(client)
    student = await _create_student(client, center["id"])

    res = await client.delete(f"/api/v1/students/{student['id']}")
    assert res.status_code == 204
    res = await client.get(f"/api/v1/students/{student['id']}")
    assert res.status_code == 404


async def test_delete_edu_center_cascades_to_payments(client):
    center = await _create_center(client)
    student = await _create_student(client, center["id"])
    payment = (await client.post("/api/v1/payments", json={
        "student_id": student["id"], "edu_center_id": center["id"],
        "price": "100", "for_month": "2026-10",
    })).json()

    res = await client.delete(f"/api/v1/edu-centers/{center['id']}")
    assert res.status_code == 204

    assert (await client.get(f"/api/v1/students/{student['id']}")).status_code == 404
    assert (await client.get(f"/api/v1/payments/{payment['id']}")).status_code == 404
