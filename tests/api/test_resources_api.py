import pytest


# (path, valid create body, partial update, invalid create body, seeded count)
RESOURCES = [
    (
        "/api/core-members",
        {"name": "Lina", "studentId": "29210001", "role": "president", "imageUrl": "lina.jpg"},
        {"description": "Acting president"},
        {"name": "Lina", "studentId": "29210001", "role": "mascot", "imageUrl": "lina.jpg"},
        3,
    ),
    (
        "/api/class-members",
        {"name": "Lina", "studentId": "29210001", "imageUrl": "lina.jpg"},
        {"name": "Lina K."},
        {"name": "Lina"},
        38,
    ),
    (
        "/api/announcements",
        {"title": "Quiz", "content": "Chapter 4", "date": "2024-02-01", "category": "new", "postedBy": "Budi"},
        {"category": "important"},
        {"title": "Quiz", "content": "Chapter 4", "date": "not a date", "category": "new", "postedBy": "Budi"},
        3,
    ),
    (
        "/api/schedules",
        {"day": "Saturday", "startTime": "09:00", "endTime": "11:00", "subject": "Review", "room": "Room 1"},
        {"room": "Lab 2"},
        {"day": "Someday", "startTime": "09:00", "endTime": "11:00", "subject": "Review", "room": "Room 1"},
        7,
    ),
    (
        "/api/assignments",
        {
            "title": "Essay",
            "dueDate": "2024-03-01",
            "assignedDate": "2024-02-01",
            "description": "Write 500 words",
            "type": "individual",
            "submitted": 0,
            "total": 38,
            "status": "upcoming",
        },
        {"submitted": 10},
        {
            "title": "Essay",
            "dueDate": "2024-03-01",
            "assignedDate": "2024-02-01",
            "description": "Write 500 words",
            "type": "solo",
            "status": "upcoming",
        },
        3,
    ),
    (
        "/api/transactions",
        {"amount": 500000, "type": "expense", "description": "Test", "category": "other", "date": "2024-01-01"},
        {"category": "supplies"},
        {"amount": -5, "type": "expense", "description": "Test", "category": "other", "date": "2024-01-01"},
        8,
    ),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("path,body,partial,invalid,count", RESOURCES)
async def test_list_returns_seeded_records(api_client, path, body, partial, invalid, count):
    resp = await api_client.get(path)
    assert resp.status_code == 200
    assert len(resp.json()) == count


@pytest.mark.asyncio
@pytest.mark.parametrize("path,body,partial,invalid,count", RESOURCES)
async def test_crud_round(api_client, path, body, partial, invalid, count):
    created = await api_client.post(path, json=body)
    assert created.status_code == 201
    record = created.json()
    assert record["id"] == count + 1
    for key, value in body.items():
        assert record[key] == value

    fetched = await api_client.get(f"{path}/{record['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == record

    updated = await api_client.put(f"{path}/{record['id']}", json=partial)
    assert updated.status_code == 200
    assert updated.json() == {**record, **partial}

    deleted = await api_client.delete(f"{path}/{record['id']}")
    assert deleted.status_code == 204
    assert (await api_client.get(f"{path}/{record['id']}")).status_code == 404
    assert (await api_client.delete(f"{path}/{record['id']}")).status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("path,body,partial,invalid,count", RESOURCES)
async def test_missing_record_is_404(api_client, path, body, partial, invalid, count):
    assert (await api_client.get(f"{path}/999")).status_code == 404
    resp = await api_client.put(f"{path}/999", json=partial)
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize("path,body,partial,invalid,count", RESOURCES)
async def test_invalid_body_is_400(api_client, path, body, partial, invalid, count):
    resp = await api_client.post(path, json=invalid)
    assert resp.status_code == 400
    payload = resp.json()
    assert payload["message"] == "Invalid data"
    assert payload["errors"]
    assert len((await api_client.get(path)).json()) == count


@pytest.mark.asyncio
async def test_invalid_partial_update_is_400(api_client):
    resp = await api_client.put("/api/transactions/1", json={"type": "refund"})
    assert resp.status_code == 400
    assert (await api_client.get("/api/transactions/1")).json()["type"] == "income"


@pytest.mark.asyncio
async def test_new_ids_exceed_deleted_ones(api_client):
    body = RESOURCES[2][1]
    first = (await api_client.post("/api/announcements", json=body)).json()
    await api_client.delete(f"/api/announcements/{first['id']}")
    second = (await api_client.post("/api/announcements", json=body)).json()
    assert second["id"] > first["id"]


@pytest.mark.asyncio
async def test_announcements_are_newest_first(api_client):
    dates = [a["date"] for a in (await api_client.get("/api/announcements")).json()]
    assert dates == ["2023-10-15", "2023-10-10", "2023-10-05"]


@pytest.mark.asyncio
async def test_schedules_are_in_weekday_order(api_client):
    entries = (await api_client.get("/api/schedules")).json()
    assert [(e["day"], e["startTime"]) for e in entries] == [
        ("Monday", "08:00"),
        ("Monday", "13:00"),
        ("Tuesday", "10:15"),
        ("Wednesday", "08:00"),
        ("Wednesday", "13:00"),
        ("Thursday", "10:15"),
        ("Friday", "08:00"),
    ]


@pytest.mark.asyncio
async def test_duplicate_student_id_is_409(api_client):
    body = {"name": "Copy", "studentId": "19210723", "imageUrl": "x.jpg"}
    resp = await api_client.post("/api/class-members", json=body)
    assert resp.status_code == 409
    assert "19210723" in resp.json()["message"]

    resp = await api_client.put("/api/class-members/2", json={"studentId": "19210723"})
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_non_integer_id_is_404(api_client):
    resp = await api_client.get("/api/schedules/monday")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not found"}
    assert (await api_client.delete("/api/announcements/first")).status_code == 404


@pytest.mark.asyncio
async def test_non_integer_id_with_bad_body_is_400(api_client):
    resp = await api_client.put("/api/schedules/monday", json={"day": "Funday"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid data"
