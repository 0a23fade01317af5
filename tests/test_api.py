"""
HTTP endpoint tests against the relational backend on in-memory SQLite.
"""

JOHN_DOE = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@x.com",
    "phone": "123",
    "password": "pw",
}


def _doctor(email: str, phone: str) -> dict:
    return {
        "firstName": "Gregory",
        "lastName": "House",
        "email": email,
        "phone": phone,
        "password": "secret",
        "specialisation": "Diagnostics",
        "hospitalName": "General Hospital",
    }


def test_create_admin_returns_generated_id(client):
    response = client.post("/admin", json=JOHN_DOE)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["id"]
    assert body["data"]["firstName"] == "John"
    assert body["data"]["email"] == "john@x.com"
    assert body["data"]["description"] is None
    assert response.headers["X-Request-ID"] == body["request_id"]


def test_create_accepts_snake_case_fields(client):
    payload = {
        "first_name": "Ann",
        "last_name": "Lee",
        "password": "pw",
    }

    response = client.post("/patient", json=payload)

    assert response.status_code == 201
    assert response.json()["data"]["lastName"] == "Lee"


def test_get_list_update_delete_admin(client):
    admin_id = client.post("/admin", json=JOHN_DOE).json()["data"]["id"]

    found = client.get(f"/admin/{admin_id}")
    assert found.status_code == 200
    assert found.json()["data"]["phone"] == "123"

    listed = client.get("/admin").json()["data"]
    assert [a["id"] for a in listed] == [admin_id]

    updated = client.put(f"/admin/{admin_id}", json={**JOHN_DOE, "description": "Night shift"})
    assert updated.status_code == 200
    assert updated.json()["data"]["description"] == "Night shift"
    assert updated.json()["data"]["id"] == admin_id

    deleted = client.delete(f"/admin/{admin_id}")
    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"deleted": True, "id": admin_id}

    missing = client.get(f"/admin/{admin_id}")
    assert missing.status_code == 404
    assert missing.json()["error"] == "NOT_FOUND"
    assert missing.json()["details"] == {"entity": "admin", "id": admin_id}


def test_unknown_ids_are_not_found(client):
    assert client.get("/hospital/does-not-exist").status_code == 404
    assert client.put("/rating/42", json={"rating": 5, "date": 1, "time": 2}).status_code == 404
    assert client.delete("/appointment/42").status_code == 404


def test_missing_required_field_is_invalid_input(client):
    response = client.post("/admin", json={"firstName": "John"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "INVALID_INPUT"
    assert body["details"]["path"] == "/admin"


def test_duplicate_email_surfaces_as_database_error(client):
    assert client.post("/admin", json=JOHN_DOE).status_code == 201

    response = client.post("/admin", json={**JOHN_DOE, "phone": "456"})

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "DATABASE_ERROR"
    assert body["details"]["storage_key"] == "admin"
    assert len(client.get("/admin").json()["data"]) == 1


def test_doctors_sharing_hospital_name_both_persist(client):
    first = client.post("/doctor", json=_doctor("a@x.com", "1"))
    second = client.post("/doctor", json=_doctor("b@x.com", "2"))

    assert first.status_code == 201
    assert second.status_code == 201
    doctors = client.get("/doctor").json()["data"]
    assert len(doctors) == 2
    assert {d["hospitalName"] for d in doctors} == {"General Hospital"}


def test_hospital_uses_phone_no_on_the_wire(client):
    payload = {
        "hospitalName": "General Hospital",
        "hospitalAddress": "1 Main St",
        "departments": "Cardiology",
        "email": "info@general.org",
        "phoneNo": "555",
        "password": "pw",
    }

    response = client.post("/hospital", json=payload)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["phoneNo"] == "555"
    assert "phone_no" not in data


def test_appointment_and_rating_accept_free_text_references(client):
    appointment = client.post(
        "/appointment",
        json={"date": "2024-05-01", "time": "10:00", "doctorName": "Nobody", "hospitalName": "Nowhere"},
    )
    rating = client.post("/rating", json={"rating": 4, "date": 20240501, "time": 1000})

    assert appointment.status_code == 201
    assert rating.status_code == 201
    assert rating.json()["data"]["comment"] is None


def test_rating_rejects_non_integer_rating(client):
    response = client.post("/rating", json={"rating": "great", "date": 20240501, "time": 1000})

    assert response.status_code == 422


def test_ids_without_a_storable_key_are_not_found(client):
    for raw_id in ("²", "99999999999999999999999"):
        assert client.get(f"/admin/{raw_id}").status_code == 404
        assert client.put(f"/admin/{raw_id}", json=JOHN_DOE).status_code == 404
        assert client.delete(f"/admin/{raw_id}").status_code == 404
