from __future__ import annotations


def _call_body(**overrides):
    body = {
        "patient_name": "Ravi Kumar",
        "symptoms": ["Chest pain", "Sweating"],
        "severity": "Critical",
        "address": "Sector 18, Noida",
        "age": 54,
        "gender": "male",
    }
    body.update(overrides)
    return body


def test_create_and_assign_emergency_call(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    headers = auth_headers("patient-a")

    created = client.post("/emergency/calls", headers=headers, json=_call_body())
    assert created.status_code == 200
    call = created.json()["call"]
    assert call["status"] == "pending"
    assert call["user_id"] == "patient-a"
    assert call["symptoms"] == ["Chest pain", "Sweating"]
    assert call["doctor_id"] is None

    assigned = client.post(f"/emergency/calls/{call['id']}/assign", headers=headers, json={"doctor_id": "doc-asha"})
    assert assigned.status_code == 200
    assert assigned.json()["call"]["status"] == "assigned"
    assert assigned.json()["call"]["doctor_id"] == "doc-asha"


def test_emergency_call_validation_and_scope(client, auth_headers):
    headers = auth_headers("patient-a")
    missing = client.post("/emergency/calls", headers=headers, json=_call_body(address=" "))
    assert missing.status_code == 400

    call = client.post("/emergency/calls", headers=headers, json=_call_body()).json()["call"]
    unknown_doctor = client.post(f"/emergency/calls/{call['id']}/assign", headers=headers, json={"doctor_id": "nobody"})
    assert unknown_doctor.status_code == 404

    foreign = client.post(
        f"/emergency/calls/{call['id']}/assign",
        headers=auth_headers("patient-b"),
        json={"doctor_id": "nobody"},
    )
    assert foreign.status_code == 403


def test_emergency_doctor_search_by_address_and_location(client, auth_headers, verified_doctor):
    verified_doctor("doc-noida", name="Dr. Noida", address="Sector 62", region="Noida")
    verified_doctor("doc-pune", name="Dr. Pune", address="Kothrud", region="Pune")
    headers = auth_headers("patient-a")

    by_address = client.get("/emergency/doctors", headers=headers, params={"address": "Sector 18, Noida"}).json()
    assert by_address["location_source"] == "address"
    assert [row["id"] for row in by_address["doctors"]] == ["doc-noida", "doc-pune"]
    assert by_address["doctors"][0]["distance"] == 0.0

    by_coordinates = client.get(
        "/emergency/doctors",
        headers=headers,
        params={"latitude": 18.52, "longitude": 73.85},
    ).json()
    assert by_coordinates["location_source"] == "coordinates"
    assert by_coordinates["doctors"][0]["id"] == "doc-pune"


def test_emergency_search_without_location(client, auth_headers):
    response = client.get("/emergency/doctors", headers=auth_headers("patient-a"))
    assert response.status_code == 400
    assert response.json()["detail"] == (
        "No location information available. Please enable GPS or update your profile address."
    )

    client.post("/profile", headers=auth_headers("patient-a"), json={"region": "Pune"})
    response = client.get("/emergency/doctors", headers=auth_headers("patient-a"))
    assert response.status_code == 200
    assert response.json()["location_source"] == "profile_address"
