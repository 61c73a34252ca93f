from __future__ import annotations

from conftest import ADMIN_USER_ID

from records.time_utils import date_after_days


def _register(client, headers, **overrides):
    body = {
        "name": "Dr. Meera Iyer",
        "email": "meera@clinic.test",
        "specialization": "Dermatology",
        "hospital": "Skin Care Centre",
        "address": "Bandra West",
        "region": "Mumbai",
        "degrees": "MBBS, DVD",
        "experience": 8,
        "registration_number": "MH-2231",
        "degree_verification_photo": "https://files.test/degree.png",
    }
    body.update(overrides)
    return client.post("/doctors/register", headers=headers, json=body)


def test_registration_creates_unverified_geocoded_application(client, auth_headers):
    response = _register(client, auth_headers("doc-meera"))
    assert response.status_code == 200
    doctor = response.json()["doctor"]
    assert doctor["id"] == "doc-meera"
    assert doctor["verified"] is False
    assert doctor["available"] is True
    assert (doctor["latitude"], doctor["longitude"]) == (19.0760, 72.8777)

    # unverified doctors stay out of the public directory
    listing = client.get("/doctors")
    assert listing.status_code == 200
    assert listing.json()["doctors"] == []


def test_duplicate_registration_is_rejected(client, auth_headers):
    assert _register(client, auth_headers("doc-meera")).status_code == 200
    duplicate = _register(client, auth_headers("doc-meera"))
    assert duplicate.status_code == 409
    assert "already submitted a doctor registration application" in duplicate.json()["detail"]


def test_admin_endpoints_require_admin_flag(client, auth_headers):
    for path in ("/admin/users", "/admin/doctors"):
        response = client.get(path, headers=auth_headers("patient-a"))
        assert response.status_code == 403
        assert response.json()["detail"] == "You don't have administrator permissions."

    verify = client.post(
        "/admin/doctors/doc-x/verify",
        headers=auth_headers("patient-a"),
        json={"approve": True},
    )
    assert verify.status_code == 403


def test_admin_verification_grants_and_rejection_revokes_access(client, auth_headers):
    _register(client, auth_headers("doc-meera"))
    admin = auth_headers(ADMIN_USER_ID)

    pending = client.get("/admin/doctors", headers=admin, params={"pending_only": True})
    assert [row["id"] for row in pending.json()["doctors"]] == ["doc-meera"]

    approved = client.post("/admin/doctors/doc-meera/verify", headers=admin, json={"approve": True})
    assert approved.status_code == 200
    assert approved.json()["doctor"]["verified"] is True
    access = client.get("/doctors/access", headers=auth_headers("doc-meera")).json()
    assert access == {"is_doctor": True, "doctor_dashboard": True, "reason": None}
    assert client.get("/admin/doctors", headers=admin, params={"pending_only": True}).json()["doctors"] == []

    listing = client.get("/doctors", params={"specialization": "Dermatology"}).json()["doctors"]
    assert [row["id"] for row in listing] == ["doc-meera"]
    assert client.get("/doctors", params={"specialization": "Cardiology"}).json()["doctors"] == []

    rejected = client.post("/admin/doctors/doc-meera/verify", headers=admin, json={"approve": False})
    assert rejected.json()["doctor"]["verified"] is False
    access = client.get("/doctors/access", headers=auth_headers("doc-meera")).json()
    assert access["is_doctor"] is False
    assert access["reason"] == "User does not have doctor access"


def test_reviewing_missing_application_is_404(client, auth_headers):
    response = client.post(
        "/admin/doctors/ghost/verify",
        headers=auth_headers(ADMIN_USER_ID),
        json={"approve": True},
    )
    assert response.status_code == 404


def test_admin_user_list_and_access_toggle(client, auth_headers):
    client.post("/profile", headers=auth_headers("patient-abcdefghij"), json={"first_name": "Ravi"})
    admin = auth_headers(ADMIN_USER_ID)

    users = client.get("/admin/users", headers=admin).json()["users"]
    ravi = next(row for row in users if row["id"] == "patient-abcdefghij")
    assert ravi["email"] == "user-patient-@example.com"
    assert ravi["first_name"] == "Ravi"
    assert ravi["is_doctor"] is False

    granted = client.post("/admin/users/patient-abcdefghij/doctor-access", headers=admin, json={"grant": True})
    assert granted.json() == {"user_id": "patient-abcdefghij", "is_doctor": True}
    # access flag alone does not open the dashboard without a verified doctor row
    access = client.get("/doctors/access", headers=auth_headers("patient-abcdefghij")).json()
    assert access["doctor_dashboard"] is False
    assert access["reason"] == "Doctor profile not found"

    revoked = client.post("/admin/users/patient-abcdefghij/doctor-access", headers=admin, json={"grant": False})
    assert revoked.json()["is_doctor"] is False


def test_nearby_search_with_coordinates(client, verified_doctor):
    verified_doctor("doc-delhi", name="Dr. Delhi", address="Karol Bagh", region="Delhi")
    verified_doctor("doc-mumbai", name="Dr. Mumbai", specialization="Neurology", address="Andheri", region="Mumbai")

    response = client.get(
        "/doctors/nearby",
        headers={"Authorization": "Bearer patient-a"},
        params={"latitude": 28.6, "longitude": 77.2},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["location_source"] == "coordinates"
    assert [row["id"] for row in payload["doctors"]] == ["doc-delhi", "doc-mumbai"]
    first = payload["doctors"][0]
    assert set(first) == {"id", "name", "specialization", "hospital", "address", "distance"}
    assert first["distance"] == round(first["distance"], 2)
    assert first["distance"] < payload["doctors"][1]["distance"]

    filtered = client.get(
        "/doctors/nearby",
        headers={"Authorization": "Bearer patient-a"},
        params={"latitude": 28.6, "longitude": 77.2, "specialization": "neurology"},
    ).json()
    assert [row["id"] for row in filtered["doctors"]] == ["doc-mumbai"]


def test_nearby_search_falls_back_to_profile_address(client, auth_headers, verified_doctor):
    verified_doctor("doc-mumbai", name="Dr. Mumbai", address="Andheri", region="Mumbai")
    headers = auth_headers("patient-b")

    missing = client.get("/doctors/nearby", headers=headers)
    assert missing.status_code == 400
    assert missing.json()["detail"] == "No address information found in profile"

    client.post("/profile", headers=headers, json={"address": "Colaba", "city": "Mumbai"})
    response = client.get("/doctors/nearby", headers=headers)
    assert response.status_code == 200
    payload = response.json()
    assert payload["location_source"] == "profile_address"
    assert payload["address"] == "Colaba, Mumbai"
    assert payload["doctors"][0]["distance"] == 0.0


def test_nearby_search_rejects_out_of_range_coordinates(client, auth_headers):
    response = client.get(
        "/doctors/nearby",
        headers=auth_headers("patient-a"),
        params={"latitude": 95, "longitude": 10},
    )
    assert response.status_code == 400


def test_nearby_search_rejects_non_positive_limit(client, auth_headers, verified_doctor):
    verified_doctor("doc-delhi", address="Karol Bagh", region="Delhi")
    for limit in (0, -3):
        response = client.get(
            "/doctors/nearby",
            headers=auth_headers("patient-a"),
            params={"latitude": 28.6, "longitude": 77.2, "limit": limit},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "limit must be at least 1"


def test_approving_placeholder_clears_flag_without_granting_access(client, auth_headers, backend_module):
    requested = client.post(
        "/appointments/request",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "Dr. Walk In", "date": date_after_days(2), "time": "10:00"},
    ).json()
    placeholder_id = requested["appointment"]["doctor_id"]

    approved = client.post(
        f"/admin/doctors/{placeholder_id}/verify",
        headers=auth_headers(ADMIN_USER_ID),
        json={"approve": True},
    )
    assert approved.status_code == 200
    doctor = approved.json()["doctor"]
    assert doctor["verified"] is True
    assert doctor["is_placeholder"] is False

    with backend_module.container.db.connection() as conn:
        profile = conn.execute("SELECT id FROM profiles WHERE id = ?", (placeholder_id,)).fetchone()
    assert profile is None
