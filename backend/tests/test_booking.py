from __future__ import annotations

from records.time_utils import date_after_days


def test_direct_booking_by_verified_doctor_name(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    response = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "Dr. Asha Rao", "date": date_after_days(3), "time": "10:30"},
    )
    assert response.status_code == 200
    appointment = response.json()["appointment"]
    assert appointment["doctor_id"] == "doc-asha"
    assert appointment["user_id"] == "patient-a"
    assert appointment["status"] == "pending"
    assert appointment["reason"] == "General consultation"
    assert appointment["notes"] is None
    assert appointment["doctor_specialty"] == "Cardiology"


def test_direct_booking_requires_verified_doctor(client, auth_headers):
    client.post(
        "/doctors/register",
        headers=auth_headers("doc-pending"),
        json={"name": "Dr. Pending", "specialization": "ENT"},
    )
    by_name = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "Dr. Pending", "date": date_after_days(1), "time": "09:00"},
    )
    assert by_name.status_code == 404
    assert by_name.json()["detail"] == 'Doctor "Dr. Pending" not found or not verified'

    by_id = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "Dr. Pending", "doctor_id": "doc-pending", "date": date_after_days(1), "time": "09:00"},
    )
    assert by_id.status_code == 404
    assert by_id.json()["detail"] == "Doctor not found or not verified"


def test_direct_booking_validates_date_and_time(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    bad_date = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_id": "doc-asha", "date": "tomorrow", "time": "09:00"},
    )
    assert bad_date.status_code == 400
    bad_time = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": "nine"},
    )
    assert bad_time.status_code == 400


def test_booking_requires_authorization(client):
    response = client.post(
        "/appointments",
        json={"doctor_name": "Dr. Asha Rao", "date": date_after_days(1), "time": "09:00"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Missing Authorization"


def test_requested_booking_creates_placeholder_doctor(client, auth_headers, backend_module):
    response = client.post(
        "/appointments/request",
        headers=auth_headers("patient-a"),
        json={
            "doctor_name": "Dr. New Person",
            "doctor_specialty": "Orthopedics",
            "date": date_after_days(2),
            "time": "11:00 AM",
            "reason": "Knee pain",
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["placeholder_doctor_created"] is True
    assert payload["health_check_shared"] is False
    appointment = payload["appointment"]
    assert appointment["reason"] == "Knee pain"

    with backend_module.container.db.connection() as conn:
        row = conn.execute(
            "SELECT name, specialization, verified, available, is_placeholder FROM doctors WHERE id = ?",
            (appointment["doctor_id"],),
        ).fetchone()
    assert row["name"] == "Dr. New Person"
    assert row["specialization"] == "Orthopedics"
    assert (row["verified"], row["available"], row["is_placeholder"]) == (0, 0, 1)

    # a second request with the same name reuses the placeholder
    again = client.post(
        "/appointments/request",
        headers=auth_headers("patient-b"),
        json={"doctor_name": "dr. new person", "date": date_after_days(4), "time": "12:00"},
    ).json()
    assert again["placeholder_doctor_created"] is False
    assert again["appointment"]["doctor_id"] == appointment["doctor_id"]

    # placeholders never show in the public directory
    assert client.get("/doctors").json()["doctors"] == []


def test_requested_booking_reuses_existing_doctor(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    payload = client.post(
        "/appointments/request",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "DR. ASHA RAO", "date": date_after_days(2), "time": "14:00"},
    ).json()
    assert payload["placeholder_doctor_created"] is False
    assert payload["appointment"]["doctor_id"] == "doc-asha"


def test_requested_booking_requires_fields(client, auth_headers):
    response = client.post(
        "/appointments/request",
        headers=auth_headers("patient-a"),
        json={"doctor_name": "", "date": date_after_days(2), "time": "14:00"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all required fields"


def test_patient_cancel_follows_lifecycle(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    appointment = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": "09:00"},
    ).json()["appointment"]

    foreign = client.post(f"/appointments/{appointment['id']}/cancel", headers=auth_headers("patient-b"))
    assert foreign.status_code == 403

    cancelled = client.post(f"/appointments/{appointment['id']}/cancel", headers=auth_headers("patient-a"))
    assert cancelled.status_code == 200
    assert cancelled.json()["appointment"]["status"] == "cancelled"

    missing = client.post("/appointments/does-not-exist/cancel", headers=auth_headers("patient-a"))
    assert missing.status_code == 404


def test_cannot_cancel_completed_appointment(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    appointment = client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": "09:00"},
    ).json()["appointment"]
    doctor = auth_headers("doc-asha")
    for action in ("confirm", "complete"):
        response = client.post(
            f"/doctor/appointments/appointment/{appointment['id']}/status",
            headers=doctor,
            json={"action": action},
        )
        assert response.status_code == 200

    response = client.post(f"/appointments/{appointment['id']}/cancel", headers=auth_headers("patient-a"))
    assert response.status_code == 409
    assert response.json()["detail"] == "Invalid transition: completed -> cancelled"


def test_patient_listing_and_upcoming_window(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    headers = auth_headers("patient-a")
    for days, time in ((5, "09:00"), (1, "15:00"), (20, "10:00")):
        client.post(
            "/appointments",
            headers=headers,
            json={"doctor_id": "doc-asha", "date": date_after_days(days), "time": time},
        )

    listing = client.get("/appointments", headers=headers).json()
    assert [row["date"] for row in listing["appointments"]] == [
        date_after_days(1),
        date_after_days(5),
        date_after_days(20),
    ]
    assert listing["slot_bookings"] == []

    upcoming = client.get("/appointments/upcoming", headers=headers).json()["appointments"]
    assert [row["date"] for row in upcoming] == [date_after_days(1), date_after_days(5)]
    assert client.get("/appointments/upcoming", headers=auth_headers("patient-b")).json()["appointments"] == []


def test_booking_times_are_stored_as_24_hour_clock(client, auth_headers, verified_doctor):
    verified_doctor("doc-asha")
    headers = auth_headers("patient-a")
    stored = {}
    for raw in ("9:05", "09:05:30", "12:15 AM", "12:00 pm", "7:45PM"):
        response = client.post(
            "/appointments",
            headers=headers,
            json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": raw},
        )
        assert response.status_code == 200, response.text
        stored[raw] = response.json()["appointment"]["time"]
    assert stored == {
        "9:05": "09:05",
        "09:05:30": "09:05",
        "12:15 AM": "00:15",
        "12:00 pm": "12:00",
        "7:45PM": "19:45",
    }

    for raw in ("24:00", "13:00 PM", "0:30 AM", "10:75"):
        response = client.post(
            "/appointments",
            headers=headers,
            json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": raw},
        )
        assert response.status_code == 400, raw
