from __future__ import annotations

import pytest

from records.time_utils import date_after_days


@pytest.fixture
def saved_health_check(client, auth_headers, backend_module, monkeypatch):
    def fake(**kwargs):
        return {"choices": [{"message": {"content": "Possible migraine."}}]}

    monkeypatch.setattr(backend_module, "_groq_chat_completion", fake)

    def _make(user_id: str = "patient-a") -> dict:
        response = client.post(
            "/health-checks",
            headers=auth_headers(user_id),
            json={
                "symptoms": ["Headache", "Confusion"],
                "severity": "Severe",
                "duration": "2 days",
                "notes": "Light hurts",
                "photos": {"Headache": "https://files.test/scan.jpg"},
            },
        )
        assert response.status_code == 200, response.text
        return response.json()["health_check"]

    return _make


def test_requested_booking_forwards_health_check(client, auth_headers, verified_doctor, saved_health_check):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    client.post("/profile", headers=auth_headers("patient-a"), json={"first_name": "Ravi", "last_name": "Kumar"})
    check = saved_health_check()

    response = client.post(
        "/appointments/request",
        headers=auth_headers("patient-a"),
        json={
            "doctor_name": "Dr. Asha Rao",
            "date": date_after_days(2),
            "time": "10:00",
            "reason": "Getting worse",
            "health_check_id": check["id"],
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["health_check_shared"] is True
    appointment = payload["appointment"]
    assert appointment["reason"] == (
        "Health Check Follow-up: Headache, Confusion "
        "(URGENT - SEE HEALTHCARE PROVIDER WITHIN 24 HOURS URGENCY) - Getting worse"
    )

    inbox = client.get("/doctor/notifications", headers=auth_headers("doc-asha"))
    assert inbox.status_code == 200
    notifications = inbox.json()["notifications"]
    assert len(notifications) == 1
    note = notifications[0]
    assert note["status"] == "sent"
    assert note["patient_name"] == "Ravi Kumar"
    assert note["appointment_date"] == date_after_days(2)
    assert note["appointment_time"] == "10:00"
    data = note["symptoms_data"]
    assert data["symptoms"] == ["Headache", "Confusion"]
    assert data["forwarded_from"] == "health_check_booking"
    assert data["booking_context"]["appointment_id"] == appointment["id"]
    assert data["booking_context"]["patient_notes"] == (
        "Health check data automatically forwarded from appointment booking"
    )
    assert data["symptom_photos"] == {"Headache": "https://files.test/scan.jpg"}
    assert data["check_date"] == check["created_at"]


def test_booking_with_foreign_health_check_is_blocked(client, auth_headers, verified_doctor, saved_health_check):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    check = saved_health_check("patient-a")
    response = client.post(
        "/appointments/request",
        headers=auth_headers("patient-b"),
        json={
            "doctor_name": "Dr. Asha Rao",
            "date": date_after_days(2),
            "time": "10:00",
            "health_check_id": check["id"],
        },
    )
    assert response.status_code == 403


def test_share_without_upcoming_appointment(client, auth_headers, saved_health_check):
    check = saved_health_check()
    response = client.post(f"/health-checks/{check['id']}/share", headers=auth_headers("patient-a"))
    assert response.status_code == 200
    assert response.json() == {"shared": False, "reason": "no_upcoming_appointment"}


def test_share_uses_nearest_upcoming_appointment(client, auth_headers, verified_doctor, saved_health_check):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    verified_doctor("doc-other", name="Dr. Other")
    headers = auth_headers("patient-a")
    for doctor_id, days in (("doc-other", 5), ("doc-asha", 1), ("doc-other", 30)):
        client.post(
            "/appointments",
            headers=headers,
            json={"doctor_id": doctor_id, "date": date_after_days(days), "time": "09:00"},
        )
    check = saved_health_check()

    response = client.post(f"/health-checks/{check['id']}/share", headers=headers)
    assert response.status_code == 200
    payload = response.json()
    assert payload["shared"] is True
    assert payload["appointment"]["doctor_id"] == "doc-asha"
    assert payload["notification"]["doctor_id"] == "doc-asha"
    assert client.get("/doctor/notifications", headers=auth_headers("doc-other")).json()["notifications"] == []

    foreign = client.post(f"/health-checks/{check['id']}/share", headers=auth_headers("patient-b"))
    assert foreign.status_code == 403


def test_share_with_explicit_appointment(client, auth_headers, verified_doctor, saved_health_check):
    verified_doctor("doc-other", name="Dr. Other")
    headers = auth_headers("patient-a")
    appointment = client.post(
        "/appointments",
        headers=headers,
        json={"doctor_id": "doc-other", "date": date_after_days(40), "time": "09:00"},
    ).json()["appointment"]
    check = saved_health_check()

    response = client.post(
        f"/health-checks/{check['id']}/share",
        headers=headers,
        json={"appointment_id": appointment["id"]},
    )
    assert response.json()["notification"]["appointment_id"] == appointment["id"]

    missing = client.post(
        f"/health-checks/{check['id']}/share",
        headers=headers,
        json={"appointment_id": "missing"},
    )
    assert missing.status_code == 404


def test_notification_status_lifecycle(client, auth_headers, verified_doctor, saved_health_check):
    verified_doctor("doc-asha", name="Dr. Asha Rao")
    verified_doctor("doc-other", name="Dr. Other")
    client.post(
        "/appointments",
        headers=auth_headers("patient-a"),
        json={"doctor_id": "doc-asha", "date": date_after_days(1), "time": "09:00"},
    )
    check = saved_health_check()
    notification = client.post(
        f"/health-checks/{check['id']}/share",
        headers=auth_headers("patient-a"),
    ).json()["notification"]
    path = f"/doctor/notifications/{notification['id']}/status"

    assert client.post(path, headers=auth_headers("doc-other"), json={"status": "read"}).status_code == 403
    assert client.post(path, headers=auth_headers("doc-asha"), json={"status": "archived"}).status_code == 400

    read = client.post(path, headers=auth_headers("doc-asha"), json={"status": "read"})
    assert read.json()["notification"]["status"] == "read"
    acknowledged = client.post(path, headers=auth_headers("doc-asha"), json={"status": "acknowledged"})
    assert acknowledged.json()["notification"]["status"] == "acknowledged"

    back = client.post(path, headers=auth_headers("doc-asha"), json={"status": "read"})
    assert back.status_code == 409
