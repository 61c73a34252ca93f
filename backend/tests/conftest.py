from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

ADMIN_USER_ID = "admin-user"


@pytest.fixture
def backend_module(tmp_path, monkeypatch):
    db_path = tmp_path / "healthbridge-test.sqlite"
    monkeypatch.setenv("HEALTHBRIDGE_DB_PATH", str(db_path))
    monkeypatch.setenv("ALLOW_ANON", "false")
    monkeypatch.setenv("HEALTHBRIDGE_ADMIN_USER_IDS", ADMIN_USER_ID)
    # Keep CI deterministic; geocoding falls back to the city table.
    monkeypatch.setenv("HEALTHBRIDGE_DISABLE_EXTERNAL_GEO", "true")
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    if "main" in sys.modules:
        module = importlib.reload(sys.modules["main"])
    else:
        module = importlib.import_module("main")
    return module


@pytest.fixture
def client(backend_module):
    with TestClient(backend_module.app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    def _make(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {user_id}"}

    return _make


@pytest.fixture
def verified_doctor(client, auth_headers) -> Callable[..., dict[str, Any]]:
    """Register a doctor through the API and approve it as the seeded admin."""

    def _make(
        user_id: str,
        *,
        name: str = "Dr. Asha Rao",
        specialization: str = "Cardiology",
        address: str = "Connaught Place",
        region: str = "Delhi",
    ) -> dict[str, Any]:
        registered = client.post(
            "/doctors/register",
            headers=auth_headers(user_id),
            json={
                "name": name,
                "email": f"{user_id}@clinic.test",
                "specialization": specialization,
                "hospital": "City Hospital",
                "address": address,
                "region": region,
                "degrees": "MBBS, MD",
                "experience": 12,
                "registration_number": f"REG-{user_id}",
            },
        )
        assert registered.status_code == 200, registered.text
        approved = client.post(
            f"/admin/doctors/{user_id}/verify",
            headers=auth_headers(ADMIN_USER_ID),
            json={"approve": True},
        )
        assert approved.status_code == 200, approved.text
        return approved.json()["doctor"]

    return _make
