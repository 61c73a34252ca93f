#!/usr/bin/env python3
from __future__ import annotations

import importlib
import json
import os
import sys
import tempfile
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

from fastapi.testclient import TestClient

ADMIN_ID = "smoke-admin"
DOCTOR_ID = "smoke-doctor"
PATIENT_ID = "smoke-patient"


@dataclass
class Step:
  name: str
  method: str
  path: Callable[[dict[str, Any]], str]
  user_id: str
  body: dict[str, Any] | None = None
  expected_status: int = 200
  capture: Callable[[dict[str, Any], dict[str, Any]], None] | None = None


def headers_for(user_id: str) -> dict[str, str]:
  return {"Authorization": f"Bearer {user_id}"}


def future_date(days: int) -> str:
  return (datetime.now(timezone.utc).date() + timedelta(days=days)).isoformat()


def build_steps() -> list[Step]:
  def keep(key: str, extract: Callable[[dict[str, Any]], Any]) -> Callable[[dict[str, Any], dict[str, Any]], None]:
    def _capture(state: dict[str, Any], body: dict[str, Any]) -> None:
      state[key] = extract(body)

    return _capture

  return [
    Step(
      name="Patient Profile",
      method="POST",
      path=lambda state: "/profile",
      user_id=PATIENT_ID,
      body={"first_name": "Smoke", "last_name": "Patient", "address": "Andheri", "city": "Mumbai"},
    ),
    Step(
      name="Doctor Registration",
      method="POST",
      path=lambda state: "/doctors/register",
      user_id=DOCTOR_ID,
      body={
        "name": "Dr. Smoke Test",
        "specialization": "General Medicine",
        "hospital": "Smoke Clinic",
        "address": "Bandra",
        "region": "Mumbai",
        "registration_number": "SMOKE-1",
      },
    ),
    Step(
      name="Admin Verification",
      method="POST",
      path=lambda state: f"/admin/doctors/{DOCTOR_ID}/verify",
      user_id=ADMIN_ID,
      body={"approve": True},
    ),
    Step(
      name="Nearby Doctor Search",
      method="GET",
      path=lambda state: "/doctors/nearby",
      user_id=PATIENT_ID,
      capture=keep("nearby_count", lambda body: body.get("count")),
    ),
    Step(
      name="Doctor Publishes Slot",
      method="POST",
      path=lambda state: "/doctor/slots",
      user_id=DOCTOR_ID,
      body={"date": future_date(2), "start_time": "10:00", "end_time": "10:30", "duration": 30},
      capture=keep("slot_id", lambda body: body["slot"]["id"]),
    ),
    Step(
      name="Patient Books Slot",
      method="POST",
      path=lambda state: f"/slots/{state['slot_id']}/book",
      user_id=PATIENT_ID,
      body={"patient_name": "Smoke Patient"},
    ),
    Step(
      name="Slot Cannot Be Double Booked",
      method="POST",
      path=lambda state: f"/slots/{state['slot_id']}/book",
      user_id=PATIENT_ID,
      body={"patient_name": "Smoke Patient"},
      expected_status=409,
    ),
    Step(
      name="Direct Appointment",
      method="POST",
      path=lambda state: "/appointments",
      user_id=PATIENT_ID,
      body={"doctor_id": DOCTOR_ID, "date": future_date(3), "time": "11:00"},
      capture=keep("appointment_id", lambda body: body["appointment"]["id"]),
    ),
    Step(
      name="Requested Appointment With Placeholder Doctor",
      method="POST",
      path=lambda state: "/appointments/request",
      user_id=PATIENT_ID,
      body={"doctor_name": "Dr. Not Yet Listed", "date": future_date(4), "time": "12:00"},
      capture=keep("placeholder_created", lambda body: body.get("placeholder_doctor_created")),
    ),
    Step(
      name="Doctor Confirms Appointment",
      method="POST",
      path=lambda state: f"/doctor/appointments/appointment/{state['appointment_id']}/status",
      user_id=DOCTOR_ID,
      body={"action": "confirm"},
    ),
    Step(
      name="Doctor Unified View",
      method="GET",
      path=lambda state: "/doctor/appointments",
      user_id=DOCTOR_ID,
      capture=keep("unified_types", lambda body: [item["type"] for item in body["appointments"]]),
    ),
    Step(
      name="Emergency Call",
      method="POST",
      path=lambda state: "/emergency/calls",
      user_id=PATIENT_ID,
      body={"patient_name": "Smoke Patient", "symptoms": ["Chest pain"], "severity": "Critical", "address": "Mumbai"},
    ),
  ]


def run() -> int:
  repo_root = Path(__file__).resolve().parents[1]
  backend_dir = repo_root / "backend"
  if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

  scratch = tempfile.mkdtemp(prefix="healthbridge-smoke-")
  os.environ["HEALTHBRIDGE_DB_PATH"] = str(Path(scratch) / "smoke.sqlite")
  os.environ["HEALTHBRIDGE_ADMIN_USER_IDS"] = ADMIN_ID
  os.environ.setdefault("HEALTHBRIDGE_DISABLE_EXTERNAL_GEO", "true")
  os.environ["ALLOW_ANON"] = "false"

  backend_module = importlib.import_module("main")
  backend_module = importlib.reload(backend_module)

  state: dict[str, Any] = {}
  results: list[dict[str, Any]] = []

  with TestClient(backend_module.app) as client:
    for step in build_steps():
      result: dict[str, Any] = {"name": step.name, "expected_status": step.expected_status}
      try:
        path = step.path(state)
      except KeyError as exc:
        result["pass"] = False
        result["error"] = f"Missing state from an earlier step: {exc}"
        results.append(result)
        continue

      response = client.request(step.method, path, headers=headers_for(step.user_id), json=step.body)
      result["path"] = path
      result["status_code"] = response.status_code
      try:
        body = response.json()
      except json.JSONDecodeError:
        body = {"raw": response.text[:500]}
      result["body"] = body
      result["pass"] = response.status_code == step.expected_status
      if result["pass"] and step.capture is not None and isinstance(body, dict):
        step.capture(state, body)
      if not result["pass"]:
        result["error"] = f"Expected {step.expected_status}, got {response.status_code}"
      results.append(result)

  passed = sum(1 for item in results if item.get("pass"))
  failed = len(results) - passed
  timestamp = datetime.now(timezone.utc).isoformat()

  report_lines = [
    "# Booking E2E Smoke Report",
    "",
    f"- Timestamp (UTC): `{timestamp}`",
    f"- HEALTHBRIDGE_DISABLE_EXTERNAL_GEO: `{os.getenv('HEALTHBRIDGE_DISABLE_EXTERNAL_GEO')}`",
    f"- Total steps: `{len(results)}`",
    f"- Passed: `{passed}`",
    f"- Failed: `{failed}`",
    f"- Captured state: `{json.dumps(state, ensure_ascii=True)}`",
    "",
    "## Step Results",
    "",
  ]

  for item in results:
    status = "PASS" if item.get("pass") else "FAIL"
    report_lines.append(f"### {status} - {item['name']}")
    report_lines.append(f"- Path: `{item.get('path')}`")
    report_lines.append(f"- Expected status: `{item.get('expected_status')}`")
    report_lines.append(f"- Status code: `{item.get('status_code')}`")
    if item.get("error"):
      report_lines.append(f"- Error: `{item['error']}`")
    report_lines.append("- Response payload:")
    report_lines.append("```json")
    report_lines.append(json.dumps(item.get("body"), indent=2, ensure_ascii=True))
    report_lines.append("```")
    report_lines.append("")

  report_path = repo_root / "BOOKING_E2E_SMOKE_REPORT.md"
  report_path.write_text("\n".join(report_lines), encoding="utf-8")
  print(f"Wrote report: {report_path}")
  print(f"Passed {passed}/{len(results)} steps.")

  return 0 if failed == 0 else 1


if __name__ == "__main__":
  raise SystemExit(run())
