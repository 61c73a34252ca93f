from __future__ import annotations

import json
import sqlite3
import uuid
from typing import Any

from .database import SQLiteRecordsDB
from .time_utils import to_iso, utc_now


def _json_dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


def _json_loads(value: str | None, default: Any) -> Any:
    if not value:
        return default
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return default


def _health_check_row(row: sqlite3.Row) -> dict[str, Any]:
    return {
        "id": row["id"],
        "user_id": row["user_id"],
        "symptoms": _json_loads(row["symptoms_json"], []),
        "severity": row["severity"],
        "duration": row["duration"],
        "previous_conditions": _json_loads(row["previous_conditions_json"], []),
        "medications": _json_loads(row["medications_json"], []),
        "notes": row["notes"],
        "analysis_results": _json_loads(row["analysis_results_json"], None),
        "comprehensive_analysis": bool(row["comprehensive_analysis"]),
        "overall_assessment": row["overall_assessment"],
        "urgency_level": row["urgency_level"],
        "symptom_photos": _json_loads(row["symptom_photos_json"], {}),
        "created_at": row["created_at"],
    }


def _notification_row(row: sqlite3.Row) -> dict[str, Any]:
    item = dict(row)
    item["symptoms_data"] = _json_loads(item.pop("symptoms_data_json"), {})
    return item


def _emergency_row(row: sqlite3.Row) -> dict[str, Any]:
    item = dict(row)
    item["symptoms"] = _json_loads(item.pop("symptoms_json"), [])
    return item


class HealthStore:
    def __init__(self, db: SQLiteRecordsDB) -> None:
        self._db = db

    def create_health_check(self, user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        now = to_iso(utc_now())
        record_id = uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO health_checks (
                  id, user_id, symptoms_json, severity, duration, previous_conditions_json,
                  medications_json, notes, analysis_results_json, comprehensive_analysis,
                  overall_assessment, urgency_level, symptom_photos_json, created_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record_id,
                    user_id,
                    _json_dumps(list(payload.get("symptoms") or [])),
                    payload.get("severity"),
                    payload.get("duration"),
                    _json_dumps(list(payload.get("previous_conditions") or [])),
                    _json_dumps(list(payload.get("medications") or [])),
                    payload.get("notes"),
                    _json_dumps(payload["analysis_results"]) if payload.get("analysis_results") is not None else None,
                    int(bool(payload.get("comprehensive_analysis"))),
                    payload.get("overall_assessment"),
                    payload.get("urgency_level"),
                    _json_dumps(dict(payload.get("symptom_photos") or {})),
                    payload.get("created_at") or now,
                ),
            )
            row = conn.execute("SELECT * FROM health_checks WHERE id = ?", (record_id,)).fetchone()
            return _health_check_row(row)

    def get_health_check(self, health_check_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM health_checks WHERE id = ?", (health_check_id,)).fetchone()
            return _health_check_row(row) if row else None

    def list_health_checks(self, user_id: str, limit: int = 50) -> list[dict[str, Any]]:
        bounded = max(1, min(int(limit), 200))
        with self._db.connection() as conn:
            rows = conn.execute(
                """
                SELECT * FROM health_checks
                WHERE user_id = ?
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
                """,
                (user_id, bounded),
            ).fetchall()
            return [_health_check_row(row) for row in rows]

    def create_notification(
        self,
        *,
        doctor_id: str,
        patient_id: str,
        appointment_id: str,
        health_check_id: str,
        symptoms_data: dict[str, Any],
    ) -> dict[str, Any]:
        now = to_iso(utc_now())
        record_id = uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO doctor_notifications (
                  id, doctor_id, patient_id, appointment_id, health_check_id,
                  symptoms_data_json, status, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, 'sent', ?, ?)
                """,
                (
                    record_id,
                    doctor_id,
                    patient_id,
                    appointment_id,
                    health_check_id,
                    _json_dumps(symptoms_data),
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM doctor_notifications WHERE id = ?", (record_id,)).fetchone()
            return _notification_row(row)

    def get_notification(self, notification_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute(
                "SELECT * FROM doctor_notifications WHERE id = ?",
                (notification_id,),
            ).fetchone()
            return _notification_row(row) if row else None

    def list_doctor_notifications(self, doctor_id: str) -> list[dict[str, Any]]:
        with self._db.connection() as conn:
            rows = conn.execute(
                """
                SELECT n.*,
                       TRIM(COALESCE(p.first_name, '') || ' ' || COALESCE(p.last_name, '')) AS patient_name,
                       a.date AS appointment_date,
                       a.time AS appointment_time
                FROM doctor_notifications n
                LEFT JOIN profiles p ON p.id = n.patient_id
                LEFT JOIN appointments a ON a.id = n.appointment_id
                WHERE n.doctor_id = ?
                ORDER BY n.created_at DESC, n.rowid DESC
                """,
                (doctor_id,),
            ).fetchall()
            items = []
            for row in rows:
                item = _notification_row(row)
                item["patient_name"] = item.get("patient_name") or "Unknown Patient"
                items.append(item)
            return items

    def update_notification_status(self, notification_id: str, status: str) -> dict[str, Any] | None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            conn.execute(
                "UPDATE doctor_notifications SET status = ?, updated_at = ? WHERE id = ?",
                (status, now, notification_id),
            )
            row = conn.execute(
                "SELECT * FROM doctor_notifications WHERE id = ?",
                (notification_id,),
            ).fetchone()
            return _notification_row(row) if row else None

    def create_emergency_call(self, user_id: str | None, payload: dict[str, Any]) -> dict[str, Any]:
        now = to_iso(utc_now())
        record_id = uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO emergency_calls (
                  id, user_id, doctor_id, patient_name, symptoms_json, severity, address,
                  age, gender, status, created_at, updated_at
                )
                VALUES (?, ?, NULL, ?, ?, ?, ?, ?, ?, 'pending', ?, ?)
                """,
                (
                    record_id,
                    user_id,
                    payload["patient_name"],
                    _json_dumps(list(payload.get("symptoms") or [])),
                    payload.get("severity"),
                    payload["address"],
                    payload.get("age"),
                    payload.get("gender"),
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM emergency_calls WHERE id = ?", (record_id,)).fetchone()
            return _emergency_row(row)

    def get_emergency_call(self, call_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM emergency_calls WHERE id = ?", (call_id,)).fetchone()
            return _emergency_row(row) if row else None

    def assign_emergency_doctor(self, call_id: str, doctor_id: str) -> dict[str, Any] | None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            conn.execute(
                """
                UPDATE emergency_calls
                SET doctor_id = ?, status = 'assigned', updated_at = ?
                WHERE id = ?
                """,
                (doctor_id, now, call_id),
            )
            row = conn.execute("SELECT * FROM emergency_calls WHERE id = ?", (call_id,)).fetchone()
            return _emergency_row(row) if row else None
