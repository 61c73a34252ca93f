from __future__ import annotations

import uuid
from typing import Any

from .database import SQLiteRecordsDB
from .time_utils import to_iso, utc_now


class BookingStore:
    def __init__(self, db: SQLiteRecordsDB) -> None:
        self._db = db

    def create_appointment(self, payload: dict[str, Any]) -> dict[str, Any]:
        now = to_iso(utc_now())
        appointment_id = uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO appointments (
                  id, user_id, doctor_id, doctor_name, doctor_specialty, date, time,
                  reason, notes, status, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    appointment_id,
                    payload["user_id"],
                    payload.get("doctor_id"),
                    payload["doctor_name"],
                    payload.get("doctor_specialty"),
                    payload["date"],
                    payload["time"],
                    payload.get("reason"),
                    payload.get("notes"),
                    payload.get("status", "pending"),
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM appointments WHERE id = ?", (appointment_id,)).fetchone()
            return dict(row)

    def get_appointment(self, appointment_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM appointments WHERE id = ?", (appointment_id,)).fetchone()
            return dict(row) if row else None

    def list_patient_appointments(self, user_id: str) -> list[dict[str, Any]]:
        with self._db.connection() as conn:
            return [
                dict(row)
                for row in conn.execute(
                    """
                    SELECT * FROM appointments
                    WHERE user_id = ?
                    ORDER BY date ASC, time ASC
                    """,
                    (user_id,),
                ).fetchall()
            ]

    def list_doctor_appointments(self, doctor_id: str) -> list[dict[str, Any]]:
        with self._db.connection() as conn:
            return [
                dict(row)
                for row in conn.execute(
                    """
                    SELECT * FROM appointments
                    WHERE doctor_id = ?
                    ORDER BY date ASC, time ASC
                    """,
                    (doctor_id,),
                ).fetchall()
            ]

    def appointments_between(
        self,
        user_id: str,
        *,
        start_date: str,
        end_date: str,
        statuses: tuple[str, ...] = ("pending", "confirmed"),
    ) -> list[dict[str, Any]]:
        placeholders = ", ".join("?" for _ in statuses)
        with self._db.connection() as conn:
            return [
                dict(row)
                for row in conn.execute(
                    f"""
                    SELECT * FROM appointments
                    WHERE user_id = ?
                      AND date >= ?
                      AND date <= ?
                      AND status IN ({placeholders})
                    ORDER BY date ASC, time ASC
                    """,
                    (user_id, start_date, end_date, *statuses),
                ).fetchall()
            ]

    def update_appointment_status(self, appointment_id: str, status: str) -> dict[str, Any] | None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            conn.execute(
                "UPDATE appointments SET status = ?, updated_at = ? WHERE id = ?",
                (status, now, appointment_id),
            )
            row = conn.execute("SELECT * FROM appointments WHERE id = ?", (appointment_id,)).fetchone()
            return dict(row) if row else None

    def create_slot(self, payload: dict[str, Any]) -> dict[str, Any]:
        now = to_iso(utc_now())
        slot_id = uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO appointment_slots (
                  id, doctor_id, date, start_time, end_time, duration, max_patients,
                  status, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, 'available', ?, ?)
                """,
                (
                    slot_id,
                    payload["doctor_id"],
                    payload["date"],
                    payload["start_time"],
                    payload["end_time"],
                    int(payload["duration"]),
                    int(payload.get("max_patients") or 1),
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM appointment_slots WHERE id = ?", (slot_id,)).fetchone()
            return dict(row)

    def get_slot(self, slot_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM appointment_slots WHERE id = ?", (slot_id,)).fetchone()
            return dict(row) if row else None

    def list_doctor_slots(self, doctor_id: str, *, exclude_available: bool = False) -> list[dict[str, Any]]:
        query = "SELECT * FROM appointment_slots WHERE doctor_id = ?"
        if exclude_available:
            query += " AND status != 'available'"
        query += " ORDER BY date ASC, start_time ASC"
        with self._db.connection() as conn:
            return [dict(row) for row in conn.execute(query, (doctor_id,)).fetchall()]

    def list_patient_slots(self, user_id: str) -> list[dict[str, Any]]:
        with self._db.connection() as conn:
            return [
                dict(row)
                for row in conn.execute(
                    """
                    SELECT s.*, d.name AS doctor_name, d.specialization AS doctor_specialization,
                           d.hospital AS doctor_hospital
                    FROM appointment_slots s
                    JOIN doctors d ON d.id = s.doctor_id
                    WHERE s.user_id = ?
                    ORDER BY s.date ASC, s.start_time ASC
                    """,
                    (user_id,),
                ).fetchall()
            ]

    def available_slots(self, *, from_date: str, doctor_id: str | None = None) -> list[dict[str, Any]]:
        query = """
            SELECT s.*, d.name AS doctor_name, d.specialization AS doctor_specialization,
                   d.hospital AS doctor_hospital
            FROM appointment_slots s
            JOIN doctors d ON d.id = s.doctor_id
            WHERE s.status = 'available' AND s.date >= ?
        """
        params: list[Any] = [from_date]
        if doctor_id:
            query += " AND s.doctor_id = ?"
            params.append(doctor_id)
        query += " ORDER BY s.date ASC, s.start_time ASC"
        with self._db.connection() as conn:
            rows = conn.execute(query, params).fetchall()
        items: list[dict[str, Any]] = []
        for row in rows:
            item = dict(row)
            item["doctor"] = {
                "name": item.pop("doctor_name"),
                "specialization": item.pop("doctor_specialization"),
                "hospital": item.pop("doctor_hospital"),
            }
            items.append(item)
        return items

    def book_slot(self, slot_id: str, *, user_id: str, patient_name: str, reason: str) -> int:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            cursor = conn.execute(
                """
                UPDATE appointment_slots
                SET user_id = ?, patient_name = ?, reason = ?, status = 'booked', updated_at = ?
                WHERE id = ? AND status = 'available'
                """,
                (user_id, patient_name, reason, now, slot_id),
            )
            return cursor.rowcount

    def update_slot_status(self, slot_id: str, status: str) -> dict[str, Any] | None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            if status == "available":
                # A re-opened slot no longer belongs to its previous patient.
                conn.execute(
                    """
                    UPDATE appointment_slots
                    SET status = ?, user_id = NULL, patient_name = NULL, reason = NULL, updated_at = ?
                    WHERE id = ?
                    """,
                    (status, now, slot_id),
                )
            else:
                conn.execute(
                    "UPDATE appointment_slots SET status = ?, updated_at = ? WHERE id = ?",
                    (status, now, slot_id),
                )
            row = conn.execute("SELECT * FROM appointment_slots WHERE id = ?", (slot_id,)).fetchone()
            return dict(row) if row else None

    def delete_slot(self, slot_id: str) -> bool:
        with self._db.connection() as conn:
            cursor = conn.execute("DELETE FROM appointment_slots WHERE id = ?", (slot_id,))
            return cursor.rowcount > 0
