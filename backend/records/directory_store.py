from __future__ import annotations

import sqlite3
import uuid
from typing import Any

from .database import SQLiteRecordsDB
from .time_utils import to_iso, utc_now

_PROFILE_COLUMNS = (
    "first_name",
    "last_name",
    "phone",
    "address",
    "city",
    "region",
    "date_of_birth",
    "gender",
    "allergies",
    "medical_history",
    "medications",
    "emergency_contact_name",
    "emergency_contact_phone",
    "emergency_contact_relation",
)

_DOCTOR_BOOL_COLUMNS = ("available", "verified", "is_placeholder")


def _profile_row(row: sqlite3.Row | None) -> dict[str, Any] | None:
    if row is None:
        return None
    item = dict(row)
    item["is_doctor"] = bool(item.get("is_doctor"))
    item["is_admin"] = bool(item.get("is_admin"))
    return item


def _doctor_row(row: sqlite3.Row | None) -> dict[str, Any] | None:
    if row is None:
        return None
    item = dict(row)
    for column in _DOCTOR_BOOL_COLUMNS:
        item[column] = bool(item.get(column))
    return item


def display_name_from_profile(profile: dict[str, Any] | None) -> str | None:
    if not profile:
        return None
    first = (profile.get("first_name") or "").strip()
    last = (profile.get("last_name") or "").strip()
    full = f"{first} {last}".strip()
    return full or None


class DirectoryStore:
    def __init__(self, db: SQLiteRecordsDB) -> None:
        self._db = db

    def get_profile(self, user_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM profiles WHERE id = ?", (user_id,)).fetchone()
            return _profile_row(row)

    def list_profiles(self) -> list[dict[str, Any]]:
        with self._db.connection() as conn:
            rows = conn.execute(
                """
                SELECT id, first_name, last_name, is_doctor
                FROM profiles
                ORDER BY created_at ASC
                """
            ).fetchall()
            return [
                {
                    "id": row["id"],
                    "first_name": row["first_name"],
                    "last_name": row["last_name"],
                    "is_doctor": bool(row["is_doctor"]),
                }
                for row in rows
            ]

    def upsert_profile(self, user_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        now = to_iso(utc_now())
        values = {column: fields.get(column) for column in _PROFILE_COLUMNS if column in fields}
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO profiles (id, created_at, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(id) DO NOTHING
                """,
                (user_id, now, now),
            )
            if values:
                assignments = ", ".join(f"{column} = ?" for column in values)
                conn.execute(
                    f"UPDATE profiles SET {assignments}, updated_at = ? WHERE id = ?",
                    (*values.values(), now, user_id),
                )
            row = conn.execute("SELECT * FROM profiles WHERE id = ?", (user_id,)).fetchone()
            return _profile_row(row) or {}

    def _set_profile_flag(self, user_id: str, column: str, value: bool) -> None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            conn.execute(
                f"""
                INSERT INTO profiles (id, {column}, created_at, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                  {column} = excluded.{column},
                  updated_at = excluded.updated_at
                """,
                (user_id, int(value), now, now),
            )

    def set_doctor_flag(self, user_id: str, value: bool) -> None:
        self._set_profile_flag(user_id, "is_doctor", value)

    def set_admin_flag(self, user_id: str, value: bool) -> None:
        self._set_profile_flag(user_id, "is_admin", value)

    def get_doctor(self, doctor_id: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute("SELECT * FROM doctors WHERE id = ?", (doctor_id,)).fetchone()
            return _doctor_row(row)

    def find_verified_doctor(self, *, doctor_id: str | None = None, name: str | None = None) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            if doctor_id:
                row = conn.execute(
                    "SELECT * FROM doctors WHERE id = ? AND verified = 1",
                    (doctor_id,),
                ).fetchone()
            else:
                row = conn.execute(
                    """
                    SELECT * FROM doctors
                    WHERE name = ? AND verified = 1
                    ORDER BY created_at ASC
                    LIMIT 1
                    """,
                    (name or "",),
                ).fetchone()
            return _doctor_row(row)

    def find_doctor_by_name(self, name: str) -> dict[str, Any] | None:
        with self._db.connection() as conn:
            row = conn.execute(
                """
                SELECT * FROM doctors
                WHERE lower(name) = lower(?)
                ORDER BY verified DESC, created_at ASC
                LIMIT 1
                """,
                (name.strip(),),
            ).fetchone()
            return _doctor_row(row)

    def list_doctors(self, specialization: str | None = None) -> list[dict[str, Any]]:
        query = "SELECT * FROM doctors WHERE verified = 1 AND available = 1"
        params: list[Any] = []
        if specialization:
            query += " AND specialization = ?"
            params.append(specialization)
        query += " ORDER BY name ASC"
        with self._db.connection() as conn:
            return [_doctor_row(row) for row in conn.execute(query, params).fetchall()]

    def doctors_with_coordinates(self, specialization: str | None = None) -> list[dict[str, Any]]:
        query = """
            SELECT id, name, specialization, hospital, address, latitude, longitude
            FROM doctors
            WHERE verified = 1 AND available = 1
              AND latitude IS NOT NULL AND longitude IS NOT NULL
        """
        params: list[Any] = []
        if specialization:
            query += " AND lower(specialization) = lower(?)"
            params.append(specialization)
        with self._db.connection() as conn:
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    def list_applications(self, pending_only: bool = False) -> list[dict[str, Any]]:
        query = "SELECT * FROM doctors"
        if pending_only:
            query += " WHERE verified = 0"
        query += " ORDER BY created_at DESC"
        with self._db.connection() as conn:
            return [_doctor_row(row) for row in conn.execute(query).fetchall()]

    def create_doctor(self, payload: dict[str, Any], *, doctor_id: str | None = None) -> dict[str, Any]:
        now = to_iso(utc_now())
        record_id = doctor_id or uuid.uuid4().hex
        with self._db.connection() as conn:
            conn.execute(
                """
                INSERT INTO doctors (
                  id, name, email, specialization, hospital, address, region, degrees,
                  experience, registration_number, degree_verification_photo, latitude, longitude,
                  available, verified, is_placeholder, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record_id,
                    payload["name"],
                    payload.get("email"),
                    payload.get("specialization") or "",
                    payload.get("hospital") or "",
                    payload.get("address") or "",
                    payload.get("region") or "",
                    payload.get("degrees") or "",
                    int(payload.get("experience") or 0),
                    payload.get("registration_number") or "",
                    payload.get("degree_verification_photo"),
                    payload.get("latitude"),
                    payload.get("longitude"),
                    int(bool(payload.get("available", True))),
                    int(bool(payload.get("verified", False))),
                    int(bool(payload.get("is_placeholder", False))),
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM doctors WHERE id = ?", (record_id,)).fetchone()
            return _doctor_row(row) or {}

    def set_verified(self, doctor_id: str, verified: bool) -> dict[str, Any] | None:
        now = to_iso(utc_now())
        with self._db.connection() as conn:
            conn.execute(
                """
                UPDATE doctors
                SET verified = ?,
                    available = CASE WHEN ? = 1 THEN 1 ELSE available END,
                    is_placeholder = CASE WHEN ? = 1 THEN 0 ELSE is_placeholder END,
                    updated_at = ?
                WHERE id = ?
                """,
                (int(verified), int(verified), int(verified), now, doctor_id),
            )
            row = conn.execute("SELECT * FROM doctors WHERE id = ?", (doctor_id,)).fetchone()
            return _doctor_row(row)
