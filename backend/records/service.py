from __future__ import annotations

from typing import Any

from .access_guard import AccessGuard
from .booking_store import BookingStore
from .database import SQLiteRecordsDB
from .directory_store import DirectoryStore, display_name_from_profile
from .health_store import HealthStore


class RecordsService:
    def __init__(self, db: SQLiteRecordsDB) -> None:
        self.db = db
        self.guard = AccessGuard()
        self.directory = DirectoryStore(db)
        self.bookings = BookingStore(db)
        self.health = HealthStore(db)

    def seed_admins(self, user_ids: list[str]) -> None:
        for user_id in user_ids:
            cleaned = user_id.strip()
            if cleaned:
                self.directory.set_admin_flag(cleaned, True)

    def require_admin(self, user_id: str) -> dict[str, Any]:
        profile = self.directory.get_profile(user_id)
        self.guard.ensure_admin(profile)
        return profile or {}

    def require_doctor(self, user_id: str) -> dict[str, Any]:
        profile = self.directory.get_profile(user_id)
        doctor = self.directory.get_doctor(user_id)
        self.guard.ensure_doctor(profile, doctor)
        return doctor or {}

    def patient_display_name(self, user_id: str | None) -> str | None:
        if not user_id:
            return None
        return display_name_from_profile(self.directory.get_profile(user_id))
