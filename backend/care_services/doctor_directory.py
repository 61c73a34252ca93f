from __future__ import annotations

import sqlite3
from typing import Any

from care_core.models import Coordinates, LocationFix
from records.service import RecordsService

from .errors import DirectoryError
from .geolocation import (
    Geocoder,
    GeolocationError,
    compose_profile_address,
    haversine_km,
    validate_coordinates,
)


class DoctorDirectory:
    def __init__(self, records: RecordsService, geocoder: Geocoder) -> None:
        self.records = records
        self.geocoder = geocoder

    def list_doctors(self, specialization: str | None = None) -> list[dict[str, Any]]:
        return self.records.directory.list_doctors(specialization=(specialization or "").strip() or None)

    def find_nearest_doctors(
        self,
        origin: Coordinates,
        specialization: str | None = None,
        limit: int = 10,
    ) -> list[dict[str, Any]]:
        if limit < 1:
            raise DirectoryError("limit must be at least 1")
        candidates = self.records.directory.doctors_with_coordinates((specialization or "").strip() or None)
        ranked: list[dict[str, Any]] = []
        for doctor in candidates:
            distance = haversine_km(origin.latitude, origin.longitude, doctor["latitude"], doctor["longitude"])
            ranked.append(
                {
                    "id": doctor["id"],
                    "name": doctor["name"],
                    "specialization": doctor["specialization"],
                    "hospital": doctor["hospital"],
                    "address": doctor["address"],
                    "distance": round(distance, 2),
                }
            )
        ranked.sort(key=lambda item: item["distance"])
        return ranked[:limit]

    def resolve_location(
        self,
        user_id: str,
        latitude: float | None = None,
        longitude: float | None = None,
        *,
        missing_message: str = "No address information found in profile",
    ) -> LocationFix:
        if latitude is not None and longitude is not None:
            return LocationFix(coordinates=validate_coordinates(latitude, longitude), source="coordinates")

        profile = self.records.directory.get_profile(user_id)
        full_address = compose_profile_address(profile)
        if not full_address:
            raise GeolocationError(missing_message)
        return LocationFix(
            coordinates=self.geocoder.geocode(full_address),
            source="profile_address",
            address=full_address,
        )

    def nearby_for_user(
        self,
        user_id: str,
        *,
        latitude: float | None = None,
        longitude: float | None = None,
        specialization: str | None = None,
        limit: int = 10,
    ) -> dict[str, Any]:
        fix = self.resolve_location(user_id, latitude, longitude)
        doctors = self.find_nearest_doctors(fix.coordinates, specialization=specialization, limit=limit)
        return {"doctors": doctors, "count": len(doctors), **fix.as_dict()}

    def register_doctor(self, user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        location_text = ", ".join(
            part for part in ((payload.get("address") or "").strip(), (payload.get("region") or "").strip()) if part
        )
        coords = self.geocoder.geocode(location_text) if location_text else None
        record = dict(payload)
        record.update(
            {
                "available": True,
                "verified": False,
                "is_placeholder": False,
                "latitude": coords.latitude if coords else None,
                "longitude": coords.longitude if coords else None,
            }
        )
        try:
            return self.records.directory.create_doctor(record, doctor_id=user_id)
        except sqlite3.IntegrityError as exc:
            raise DirectoryError(
                "You have already submitted a doctor registration application. Please wait for admin approval.",
                status_code=409,
            ) from exc

    def check_doctor_access(self, user_id: str) -> bool:
        profile = self.records.directory.get_profile(user_id)
        return bool(profile and profile.get("is_doctor"))

    def grant_doctor_access(self, user_id: str) -> bool:
        self.records.directory.set_doctor_flag(user_id, True)
        return True

    def revoke_doctor_access(self, user_id: str) -> bool:
        self.records.directory.set_doctor_flag(user_id, False)
        return True

    def list_users(self) -> list[dict[str, Any]]:
        users = []
        for profile in self.records.directory.list_profiles():
            users.append(
                {
                    "id": profile["id"],
                    "email": f"user-{profile['id'][:8]}@example.com",
                    "first_name": profile.get("first_name") or None,
                    "last_name": profile.get("last_name") or None,
                    "is_doctor": bool(profile.get("is_doctor")),
                }
            )
        return users

    def list_applications(self, pending_only: bool = False) -> list[dict[str, Any]]:
        return self.records.directory.list_applications(pending_only=pending_only)

    def review_application(self, doctor_id: str, approve: bool) -> dict[str, Any]:
        existing = self.records.directory.get_doctor(doctor_id)
        if existing is None:
            raise DirectoryError("Doctor application not found", status_code=404)
        updated = self.records.directory.set_verified(doctor_id, approve)
        # Self-registered doctors share their user id; placeholders have no account.
        if existing["is_placeholder"]:
            return updated or {}
        if approve:
            self.grant_doctor_access(doctor_id)
        else:
            self.revoke_doctor_access(doctor_id)
        return updated or {}
