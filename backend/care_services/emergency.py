from __future__ import annotations

from typing import Any

from records.service import RecordsService

from .doctor_directory import DoctorDirectory
from .errors import CareServiceError

NO_LOCATION_MESSAGE = "No location information available. Please enable GPS or update your profile address."


class EmergencyService:
    def __init__(self, records: RecordsService, directory: DoctorDirectory) -> None:
        self.records = records
        self.directory = directory

    def create_call(self, user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        if not (payload.get("patient_name") or "").strip():
            raise CareServiceError("Patient name is required")
        if not (payload.get("address") or "").strip():
            raise CareServiceError("Address is required")
        return self.records.health.create_emergency_call(user_id, payload)

    def assign_doctor(self, user_id: str, call_id: str, doctor_id: str) -> dict[str, Any]:
        call = self.records.health.get_emergency_call(call_id)
        if call is None:
            raise CareServiceError("Emergency call not found", status_code=404)
        self.records.guard.ensure_user_scope(call.get("user_id"), user_id)
        if self.records.directory.get_doctor(doctor_id) is None:
            raise CareServiceError("Doctor not found", status_code=404)
        return self.records.health.assign_emergency_doctor(call_id, doctor_id) or {}

    def doctors_near_address(self, address: str, specialization: str | None = None) -> dict[str, Any]:
        coordinates = self.directory.geocoder.geocode(address)
        doctors = self.directory.find_nearest_doctors(coordinates, specialization=specialization)
        return {
            "doctors": doctors,
            "count": len(doctors),
            "latitude": coordinates.latitude,
            "longitude": coordinates.longitude,
            "location_source": "address",
            "address": address,
        }

    def doctors_near_user(
        self,
        user_id: str,
        *,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> dict[str, Any]:
        fix = self.directory.resolve_location(user_id, latitude, longitude, missing_message=NO_LOCATION_MESSAGE)
        doctors = self.directory.find_nearest_doctors(fix.coordinates)
        return {"doctors": doctors, "count": len(doctors), **fix.as_dict()}
