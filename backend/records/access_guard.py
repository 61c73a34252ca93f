from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class AccessPolicyError(Exception):
    def __init__(self, message: str, status_code: int = 403) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class DoctorAccessResult:
    allowed: bool
    reason: str | None = None


_PROFILE_EDITABLE_FIELDS = (
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


class AccessGuard:
    def ensure_user_scope(self, requested_user_id: str | None, scoped_user_id: str) -> None:
        if requested_user_id != scoped_user_id:
            raise AccessPolicyError("Cross-user access is blocked.")

    def ensure_admin(self, profile: dict[str, Any] | None) -> None:
        if not profile or not profile.get("is_admin"):
            raise AccessPolicyError("You don't have administrator permissions.")

    def check_doctor_access(
        self,
        profile: dict[str, Any] | None,
        doctor: dict[str, Any] | None,
    ) -> DoctorAccessResult:
        if not profile or not profile.get("is_doctor"):
            return DoctorAccessResult(False, "User does not have doctor access")
        if doctor is None:
            return DoctorAccessResult(False, "Doctor profile not found")
        if not doctor.get("verified"):
            return DoctorAccessResult(False, "Doctor profile is not verified")
        return DoctorAccessResult(True)

    def ensure_doctor(self, profile: dict[str, Any] | None, doctor: dict[str, Any] | None) -> None:
        result = self.check_doctor_access(profile, doctor)
        if not result.allowed:
            raise AccessPolicyError(result.reason or "User does not have doctor access")

    def editable_profile_fields(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {key: payload[key] for key in _PROFILE_EDITABLE_FIELDS if key in payload}
