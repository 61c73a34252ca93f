from __future__ import annotations

import re
import sqlite3
from typing import Any

from care_core.lifecycle import StatusLifecycle
from care_core.models import DEFAULT_REASON, SLOT_STATES, BookingRequest
from records.service import RecordsService
from records.time_utils import today_iso

from .errors import BookingError, CareServiceError
from .notifications import NotificationRelay

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s?([AaPp])[Mm])?$")


def _validated_date(value: str) -> str:
    cleaned = (value or "").strip()
    if not _DATE_RE.fullmatch(cleaned):
        raise BookingError(f"Invalid date: {value!r}. Expected YYYY-MM-DD.")
    return cleaned


def _validated_time(value: str) -> str:
    """Normalize `9:00`, `09:00:00` or `2:00 PM` to 24-hour `HH:MM`."""
    match = _TIME_RE.fullmatch((value or "").strip())
    if not match:
        raise BookingError(f"Invalid time: {value!r}.")
    hour, minute = int(match.group(1)), int(match.group(2))
    meridiem = (match.group(4) or "").lower()
    if meridiem:
        if not 1 <= hour <= 12:
            raise BookingError(f"Invalid time: {value!r}.")
        hour = hour % 12 + (12 if meridiem == "p" else 0)
    if hour > 23 or minute > 59:
        raise BookingError(f"Invalid time: {value!r}.")
    return f"{hour:02d}:{minute:02d}"


def health_check_reason(health_check: dict[str, Any], reason: str | None) -> str:
    symptoms_text = ", ".join(health_check.get("symptoms") or [])
    urgency = (health_check.get("urgency_level") or "").strip()
    urgency_text = f" ({urgency.upper()} URGENCY)" if urgency else ""
    suffix = f" - {reason}" if reason else ""
    return f"Health Check Follow-up: {symptoms_text}{urgency_text}{suffix}"


class BookingService:
    def __init__(self, records: RecordsService, lifecycle: StatusLifecycle, relay: NotificationRelay) -> None:
        self.records = records
        self.lifecycle = lifecycle
        self.relay = relay

    def resolve_doctor_reference(
        self,
        *,
        doctor_name: str,
        doctor_id: str | None = None,
        doctor_specialty: str | None = None,
    ) -> tuple[dict[str, Any], bool]:
        directory = self.records.directory
        if doctor_id:
            existing = directory.get_doctor(doctor_id)
            if existing is None:
                raise BookingError("Doctor not found", status_code=404)
            return existing, False

        existing = directory.find_doctor_by_name(doctor_name)
        if existing is not None:
            return existing, False

        placeholder = directory.create_doctor(
            {
                "name": doctor_name.strip(),
                "specialization": doctor_specialty or "",
                "available": False,
                "verified": False,
                "is_placeholder": True,
            }
        )
        print(f"placeholder doctor created pending verification: {placeholder['id']}")  # noqa: T201
        return placeholder, True

    def book_direct_appointment(self, user_id: str | None, booking: BookingRequest) -> dict[str, Any]:
        if not user_id:
            raise BookingError("User not authenticated", status_code=401)
        date = _validated_date(booking.date)
        time = _validated_time(booking.time)

        directory = self.records.directory
        if not booking.doctor_id:
            doctor = directory.find_verified_doctor(name=booking.doctor_name)
            if doctor is None:
                raise BookingError(f'Doctor "{booking.doctor_name}" not found or not verified', status_code=404)
        else:
            doctor = directory.find_verified_doctor(doctor_id=booking.doctor_id)
            if doctor is None:
                raise BookingError("Doctor not found or not verified", status_code=404)

        final_doctor_id = doctor.get("id")
        if not final_doctor_id:
            raise BookingError("Failed to determine doctor ID for appointment", status_code=500)

        inserted = self.records.bookings.create_appointment(
            {
                "user_id": user_id,
                "doctor_id": final_doctor_id,
                "doctor_name": booking.doctor_name or doctor["name"],
                "doctor_specialty": booking.doctor_specialty or doctor.get("specialization") or None,
                "date": date,
                "time": time,
                "reason": booking.reason or DEFAULT_REASON,
                "notes": booking.notes or None,
                "status": "pending",
            }
        )

        if not inserted.get("doctor_id"):
            raise BookingError("Appointment created but doctor assignment failed", status_code=500)
        if inserted["doctor_id"] != final_doctor_id:
            print(  # noqa: T201
                f"appointment doctor_id mismatch: expected={final_doctor_id} actual={inserted['doctor_id']}"
            )
        return inserted

    def request_appointment(
        self,
        user_id: str,
        booking: BookingRequest,
        *,
        health_check_id: str | None = None,
    ) -> dict[str, Any]:
        if not booking.date or not (booking.doctor_name or "").strip() or not booking.time:
            raise BookingError("Please fill in all required fields")
        date = _validated_date(booking.date)
        time = _validated_time(booking.time)

        health_check = None
        if health_check_id:
            health_check = self.records.health.get_health_check(health_check_id)
            if health_check is None:
                raise BookingError("Health check not found", status_code=404)
            self.records.guard.ensure_user_scope(health_check["user_id"], user_id)

        doctor, placeholder_created = self.resolve_doctor_reference(
            doctor_name=booking.doctor_name,
            doctor_id=booking.doctor_id,
            doctor_specialty=booking.doctor_specialty,
        )
        reason = health_check_reason(health_check, booking.reason) if health_check else booking.reason
        appointment = self.records.bookings.create_appointment(
            {
                "user_id": user_id,
                "doctor_id": doctor["id"],
                "doctor_name": booking.doctor_name.strip(),
                "doctor_specialty": booking.doctor_specialty or None,
                "date": date,
                "time": time,
                "reason": reason,
                "notes": booking.notes or None,
                "status": "pending",
            }
        )

        shared = False
        if health_check is not None:
            try:
                self.relay.send_health_check_to_doctor(
                    patient_id=user_id,
                    health_check=health_check,
                    appointment_id=appointment["id"],
                    doctor_id=doctor["id"],
                )
                shared = True
            except (CareServiceError, sqlite3.Error) as exc:
                print(f"health check forward failed for appointment {appointment['id']}: {exc}")  # noqa: T201

        return {
            "appointment": appointment,
            "placeholder_doctor_created": placeholder_created,
            "health_check_shared": shared,
        }

    def cancel_appointment(self, user_id: str, appointment_id: str) -> dict[str, Any]:
        appointment = self.records.bookings.get_appointment(appointment_id)
        if appointment is None:
            raise BookingError("Appointment not found", status_code=404)
        self.records.guard.ensure_user_scope(appointment["user_id"], user_id)
        self.lifecycle.ensure_transition("appointment", appointment.get("status"), "cancelled")
        return self.records.bookings.update_appointment_status(appointment_id, "cancelled") or {}

    def patient_appointments(self, user_id: str) -> dict[str, Any]:
        return {
            "appointments": self.records.bookings.list_patient_appointments(user_id),
            "slot_bookings": self.records.bookings.list_patient_slots(user_id),
        }

    def available_slots(self, doctor_id: str | None = None) -> list[dict[str, Any]]:
        return self.records.bookings.available_slots(from_date=today_iso(), doctor_id=doctor_id or None)

    def book_slot_appointment(
        self,
        user_id: str | None,
        slot_id: str,
        patient_name: str,
        reason: str | None = None,
    ) -> dict[str, Any]:
        if not user_id:
            raise BookingError("User not authenticated", status_code=401)
        if not (patient_name or "").strip():
            raise BookingError("Patient name is required")
        changed = self.records.bookings.book_slot(
            slot_id,
            user_id=user_id,
            patient_name=patient_name.strip(),
            reason=reason or DEFAULT_REASON,
        )
        if changed == 0:
            raise BookingError("Slot is no longer available", status_code=409)
        return self.records.bookings.get_slot(slot_id) or {}

    def create_slot(self, doctor_user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.records.require_doctor(doctor_user_id)
        duration = int(payload.get("duration") or 0)
        if duration <= 0:
            raise BookingError("Slot duration must be positive")
        max_patients = int(payload.get("max_patients") or 1)
        if max_patients <= 0:
            raise BookingError("max_patients must be positive")
        start_time = _validated_time(payload.get("start_time", ""))
        end_time = _validated_time(payload.get("end_time", ""))
        if end_time <= start_time:
            raise BookingError("Slot end_time must be after start_time")
        return self.records.bookings.create_slot(
            {
                "doctor_id": doctor_user_id,
                "date": _validated_date(payload.get("date", "")),
                "start_time": start_time,
                "end_time": end_time,
                "duration": duration,
                "max_patients": max_patients,
            }
        )

    def doctor_slots(self, doctor_user_id: str) -> list[dict[str, Any]]:
        self.records.require_doctor(doctor_user_id)
        return self.records.bookings.list_doctor_slots(doctor_user_id)

    def _owned_slot(self, doctor_user_id: str, slot_id: str) -> dict[str, Any]:
        self.records.require_doctor(doctor_user_id)
        slot = self.records.bookings.get_slot(slot_id)
        if slot is None:
            raise BookingError("Slot not found", status_code=404)
        self.records.guard.ensure_user_scope(slot["doctor_id"], doctor_user_id)
        return slot

    def update_slot_status(self, doctor_user_id: str, slot_id: str, status: str) -> dict[str, Any]:
        if status not in SLOT_STATES:
            raise BookingError("Invalid slot status")
        slot = self._owned_slot(doctor_user_id, slot_id)
        self.lifecycle.ensure_transition("slot", slot["status"], status)
        return self.records.bookings.update_slot_status(slot_id, status) or {}

    def delete_slot(self, doctor_user_id: str, slot_id: str) -> bool:
        self._owned_slot(doctor_user_id, slot_id)
        return self.records.bookings.delete_slot(slot_id)
