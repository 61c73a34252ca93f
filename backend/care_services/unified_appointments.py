from __future__ import annotations

from typing import Any

from care_core.lifecycle import StatusLifecycle
from care_core.models import DEFAULT_REASON
from records.service import RecordsService

from .errors import BookingError

UNKNOWN_PATIENT = "Unknown Patient"

_ACTION_STATUS = {
    "confirm": "confirmed",
    "cancel": "cancelled",
    "complete": "completed",
}


def slot_view_status(stored: str | None) -> str:
    if stored == "booked":
        return "confirmed"
    return stored or "pending"


def slot_stored_status(view_status: str) -> str:
    if view_status == "confirmed":
        return "booked"
    return view_status


class UnifiedAppointmentService:
    """Doctor-facing view merging direct appointments with booked slots."""

    def __init__(self, records: RecordsService, lifecycle: StatusLifecycle) -> None:
        self.records = records
        self.lifecycle = lifecycle

    def _patient_name(self, user_id: str | None, fallback: str | None = None) -> str:
        return self.records.patient_display_name(user_id) or (fallback or "").strip() or UNKNOWN_PATIENT

    def list_for_doctor(self, doctor_user_id: str) -> list[dict[str, Any]]:
        doctor = self.records.require_doctor(doctor_user_id)
        bookings = self.records.bookings
        items: list[dict[str, Any]] = []

        for appointment in bookings.list_doctor_appointments(doctor["id"]):
            status = appointment.get("status") or "pending"
            items.append(
                {
                    "id": appointment["id"],
                    "type": "appointment",
                    "patient_id": appointment["user_id"],
                    "patient_name": self._patient_name(appointment["user_id"]),
                    "date": appointment["date"],
                    "time": appointment["time"],
                    "reason": appointment.get("reason") or DEFAULT_REASON,
                    "status": status,
                    "notes": appointment.get("notes"),
                    "actionable": not self.lifecycle.is_terminal("appointment", status),
                }
            )

        for slot in bookings.list_doctor_slots(doctor["id"], exclude_available=True):
            status = slot_view_status(slot.get("status"))
            items.append(
                {
                    "id": slot["id"],
                    "type": "slot",
                    "patient_id": slot.get("user_id"),
                    "patient_name": self._patient_name(slot.get("user_id"), slot.get("patient_name")),
                    "date": slot["date"],
                    "time": slot["start_time"],
                    "end_time": slot["end_time"],
                    "reason": slot.get("reason") or DEFAULT_REASON,
                    "status": status,
                    "notes": None,
                    "actionable": status in {"pending", "confirmed"},
                }
            )

        items.sort(key=lambda item: (item["date"], item["time"]))
        return items

    def update_status(self, doctor_user_id: str, kind: str, record_id: str, action: str) -> dict[str, Any]:
        next_status = _ACTION_STATUS.get(action)
        if next_status is None:
            raise BookingError(f"Unsupported appointment action: {action}")
        doctor = self.records.require_doctor(doctor_user_id)
        bookings = self.records.bookings

        if kind == "appointment":
            appointment = bookings.get_appointment(record_id)
            if appointment is None:
                raise BookingError("Appointment not found", status_code=404)
            self.records.guard.ensure_user_scope(appointment.get("doctor_id"), doctor["id"])
            self.lifecycle.ensure_transition("appointment", appointment.get("status"), next_status)
            updated = bookings.update_appointment_status(record_id, next_status) or {}
            return {"type": "appointment", "id": record_id, "status": updated.get("status")}

        if kind == "slot":
            slot = bookings.get_slot(record_id)
            if slot is None:
                raise BookingError("Slot not found", status_code=404)
            self.records.guard.ensure_user_scope(slot["doctor_id"], doctor["id"])
            self.lifecycle.ensure_transition("appointment", slot_view_status(slot.get("status")), next_status)
            updated = bookings.update_slot_status(record_id, slot_stored_status(next_status)) or {}
            return {"type": "slot", "id": record_id, "status": slot_view_status(updated.get("status"))}

        raise BookingError(f"Unknown appointment type: {kind}")
