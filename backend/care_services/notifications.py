from __future__ import annotations

import copy
from typing import Any

from care_core.lifecycle import StatusLifecycle
from care_core.models import NOTIFICATION_STATES
from records.service import RecordsService
from records.time_utils import date_after_days, to_iso, today_iso, utc_now

from .errors import NotificationError

FORWARDED_FROM = "health_check_booking"
FORWARD_NOTE = "Health check data automatically forwarded from appointment booking"


def build_symptoms_data(health_check: dict[str, Any], appointment_id: str) -> dict[str, Any]:
    analysis = health_check.get("analysis_results")
    return {
        "symptoms": list(health_check.get("symptoms") or []),
        "severity": health_check.get("severity") or "",
        "duration": health_check.get("duration") or "",
        "previous_conditions": list(health_check.get("previous_conditions") or []),
        "medications": list(health_check.get("medications") or []),
        "notes": health_check.get("notes") or "",
        "analysis_results": copy.deepcopy(analysis) if analysis else None,
        "urgency_level": health_check.get("urgency_level") or "",
        "overall_assessment": health_check.get("overall_assessment") or "",
        "comprehensive_analysis": bool(health_check.get("comprehensive_analysis")),
        "check_date": health_check.get("created_at") or to_iso(utc_now()),
        "symptom_photos": dict(health_check.get("symptom_photos") or {}),
        "forwarded_from": FORWARDED_FROM,
        "booking_context": {
            "appointment_id": appointment_id,
            "forwarded_at": to_iso(utc_now()),
            "patient_notes": FORWARD_NOTE,
        },
    }


class NotificationRelay:
    def __init__(self, records: RecordsService, lifecycle: StatusLifecycle) -> None:
        self.records = records
        self.lifecycle = lifecycle

    def send_health_check_to_doctor(
        self,
        *,
        patient_id: str,
        health_check: dict[str, Any],
        appointment_id: str,
        doctor_id: str,
    ) -> dict[str, Any]:
        if self.records.directory.get_doctor(doctor_id) is None:
            raise NotificationError("Doctor not found for notification", status_code=404)
        return self.records.health.create_notification(
            doctor_id=doctor_id,
            patient_id=patient_id,
            appointment_id=appointment_id,
            health_check_id=health_check["id"],
            symptoms_data=build_symptoms_data(health_check, appointment_id),
        )

    def upcoming_appointments(self, user_id: str, days: int = 7) -> list[dict[str, Any]]:
        return self.records.bookings.appointments_between(
            user_id,
            start_date=today_iso(),
            end_date=date_after_days(days),
        )

    def share_with_doctor(
        self,
        user_id: str,
        health_check_id: str,
        appointment_id: str | None = None,
    ) -> dict[str, Any]:
        health_check = self.records.health.get_health_check(health_check_id)
        if health_check is None:
            raise NotificationError("Health check not found", status_code=404)
        self.records.guard.ensure_user_scope(health_check["user_id"], user_id)

        if appointment_id:
            appointment = self.records.bookings.get_appointment(appointment_id)
            if appointment is None:
                raise NotificationError("Appointment not found", status_code=404)
            self.records.guard.ensure_user_scope(appointment["user_id"], user_id)
        else:
            upcoming = self.upcoming_appointments(user_id)
            if not upcoming:
                return {"shared": False, "reason": "no_upcoming_appointment"}
            appointment = upcoming[0]

        doctor_id = appointment.get("doctor_id")
        if not doctor_id:
            raise NotificationError("Appointment has no assigned doctor", status_code=409)

        notification = self.send_health_check_to_doctor(
            patient_id=user_id,
            health_check=health_check,
            appointment_id=appointment["id"],
            doctor_id=doctor_id,
        )
        return {"shared": True, "notification": notification, "appointment": appointment}

    def doctor_inbox(self, doctor_user_id: str) -> list[dict[str, Any]]:
        self.records.require_doctor(doctor_user_id)
        return self.records.health.list_doctor_notifications(doctor_user_id)

    def update_status(self, doctor_user_id: str, notification_id: str, status: str) -> dict[str, Any]:
        if status not in NOTIFICATION_STATES:
            raise NotificationError(f"Invalid notification status: {status}")
        self.records.require_doctor(doctor_user_id)
        notification = self.records.health.get_notification(notification_id)
        if notification is None:
            raise NotificationError("Notification not found", status_code=404)
        self.records.guard.ensure_user_scope(notification["doctor_id"], doctor_user_id)
        self.lifecycle.ensure_transition("notification", notification["status"], status)
        return self.records.health.update_notification_status(notification_id, status) or {}
