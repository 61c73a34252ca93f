from __future__ import annotations

from typing import Any

from care_core.models import HealthCheckInput
from care_core.triage import DISCLAIMER, SYMPTOM_CATEGORIES, TriagePolicy
from records.service import RecordsService
from records.time_utils import to_iso, utc_now

from .errors import CareServiceError

MAX_SYMPTOM_PHOTOS = 5


class HealthCheckService:
    def __init__(self, records: RecordsService, triage: TriagePolicy) -> None:
        self.records = records
        self.triage = triage

    def categories(self) -> list[dict[str, Any]]:
        return [{"category": name, "symptoms": list(symptoms)} for name, symptoms in SYMPTOM_CATEGORIES.items()]

    def normalize_input(self, check: HealthCheckInput) -> HealthCheckInput:
        symptoms = [symptom.strip() for symptom in check.symptoms if symptom and symptom.strip()]
        if not symptoms:
            raise CareServiceError("Please select at least one symptom")
        if len(check.photos) > MAX_SYMPTOM_PHOTOS:
            raise CareServiceError(f"You can upload a maximum of {MAX_SYMPTOM_PHOTOS} photos")

        categories = {
            symptom: check.symptom_categories[symptom]
            for symptom in symptoms
            if symptom in check.symptom_categories
        }
        for symptom in symptoms:
            if symptom in categories:
                continue
            for category, known in SYMPTOM_CATEGORIES.items():
                if symptom in known:
                    categories[symptom] = category
                    break

        return HealthCheckInput(
            symptoms=symptoms,
            symptom_categories=categories,
            severity=check.severity.strip(),
            duration=check.duration.strip(),
            notes=check.notes.strip(),
            photos=dict(check.photos),
            previous_conditions=list(check.previous_conditions),
            medications=list(check.medications),
        )

    def analysis_prompt(self, check: HealthCheckInput) -> str:
        return self.triage.build_analysis_prompt(
            symptoms=check.symptoms,
            symptom_categories=check.symptom_categories,
            severity=check.severity,
            duration=check.duration,
            notes=check.notes,
            photo_count=len(check.photos),
        )

    def compose_analysis(self, check: HealthCheckInput, analysis_text: str) -> dict[str, Any]:
        return {
            "symptoms": check.symptoms,
            "symptom_categories": check.symptom_categories,
            "severity": check.severity,
            "duration": check.duration,
            "analysis": analysis_text,
            "recommendations": self.triage.recommendations(check.severity, list(check.symptom_categories.values())),
            "urgency_level": self.triage.determine_urgency(check.severity, check.symptoms),
            "timestamp": to_iso(utc_now()),
            "disclaimer": DISCLAIMER,
        }

    def save(self, user_id: str, check: HealthCheckInput, analysis: dict[str, Any]) -> dict[str, Any]:
        return self.records.health.create_health_check(
            user_id,
            {
                "symptoms": check.symptoms,
                "severity": check.severity,
                "duration": check.duration,
                "previous_conditions": check.previous_conditions,
                "medications": check.medications,
                "notes": check.notes,
                "analysis_results": analysis,
                "comprehensive_analysis": False,
                "overall_assessment": analysis.get("analysis"),
                "urgency_level": analysis.get("urgency_level"),
                "symptom_photos": check.photos,
            },
        )

    def history(self, user_id: str, limit: int = 50) -> list[dict[str, Any]]:
        return self.records.health.list_health_checks(user_id, limit)

    def get(self, user_id: str, health_check_id: str) -> dict[str, Any]:
        record = self.records.health.get_health_check(health_check_id)
        if record is None:
            raise CareServiceError("Health check not found", status_code=404)
        self.records.guard.ensure_user_scope(record["user_id"], user_id)
        return record
