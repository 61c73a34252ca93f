from .lifecycle import LifecycleError, StatusLifecycle
from .models import (
    DEFAULT_REASON,
    NOTIFICATION_STATES,
    SLOT_STATES,
    BookingRequest,
    Coordinates,
    HealthCheckInput,
    LocationFix,
)
from .reports import LANGUAGE_INSTRUCTIONS, build_report_prompt, build_report_request, fallback_report
from .triage import ANALYSIS_SYSTEM_PROMPT, DISCLAIMER, SYMPTOM_CATEGORIES, TriagePolicy

__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "DEFAULT_REASON",
    "DISCLAIMER",
    "LANGUAGE_INSTRUCTIONS",
    "NOTIFICATION_STATES",
    "SLOT_STATES",
    "SYMPTOM_CATEGORIES",
    "BookingRequest",
    "Coordinates",
    "HealthCheckInput",
    "LifecycleError",
    "LocationFix",
    "StatusLifecycle",
    "TriagePolicy",
    "build_report_prompt",
    "build_report_request",
    "fallback_report",
]
