from __future__ import annotations

import pytest

from care_core import LifecycleError, StatusLifecycle, TriagePolicy
from care_core.reports import build_report_prompt, language_instruction, strip_data_url


def test_appointment_lifecycle_transitions():
    lifecycle = StatusLifecycle()
    lifecycle.ensure_transition("appointment", "pending", "confirmed")
    lifecycle.ensure_transition("appointment", None, "cancelled")
    lifecycle.ensure_transition("appointment", "confirmed", "confirmed")
    with pytest.raises(LifecycleError, match="Invalid transition: pending -> completed"):
        lifecycle.ensure_transition("appointment", "pending", "completed")
    assert lifecycle.is_terminal("appointment", "cancelled")
    assert not lifecycle.is_terminal("appointment", "confirmed")


def test_slot_and_notification_lifecycles():
    lifecycle = StatusLifecycle()
    lifecycle.ensure_transition("slot", "cancelled", "available")
    with pytest.raises(LifecycleError):
        lifecycle.ensure_transition("slot", "cancelled", "booked")
    lifecycle.ensure_transition("notification", "sent", "acknowledged")
    with pytest.raises(LifecycleError):
        lifecycle.ensure_transition("notification", "acknowledged", "sent")
    with pytest.raises(LifecycleError):
        lifecycle.allowed_next("invoice", "open")


@pytest.mark.parametrize(
    ("severity", "symptoms", "expected"),
    [
        ("Critical", ["Rash"], "Emergency - Seek immediate medical attention"),
        ("Mild", ["Sudden difficulty breathing"], "Emergency - Seek immediate medical attention"),
        ("Severe", ["Back pain"], "Urgent - See healthcare provider within 24 hours"),
        ("Moderate", ["Back pain"], "Semi-urgent - Schedule appointment within 2-3 days"),
        ("", ["Back pain"], "Routine - Monitor and schedule regular checkup"),
    ],
)
def test_urgency_levels(severity, symptoms, expected):
    assert TriagePolicy().determine_urgency(severity, symptoms) == expected


def test_recommendations_dedupe_categories():
    items = TriagePolicy().recommendations("Severe", ["Dental", "Dental", "Skin"])
    assert items == [
        "Seek immediate medical attention",
        "Consider emergency department evaluation",
        "Maintain good oral hygiene and avoid hard foods",
        "Keep a symptom diary",
        "Stay hydrated and get adequate rest",
    ]


def test_report_prompt_helpers():
    assert strip_data_url("data:image/jpeg;base64,AAAA") == "AAAA"
    assert strip_data_url("AAAA") == "AAAA"
    assert language_instruction("tamil").startswith("Respond in Tamil")
    assert language_instruction(None) == language_instruction("simple-english")
    prompt = build_report_prompt(file_name="lipid.pdf", file_type="application/pdf", language="french")
    assert "Analyze this medical report file: lipid.pdf (application/pdf)" in prompt
    assert "This is a PDF medical report." in prompt
    assert '"language": "french"' in prompt
