from __future__ import annotations

import json
import re

SYMPTOM_CATEGORIES: dict[str, list[str]] = {
    "Heart & Circulation": [
        "Chest pain",
        "Shortness of breath",
        "Heart palpitations",
        "Dizziness",
        "Fainting",
        "Swelling in legs",
    ],
    "Brain & Nervous System": [
        "Headache",
        "Memory problems",
        "Confusion",
        "Seizures",
        "Numbness",
        "Weakness",
        "Tremors",
    ],
    "Bones & Muscles": [
        "Joint pain",
        "Back pain",
        "Muscle weakness",
        "Bone pain",
        "Stiffness",
        "Swelling",
        "Limited mobility",
    ],
    "Eye": [
        "Blurred vision",
        "Eye pain",
        "Double vision",
        "Light sensitivity",
        "Eye discharge",
        "Dry eyes",
        "Vision loss",
    ],
    "Ear": ["Ear pain", "Hearing loss", "Ringing in ears", "Ear discharge", "Balance problems", "Ear pressure"],
    "Dental": [
        "Tooth pain",
        "Gum bleeding",
        "Bad breath",
        "Tooth sensitivity",
        "Jaw pain",
        "Braces pain",
        "Wisdom tooth pain",
    ],
    "Child Health": ["Fever in child", "Rash", "Crying", "Feeding problems", "Sleep issues", "Development delays"],
    "Women's Health": ["Menstrual problems", "Pregnancy symptoms", "Breast pain", "Pelvic pain", "Hot flashes"],
    "General": ["Fever", "Fatigue", "Nausea", "Vomiting", "Cough", "Cold symptoms", "Weight loss", "Weight gain"],
    "Skin": ["Rash", "Itching", "Skin discoloration", "Wounds", "Acne", "Dry skin", "Hair loss"],
}

DISCLAIMER = (
    "This is a preliminary AI assessment. Always consult with qualified healthcare "
    "professionals for proper diagnosis and treatment."
)

ANALYSIS_SYSTEM_PROMPT = (
    "You are a highly skilled medical AI assistant specializing in evidence-based diagnostic reasoning. "
    "Provide thorough, accurate, and category-constrained medical assessments while emphasizing the "
    "importance of professional medical consultation."
)

_CATEGORY_RECOMMENDATIONS = {
    "Heart & Circulation": "Monitor blood pressure and heart rate",
    "Brain & Nervous System": "Avoid driving if experiencing dizziness or confusion",
    "Eye": "Protect eyes from bright light if experiencing sensitivity",
    "Dental": "Maintain good oral hygiene and avoid hard foods",
}


class TriagePolicy:
    _EMERGENCY_PATTERNS = [
        re.compile(r"chest pain", re.IGNORECASE),
        re.compile(r"difficulty breathing", re.IGNORECASE),
        re.compile(r"severe headache", re.IGNORECASE),
        re.compile(r"loss of consciousness", re.IGNORECASE),
        re.compile(r"severe bleeding", re.IGNORECASE),
        re.compile(r"signs of stroke", re.IGNORECASE),
    ]

    def has_emergency_symptom(self, symptoms: list[str]) -> bool:
        for symptom in symptoms:
            cleaned = (symptom or "").strip()
            for pattern in self._EMERGENCY_PATTERNS:
                if pattern.search(cleaned):
                    return True
        return False

    def determine_urgency(self, severity: str, symptoms: list[str]) -> str:
        if severity == "Critical" or self.has_emergency_symptom(symptoms):
            return "Emergency - Seek immediate medical attention"
        if severity == "Severe":
            return "Urgent - See healthcare provider within 24 hours"
        if severity == "Moderate":
            return "Semi-urgent - Schedule appointment within 2-3 days"
        return "Routine - Monitor and schedule regular checkup"

    def recommendations(self, severity: str, categories: list[str]) -> list[str]:
        items: list[str] = []
        if severity in {"Critical", "Severe"}:
            items.append("Seek immediate medical attention")
            items.append("Consider emergency department evaluation")
        elif severity == "Moderate":
            items.append("Schedule appointment with your healthcare provider within 24-48 hours")
        else:
            items.append("Monitor symptoms and consult healthcare provider if worsening")

        # dict.fromkeys keeps first-seen order
        for category in dict.fromkeys(categories):
            extra = _CATEGORY_RECOMMENDATIONS.get(category)
            if extra:
                items.append(extra)

        items.append("Keep a symptom diary")
        items.append("Stay hydrated and get adequate rest")
        return items

    def fallback_analysis(self) -> dict[str, object]:
        return {
            "analysis": (
                "Unable to complete AI analysis at this time. Please consult with a healthcare "
                "professional for proper evaluation of your symptoms."
            ),
            "recommendations": [
                "Consult with a healthcare provider",
                "Monitor symptoms closely",
                "Seek immediate care if symptoms worsen",
            ],
            "urgency_level": "Consult healthcare provider",
            "disclaimer": DISCLAIMER,
        }

    def build_analysis_prompt(
        self,
        *,
        symptoms: list[str],
        symptom_categories: dict[str, str],
        severity: str,
        duration: str,
        notes: str,
        photo_count: int,
    ) -> str:
        constraint_lines = "\n".join(
            f'- "{symptom}" ({category} specialty): Focus only on {category.lower()} conditions'
            for symptom, category in symptom_categories.items()
        )
        return (
            "You are an expert medical AI assistant providing preliminary health assessments.\n\n"
            "IMPORTANT CONSTRAINTS:\n"
            "- Only provide diagnoses within the medical specialty indicated by the symptom categories\n"
            f"- Each symptom is categorized as follows: {json.dumps(symptom_categories)}\n"
            "- Stay strictly within the relevant medical domain for each symptom\n"
            "- Do not suggest diagnoses from unrelated medical specialties\n\n"
            "PATIENT PRESENTATION:\n"
            f"Symptoms: {', '.join(symptoms)}\n"
            f"Severity: {severity}\n"
            f"Duration: {duration}\n"
            f"Additional Notes: {notes}\n"
            f"Photos Available: {photo_count}\n\n"
            "MEDICAL REASONING FRAMEWORK:\n"
            "For each symptom category present, provide:\n\n"
            "1. CATEGORY-SPECIFIC DIFFERENTIAL DIAGNOSIS:\n"
            "   - List 3-5 most likely conditions within the relevant medical specialty\n"
            "   - Rank by probability based on symptom constellation\n"
            "   - Include common, serious, and rare but important diagnoses\n\n"
            "2. PATHOPHYSIOLOGICAL CORRELATION:\n"
            "   - Explain how symptoms relate to underlying disease mechanisms\n"
            "   - Consider anatomy, physiology, and pathology relevant to the category\n\n"
            "3. CLINICAL DECISION SUPPORT:\n"
            "   - Risk stratification (low, moderate, high)\n"
            "   - Red flag symptoms requiring immediate attention\n"
            "   - Category-appropriate diagnostic recommendations\n\n"
            "4. EVIDENCE-BASED ASSESSMENT:\n"
            "   - Reference relevant clinical guidelines\n"
            "   - Consider epidemiological factors\n"
            "   - Account for symptom duration and severity\n\n"
            "SPECIALTY-CONSTRAINED ANALYSIS:\n"
            f"{constraint_lines}\n\n"
            "Provide a comprehensive but category-appropriate medical assessment following "
            "evidence-based clinical reasoning."
        )
