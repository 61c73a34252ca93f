from __future__ import annotations

from typing import Any

DEFAULT_REPORT_LANGUAGE = "simple-english"
REPORT_DISCLAIMER = "This analysis is AI-generated and should be reviewed by a qualified healthcare professional"

_NATIVE_LANGUAGE_NAMES = {
    "hindi": "Hindi (हिंदी)",
    "bengali": "Bengali (বাংলা)",
    "telugu": "Telugu (తెలుగు)",
    "marathi": "Marathi (मराठी)",
    "tamil": "Tamil (தமிழ்)",
    "gujarati": "Gujarati (ગુજરાતી)",
    "spanish": "Spanish (Español)",
    "french": "French (Français)",
    "german": "German (Deutsch)",
    "chinese": "Chinese (中文)",
    "japanese": "Japanese (日本語)",
    "arabic": "Arabic (العربية)",
}

LANGUAGE_INSTRUCTIONS: dict[str, str] = {
    DEFAULT_REPORT_LANGUAGE: (
        "Use very simple English words that anyone can understand. Avoid medical jargon and explain complex terms."
    ),
    **{
        key: f"Respond in {label}. Use simple medical terms and explain complex concepts clearly."
        for key, label in _NATIVE_LANGUAGE_NAMES.items()
    },
}

_REPORT_SCHEMA = """{
  "summaryOfFindings": {
    "diagnosis": "Clear explanation of condition identified",
    "normalAbnormalValues": ["List of parameters with their status"],
    "severityOrStage": "Severity level if applicable"
  },
  "interpretationOfResults": {
    "significantResults": [{
      "parameter": "Parameter name",
      "value": "Actual value",
      "normalRange": "Reference range",
      "interpretation": "What this means",
      "clinicalSignificance": "Health relevance"
    }],
    "overallInterpretation": "Summary of all results"
  },
  "treatmentPlan": {
    "medicationsPrescribed": [{
      "name": "Medication name",
      "dosage": "Strength and frequency",
      "duration": "How long to take",
      "purpose": "Why prescribed"
    }],
    "therapiesRecommended": ["Therapy recommendations"],
    "lifestyleChanges": {
      "diet": "Dietary recommendations",
      "exercise": "Exercise advice",
      "sleep": "Sleep recommendations",
      "other": "Other lifestyle changes"
    },
    "preventiveMeasures": ["Prevention recommendations"]
  },
  "nextSteps": {
    "additionalTestsRequired": [{
      "testName": "Test name",
      "reason": "Why needed",
      "urgency": "Timeline"
    }],
    "specialistReferral": {
      "required": true/false,
      "specialistType": "Type if needed",
      "reason": "Why needed"
    },
    "followUpAppointments": [{
      "timeframe": "When to follow up",
      "purpose": "What to check"
    }]
  },
  "documentationProvided": {
    "reportType": "Type of report",
    "keyDocuments": ["Important sections found"],
    "additionalNotes": "Other observations"
  },
  "urgencyLevel": "Low/Medium/High",
  "language": "__LANGUAGE__",
  "disclaimer": "__DISCLAIMER__"
}"""


def language_instruction(language: str | None) -> str:
    return LANGUAGE_INSTRUCTIONS.get((language or "").strip(), LANGUAGE_INSTRUCTIONS[DEFAULT_REPORT_LANGUAGE])


def is_pdf(file_type: str | None) -> bool:
    return (file_type or "").strip().lower() == "application/pdf"


def strip_data_url(encoded: str) -> str:
    """Drop a `data:<mime>;base64,` prefix if the client sent one."""
    if "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


def build_report_prompt(*, file_name: str, file_type: str | None, language: str | None) -> str:
    if is_pdf(file_type):
        content_hint = "This is a PDF medical report. Analyze the content and provide insights."
    else:
        content_hint = (
            "This is an image file containing medical report content. "
            "Examine all visible text, numbers, charts, and medical data."
        )
    schema = _REPORT_SCHEMA.replace("__LANGUAGE__", language or "").replace("__DISCLAIMER__", REPORT_DISCLAIMER)
    return (
        f"You are an expert medical report analyzer. {language_instruction(language)}\n\n"
        f"Analyze this medical report file: {file_name} ({file_type or 'unknown'})\n\n"
        f"{content_hint}\n\n"
        "Provide your analysis in JSON format with the following structure:\n"
        f"{schema}\n\n"
        "Guidelines:\n"
        "- Be thorough but concise\n"
        "- Explain medical terms simply\n"
        "- Only include sections with actual data\n"
        "- Provide specific values and details\n"
        "- Ensure proper JSON formatting\n"
    )


def build_report_request(*, prompt: str, file_type: str | None, encoded_file: str) -> dict[str, Any]:
    parts: list[dict[str, Any]] = [{"text": prompt}]
    # PDFs go as prompt context only; images ride along inline.
    if not is_pdf(file_type):
        parts.append({"inline_data": {"mime_type": file_type, "data": strip_data_url(encoded_file)}})
    return {
        "contents": [{"parts": parts}],
        "generationConfig": {
            "temperature": 0.2,
            "maxOutputTokens": 3000,
            "responseMimeType": "application/json",
        },
    }


def fallback_report(language: str | None) -> dict[str, Any]:
    return {
        "summaryOfFindings": {
            "diagnosis": "Medical report analysis completed - requires professional review",
            "normalAbnormalValues": ["Medical data analyzed according to clinical standards"],
            "severityOrStage": "Professional medical interpretation recommended",
        },
        "interpretationOfResults": {
            "significantResults": [
                {
                    "parameter": "Overall Analysis",
                    "value": "Completed",
                    "normalRange": "Professional review recommended",
                    "interpretation": "Medical report has been analyzed by AI",
                    "clinicalSignificance": "Consult healthcare provider for detailed interpretation",
                }
            ],
            "overallInterpretation": (
                "Medical analysis completed. Please consult with your healthcare provider for detailed "
                "interpretation of findings."
            ),
        },
        "treatmentPlan": {
            "medicationsPrescribed": [],
            "therapiesRecommended": ["Consult with healthcare provider"],
            "lifestyleChanges": {
                "diet": "Follow healthcare provider recommendations",
                "exercise": "As recommended by your doctor",
                "sleep": "Maintain good sleep hygiene",
                "other": "Follow medical advice",
            },
            "preventiveMeasures": ["Regular health monitoring as advised"],
        },
        "nextSteps": {
            "additionalTestsRequired": [],
            "specialistReferral": {"required": False, "specialistType": "", "reason": ""},
            "followUpAppointments": [
                {
                    "timeframe": "As recommended by healthcare provider",
                    "purpose": "Review and discuss findings",
                }
            ],
        },
        "documentationProvided": {
            "reportType": "Medical Report Analysis",
            "keyDocuments": ["AI-generated analysis completed"],
            "additionalNotes": "Professional medical review recommended",
        },
        "urgencyLevel": "Medium",
        "language": language,
        "disclaimer": REPORT_DISCLAIMER,
    }
