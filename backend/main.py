from __future__ import annotations

import hashlib
import json
import os
import re
from pathlib import Path
from typing import Any

import httpx
from fastapi import FastAPI, File, Header, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from care_core import (
    ANALYSIS_SYSTEM_PROMPT,
    BookingRequest,
    HealthCheckInput,
    LifecycleError,
    StatusLifecycle,
    TriagePolicy,
    build_report_prompt,
    build_report_request,
    fallback_report,
)
from care_services import (
    BookingService,
    CareServiceError,
    DoctorDirectory,
    EmergencyService,
    Geocoder,
    GeolocationError,
    HealthCheckService,
    NotificationRelay,
    UnifiedAppointmentService,
)
from care_services.geolocation import indian_cities, nearby_cities, user_city, validate_coordinates, world_cities
from records import AccessPolicyError, RecordsService, SQLiteRecordsDB

_ENV_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _load_local_env_file(path: Path) -> None:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not _ENV_KEY_RE.fullmatch(key):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        os.environ.setdefault(key, value)


def _bootstrap_local_env() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    for candidate in (repo_root / ".env", repo_root / "backend/.env"):
        if candidate.exists():
            _load_local_env_file(candidate)


_bootstrap_local_env()


class ProfilePayload(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    allergies: str | None = None
    medical_history: str | None = None
    medications: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    emergency_contact_relation: str | None = None


class DoctorRegistrationPayload(BaseModel):
    name: str
    email: str | None = None
    specialization: str
    hospital: str = ""
    address: str = ""
    region: str = ""
    degrees: str = ""
    experience: int = 0
    registration_number: str = ""
    degree_verification_photo: str | None = None


class DoctorReviewPayload(BaseModel):
    approve: bool


class DoctorAccessPayload(BaseModel):
    grant: bool


class AppointmentPayload(BaseModel):
    doctor_name: str = ""
    date: str = ""
    time: str = ""
    doctor_id: str | None = None
    doctor_specialty: str | None = None
    reason: str | None = None
    notes: str | None = None
    health_check_id: str | None = None

    def to_booking(self) -> BookingRequest:
        return BookingRequest(
            doctor_name=self.doctor_name,
            date=self.date,
            time=self.time,
            doctor_id=self.doctor_id,
            doctor_specialty=self.doctor_specialty,
            reason=self.reason,
            notes=self.notes,
        )


class SlotBookingPayload(BaseModel):
    patient_name: str
    reason: str | None = None


class SlotPayload(BaseModel):
    date: str
    start_time: str
    end_time: str
    duration: int
    max_patients: int = 1


class StatusPayload(BaseModel):
    status: str


class AppointmentActionPayload(BaseModel):
    action: str


class HealthCheckPayload(BaseModel):
    symptoms: list[str] = Field(default_factory=list)
    symptom_categories: dict[str, str] = Field(default_factory=dict)
    severity: str = ""
    duration: str = ""
    notes: str = ""
    photos: dict[str, str] = Field(default_factory=dict)
    previous_conditions: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)

    def to_input(self) -> HealthCheckInput:
        return HealthCheckInput(
            symptoms=list(self.symptoms),
            symptom_categories=dict(self.symptom_categories),
            severity=self.severity,
            duration=self.duration,
            notes=self.notes,
            photos=dict(self.photos),
            previous_conditions=list(self.previous_conditions),
            medications=list(self.medications),
        )


class SharePayload(BaseModel):
    appointment_id: str | None = None


class EmergencyCallPayload(BaseModel):
    patient_name: str = ""
    symptoms: list[str] = Field(default_factory=list)
    severity: str | None = None
    address: str = ""
    age: int | None = None
    gender: str | None = None


class EmergencyAssignPayload(BaseModel):
    doctor_id: str


class ChatMessage(BaseModel):
    role: str
    content: str


class AIChatPayload(BaseModel):
    messages: list[ChatMessage] | None = None
    model: str | None = None
    temperature: float = 0.7
    max_tokens: int = 1000


class MedicalReportPayload(BaseModel):
    file: str | None = None
    fileName: str | None = None
    fileType: str | None = None
    language: str = "simple-english"


class HealthBridgeApp:
    def __init__(self) -> None:
        db_path = os.getenv(
            "HEALTHBRIDGE_DB_PATH",
            str((Path(__file__).resolve().parent / "healthbridge.sqlite")),
        )
        self.db = SQLiteRecordsDB(db_path)
        self.records = RecordsService(self.db)
        self.lifecycle = StatusLifecycle()
        self.triage = TriagePolicy()
        self.geocoder = Geocoder()

        self.directory = DoctorDirectory(self.records, self.geocoder)
        self.relay = NotificationRelay(self.records, self.lifecycle)
        self.booking = BookingService(self.records, self.lifecycle, self.relay)
        self.unified = UnifiedAppointmentService(self.records, self.lifecycle)
        self.health_checks = HealthCheckService(self.records, self.triage)
        self.emergency = EmergencyService(self.records, self.directory)

        admin_ids = os.getenv("HEALTHBRIDGE_ADMIN_USER_IDS", "")
        self.records.seed_admins(admin_ids.split(","))


container = HealthBridgeApp()
app = FastAPI(title="HealthBridge Backend")

allowed_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in allowed_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


_TRUSTED_USER_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._:@-]{1,63}$")


def _validated_trusted_user_id(x_user_id: str) -> str:
    candidate = x_user_id.strip()
    if not candidate or not _TRUSTED_USER_ID_RE.fullmatch(candidate):
        raise HTTPException(status_code=400, detail="Invalid X-User-Id")
    return candidate


def _anonymous_allowed() -> bool:
    return os.getenv("ALLOW_ANON", "false").lower() == "true"


def get_user_id(auth_header: str | None) -> str:
    raw = (auth_header or "").replace("Bearer", "", 1).strip()
    if not raw:
        if _anonymous_allowed():
            return "demo-user"
        raise HTTPException(status_code=401, detail="Missing Authorization")
    # The bearer token is an opaque identity; long tokens are folded to a stable id.
    if len(raw) > 96:
        return f"token_{hashlib.sha256(raw.encode('utf-8')).hexdigest()[:24]}"
    return raw


def resolve_user_id(authorization: str | None, x_user_id: str | None) -> str:
    if x_user_id is not None:
        return _validated_trusted_user_id(x_user_id)
    return get_user_id(authorization)


_DOMAIN_ERRORS = (AccessPolicyError, CareServiceError, LifecycleError, GeolocationError)


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, (AccessPolicyError, CareServiceError)):
        return HTTPException(status_code=exc.status_code, detail=str(exc))
    if isinstance(exc, LifecycleError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


_GROQ_API_BASE = os.getenv("GROQ_API_BASE_URL", "https://api.groq.com/openai/v1").rstrip("/")
_GEMINI_API_BASE = os.getenv(
    "GEMINI_API_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta",
).rstrip("/")
_MAX_AUDIO_BYTES = int(os.getenv("HEALTHBRIDGE_MAX_AUDIO_BYTES", str(25 * 1024 * 1024)))
_MAX_REPORT_BYTES = int(os.getenv("HEALTHBRIDGE_MAX_REPORT_BYTES", str(20 * 1024 * 1024)))

_GEMINI_ERROR_MESSAGES = {
    400: "Invalid request format. Please check your file format.",
    401: "Invalid Gemini API key. Please check your API key configuration.",
    429: "Gemini API rate limit exceeded. Please try again later.",
}


def _require_groq_api_key() -> str:
    api_key = (os.getenv("GROQ_API_KEY") or "").strip()
    if not api_key:
        raise HTTPException(status_code=500, detail="Groq API key not configured")
    return api_key


def _require_gemini_api_key() -> str:
    api_key = (os.getenv("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise HTTPException(status_code=500, detail="Gemini API key not configured")
    return api_key


def _provider_error_message(response: httpx.Response) -> str:
    message = response.text.strip()
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict):
            msg = err.get("message")
            if isinstance(msg, str) and msg.strip():
                return msg.strip()
        msg = payload.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return message or f"HTTP {response.status_code}"


def _extract_json_object(raw_text: str) -> dict[str, Any] | None:
    text = (raw_text or "").strip()
    if not text:
        return None
    try:
        payload = json.loads(text)
        if isinstance(payload, dict):
            return payload
    except json.JSONDecodeError:
        pass

    for start_idx in [idx for idx, char in enumerate(text) if char == "{"]:
        depth = 0
        for end_idx in range(start_idx, len(text)):
            char = text[end_idx]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            if depth == 0:
                try:
                    payload = json.loads(text[start_idx : end_idx + 1])
                    if isinstance(payload, dict):
                        return payload
                except json.JSONDecodeError:
                    break
    return None


def _coerce_completion_text(response_json: dict[str, Any]) -> str:
    choices = response_json.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "\n".join(
            item["text"] for item in content if isinstance(item, dict) and isinstance(item.get("text"), str)
        )
    return ""


def _coerce_gemini_text(response_json: dict[str, Any]) -> str | None:
    candidates = response_json.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return ""
    text_value = parts[0].get("text")
    return text_value if isinstance(text_value, str) else ""


def _groq_chat_completion(
    *,
    messages: list[dict[str, str]],
    model: str,
    temperature: float,
    max_tokens: int,
    timeout_seconds: float = 45.0,
) -> dict[str, Any]:
    api_key = _require_groq_api_key()
    payload = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    try:
        with httpx.Client(timeout=httpx.Timeout(timeout_seconds, connect=8.0)) as client:
            response = client.post(f"{_GROQ_API_BASE}/chat/completions", headers=headers, json=payload)
    except httpx.TimeoutException as exc:
        raise HTTPException(status_code=504, detail="Groq API timed out.") from exc
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail="Failed to reach Groq API.") from exc

    if response.status_code >= 400:
        print(f"groq chat error {response.status_code}: {_provider_error_message(response)}")  # noqa: T201
        if response.status_code == 401:
            raise HTTPException(status_code=503, detail="Groq API key was rejected by provider.")
        if response.status_code == 429:
            raise HTTPException(status_code=429, detail="Groq API is rate-limited. Retry shortly.")
        raise HTTPException(status_code=502, detail=f"Groq API returned error status: {response.status_code}")

    try:
        completion = response.json()
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=502, detail="Groq API returned invalid JSON.") from exc
    if not isinstance(completion, dict) or not completion.get("choices"):
        raise HTTPException(status_code=502, detail="Invalid response structure from Groq API")
    return completion


def _groq_transcribe(*, file_name: str, mime_type: str, audio_bytes: bytes) -> dict[str, Any]:
    api_key = _require_groq_api_key()
    model = (os.getenv("GROQ_WHISPER_MODEL") or "whisper-large-v3-turbo").strip()
    data = {"model": model, "language": "en", "response_format": "json"}
    files = {"file": (file_name, audio_bytes, mime_type or "application/octet-stream")}
    headers = {"Authorization": f"Bearer {api_key}"}

    try:
        with httpx.Client(timeout=httpx.Timeout(60.0, connect=10.0)) as client:
            response = client.post(
                f"{_GROQ_API_BASE}/audio/transcriptions",
                headers=headers,
                data=data,
                files=files,
            )
    except httpx.TimeoutException as exc:
        raise HTTPException(status_code=504, detail="Transcription provider timed out.") from exc
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail="Failed to reach transcription provider.") from exc

    if response.status_code >= 400:
        print(f"groq transcription error {response.status_code}: {_provider_error_message(response)}")  # noqa: T201
        raise HTTPException(status_code=response.status_code, detail=f"Transcription failed: {response.status_code}")

    try:
        payload_json = response.json()
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=502, detail="Transcription provider returned invalid JSON.") from exc
    return payload_json if isinstance(payload_json, dict) else {}


def _gemini_generate_report(request_body: dict[str, Any]) -> dict[str, Any]:
    api_key = _require_gemini_api_key()
    model = (os.getenv("GEMINI_MODEL") or "gemini-1.5-flash").strip()
    try:
        with httpx.Client(timeout=httpx.Timeout(90.0, connect=8.0)) as client:
            response = client.post(
                f"{_GEMINI_API_BASE}/models/{model}:generateContent",
                params={"key": api_key},
                headers={"Content-Type": "application/json"},
                json=request_body,
            )
    except httpx.TimeoutException as exc:
        raise HTTPException(status_code=504, detail="Gemini API timed out.") from exc
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail="Failed to reach Gemini API.") from exc

    if response.status_code >= 400:
        print(f"gemini error {response.status_code}: {_provider_error_message(response)}")  # noqa: T201
        detail = _GEMINI_ERROR_MESSAGES.get(response.status_code, "Failed to analyze medical report")
        raise HTTPException(status_code=response.status_code, detail=detail)

    try:
        payload_json = response.json()
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=500, detail="Failed to analyze medical report") from exc
    return payload_json if isinstance(payload_json, dict) else {}


def _run_symptom_analysis(check: HealthCheckInput) -> dict[str, Any] | JSONResponse:
    try:
        completion = _groq_chat_completion(
            messages=[
                {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
                {"role": "user", "content": container.health_checks.analysis_prompt(check)},
            ],
            model=(os.getenv("GROQ_ANALYSIS_MODEL") or "llama3-70b-8192").strip(),
            temperature=0.3,
            max_tokens=2000,
        )
    except HTTPException as exc:
        print(f"symptom analysis failed: {exc.detail}")  # noqa: T201
        return JSONResponse(
            status_code=500,
            content={
                "error": "Analysis failed",
                "details": exc.detail,
                "fallback_analysis": container.triage.fallback_analysis(),
            },
        )
    return container.health_checks.compose_analysis(check, _coerce_completion_text(completion))


@app.get("/profile")
def get_profile(authorization: str | None = Header(default=None), x_user_id: str | None = Header(default=None)):
    user_id = resolve_user_id(authorization, x_user_id)
    return container.records.directory.get_profile(user_id) or {}


@app.post("/profile")
def upsert_profile(
    payload: ProfilePayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    fields = container.records.guard.editable_profile_fields(payload.model_dump(exclude_unset=True))
    return container.records.directory.upsert_profile(user_id, fields)


@app.get("/doctors")
def list_doctors(specialization: str | None = None):
    return {"doctors": container.directory.list_doctors(specialization)}


@app.get("/doctors/nearby")
def nearby_doctors(
    latitude: float | None = None,
    longitude: float | None = None,
    specialization: str | None = None,
    limit: int = 10,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return container.directory.nearby_for_user(
            user_id,
            latitude=latitude,
            longitude=longitude,
            specialization=specialization,
            limit=limit,
        )
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/doctors/register")
def register_doctor(
    payload: DoctorRegistrationPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    if not payload.name.strip() or not payload.specialization.strip():
        raise HTTPException(status_code=400, detail="Name and specialization are required")
    try:
        doctor = container.directory.register_doctor(user_id, payload.model_dump())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"doctor": doctor, "status": "pending_verification"}


@app.get("/doctors/access")
def doctor_access(authorization: str | None = Header(default=None), x_user_id: str | None = Header(default=None)):
    user_id = resolve_user_id(authorization, x_user_id)
    profile = container.records.directory.get_profile(user_id)
    doctor = container.records.directory.get_doctor(user_id)
    result = container.records.guard.check_doctor_access(profile, doctor)
    return {
        "is_doctor": container.directory.check_doctor_access(user_id),
        "doctor_dashboard": result.allowed,
        "reason": result.reason,
    }


@app.get("/admin/users")
def admin_users(authorization: str | None = Header(default=None), x_user_id: str | None = Header(default=None)):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        container.records.require_admin(user_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"users": container.directory.list_users()}


@app.get("/admin/doctors")
def admin_doctors(
    pending_only: bool = False,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        container.records.require_admin(user_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"doctors": container.directory.list_applications(pending_only=pending_only)}


@app.post("/admin/doctors/{doctor_id}/verify")
def admin_review_doctor(
    doctor_id: str,
    payload: DoctorReviewPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        container.records.require_admin(user_id)
        doctor = container.directory.review_application(doctor_id, payload.approve)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"doctor": doctor}


@app.post("/admin/users/{target_user_id}/doctor-access")
def admin_doctor_access(
    target_user_id: str,
    payload: DoctorAccessPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        container.records.require_admin(user_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    if payload.grant:
        container.directory.grant_doctor_access(target_user_id)
    else:
        container.directory.revoke_doctor_access(target_user_id)
    return {"user_id": target_user_id, "is_doctor": container.directory.check_doctor_access(target_user_id)}


@app.post("/appointments")
def book_appointment(
    payload: AppointmentPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        appointment = container.booking.book_direct_appointment(user_id, payload.to_booking())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"appointment": appointment}


@app.post("/appointments/request")
def request_appointment(
    payload: AppointmentPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return container.booking.request_appointment(
            user_id,
            payload.to_booking(),
            health_check_id=payload.health_check_id,
        )
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.get("/appointments")
def list_appointments(authorization: str | None = Header(default=None), x_user_id: str | None = Header(default=None)):
    user_id = resolve_user_id(authorization, x_user_id)
    return container.booking.patient_appointments(user_id)


@app.get("/appointments/upcoming")
def upcoming_appointments(
    days: int = 7,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    return {"appointments": container.relay.upcoming_appointments(user_id, days=max(0, days))}


@app.post("/appointments/{appointment_id}/cancel")
def cancel_appointment(
    appointment_id: str,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        appointment = container.booking.cancel_appointment(user_id, appointment_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"appointment": appointment}


@app.get("/slots/available")
def available_slots(doctor_id: str | None = None):
    return {"slots": container.booking.available_slots(doctor_id)}


@app.post("/slots/{slot_id}/book")
def book_slot(
    slot_id: str,
    payload: SlotBookingPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        slot = container.booking.book_slot_appointment(user_id, slot_id, payload.patient_name, payload.reason)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"slot": slot}


@app.get("/doctor/slots")
def doctor_slots(authorization: str | None = Header(default=None), x_user_id: str | None = Header(default=None)):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return {"slots": container.booking.doctor_slots(user_id)}
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/doctor/slots")
def create_doctor_slot(
    payload: SlotPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        slot = container.booking.create_slot(user_id, payload.model_dump())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"slot": slot}


@app.patch("/doctor/slots/{slot_id}")
def update_doctor_slot(
    slot_id: str,
    payload: StatusPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        slot = container.booking.update_slot_status(user_id, slot_id, payload.status)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"slot": slot}


@app.delete("/doctor/slots/{slot_id}")
def delete_doctor_slot(
    slot_id: str,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        deleted = container.booking.delete_slot(user_id, slot_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"deleted": deleted}


@app.get("/doctor/appointments")
def doctor_appointments(
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return {"appointments": container.unified.list_for_doctor(user_id)}
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/doctor/appointments/{kind}/{record_id}/status")
def doctor_appointment_status(
    kind: str,
    record_id: str,
    payload: AppointmentActionPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return container.unified.update_status(user_id, kind, record_id, payload.action)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.get("/doctor/notifications")
def doctor_notifications(
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return {"notifications": container.relay.doctor_inbox(user_id)}
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/doctor/notifications/{notification_id}/status")
def doctor_notification_status(
    notification_id: str,
    payload: StatusPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        notification = container.relay.update_status(user_id, notification_id, payload.status)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"notification": notification}


@app.get("/health-checks/categories")
def health_check_categories():
    return {"categories": container.health_checks.categories()}


@app.post("/health-checks/analyze")
def analyze_health_check(
    payload: HealthCheckPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    resolve_user_id(authorization, x_user_id)
    try:
        check = container.health_checks.normalize_input(payload.to_input())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return _run_symptom_analysis(check)


@app.post("/health-checks")
def create_health_check(
    payload: HealthCheckPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        check = container.health_checks.normalize_input(payload.to_input())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    analysis = _run_symptom_analysis(check)
    if isinstance(analysis, JSONResponse):
        return analysis
    record = container.health_checks.save(user_id, check, analysis)
    return {"health_check": record, "analysis": analysis}


@app.get("/health-checks")
def list_health_checks(
    limit: int = 50,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    return {"health_checks": container.health_checks.history(user_id, limit=max(1, min(limit, 200)))}


@app.get("/health-checks/{health_check_id}")
def get_health_check(
    health_check_id: str,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        return {"health_check": container.health_checks.get(user_id, health_check_id)}
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/health-checks/{health_check_id}/share")
def share_health_check(
    health_check_id: str,
    payload: SharePayload | None = None,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    appointment_id = payload.appointment_id if payload else None
    try:
        return container.relay.share_with_doctor(user_id, health_check_id, appointment_id=appointment_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.post("/emergency/calls")
def create_emergency_call(
    payload: EmergencyCallPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        call = container.emergency.create_call(user_id, payload.model_dump())
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"call": call}


@app.post("/emergency/calls/{call_id}/assign")
def assign_emergency_doctor(
    call_id: str,
    payload: EmergencyAssignPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        call = container.emergency.assign_doctor(user_id, call_id, payload.doctor_id)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc
    return {"call": call}


@app.get("/emergency/doctors")
def emergency_doctors(
    address: str | None = None,
    specialization: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    user_id = resolve_user_id(authorization, x_user_id)
    try:
        if address and address.strip():
            return container.emergency.doctors_near_address(address.strip(), specialization)
        return container.emergency.doctors_near_user(user_id, latitude=latitude, longitude=longitude)
    except _DOMAIN_ERRORS as exc:
        raise _http_error(exc) from exc


@app.get("/geo/cities")
def geo_cities(scope: str = "india"):
    if scope == "world":
        return {"cities": world_cities()}
    return {"cities": indian_cities()}


@app.get("/geo/nearby-cities")
def geo_nearby_cities(latitude: float, longitude: float, limit: int = 5):
    try:
        coords = validate_coordinates(latitude, longitude)
    except GeolocationError as exc:
        raise _http_error(exc) from exc
    return {
        "city": user_city(coords.latitude, coords.longitude),
        "nearby": nearby_cities(coords.latitude, coords.longitude, limit=max(1, limit)),
    }


@app.post("/ai/chat")
def ai_chat(
    payload: AIChatPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    resolve_user_id(authorization, x_user_id)
    if not payload.messages:
        raise HTTPException(status_code=400, detail="Messages array is required")
    model = payload.model or (os.getenv("GROQ_CHAT_MODEL") or "llama3-8b-8192").strip()
    completion = _groq_chat_completion(
        messages=[message.model_dump() for message in payload.messages],
        model=model,
        temperature=payload.temperature,
        max_tokens=payload.max_tokens,
    )
    return {
        "message": _coerce_completion_text(completion),
        "usage": completion.get("usage"),
        "model": completion.get("model") or model,
    }


@app.post("/ai/transcribe")
async def ai_transcribe(
    audio: UploadFile | None = File(default=None),
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    resolve_user_id(authorization, x_user_id)
    _require_groq_api_key()
    if audio is None:
        raise HTTPException(status_code=400, detail="Audio file is required")

    audio_bytes = await audio.read(_MAX_AUDIO_BYTES + 1)
    if len(audio_bytes) > _MAX_AUDIO_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Audio file exceeds {_MAX_AUDIO_BYTES // (1024 * 1024)}MB limit.",
        )
    if not audio_bytes:
        raise HTTPException(status_code=400, detail="Audio file is required")

    transcription = _groq_transcribe(
        file_name=(audio.filename or "").strip() or "recording.webm",
        mime_type=(audio.content_type or "").lower().strip(),
        audio_bytes=audio_bytes,
    )
    return {
        "transcript": str(transcription.get("text") or "").strip(),
        "language": transcription.get("language") or "en",
    }


@app.post("/ai/analyze-medical-report")
def analyze_medical_report(
    payload: MedicalReportPayload,
    authorization: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
):
    resolve_user_id(authorization, x_user_id)
    if not payload.file or not payload.fileName:
        raise HTTPException(status_code=400, detail="File and fileName are required")
    _require_gemini_api_key()
    # base64 inflates by 4/3
    if len(payload.file) * 3 // 4 > _MAX_REPORT_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Report file exceeds {_MAX_REPORT_BYTES // (1024 * 1024)}MB limit.",
        )

    prompt = build_report_prompt(file_name=payload.fileName, file_type=payload.fileType, language=payload.language)
    response_json = _gemini_generate_report(
        build_report_request(prompt=prompt, file_type=payload.fileType, encoded_file=payload.file)
    )
    content = _coerce_gemini_text(response_json)
    if content is None:
        print("gemini returned no candidates")  # noqa: T201
        raise HTTPException(status_code=500, detail="Failed to analyze medical report")

    analysis = _extract_json_object(content)
    if analysis is None:
        print("gemini report was not valid JSON; using fallback analysis")  # noqa: T201
        analysis = fallback_report(payload.language)
    analysis["language"] = payload.language
    return analysis
