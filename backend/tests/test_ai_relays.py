from __future__ import annotations

import json

import httpx
from fastapi import HTTPException


def _route_provider(monkeypatch, backend_module, handler):
    real_client = httpx.Client

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(backend_module.httpx, "Client", client_factory)


def test_chat_requires_messages(client, auth_headers):
    response = client.post("/ai/chat", headers=auth_headers("user-a"), json={"messages": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Messages array is required"


def test_chat_without_key_is_server_error(client, auth_headers):
    response = client.post(
        "/ai/chat",
        headers=auth_headers("user-a"),
        json={"messages": [{"role": "user", "content": "hello"}]},
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Groq API key not configured"


def test_chat_relays_completion_with_defaults(client, auth_headers, backend_module, monkeypatch):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "model": "llama3-8b-8192",
                "choices": [{"message": {"role": "assistant", "content": "Drink water and rest."}}],
                "usage": {"total_tokens": 42},
            },
        )

    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    _route_provider(monkeypatch, backend_module, handler)
    response = client.post(
        "/ai/chat",
        headers=auth_headers("user-a"),
        json={"messages": [{"role": "user", "content": "I feel tired"}]},
    )
    assert response.status_code == 200
    assert response.json() == {
        "message": "Drink water and rest.",
        "usage": {"total_tokens": 42},
        "model": "llama3-8b-8192",
    }
    sent = json.loads(seen[0].content)
    assert seen[0].url.path.endswith("/chat/completions")
    assert seen[0].headers["Authorization"] == "Bearer gsk-test"
    assert sent["model"] == "llama3-8b-8192"
    assert sent["temperature"] == 0.7
    assert sent["max_tokens"] == 1000


def test_chat_rate_limit_maps_to_429(client, auth_headers, backend_module, monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    _route_provider(
        monkeypatch,
        backend_module,
        lambda request: httpx.Response(429, json={"error": {"message": "slow down"}}),
    )
    response = client.post(
        "/ai/chat",
        headers=auth_headers("user-a"),
        json={"messages": [{"role": "user", "content": "hi"}]},
    )
    assert response.status_code == 429


def test_transcribe_success(client, auth_headers, backend_module, monkeypatch):
    captured: dict = {}

    def fake_transcribe(**kwargs):
        captured.update(kwargs)
        return {"text": " I have a headache. "}

    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    monkeypatch.setattr(backend_module, "_groq_transcribe", fake_transcribe)
    response = client.post(
        "/ai/transcribe",
        headers=auth_headers("user-a"),
        files={"audio": ("note.webm", b"fake-audio", "audio/webm")},
    )
    assert response.status_code == 200
    assert response.json() == {"transcript": "I have a headache.", "language": "en"}
    assert captured["file_name"] == "note.webm"
    assert captured["audio_bytes"] == b"fake-audio"


def test_transcribe_requires_audio(client, auth_headers, monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    response = client.post("/ai/transcribe", headers=auth_headers("user-a"))
    assert response.status_code == 400
    assert response.json()["detail"] == "Audio file is required"


def test_transcribe_passes_provider_status_through(client, auth_headers, backend_module, monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/audio/transcriptions")
        return httpx.Response(413, text="file too large")

    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    _route_provider(monkeypatch, backend_module, handler)
    response = client.post(
        "/ai/transcribe",
        headers=auth_headers("user-a"),
        files={"audio": ("note.webm", b"fake-audio", "audio/webm")},
    )
    assert response.status_code == 413
    assert response.json()["detail"] == "Transcription failed: 413"


def test_transcribe_timeout_surfaces_clear_error(client, auth_headers, backend_module, monkeypatch):
    def fake_transcribe(**kwargs):
        raise HTTPException(status_code=504, detail="Transcription provider timed out.")

    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    monkeypatch.setattr(backend_module, "_groq_transcribe", fake_transcribe)
    response = client.post(
        "/ai/transcribe",
        headers=auth_headers("user-a"),
        files={"audio": ("note.wav", b"wav-bytes", "audio/wav")},
    )
    assert response.status_code == 504


def test_report_requires_file_and_key(client, auth_headers):
    missing = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={"fileName": "cbc.pdf", "fileType": "application/pdf"},
    )
    assert missing.status_code == 400
    assert missing.json()["detail"] == "File and fileName are required"

    no_key = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={"file": "JVBERi0x", "fileName": "cbc.pdf", "fileType": "application/pdf"},
    )
    assert no_key.status_code == 500


def test_report_image_is_sent_inline_and_language_forced(client, auth_headers, backend_module, monkeypatch):
    captured: dict = {}
    model_report = {"summaryOfFindings": {"diagnosis": "Mild anemia"}, "urgencyLevel": "Low", "language": "english"}

    def fake_generate(request_body):
        captured["body"] = request_body
        return {"candidates": [{"content": {"parts": [{"text": json.dumps(model_report)}]}}]}

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test")
    monkeypatch.setattr(backend_module, "_gemini_generate_report", fake_generate)
    response = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={
            "file": "data:image/png;base64,iVBORw0KGgo=",
            "fileName": "cbc.png",
            "fileType": "image/png",
            "language": "hindi",
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["summaryOfFindings"]["diagnosis"] == "Mild anemia"
    assert payload["language"] == "hindi"

    parts = captured["body"]["contents"][0]["parts"]
    assert parts[1] == {"inline_data": {"mime_type": "image/png", "data": "iVBORw0KGgo="}}
    assert "Respond in Hindi" in parts[0]["text"]
    assert captured["body"]["generationConfig"] == {
        "temperature": 0.2,
        "maxOutputTokens": 3000,
        "responseMimeType": "application/json",
    }


def test_report_pdf_is_text_only_and_unparseable_output_falls_back(client, auth_headers, backend_module, monkeypatch):
    captured: dict = {}

    def fake_generate(request_body):
        captured["body"] = request_body
        return {"candidates": [{"content": {"parts": [{"text": "not json at all"}]}}]}

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test")
    monkeypatch.setattr(backend_module, "_gemini_generate_report", fake_generate)
    response = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={"file": "JVBERi0x", "fileName": "cbc.pdf", "fileType": "application/pdf", "language": "klingon"},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["urgencyLevel"] == "Medium"
    assert payload["language"] == "klingon"
    parts = captured["body"]["contents"][0]["parts"]
    assert len(parts) == 1
    assert "Use very simple English words" in parts[0]["text"]


def test_report_provider_errors_keep_status(client, auth_headers, backend_module, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test")
    _route_provider(monkeypatch, backend_module, lambda request: httpx.Response(429, text="quota"))
    response = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={"file": "JVBERi0x", "fileName": "cbc.pdf", "fileType": "application/pdf"},
    )
    assert response.status_code == 429
    assert response.json()["detail"] == "Gemini API rate limit exceeded. Please try again later."


def test_report_without_candidates_is_server_error(client, auth_headers, backend_module, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test")
    monkeypatch.setattr(backend_module, "_gemini_generate_report", lambda request_body: {"candidates": []})
    response = client.post(
        "/ai/analyze-medical-report",
        headers=auth_headers("user-a"),
        json={"file": "JVBERi0x", "fileName": "cbc.pdf", "fileType": "application/pdf"},
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to analyze medical report"
