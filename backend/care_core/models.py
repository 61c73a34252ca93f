from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SLOT_STATES = {"available", "booked", "cancelled"}
NOTIFICATION_STATES = {"sent", "read", "acknowledged"}
DEFAULT_REASON = "General consultation"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def as_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class LocationFix:
    coordinates: Coordinates
    source: str
    address: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.coordinates.latitude,
            "longitude": self.coordinates.longitude,
            "location_source": self.source,
            "address": self.address,
        }


@dataclass
class BookingRequest:
    doctor_name: str
    date: str
    time: str
    doctor_id: str | None = None
    doctor_specialty: str | None = None
    reason: str | None = None
    notes: str | None = None


@dataclass
class HealthCheckInput:
    symptoms: list[str]
    symptom_categories: dict[str, str] = field(default_factory=dict)
    severity: str = ""
    duration: str = ""
    notes: str = ""
    photos: dict[str, str] = field(default_factory=dict)
    previous_conditions: list[str] = field(default_factory=list)
    medications: list[str] = field(default_factory=list)
