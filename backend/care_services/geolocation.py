from __future__ import annotations

import math
import os
from typing import Any

import httpx

from care_core.models import Coordinates

from .geodata import (
    CITY_COORDINATES,
    DEFAULT_COORDINATES,
    INDIAN_CITIES,
    INTERNATIONAL_CITIES,
    REFERENCE_CITIES,
)

EARTH_RADIUS_KM = 6371.0


class GeolocationError(Exception):
    pass


def _safe_float(value: Any) -> float | None:
    try:
        if value is None:
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_coordinates(latitude: Any, longitude: Any) -> Coordinates:
    lat = _safe_float(latitude)
    lon = _safe_float(longitude)
    if lat is None or lon is None:
        raise GeolocationError("Latitude and longitude must be numeric.")
    if not -90.0 <= lat <= 90.0:
        raise GeolocationError("Latitude must be between -90 and 90.")
    if not -180.0 <= lon <= 180.0:
        raise GeolocationError("Longitude must be between -180 and 180.")
    return Coordinates(latitude=lat, longitude=lon)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def city_coordinates(city_name: str) -> Coordinates | None:
    name = (city_name or "").strip()
    if not name:
        return None

    exact = CITY_COORDINATES.get(name)
    if exact:
        return Coordinates(*exact)

    normalized = name.lower()
    for city, coords in CITY_COORDINATES.items():
        if city.lower() == normalized:
            return Coordinates(*coords)

    for city, coords in CITY_COORDINATES.items():
        candidate = city.lower()
        if candidate in normalized or normalized in candidate:
            return Coordinates(*coords)
    return None


def nearby_cities(latitude: float, longitude: float, limit: int = 5) -> list[str]:
    ranked = sorted(
        REFERENCE_CITIES,
        key=lambda city: haversine_km(latitude, longitude, city[1], city[2]),
    )
    return [name for name, _, _ in ranked[: max(0, limit)]]


def user_city(latitude: float, longitude: float) -> str | None:
    cities = nearby_cities(latitude, longitude, limit=1)
    return cities[0] if cities else None


def indian_cities() -> list[str]:
    return list(dict.fromkeys(INDIAN_CITIES))


def world_cities() -> list[str]:
    return sorted(set(INDIAN_CITIES) | set(INTERNATIONAL_CITIES))


def compose_profile_address(profile: dict[str, Any] | None) -> str | None:
    if not profile:
        return None
    address = (profile.get("address") or "").strip()
    city = (profile.get("city") or "").strip()
    region = (profile.get("region") or "").strip()
    parts = [part for part in (address, city or region) if part]
    if not parts:
        return None
    return ", ".join(parts)


class Geocoder:
    def __init__(self) -> None:
        self.disable_external = os.getenv("HEALTHBRIDGE_DISABLE_EXTERNAL_GEO", "false").lower() == "true"
        self.timeout = float(os.getenv("HEALTHBRIDGE_GEO_TIMEOUT_SECONDS", "5.0"))

    def geocode(self, address: str) -> Coordinates:
        cleaned = (address or "").strip()
        if not cleaned:
            raise GeolocationError("Address is required for geocoding.")

        if not self.disable_external:
            live = self._nominatim_lookup(cleaned)
            if live is not None:
                return live

        parts = [part.strip() for part in cleaned.split(",") if part.strip()]
        for candidate in [*reversed(parts), cleaned]:
            coords = city_coordinates(candidate)
            if coords is not None:
                return coords
        return Coordinates(*DEFAULT_COORDINATES)

    def _nominatim_lookup(self, address: str) -> Coordinates | None:
        try:
            response = httpx.get(
                "https://nominatim.openstreetmap.org/search",
                params={
                    "q": address,
                    "format": "jsonv2",
                    "limit": 1,
                },
                headers={"User-Agent": "healthbridge-backend/1.0"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            print(f"geocoder lookup failed, using city table: {exc}")  # noqa: T201
            return None

        try:
            rows = response.json() if response.content else []
        except ValueError:
            return None
        if not isinstance(rows, list) or not rows:
            return None
        first = rows[0]
        if not isinstance(first, dict):
            return None
        lat = _safe_float(first.get("lat"))
        lon = _safe_float(first.get("lon"))
        if lat is None or lon is None:
            return None
        return Coordinates(latitude=lat, longitude=lon)
