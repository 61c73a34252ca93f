from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def today_iso() -> str:
    return utc_now().date().isoformat()


def date_after_days(days: int, start: date | None = None) -> str:
    base = start or utc_now().date()
    return (base + timedelta(days=days)).isoformat()
