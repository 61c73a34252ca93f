from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class SQLiteRecordsDB:
    def __init__(self, db_path: str) -> None:
        self._path = Path(db_path).expanduser().resolve()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._init_schema()

    @property
    def path(self) -> str:
        return str(self._path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._path), timeout=30.0, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._lock, self.connection() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS profiles (
                  id TEXT PRIMARY KEY,
                  first_name TEXT,
                  last_name TEXT,
                  phone TEXT,
                  address TEXT,
                  city TEXT,
                  region TEXT,
                  date_of_birth TEXT,
                  gender TEXT,
                  allergies TEXT,
                  medical_history TEXT,
                  medications TEXT,
                  emergency_contact_name TEXT,
                  emergency_contact_phone TEXT,
                  emergency_contact_relation TEXT,
                  is_doctor INTEGER NOT NULL DEFAULT 0,
                  is_admin INTEGER NOT NULL DEFAULT 0,
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS doctors (
                  id TEXT PRIMARY KEY,
                  name TEXT NOT NULL,
                  email TEXT,
                  specialization TEXT NOT NULL DEFAULT '',
                  hospital TEXT NOT NULL DEFAULT '',
                  address TEXT NOT NULL DEFAULT '',
                  region TEXT NOT NULL DEFAULT '',
                  degrees TEXT NOT NULL DEFAULT '',
                  experience INTEGER NOT NULL DEFAULT 0,
                  registration_number TEXT NOT NULL DEFAULT '',
                  degree_verification_photo TEXT,
                  latitude REAL,
                  longitude REAL,
                  available INTEGER NOT NULL DEFAULT 1,
                  verified INTEGER NOT NULL DEFAULT 0,
                  is_placeholder INTEGER NOT NULL DEFAULT 0,
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS appointments (
                  id TEXT PRIMARY KEY,
                  user_id TEXT NOT NULL,
                  doctor_id TEXT REFERENCES doctors(id),
                  doctor_name TEXT NOT NULL,
                  doctor_specialty TEXT,
                  date TEXT NOT NULL,
                  time TEXT NOT NULL,
                  reason TEXT,
                  notes TEXT,
                  status TEXT,
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS appointment_slots (
                  id TEXT PRIMARY KEY,
                  doctor_id TEXT NOT NULL REFERENCES doctors(id) ON DELETE CASCADE,
                  date TEXT NOT NULL,
                  start_time TEXT NOT NULL,
                  end_time TEXT NOT NULL,
                  duration INTEGER NOT NULL,
                  max_patients INTEGER NOT NULL DEFAULT 1,
                  status TEXT NOT NULL DEFAULT 'available',
                  user_id TEXT,
                  patient_name TEXT,
                  reason TEXT,
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS health_checks (
                  id TEXT PRIMARY KEY,
                  user_id TEXT NOT NULL,
                  symptoms_json TEXT NOT NULL,
                  severity TEXT,
                  duration TEXT,
                  previous_conditions_json TEXT NOT NULL DEFAULT '[]',
                  medications_json TEXT NOT NULL DEFAULT '[]',
                  notes TEXT,
                  analysis_results_json TEXT,
                  comprehensive_analysis INTEGER NOT NULL DEFAULT 0,
                  overall_assessment TEXT,
                  urgency_level TEXT,
                  symptom_photos_json TEXT NOT NULL DEFAULT '{}',
                  created_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS doctor_notifications (
                  id TEXT PRIMARY KEY,
                  doctor_id TEXT NOT NULL REFERENCES doctors(id),
                  patient_id TEXT NOT NULL,
                  appointment_id TEXT NOT NULL REFERENCES appointments(id),
                  health_check_id TEXT NOT NULL REFERENCES health_checks(id),
                  symptoms_data_json TEXT NOT NULL,
                  status TEXT NOT NULL DEFAULT 'sent',
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS emergency_calls (
                  id TEXT PRIMARY KEY,
                  user_id TEXT,
                  doctor_id TEXT REFERENCES doctors(id),
                  patient_name TEXT NOT NULL,
                  symptoms_json TEXT NOT NULL,
                  severity TEXT,
                  address TEXT NOT NULL,
                  age INTEGER,
                  gender TEXT,
                  status TEXT NOT NULL DEFAULT 'pending',
                  created_at TEXT NOT NULL,
                  updated_at TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_doctors_verified_available
                  ON doctors(verified, available);
                CREATE INDEX IF NOT EXISTS idx_appointments_user_date
                  ON appointments(user_id, date, time);
                CREATE INDEX IF NOT EXISTS idx_appointments_doctor_date
                  ON appointments(doctor_id, date, time);
                CREATE INDEX IF NOT EXISTS idx_slots_doctor_date
                  ON appointment_slots(doctor_id, date, start_time);
                CREATE INDEX IF NOT EXISTS idx_slots_status_date
                  ON appointment_slots(status, date);
                CREATE INDEX IF NOT EXISTS idx_health_checks_user_created
                  ON health_checks(user_id, created_at DESC);
                CREATE INDEX IF NOT EXISTS idx_notifications_doctor_created
                  ON doctor_notifications(doctor_id, created_at DESC);
                """
            )
