from .access_guard import AccessGuard, AccessPolicyError
from .database import SQLiteRecordsDB
from .service import RecordsService

__all__ = [
    "SQLiteRecordsDB",
    "RecordsService",
    "AccessGuard",
    "AccessPolicyError",
]
