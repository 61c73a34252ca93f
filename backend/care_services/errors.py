from __future__ import annotations


class CareServiceError(Exception):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class BookingError(CareServiceError):
    pass


class DirectoryError(CareServiceError):
    pass


class NotificationError(CareServiceError):
    pass
