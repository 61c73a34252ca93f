from .booking import BookingService
from .doctor_directory import DoctorDirectory
from .emergency import EmergencyService
from .errors import BookingError, CareServiceError, DirectoryError, NotificationError
from .geolocation import Geocoder, GeolocationError
from .health_checks import HealthCheckService
from .notifications import NotificationRelay
from .unified_appointments import UnifiedAppointmentService

__all__ = [
    "BookingError",
    "BookingService",
    "CareServiceError",
    "DirectoryError",
    "DoctorDirectory",
    "EmergencyService",
    "Geocoder",
    "GeolocationError",
    "HealthCheckService",
    "NotificationError",
    "NotificationRelay",
    "UnifiedAppointmentService",
]
