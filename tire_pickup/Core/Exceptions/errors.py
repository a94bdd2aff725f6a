from typing import Optional


class PickupError(Exception):
    """Base class for errors reported to API clients as `{"error": message}`."""

    status_code: int = 400
    default_message: str = "Invalid request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PickupError):
    status_code = 400
    default_message = "Missing required fields"


class InvalidTimeWindow(ValidationError):
    default_message = "Invalid time window"


class InvalidCredentials(PickupError):
    status_code = 401
    default_message = "Invalid credentials"


class Unauthorized(PickupError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(PickupError):
    status_code = 404
    default_message = "Not found"


class Conflict(PickupError):
    status_code = 409
    default_message = "Conflict"


class DateUnavailable(Conflict):
    default_message = "Selected date is unavailable"


class CapacityExceeded(Conflict):
    default_message = "No availability on selected date"
