"""
Domain error taxonomy.

Services raise these instead of HTTP errors; `meetx.api.errors` maps each one
to its status code at the boundary. `detail` is always safe to show a caller.
"""

from typing import Optional


class ServiceError(Exception):
    """Base class for errors that carry a stable HTTP mapping."""

    status_code: int = 500
    detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class UnauthenticatedError(ServiceError):
    status_code = 401
    detail = "Not authenticated"


class InvalidCredentialsError(UnauthenticatedError):
    # Same message for unknown email and wrong password
    detail = "Invalid email or password"


class ForbiddenError(ServiceError):
    status_code = 403
    detail = "Not authorized to access this resource"


class NotFoundError(ServiceError):
    status_code = 404
    detail = "Resource not found"


class ActivityNotFoundError(NotFoundError):
    detail = "Activity not found"


class BookingNotFoundError(NotFoundError):
    detail = "Booking not found"


class UserNotFoundError(NotFoundError):
    detail = "User not found"


class ConflictError(ServiceError):
    status_code = 409
    detail = "Conflict"


class DuplicateBookingError(ConflictError):
    detail = "You have already booked this activity"


class EmailAlreadyRegisteredError(ConflictError):
    detail = "User with this email already exists"


class PasswordHashError(ServiceError):
    """A stored password digest is structurally invalid (corrupted record)."""


class TokenError(ServiceError):
    """Base for session token failures. Callers treat every kind as 401."""

    status_code = 401
    detail = "Invalid token"
    reason = "invalid"


class MalformedTokenError(TokenError):
    reason = "malformed"


class ExpiredTokenError(TokenError):
    reason = "expired"


class TamperedTokenError(TokenError):
    reason = "tampered"
