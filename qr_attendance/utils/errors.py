"""Domain errors raised by the services and rendered by the app error handler."""


class AttendanceError(Exception):
    """Base class for failures reported to the caller with an HTTP status."""

    status_code = 400
    message = 'Request failed'

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class ValidationError(AttendanceError):
    """Malformed request: missing or unusable fields."""
    status_code = 400
    message = 'Missing fields'


class InvalidFaculty(AttendanceError):
    status_code = 400
    message = 'Invalid faculty'


class InvalidSection(AttendanceError):
    status_code = 400
    message = 'Invalid section'


class DuplicateUser(AttendanceError):
    status_code = 409
    message = 'User already exists'


class SessionNotFound(AttendanceError):
    status_code = 404
    message = 'Session not found'


class InvalidToken(AttendanceError):
    status_code = 403
    message = 'Invalid token'


class SessionExpired(AttendanceError):
    status_code = 403
    message = 'Session expired'


class StudentNotFound(AttendanceError):
    status_code = 403
    message = 'Student not found'


class DuplicateCheckin(AttendanceError):
    status_code = 409
    message = 'Already checked in'
