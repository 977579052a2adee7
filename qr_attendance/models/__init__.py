"""Models package with all models."""
from .base import BaseModel
from .user import User, UserRole
from .section import Section
from .checkin_session import CheckinSession, SessionState
from .attendance import AttendanceRecord, STATUS_PRESENT, METHOD_QR

__all__ = [
    'BaseModel', 'User', 'UserRole', 'Section',
    'CheckinSession', 'SessionState',
    'AttendanceRecord', 'STATUS_PRESENT', 'METHOD_QR'
]
