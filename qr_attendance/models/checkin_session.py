"""Time-boxed check-in session with a QR token."""
from enum import Enum
from urllib.parse import urlencode
from qr_attendance import db
from qr_attendance.models.base import BaseModel


class SessionState(Enum):
    """A session is ACTIVE until its deadline, then EXPIRED for good."""
    ACTIVE = 'active'
    EXPIRED = 'expired'


class CheckinSession(BaseModel):
    """Attendance-taking window for one section."""

    __tablename__ = 'sessions'

    section_id = db.Column(db.String(64), db.ForeignKey('sections.id'), nullable=True)
    token = db.Column(db.String(64), nullable=True)
    # Epoch milliseconds
    start_at = db.Column(db.BigInteger, nullable=True)
    expires_at = db.Column(db.BigInteger, nullable=True)

    # Relationships
    records = db.relationship('AttendanceRecord', backref='session', lazy='dynamic')

    def state(self, now: int) -> SessionState:
        """State of the session at ``now`` (epoch ms)."""
        if now >= self.expires_at:
            return SessionState.EXPIRED
        return SessionState.ACTIVE

    def is_expired(self, now: int) -> bool:
        return self.state(now) is SessionState.EXPIRED

    def checkin_url(self, base_url: str) -> str:
        """URL of the scan page pre-filled with this session and its token."""
        query = urlencode({'session': self.id, 'token': self.token})
        return f"{base_url.rstrip('/')}/scan?{query}"

    def __repr__(self):
        return f'<CheckinSession {self.id} section={self.section_id}>'
