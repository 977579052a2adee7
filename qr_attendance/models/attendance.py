"""Attendance record model."""
from qr_attendance import db
from qr_attendance.models.base import BaseModel

STATUS_PRESENT = 'present'
METHOD_QR = 'qr'


class AttendanceRecord(BaseModel):
    """One student's check-in against one session. Immutable once written."""

    __tablename__ = 'attendance'
    __table_args__ = (
        db.UniqueConstraint('session_id', 'student_id', name='uq_attendance_session_student'),
    )

    session_id = db.Column(db.String(64), db.ForeignKey('sessions.id'), nullable=True)
    student_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=True)
    status = db.Column(db.String(20), nullable=True)
    checkin_time = db.Column(db.BigInteger, nullable=True)  # epoch ms
    method = db.Column(db.String(20), nullable=True)

    def __repr__(self):
        return f'<AttendanceRecord {self.student_id}-{self.session_id}>'
