# qr_attendance/services/report_service.py
"""Read-only attendance projections and CSV export."""
import io
from typing import Dict, List, Optional

import pandas as pd

from qr_attendance import db
from qr_attendance.models import AttendanceRecord, CheckinSession, Section, User
from qr_attendance.utils.helpers import ms_to_iso, now_ms

CSV_COLUMNS = [
    'attendance_id', 'session_id', 'section_id', 'student_id',
    'status', 'checkin_time', 'method'
]


class ReportService:
    """Service for attendance listings and exports."""

    def __init__(self, session):
        self.session = session

    def list_sessions(self, now: Optional[int] = None) -> List[Dict]:
        """All sessions with their section code and title, newest first."""
        now = now_ms() if now is None else now
        rows = self.session.execute(
            db.select(CheckinSession, Section.code, Section.title)
            .outerjoin(Section, Section.id == CheckinSession.section_id)
            .order_by(CheckinSession.start_at.desc())
        ).all()

        sessions = []
        for checkin_session, code, title in rows:
            data = checkin_session.to_dict()
            data['code'] = code
            data['title'] = title
            data['state'] = checkin_session.state(now).value
            sessions.append(data)
        return sessions

    def list_attendance(self, session_id: Optional[str] = None) -> List[Dict]:
        """Attendance records with the student's name, latest check-in first."""
        query = (
            db.select(AttendanceRecord, User.name)
            .outerjoin(User, User.id == AttendanceRecord.student_id)
            .order_by(AttendanceRecord.checkin_time.desc())
        )
        if session_id:
            query = query.filter(AttendanceRecord.session_id == session_id)

        records = []
        for record, student_name in self.session.execute(query).all():
            data = record.to_dict()
            data['student_name'] = student_name
            records.append(data)
        return records

    def export_csv(self, section_id: Optional[str] = None) -> Optional[str]:
        """
        Build the attendance CSV, optionally for one section.
        Returns None when no session matches.
        """
        session_query = db.select(CheckinSession.id)
        if section_id:
            session_query = session_query.filter(CheckinSession.section_id == section_id)
        session_ids = self.session.execute(session_query).scalars().all()
        if not session_ids:
            return None

        rows = self.session.execute(
            db.select(AttendanceRecord, CheckinSession.section_id)
            .outerjoin(CheckinSession, CheckinSession.id == AttendanceRecord.session_id)
            .filter(AttendanceRecord.session_id.in_(session_ids))
        ).all()

        data = [
            {
                'attendance_id': record.id,
                'session_id': record.session_id,
                'section_id': record_section_id,
                'student_id': record.student_id,
                'status': record.status,
                'checkin_time': ms_to_iso(record.checkin_time),
                'method': record.method
            }
            for record, record_section_id in rows
        ]

        buffer = io.StringIO()
        pd.DataFrame(data, columns=CSV_COLUMNS).to_csv(buffer, index=False)
        return buffer.getvalue()
