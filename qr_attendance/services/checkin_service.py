# qr_attendance/services/checkin_service.py
"""Student check-in validation."""
import logging
import uuid
from typing import Callable, Dict

from sqlalchemy.exc import IntegrityError

from qr_attendance import db
from qr_attendance.models import (
    AttendanceRecord, CheckinSession, User, UserRole, METHOD_QR, STATUS_PRESENT
)
from qr_attendance.utils.errors import (
    DuplicateCheckin, InvalidToken, SessionExpired, SessionNotFound, StudentNotFound
)
from qr_attendance.utils.helpers import now_ms

logger = logging.getLogger(__name__)


class CheckinService:
    """Accepts or rejects a student's check-in against a session.

    Checks run in a fixed order and the first failure wins:
    unknown session, wrong token, expired session, unknown student,
    repeated check-in. A wrong token is therefore reported even when
    the session has also expired.
    """

    def __init__(self, session, clock: Callable[[], int] = now_ms):
        self.session = session
        self.clock = clock

    def check_in(self, session_id: str, token: str, student_id: str) -> Dict:
        checkin_session = self.session.get(CheckinSession, session_id)
        if checkin_session is None:
            raise SessionNotFound()

        if checkin_session.token != token:
            raise InvalidToken()

        now = self.clock()
        if checkin_session.is_expired(now):
            raise SessionExpired()

        student = self.session.get(User, student_id)
        if student is None or student.role != UserRole.STUDENT:
            raise StudentNotFound()

        existing = self.session.execute(
            db.select(AttendanceRecord.id).filter_by(
                session_id=checkin_session.id, student_id=student.id
            )
        ).first()
        if existing is not None:
            raise DuplicateCheckin()

        record = AttendanceRecord(
            id=str(uuid.uuid4()),
            session_id=checkin_session.id,
            student_id=student.id,
            status=STATUS_PRESENT,
            checkin_time=now,
            method=METHOD_QR
        )
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError:
            # A concurrent request inserted the same (session, student) pair
            self.session.rollback()
            raise DuplicateCheckin()

        logger.info("Student %s checked in to session %s", student.id, checkin_session.id)
        return record.to_dict()
