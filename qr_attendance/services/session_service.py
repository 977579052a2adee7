# qr_attendance/services/session_service.py
"""Check-in session creation."""
import logging
import uuid
from typing import Callable, Dict, Optional

from qr_attendance.models import CheckinSession, Section, User, UserRole
from qr_attendance.utils.errors import InvalidFaculty, InvalidSection
from qr_attendance.utils.helpers import now_ms
from qr_attendance.utils.validators import Validator

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 30
MAX_DURATION_MINUTES = 24 * 60
MS_PER_MINUTE = 60 * 1000
TOKEN_LENGTH = 8


class SessionManager:
    """Creates time-boxed check-in sessions for a section."""

    def __init__(
        self,
        session,
        clock: Callable[[], int] = now_ms,
        max_duration_minutes: int = MAX_DURATION_MINUTES
    ):
        self.session = session
        self.clock = clock
        self.max_duration_minutes = max_duration_minutes

    @staticmethod
    def generate_token() -> str:
        """Short opaque token: the first group of a uuid4."""
        return uuid.uuid4().hex[:TOKEN_LENGTH]

    def create_session(
        self,
        faculty_id: str,
        section_id: str,
        duration_minutes: Optional[int] = None,
        *,
        base_url: str
    ) -> Dict:
        """
        Open a new check-in session.
        Returns: dict with sessionId, token, startAt, expiresAt and checkinUrl
        """
        duration_minutes = Validator.parse_duration(
            duration_minutes,
            default=DEFAULT_DURATION_MINUTES,
            maximum=self.max_duration_minutes
        )

        faculty = self.session.get(User, faculty_id)
        if faculty is None or faculty.role != UserRole.FACULTY:
            raise InvalidFaculty()

        section = self.session.get(Section, section_id)
        if section is None:
            raise InvalidSection()

        start_at = self.clock()
        checkin_session = CheckinSession(
            id=str(uuid.uuid4()),
            section_id=section.id,
            token=self.generate_token(),
            start_at=start_at,
            expires_at=start_at + duration_minutes * MS_PER_MINUTE
        )
        self.session.add(checkin_session)
        self.session.commit()

        logger.info(
            "Session %s opened for section %s by %s (%d min)",
            checkin_session.id, section.id, faculty.id, duration_minutes
        )

        return {
            'sessionId': checkin_session.id,
            'token': checkin_session.token,
            'startAt': checkin_session.start_at,
            'expiresAt': checkin_session.expires_at,
            'checkinUrl': checkin_session.checkin_url(base_url)
        }

    def get_session(self, session_id: str) -> Optional[CheckinSession]:
        return self.session.get(CheckinSession, session_id)
