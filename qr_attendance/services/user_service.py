# qr_attendance/services/user_service.py
"""Users, sections and faculty management."""
import logging
from typing import Dict, List

from sqlalchemy.exc import IntegrityError

from qr_attendance import db
from qr_attendance.models import Section, User, UserRole
from qr_attendance.utils.errors import DuplicateUser
from qr_attendance.utils.validators import Validator

logger = logging.getLogger(__name__)


class UserService:
    """Service for the user and section directory."""

    def __init__(self, session):
        self.session = session

    def list_users(self) -> List[Dict]:
        users = self.session.execute(db.select(User)).scalars().all()
        return [user.to_dict() for user in users]

    def list_faculty(self) -> List[Dict]:
        users = self.session.execute(
            db.select(User).filter_by(role=UserRole.FACULTY)
        ).scalars().all()
        return [user.to_dict() for user in users]

    def list_sections(self) -> List[Dict]:
        sections = self.session.execute(db.select(Section)).scalars().all()
        return [section.to_dict() for section in sections]

    def add_faculty(self, user_id: str, name: str) -> Dict:
        """Create a faculty user."""
        Validator.require_fields(
            {'id': user_id, 'name': name}, ['id', 'name'], message='id & name required'
        )
        user_id, name = str(user_id).strip(), str(name).strip()

        if self.session.get(User, user_id) is not None:
            raise DuplicateUser(f"User {user_id} already exists")

        user = User(id=user_id, name=name, role=UserRole.FACULTY)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise DuplicateUser(f"User {user_id} already exists")

        logger.info("Faculty %s added", user_id)
        return user.to_dict()

    def delete_faculty(self, user_id: str) -> int:
        """Delete a faculty user; students are never touched. Returns rows removed."""
        deleted = self.session.execute(
            db.delete(User).where(User.id == user_id, User.role == UserRole.FACULTY)
        ).rowcount
        self.session.commit()

        logger.info("Faculty %s delete requested, %d removed", user_id, deleted)
        return deleted
