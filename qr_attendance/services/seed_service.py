# qr_attendance/services/seed_service.py
"""Schema bootstrap and demo data."""
import logging

from qr_attendance import db
from qr_attendance.models import Section, User, UserRole

logger = logging.getLogger(__name__)

DEMO_USERS = [
    ('faculty1', 'Prof. Alice', UserRole.FACULTY),
    ('stu1', 'Bob Student', UserRole.STUDENT),
    ('stu2', 'Cara Student', UserRole.STUDENT),
]

DEMO_SECTIONS = [
    ('sec101', 'CS101', 'Intro to CS', 'faculty1'),
]


class SeedService:
    """Creates the schema and seeds demo rows into an empty database."""

    def __init__(self, session):
        self.session = session

    def init_database(self, seed: bool = True) -> bool:
        """Create missing tables; seed when asked. Returns True if rows were seeded."""
        db.metadata.create_all(bind=self.session.get_bind())
        if seed:
            return self.seed_demo_data()
        return False

    def seed_demo_data(self) -> bool:
        """Insert demo users and sections only if the users table is empty."""
        if self.session.execute(db.select(User.id).limit(1)).first() is not None:
            return False

        for user_id, name, role in DEMO_USERS:
            self.session.add(User(id=user_id, name=name, role=role))
        for section_id, code, title, faculty_id in DEMO_SECTIONS:
            self.session.add(Section(id=section_id, code=code, title=title, faculty_id=faculty_id))
        self.session.commit()

        logger.info("DB seeded with demo data.")
        return True
