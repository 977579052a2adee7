"""User model for students and faculty."""
from enum import Enum
from qr_attendance import db
from qr_attendance.models.base import BaseModel


class UserRole(Enum):
    """User roles enumeration."""
    STUDENT = 'student'
    FACULTY = 'faculty'


class User(BaseModel):
    """A student or faculty member, identified by a caller-chosen id."""

    __tablename__ = 'users'

    name = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(
            UserRole,
            name='user_role',
            values_callable=lambda roles: [role.value for role in roles],
            create_constraint=True,
        ),
        nullable=False,
    )

    # Relationships
    sections = db.relationship('Section', backref='faculty', lazy='dynamic')
    attendance_records = db.relationship('AttendanceRecord', backref='student', lazy='dynamic')

    def is_faculty(self) -> bool:
        return self.role == UserRole.FACULTY

    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT

    def __repr__(self) -> str:
        return f'<User {self.id} ({self.role.value if self.role else None})>'
