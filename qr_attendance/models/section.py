"""Course section model."""
from qr_attendance import db
from qr_attendance.models.base import BaseModel


class Section(BaseModel):
    """A course section owned by one faculty user."""

    __tablename__ = 'sections'

    code = db.Column(db.String(50), nullable=True)
    title = db.Column(db.String(255), nullable=True)
    faculty_id = db.Column(db.String(64), db.ForeignKey('users.id'), nullable=True)

    # Relationships
    sessions = db.relationship('CheckinSession', backref='section', lazy='dynamic')

    def __repr__(self):
        return f'<Section {self.code}>'
