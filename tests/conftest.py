"""Shared test fixtures."""
import pytest
from qr_attendance import create_app, db
from qr_attendance.models import Section, User, UserRole


class FakeClock:
    """Settable epoch-millisecond clock."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def app():
    """Create test app."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def directory(app):
    """stu1 (student), faculty1 (faculty) and section sec101 owned by faculty1."""
    db.session.add_all([
        User(id='faculty1', name='Prof. Alice', role=UserRole.FACULTY),
        User(id='stu1', name='Bob Student', role=UserRole.STUDENT),
        User(id='stu2', name='Cara Student', role=UserRole.STUDENT),
        Section(id='sec101', code='CS101', title='Intro to CS', faculty_id='faculty1'),
        Section(id='sec202', code='CS202', title='Data Structures', faculty_id='faculty1'),
    ])
    db.session.commit()
