"""Test check-in session creation."""
import json
import pytest
from qr_attendance import db
from qr_attendance.models import CheckinSession, SessionState
from qr_attendance.services.session_service import SessionManager
from qr_attendance.utils.errors import InvalidFaculty, InvalidSection, ValidationError

BASE_URL = 'http://localhost'


def test_expiry_is_duration_after_start(app, directory, clock):
    """expires_at = start_at + minutes * 60000."""
    manager = SessionManager(db.session, clock=clock)

    for minutes in (1, 30, 90):
        result = manager.create_session('faculty1', 'sec101', minutes, base_url=BASE_URL)
        assert result['startAt'] == clock.now
        assert result['expiresAt'] == result['startAt'] + minutes * 60000

        stored = db.session.get(CheckinSession, result['sessionId'])
        assert stored.expires_at - stored.start_at == minutes * 60000


def test_default_duration_is_thirty_minutes(app, directory, clock):
    result = SessionManager(db.session, clock=clock).create_session('faculty1', 'sec101', base_url=BASE_URL)
    assert result['expiresAt'] == clock.now + 1800000


def test_session_gets_fresh_id_and_short_token(app, directory, clock):
    manager = SessionManager(db.session, clock=clock)
    first = manager.create_session('faculty1', 'sec101', base_url=BASE_URL)
    second = manager.create_session('faculty1', 'sec101', base_url=BASE_URL)

    assert first['sessionId'] != second['sessionId']
    assert len(first['token']) == 8
    assert first['token'] != second['token']


def test_checkin_url_embeds_session_and_token(app, directory, clock):
    result = SessionManager(db.session, clock=clock).create_session(
        'faculty1', 'sec101', base_url='http://class.example.edu/'
    )
    assert result['checkinUrl'] == (
        f"http://class.example.edu/scan?session={result['sessionId']}&token={result['token']}"
    )


@pytest.mark.parametrize('minutes', [0, -5, 24 * 60 + 1])
def test_service_rejects_out_of_range_duration(app, directory, clock, minutes):
    with pytest.raises(ValidationError):
        SessionManager(db.session, clock=clock).create_session(
            'faculty1', 'sec101', minutes, base_url=BASE_URL
        )

    assert db.session.query(CheckinSession).count() == 0


def test_service_accepts_duration_at_cap(app, directory, clock):
    result = SessionManager(db.session, clock=clock).create_session(
        'faculty1', 'sec101', 24 * 60, base_url=BASE_URL
    )
    assert result['expiresAt'] - result['startAt'] == 24 * 60 * 60000


def test_service_honours_custom_duration_cap(app, directory, clock):
    manager = SessionManager(db.session, clock=clock, max_duration_minutes=60)

    with pytest.raises(ValidationError) as excinfo:
        manager.create_session('faculty1', 'sec101', 61, base_url=BASE_URL)

    assert str(excinfo.value) == 'durationMinutes must be at most 60'


def test_create_session_requires_base_url(app, directory, clock):
    with pytest.raises(TypeError):
        SessionManager(db.session, clock=clock).create_session('faculty1', 'sec101')


def test_student_cannot_open_session(app, directory, clock):
    with pytest.raises(InvalidFaculty):
        SessionManager(db.session, clock=clock).create_session('stu1', 'sec101', base_url=BASE_URL)


def test_unknown_faculty_rejected(app, directory, clock):
    with pytest.raises(InvalidFaculty):
        SessionManager(db.session, clock=clock).create_session('nobody', 'sec101', base_url=BASE_URL)


def test_unknown_section_rejected(app, directory, clock):
    with pytest.raises(InvalidSection):
        SessionManager(db.session, clock=clock).create_session('faculty1', 'sec999', base_url=BASE_URL)


def test_faculty_checked_before_section(app, directory, clock):
    with pytest.raises(InvalidFaculty):
        SessionManager(db.session, clock=clock).create_session('stu1', 'sec999', base_url=BASE_URL)


def test_session_state_transitions_once(app, directory, clock):
    result = SessionManager(db.session, clock=clock).create_session('faculty1', 'sec101', 1, base_url=BASE_URL)
    stored = db.session.get(CheckinSession, result['sessionId'])

    assert stored.state(clock.now) is SessionState.ACTIVE
    assert stored.state(stored.expires_at - 1) is SessionState.ACTIVE
    assert stored.state(stored.expires_at) is SessionState.EXPIRED
    assert stored.state(stored.expires_at + 60000) is SessionState.EXPIRED


def test_create_session_endpoint(client, directory):
    response = client.post('/api/session', json={
        'facultyId': 'faculty1',
        'sectionId': 'sec101',
        'durationMinutes': 30
    })

    assert response.status_code == 200
    data = json.loads(response.data)
    assert data['error'] == False
    session = data['data']
    assert session['expiresAt'] - session['startAt'] == 1800000
    assert session['checkinUrl'].startswith('http://localhost/scan?')
    assert f"session={session['sessionId']}" in session['checkinUrl']
    assert f"token={session['token']}" in session['checkinUrl']


def test_create_session_accepts_string_duration(client, directory):
    response = client.post('/api/session', json={
        'facultyId': 'faculty1', 'sectionId': 'sec101', 'durationMinutes': '5'
    })
    session = json.loads(response.data)['data']
    assert session['expiresAt'] - session['startAt'] == 5 * 60000


def test_create_session_endpoint_honours_public_base_url(app, client, directory):
    app.config['PUBLIC_BASE_URL'] = 'https://attend.example.edu'
    response = client.post('/api/session', json={'facultyId': 'faculty1', 'sectionId': 'sec101'})
    url = json.loads(response.data)['data']['checkinUrl']
    assert url.startswith('https://attend.example.edu/scan?session=')


@pytest.mark.parametrize('payload, message', [
    ({}, 'Missing fields'),
    ({'facultyId': 'faculty1'}, 'Missing fields'),
    ({'facultyId': 'stu1', 'sectionId': 'sec101'}, 'Invalid faculty'),
    ({'facultyId': 'faculty1', 'sectionId': 'nope'}, 'Invalid section'),
    ({'facultyId': 'faculty1', 'sectionId': 'sec101', 'durationMinutes': 0},
     'durationMinutes must be a positive integer'),
    ({'facultyId': 'faculty1', 'sectionId': 'sec101', 'durationMinutes': 'soon'},
     'durationMinutes must be a positive integer'),
    ({'facultyId': 'faculty1', 'sectionId': 'sec101', 'durationMinutes': 24 * 60 + 1},
     'durationMinutes must be at most 1440'),
    ({'facultyId': 'faculty1', 'sectionId': 'sec101', 'durationMinutes': 1e300},
     'durationMinutes must be at most 1440'),
])
def test_create_session_endpoint_rejects_bad_requests(client, directory, payload, message):
    response = client.post('/api/session', json=payload)

    assert response.status_code == 400
    data = json.loads(response.data)
    assert data['error'] == True
    assert data['message'] == message
    assert db.session.query(CheckinSession).count() == 0


def test_create_session_rejects_infinite_duration(client, directory):
    response = client.post(
        '/api/session',
        data='{"facultyId": "faculty1", "sectionId": "sec101", "durationMinutes": Infinity}',
        content_type='application/json'
    )

    assert response.status_code == 400
    assert json.loads(response.data)['message'] == 'durationMinutes must be a positive integer'
    assert db.session.query(CheckinSession).count() == 0


@pytest.mark.parametrize('body', [5, ['faculty1', 'sec101'], 'faculty1'])
def test_create_session_rejects_non_object_body(client, directory, body):
    response = client.post('/api/session', json=body)

    assert response.status_code == 400
    data = json.loads(response.data)
    assert data['error'] == True
    assert data['message'] == 'Request body must be a JSON object'
    assert db.session.query(CheckinSession).count() == 0


def test_list_sessions_newest_first_with_section(client, directory, clock):
    manager = SessionManager(db.session, clock=clock)
    older = manager.create_session('faculty1', 'sec101', base_url=BASE_URL)
    clock.advance(60000)
    newer = manager.create_session('faculty1', 'sec202', base_url=BASE_URL)

    response = client.get('/api/sessions')

    assert response.status_code == 200
    sessions = json.loads(response.data)['data']
    assert [s['id'] for s in sessions] == [newer['sessionId'], older['sessionId']]
    assert sessions[0]['code'] == 'CS202'
    assert sessions[1]['title'] == 'Intro to CS'
    # The fake clock is far in the past relative to real time
    assert sessions[0]['state'] == 'expired'


def test_qr_page_renders_checkin_url(client, directory):
    created = json.loads(client.post('/api/session', json={
        'facultyId': 'faculty1', 'sectionId': 'sec101'
    }).data)['data']

    response = client.get(f"/session/{created['sessionId']}/qr")

    assert response.status_code == 200
    assert response.mimetype == 'text/html'
    page = response.get_data(as_text=True)
    assert 'Scan to check-in' in page
    assert 'data:image/png;base64,' in page
    assert created['sessionId'] in page
    assert created['token'] in page


def test_qr_page_unknown_session(client, directory):
    response = client.get('/session/does-not-exist/qr')

    assert response.status_code == 404
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == 'Session not found'
