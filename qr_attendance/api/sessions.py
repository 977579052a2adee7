# File: qr_attendance/api/sessions.py
"""Check-in session API and QR page."""
from flask import Blueprint, Response, current_app, render_template, request
from qr_attendance import db, limiter
from qr_attendance.services.qr_service import QRService
from qr_attendance.services.report_service import ReportService
from qr_attendance.services.session_service import SessionManager
from qr_attendance.utils.helpers import success_response
from qr_attendance.utils.validators import Validator

sessions_bp = Blueprint('sessions', __name__)
session_pages_bp = Blueprint('session_pages', __name__)


def public_base_url() -> str:
    """Base URL embedded in check-in links."""
    return current_app.config.get('PUBLIC_BASE_URL') or request.host_url


@sessions_bp.route('/session', methods=['POST'])
@limiter.limit(lambda: current_app.config['SESSION_CREATE_RATE_LIMIT'])
def create_session():
    """Open a check-in session for {facultyId, sectionId, durationMinutes?}."""
    data = Validator.request_data(request)
    Validator.require_fields(data, ['facultyId', 'sectionId'], message='Missing fields')

    duration = Validator.parse_duration(
        data.get('durationMinutes'),
        default=current_app.config['SESSION_DEFAULT_DURATION_MINUTES'],
        maximum=current_app.config['SESSION_MAX_DURATION_MINUTES']
    )

    manager = SessionManager(
        db.session,
        max_duration_minutes=current_app.config['SESSION_MAX_DURATION_MINUTES']
    )
    result = manager.create_session(
        faculty_id=str(data['facultyId']),
        section_id=str(data['sectionId']),
        duration_minutes=duration,
        base_url=public_base_url()
    )
    return success_response(data=result, message='Session created')


@sessions_bp.route('/sessions', methods=['GET'])
def get_sessions():
    """List sessions with section code/title, newest first."""
    return success_response(data=ReportService(db.session).list_sessions())


@session_pages_bp.route('/<session_id>/qr', methods=['GET'])
def session_qr(session_id):
    """Render a page showing the QR code for a session's check-in URL."""
    checkin_session = SessionManager(db.session).get_session(session_id)
    if checkin_session is None:
        return Response('Session not found', status=404, mimetype='text/plain')

    url = checkin_session.checkin_url(public_base_url())
    qr_image = QRService.render_data_url(
        url,
        box_size=current_app.config['QR_BOX_SIZE'],
        border=current_app.config['QR_BORDER']
    )
    return render_template(
        'session_qr.html',
        checkin_session=checkin_session,
        checkin_url=url,
        qr_image=qr_image
    )
