# File: qr_attendance/api/attendance.py
"""Attendance API endpoints."""
from flask import Blueprint, request
from qr_attendance import db
from qr_attendance.services.checkin_service import CheckinService
from qr_attendance.services.report_service import ReportService
from qr_attendance.utils.helpers import success_response
from qr_attendance.utils.validators import Validator

attendance_bp = Blueprint('attendance', __name__)


@attendance_bp.route('/checkin', methods=['POST'])
def check_in():
    """Check a student in to a session with {sessionId, token, studentId}."""
    data = Validator.request_data(request)
    Validator.require_fields(data, ['sessionId', 'token', 'studentId'], message='Missing params')

    record = CheckinService(db.session).check_in(
        session_id=str(data['sessionId']),
        token=str(data['token']),
        student_id=str(data['studentId'])
    )
    return success_response(data=record, message='Checked in')


@attendance_bp.route('/attendance', methods=['GET'])
def get_attendance():
    """List attendance with student names, latest first. Optional ?session=<id>."""
    records = ReportService(db.session).list_attendance(
        session_id=request.args.get('session')
    )
    return success_response(data=records)
