# File: qr_attendance/api/reports.py
"""Attendance report downloads."""
from flask import Blueprint, Response, request
from qr_attendance import db
from qr_attendance.services.report_service import ReportService

reports_bp = Blueprint('reports', __name__)


@reports_bp.route('/csv', methods=['GET'])
def export_csv():
    """Download attendance as CSV, optionally for one section (?section=<id>)."""
    content = ReportService(db.session).export_csv(section_id=request.args.get('section'))
    if content is None:
        return Response('No sessions', mimetype='text/plain')

    return Response(
        content,
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename=attendance_report.csv'}
    )
