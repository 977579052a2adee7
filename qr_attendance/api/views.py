# File: qr_attendance/api/views.py
"""Static HTML pages."""
import os
from flask import Blueprint, current_app, send_from_directory

views_bp = Blueprint('views', __name__)


def _page(filename: str):
    return send_from_directory(os.path.join(current_app.root_path, 'views'), filename)


@views_bp.route('/')
def index():
    return _page('index.html')


@views_bp.route('/faculty')
def faculty():
    return _page('faculty.html')


@views_bp.route('/faculty_management')
def faculty_management():
    return _page('faculty_management.html')


@views_bp.route('/scan')
def scan():
    """Student check-in form; session and token arrive in the query string."""
    return _page('scan.html')


@views_bp.route('/qr')
def qr():
    return _page('qr.html')


@views_bp.route('/report')
def report():
    return _page('report.html')
