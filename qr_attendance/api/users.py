# File: qr_attendance/api/users.py
"""Users, sections and faculty management API."""
from flask import Blueprint, request
from qr_attendance import db
from qr_attendance.services.user_service import UserService
from qr_attendance.utils.helpers import success_response
from qr_attendance.utils.validators import Validator

users_bp = Blueprint('users', __name__)


def _service() -> UserService:
    return UserService(db.session)


@users_bp.route('/sections', methods=['GET'])
def get_sections():
    """List all sections."""
    return success_response(data=_service().list_sections())


@users_bp.route('/users', methods=['GET'])
def get_users():
    """List all users."""
    return success_response(data=_service().list_users())


@users_bp.route('/faculty', methods=['GET'])
def get_faculty():
    """List faculty users."""
    return success_response(data=_service().list_faculty())


@users_bp.route('/faculty/add', methods=['POST'])
def add_faculty():
    """Create a faculty user from {id, name}."""
    data = Validator.request_data(request)
    faculty = _service().add_faculty(
        user_id=data.get('id'),
        name=data.get('name')
    )
    return success_response(data=faculty, message='Faculty added', status_code=201)


@users_bp.route('/faculty/delete/<user_id>', methods=['DELETE'])
def delete_faculty(user_id):
    """Delete a faculty user by id."""
    deleted = _service().delete_faculty(user_id)
    return success_response(data={'deleted': deleted}, message='Faculty deleted')
