"""Helper functions for the application."""
import time
from datetime import datetime, timezone
from flask import jsonify
from typing import Any, Optional


def handle_error(error, status_code: int):
    """Handle application errors with consistent format."""
    return jsonify({
        'error': True,
        'message': str(error),
        'status_code': status_code
    }), status_code


def success_response(data: Any = None, message: str = "Success", status_code: int = 200):
    """Return consistent success response."""
    response = {
        'error': False,
        'message': message
    }

    if data is not None:
        response['data'] = data

    return jsonify(response), status_code


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def ms_to_iso(value: Optional[int]) -> Optional[str]:
    """Render epoch milliseconds as an ISO-8601 UTC string, e.g. 2024-05-01T09:30:00.000Z."""
    if value is None:
        return None
    moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
