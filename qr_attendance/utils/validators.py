"""Validation utilities for request payloads."""
from typing import Any, Dict, List, Mapping, Optional

from qr_attendance.utils.errors import ValidationError


class Validator:
    """Validation helper class."""

    @staticmethod
    def request_data(req) -> Mapping:
        """Return the JSON object or form body of a request."""
        data = req.get_json(silent=True)
        if data is None:
            return req.form
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    @staticmethod
    def validate_required_fields(data: Mapping, required_fields: List[str]) -> Dict[str, Any]:
        """Validate required fields in data."""
        errors = []

        for field in required_fields:
            if field not in data or not data[field]:
                errors.append(f"{field} is required")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def require_fields(data: Mapping, required_fields: List[str], message: str = None) -> None:
        """Raise ValidationError when any required field is missing or empty."""
        result = Validator.validate_required_fields(data, required_fields)
        if not result["is_valid"]:
            raise ValidationError(message or ", ".join(result["errors"]))

    @staticmethod
    def parse_duration(value: Any, default: int, maximum: Optional[int] = None) -> int:
        """Parse a session duration in whole minutes; must be positive and at most maximum."""
        if value is None or value == '':
            return default
        if isinstance(value, bool):
            raise ValidationError("durationMinutes must be a positive integer")
        try:
            minutes = int(value)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("durationMinutes must be a positive integer")
        if minutes <= 0:
            raise ValidationError("durationMinutes must be a positive integer")
        if maximum is not None and minutes > maximum:
            raise ValidationError(f"durationMinutes must be at most {maximum}")
        return minutes
