"""Base model class with common functionality."""
from enum import Enum
from typing import Dict, Any
from qr_attendance import db


class BaseModel(db.Model):
    """Base model class with text primary keys and dict serialization."""

    __abstract__ = True

    id = db.Column(db.String(64), primary_key=True)

    def to_dict(self, exclude: list = None) -> Dict[str, Any]:
        """Convert instance to dictionary."""
        exclude = exclude or []
        result = {}

        for column in self.__table__.columns:
            key = column.name
            if key not in exclude:
                value = getattr(self, key)
                if isinstance(value, Enum):
                    value = value.value
                result[key] = value

        return result

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.id}>'
