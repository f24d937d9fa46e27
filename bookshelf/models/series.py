"""
Series model
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any

from .timestamps import format_timestamp, utcnow


@dataclass
class Series:
    """Series model"""
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    def __repr__(self):
        return f"Series(id={self.id}, name='{self.name}')"


SERIES_WRITABLE_FIELDS = ("name", "description")
