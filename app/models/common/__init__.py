"""Common models - base classes and shared helpers."""

from app.models.common.base import BaseEntity
from app.models.common.clock import db_utcnow, utcnow

__all__ = [
    "BaseEntity",
    "utcnow",
    "db_utcnow",
]
