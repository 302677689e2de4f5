"""Feedback repositories."""

from app.repositories.feedback.feedback import FeedbackRepository
from app.repositories.feedback.team import TeamRepository

__all__ = [
    "FeedbackRepository",
    "TeamRepository",
]
