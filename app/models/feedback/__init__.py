"""Feedback domain models - teams, customers, feedback."""

from app.models.feedback.customer import CUSTOMER_DDL
from app.models.feedback.feedback import FEEDBACK_DDL, FEEDBACK_INDEXES
from app.models.feedback.team import TEAM_DDL

__all__ = [
    "TEAM_DDL",
    "CUSTOMER_DDL",
    "FEEDBACK_DDL",
    "FEEDBACK_INDEXES",
]
