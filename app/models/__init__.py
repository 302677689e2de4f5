"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.context import TABLE_SCHEMAS, RefreshResult, RefreshStatus, TableInfo
from app.models.feedback import (
    CUSTOMER_DDL,
    FEEDBACK_DDL,
    FEEDBACK_INDEXES,
    TEAM_DDL,
)
from app.models.insights import (
    ANOMALY_EVENT,
    CULTURAL_INSIGHT_DDL,
    STREAM_EVENT_DDL,
    STREAM_EVENT_INDEXES,
)

ALL_DDL = [
    # Feedback
    TEAM_DDL,
    CUSTOMER_DDL,
    FEEDBACK_DDL,
    *FEEDBACK_INDEXES,
    # Insights
    CULTURAL_INSIGHT_DDL,
    STREAM_EVENT_DDL,
    *STREAM_EVENT_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Feedback
    "TEAM_DDL",
    "CUSTOMER_DDL",
    "FEEDBACK_DDL",
    # Insights
    "CULTURAL_INSIGHT_DDL",
    "STREAM_EVENT_DDL",
    "ANOMALY_EVENT",
    # Context
    "RefreshResult",
    "RefreshStatus",
    "TableInfo",
    "TABLE_SCHEMAS",
    # All DDL
    "ALL_DDL",
]
