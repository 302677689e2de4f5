"""Insight domain models - cultural insights and stream events."""

from app.models.insights.cultural_insight import CULTURAL_INSIGHT_DDL
from app.models.insights.stream_event import ANOMALY_EVENT, STREAM_EVENT_DDL, STREAM_EVENT_INDEXES

__all__ = [
    "CULTURAL_INSIGHT_DDL",
    "STREAM_EVENT_DDL",
    "STREAM_EVENT_INDEXES",
    "ANOMALY_EVENT",
]
