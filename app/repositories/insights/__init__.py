"""Insight repositories."""

from app.repositories.insights.cultural_insight import CulturalInsightRepository
from app.repositories.insights.stream_event import StreamEventRepository

__all__ = [
    "CulturalInsightRepository",
    "StreamEventRepository",
]
