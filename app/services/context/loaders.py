"""Context table loaders - map database rows to context entries."""

import asyncio
from collections import Counter
from datetime import timedelta

from loguru import logger

from app.models.common import db_utcnow
from app.models.insights import ANOMALY_EVENT
from app.repositories.feedback import FeedbackRepository, TeamRepository
from app.repositories.insights import CulturalInsightRepository, StreamEventRepository
from settings import (
    ANOMALY_LIMIT,
    ANOMALY_WINDOW_HOURS,
    FEEDBACK_LIMIT,
    FEEDBACK_WINDOW_HOURS,
    INSIGHTS_WINDOW_DAYS,
)

STREAMING_SOURCE = "kafka"


class ContextLoaders:
    """Full-reload loaders, one per built-in context table.

    Queries run in a worker thread so the event loop keeps serving reads.
    """

    def __init__(
        self,
        feedback_repo: FeedbackRepository,
        team_repo: TeamRepository,
        insight_repo: CulturalInsightRepository,
        event_repo: StreamEventRepository,
    ):
        self._feedback = feedback_repo
        self._teams = team_repo
        self._insights = insight_repo
        self._events = event_repo

    def for_table(self, name: str):
        """Loader coroutine function for a built-in table name."""
        loaders = {
            "feedback_context": self.feedback_context,
            "cultural_insights": self.cultural_insights,
            "team_stats": self.team_stats,
            "anomaly_alerts": self.anomaly_alerts,
        }
        if name not in loaders:
            raise KeyError(f"No loader for table {name}")
        return loaders[name]

    async def feedback_context(self) -> dict[str, dict]:
        since = db_utcnow() - timedelta(hours=FEEDBACK_WINDOW_HOURS)
        rows = await asyncio.to_thread(self._feedback.recent, since, FEEDBACK_LIMIT)

        return {
            r["id"]: {
                "id": r["id"],
                "teamId": r["team_id"],
                "text": r["translated_text"] or r["original_text"],
                "originalText": r["original_text"],
                "language": r["detected_language"],
                "sentiment": r["sentiment"],
                "culturalNotes": r["cultural_notes"],
                "summary": r["summary"],
                "rating": r["rate"],
                "isResolved": bool(r["is_resolved"]),
                "streamSource": r["stream_source"],
                "customer": _customer(r),
                "createdAt": r["created_at"],
            }
            for r in rows
        }

    async def cultural_insights(self) -> dict[str, dict]:
        since = db_utcnow() - timedelta(days=INSIGHTS_WINDOW_DAYS)
        rows = await asyncio.to_thread(self._insights.recent, since)

        result: dict[str, dict] = {}
        for r in rows:
            key = f"{r['team_id']}_{r['language']}_{r['insight_type']}"
            # Rows arrive most confident first
            if key in result:
                continue
            result[key] = {
                "id": r["id"],
                "teamId": r["team_id"],
                "language": r["language"],
                "region": r["region"],
                "insightType": r["insight_type"],
                "insight": r["insight"],
                "confidence": r["confidence"],
                "feedbackCount": r["feedback_count"],
                "createdAt": r["created_at"],
            }
        return result

    async def team_stats(self) -> dict[str, dict]:
        since = db_utcnow() - timedelta(hours=FEEDBACK_WINDOW_HOURS)
        teams = await asyncio.to_thread(self._teams.all)
        rows = await asyncio.to_thread(self._feedback.for_teams, since)

        by_team: dict[str, list[dict]] = {t["id"]: [] for t in teams}
        for r in rows:
            if r["team_id"] in by_team:
                by_team[r["team_id"]].append(r)

        now = db_utcnow()
        result = {}
        for team in teams:
            feedbacks = by_team[team["id"]]
            total = len(feedbacks)
            avg_rating = sum(f["rate"] or 0 for f in feedbacks) / total if total else 0

            result[team["id"]] = {
                "teamId": team["id"],
                "teamName": team["name"],
                "totalFeedback": total,
                "sentimentBreakdown": dict(Counter(f["sentiment"] or "neutral" for f in feedbacks)),
                "languageBreakdown": dict(Counter(f["detected_language"] or "en" for f in feedbacks)),
                "averageRating": round(avg_rating, 1),
                "resolvedCount": sum(1 for f in feedbacks if f["is_resolved"]),
                "streamingCount": sum(1 for f in feedbacks if f["stream_source"] == STREAMING_SOURCE),
                "lastUpdated": now,
            }

        logger.debug("team_stats: {} teams, {} feedback rows", len(teams), len(rows))
        return result

    async def anomaly_alerts(self) -> dict[str, dict]:
        since = db_utcnow() - timedelta(hours=ANOMALY_WINDOW_HOURS)
        rows = await asyncio.to_thread(self._events.recent, ANOMALY_EVENT, since, ANOMALY_LIMIT)

        result = {}
        for r in rows:
            payload = r["payload"]
            result[r["id"]] = {
                "id": r["id"],
                "teamId": payload.get("teamId"),
                "anomalyType": payload.get("anomalyType"),
                "severity": payload.get("severity"),
                "reasoning": payload.get("reasoning"),
                "feedbackId": payload.get("feedbackId"),
                "status": r["status"],
                "createdAt": r["created_at"],
            }
        return result


def _customer(row: dict) -> dict | None:
    if row["customer_id"] is None:
        return None
    return {
        "id": row["customer_id"],
        "name": row["customer_name"],
        "email": row["customer_email"],
    }
