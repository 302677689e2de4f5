"""Feedback repository - recent feedback with customers."""

from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class FeedbackRepository(BaseRepository):
    """Repository for feedback data access."""

    def recent(self, since: datetime, limit: int) -> list[dict]:
        """Feedback created since `since`, newest first, with customer columns."""
        rows = self.fetchdicts(
            """
            SELECT f.id, f.team_id, f.original_text, f.translated_text,
                   f.detected_language, f.sentiment, f.cultural_notes, f.summary,
                   f.rate, f.is_resolved, f.stream_source, f.created_at,
                   c.id AS customer_id, c.name AS customer_name, c.email AS customer_email
            FROM feedback f
            LEFT JOIN customer c ON c.id = f.customer_id
            WHERE f.created_at >= ?
            ORDER BY f.created_at DESC
            LIMIT ?
            """,
            [since, limit],
        )
        logger.debug("recent(since={}): {} rows", since, len(rows))
        return rows

    def for_teams(self, since: datetime) -> list[dict]:
        """Feedback columns needed for per-team aggregates."""
        return self.fetchdicts(
            """
            SELECT team_id, sentiment, detected_language, rate, is_resolved, stream_source
            FROM feedback
            WHERE created_at >= ?
            """,
            [since],
        )
