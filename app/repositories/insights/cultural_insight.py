"""Cultural insight repository."""

from datetime import datetime

from app.repositories.base import BaseRepository


class CulturalInsightRepository(BaseRepository):
    """Repository for cultural insights."""

    def recent(self, since: datetime) -> list[dict]:
        """Insights created since `since`, most confident first."""
        return self.fetchdicts(
            """
            SELECT id, team_id, language, region, insight_type, insight,
                   confidence, feedback_count, created_at
            FROM cultural_insight
            WHERE created_at >= ?
            ORDER BY confidence DESC NULLS LAST, created_at DESC
            """,
            [since],
        )
