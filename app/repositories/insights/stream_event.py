"""Stream event repository."""

import json
from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository


class StreamEventRepository(BaseRepository):
    """Repository for streaming-agent events."""

    def recent(self, event_type: str, since: datetime, limit: int) -> list[dict]:
        """Events of one type created since `since`, newest first, payload decoded."""
        rows = self.fetchdicts(
            """
            SELECT id, event_type, payload, status, created_at, processed_at
            FROM stream_event
            WHERE event_type = ? AND created_at >= ?
            ORDER BY created_at DESC
            LIMIT ?
            """,
            [event_type, since, limit],
        )
        for row in rows:
            row["payload"] = self._decode(row["id"], row["payload"])
        return rows

    @staticmethod
    def _decode(event_id: str, payload) -> dict:
        if isinstance(payload, dict):
            return payload
        if not payload:
            return {}
        try:
            value = json.loads(payload)
        except json.JSONDecodeError:
            logger.warning("Invalid payload JSON in stream event {}", event_id)
            return {}
        return value if isinstance(value, dict) else {}
