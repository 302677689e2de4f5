"""Team repository."""

from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository):
    """Repository for team data access."""

    def all(self) -> list[dict]:
        """All teams ordered by name."""
        return self.fetchdicts("SELECT id, name FROM team ORDER BY name")
