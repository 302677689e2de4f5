"""Dependency Injection container - built and started by the application."""

import duckdb
from loguru import logger

from app.repositories.db import close_db, get_db
from app.repositories.feedback import FeedbackRepository, TeamRepository
from app.repositories.insights import CulturalInsightRepository, StreamEventRepository
from app.services.context import ContextEngine, ContextLoaders
from settings import CONTEXT_TABLES


class Container:
    """Application DI container - owns repositories, loaders and the context engine.

    Explicitly constructed: tests build independent containers over their own
    database connections and tear them down with `shutdown()`.
    """

    def __init__(
        self,
        db: duckdb.DuckDBPyConnection | None = None,
        tables: dict[str, dict] | None = None,
    ):
        self._owns_db = db is None
        self._db = get_db(read_only=True) if db is None else db
        self._tables = CONTEXT_TABLES if tables is None else tables
        self._started = False

        # Repositories
        self._feedback_repo = FeedbackRepository(self._db)
        self._team_repo = TeamRepository(self._db)
        self._insight_repo = CulturalInsightRepository(self._db)
        self._event_repo = StreamEventRepository(self._db)

        # Services (with injected repos)
        self.loaders = ContextLoaders(
            feedback_repo=self._feedback_repo,
            team_repo=self._team_repo,
            insight_repo=self._insight_repo,
            event_repo=self._event_repo,
        )
        self.context_engine = ContextEngine()

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Register and load all configured context tables. Call once at app startup."""
        if self._started:
            return

        try:
            for name, config in self._tables.items():
                result = await self.context_engine.register(
                    name,
                    ttl=config["ttl"],
                    refresh_interval=config["refresh_interval"],
                    loader=self.loaders.for_table(name),
                )
                if not result.ok:
                    logger.warning("Initial load failed, serving empty table: {}", result.to_dict())
        except Exception:
            logger.error("Container start failed, stopping registered tables")
            await self.shutdown()
            raise

        self._started = True
        logger.info("Container started: {} context tables", len(self._tables))

    async def shutdown(self) -> None:
        """Stop scheduled refreshes, let running ones finish, close the connection we opened."""
        await self.context_engine.shutdown()
        await self.context_engine.drain()
        if self._owns_db:
            close_db()
