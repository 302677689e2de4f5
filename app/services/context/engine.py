"""Real-time context engine - named in-memory tables refreshed from the database.

Each table holds a full key -> entry snapshot produced by its loader. A
refresh replaces the snapshot with a single reference swap, so readers see
either the previous snapshot or the new one. Reads are synchronous and never
wait on a refresh.

Scheduling is fixed-rate: every `refresh_interval` seconds a tick spawns a
refresh task. A table refreshes at most once at a time; a tick that fires
while the previous refresh is still running is skipped.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from loguru import logger

from app.models.common import utcnow
from app.models.context import TABLE_SCHEMAS, RefreshResult, RefreshStatus, TableInfo
from app.services.context.errors import TableAlreadyRegisteredError, TableNotFoundError

Loader = Callable[[], Awaitable[Mapping[str, Any]]]
Predicate = Callable[[Any], bool]


@dataclass
class ContextTable:
    """One named partition of the cache."""

    name: str
    ttl: float
    refresh_interval: float
    loader: Loader
    data: dict[str, Any] = field(default_factory=dict)
    last_updated: datetime | None = None
    refreshing: bool = False
    failure_count: int = 0


class ContextEngine:
    """Registry of context tables and their refresh schedules."""

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._tables: dict[str, ContextTable] = {}
        self._schedules: dict[str, asyncio.Task] = {}
        self._inflight: set[asyncio.Task] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._tables

    @property
    def running(self) -> bool:
        """True while refresh schedules are active."""
        return bool(self._schedules)

    async def register(
        self,
        name: str,
        ttl: float,
        refresh_interval: float,
        loader: Loader,
    ) -> RefreshResult:
        """Create a table, load it once and schedule periodic reloads.

        A failed initial load still registers the table (empty, never
        updated); the schedule keeps retrying.
        """
        if name in self._tables:
            raise TableAlreadyRegisteredError(name)
        if refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive, got {refresh_interval}")

        table = ContextTable(name=name, ttl=ttl, refresh_interval=refresh_interval, loader=loader)
        self._tables[name] = table

        result = await self.refresh_once(name)
        self._schedules[name] = asyncio.create_task(self._run_schedule(table), name=f"context-refresh-{name}")
        logger.info(
            "Registered table {} (ttl={}s, every {}s, {} entries)",
            name,
            ttl,
            refresh_interval,
            result.record_count,
        )
        return result

    async def _run_schedule(self, table: ContextTable) -> None:
        while True:
            await asyncio.sleep(table.refresh_interval)
            if table.refreshing:
                logger.warning("Refresh of table {} still running, skipping tick", table.name)
                continue
            task = asyncio.create_task(self.refresh_once(table.name))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    async def refresh_once(self, name: str) -> RefreshResult:
        """Reload one table now.

        On failure the previous snapshot and timestamp are kept and the
        failure is counted; the error is reported in the result, not raised.
        """
        table = self._get_table(name)
        if table.refreshing:
            return RefreshResult(table=name, status=RefreshStatus.SKIPPED, record_count=len(table.data))

        table.refreshing = True
        try:
            new_data = dict(await table.loader())
        except Exception as e:
            table.failure_count += 1
            logger.error("Failed to refresh table {} (failure #{}): {}", name, table.failure_count, e)
            return RefreshResult(
                table=name,
                status=RefreshStatus.FAILED,
                record_count=len(table.data),
                error=str(e) or e.__class__.__name__,
            )
        finally:
            table.refreshing = False

        table.data = new_data
        table.last_updated = self._clock()
        logger.debug("Refreshed table {} with {} entries", name, len(new_data))
        return RefreshResult(table=name, status=RefreshStatus.OK, record_count=len(new_data))

    def get(self, name: str, key: str) -> Any | None:
        """Entry for `key`, or None."""
        table = self._get_table(name)
        if self.is_stale(name):
            logger.warning("Data in table {} is stale (last updated {})", name, table.last_updated)
        return table.data.get(key)

    def scan(self, name: str, predicate: Predicate | None = None) -> list[Any]:
        """All entries of the current snapshot, optionally filtered."""
        values = list(self._get_table(name).data.values())
        if predicate is None:
            return values
        return [v for v in values if predicate(v)]

    def is_stale(self, name: str) -> bool:
        """True if the table never loaded or its age exceeds its ttl."""
        table = self._get_table(name)
        if table.last_updated is None:
            return True
        return self._clock() - table.last_updated > timedelta(seconds=table.ttl)

    def describe_schema(self, name: str) -> dict | None:
        """Static field description, or None when the table has none."""
        self._get_table(name)
        return TABLE_SCHEMAS.get(name)

    def list_tables(self) -> list[TableInfo]:
        return [
            TableInfo(
                name=t.name,
                record_count=len(t.data),
                last_updated=t.last_updated,
                ttl=t.ttl,
                refresh_interval=t.refresh_interval,
                failure_count=t.failure_count,
            )
            for t in self._tables.values()
        ]

    async def shutdown(self) -> None:
        """Cancel all scheduled refreshes. In-flight refreshes are left to finish."""
        if not self._schedules:
            return
        schedules = list(self._schedules.values())
        self._schedules.clear()
        for task in schedules:
            task.cancel()
        for task in schedules:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        logger.info("Context engine stopped ({} tables)", len(schedules))

    async def drain(self) -> None:
        """Wait for refreshes spawned by ticks that are still running."""
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    def _get_table(self, name: str) -> ContextTable:
        table = self._tables.get(name)
        if table is None:
            raise TableNotFoundError(name)
        return table
