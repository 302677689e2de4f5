"""Context engine entities - table metadata and refresh outcomes."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity


class RefreshStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class RefreshResult(BaseEntity):
    """Outcome of one refresh attempt of a context table."""

    table: str
    status: RefreshStatus
    record_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is RefreshStatus.OK


@dataclass
class TableInfo(BaseEntity):
    """Snapshot metadata for a registered context table."""

    name: str
    record_count: int
    last_updated: datetime | None
    ttl: float
    refresh_interval: float
    failure_count: int
