"""Context engine models - table metadata and static schemas."""

from app.models.context.entities import RefreshResult, RefreshStatus, TableInfo
from app.models.context.schemas import TABLE_SCHEMAS

__all__ = [
    "RefreshResult",
    "RefreshStatus",
    "TableInfo",
    "TABLE_SCHEMAS",
]
