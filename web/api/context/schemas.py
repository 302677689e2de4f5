"""Context engine API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys (`by_alias=True`)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TableSchema(CamelModel):
    """Field-name/type description of a context table."""

    primary_key: str
    fields: dict[str, str]


class TableInfoItem(CamelModel):
    """Metadata for one context table."""

    name: str
    record_count: int
    last_updated: datetime | None
    ttl: float
    refresh_interval: float
    failure_count: int


class QueryResponse(CamelModel):
    """Single entry lookup."""

    success: bool = True
    data: Any | None
    table: str
    key: str


class QueryAllResponse(CamelModel):
    """All entries of a table."""

    success: bool = True
    data: list[Any]
    table: str
    count: int


class SchemaResponse(CamelModel):
    """Schema of a table (null when undocumented)."""

    success: bool = True
    data: TableSchema | None
    table: str


class TablesInfoResponse(CamelModel):
    """Metadata for all tables."""

    success: bool = True
    data: list[TableInfoItem]


class TableHealth(CamelModel):
    """Freshness of one table."""

    name: str
    record_count: int
    stale: bool


class HealthResponse(CamelModel):
    """Engine health."""

    status: str
    tables: list[TableHealth]


class ErrorResponse(CamelModel):
    """Failed request."""

    success: bool = False
    error: str
