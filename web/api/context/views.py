"""Context engine API views - thin layer over the engine."""

from app.services.context import ContextEngine, TableNotFoundError
from web.api.errors import NotFoundError, require

from .schemas import (
    HealthResponse,
    QueryAllResponse,
    QueryResponse,
    SchemaResponse,
    TableHealth,
    TableInfoItem,
    TableSchema,
    TablesInfoResponse,
)


def query_context(engine: ContextEngine, table: str | None, key: str | None) -> QueryResponse:
    """Get one entry by table and key."""
    table = require(table, "Table and key required for query")
    key = require(key, "Table and key required for query")
    try:
        data = engine.get(table, key)
    except TableNotFoundError as e:
        raise NotFoundError(str(e)) from e

    return QueryResponse(data=data, table=table, key=key)


def query_all_context(engine: ContextEngine, table: str | None) -> QueryAllResponse:
    """Get all entries of a table."""
    table = require(table, "Table required for query_all")
    try:
        data = engine.scan(table)
    except TableNotFoundError as e:
        raise NotFoundError(str(e)) from e

    return QueryAllResponse(data=data, table=table, count=len(data))


def get_table_schema(engine: ContextEngine, table: str | None) -> SchemaResponse:
    """Get the static schema of a table."""
    table = require(table, "Table required for schema")
    try:
        schema = engine.describe_schema(table)
    except TableNotFoundError as e:
        raise NotFoundError(str(e)) from e

    return SchemaResponse(
        data=TableSchema.model_validate(schema) if schema else None,
        table=table,
    )


def get_tables_info(engine: ContextEngine) -> TablesInfoResponse:
    """Get metadata for all registered tables."""
    items = [
        TableInfoItem(
            name=t.name,
            record_count=t.record_count,
            last_updated=t.last_updated,
            ttl=t.ttl,
            refresh_interval=t.refresh_interval,
            failure_count=t.failure_count,
        )
        for t in engine.list_tables()
    ]

    return TablesInfoResponse(data=items)


def get_health(engine: ContextEngine) -> HealthResponse:
    """Per-table freshness; degraded when any table is stale."""
    tables = [
        TableHealth(name=t.name, record_count=t.record_count, stale=engine.is_stale(t.name))
        for t in engine.list_tables()
    ]

    return HealthResponse(
        status="degraded" if any(t.stale for t in tables) else "ok",
        tables=tables,
    )
