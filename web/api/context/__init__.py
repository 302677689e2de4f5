"""Context engine API."""

from web.api.context.views import (
    get_health,
    get_table_schema,
    get_tables_info,
    query_all_context,
    query_context,
)

__all__ = [
    "query_context",
    "query_all_context",
    "get_table_schema",
    "get_tables_info",
    "get_health",
]
