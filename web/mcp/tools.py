"""Tool-call protocol adapter - exposes the context engine as named tools.

Results and errors both travel in the same envelope:
`{"content": [{"type": "text", "text": <json>}]}`, with `"isError": true`
for unknown tables, unknown tools and invalid arguments.
"""

import json
from collections.abc import Callable
from datetime import datetime
from typing import Any

import pydantic
from loguru import logger

from app.services.context import ContextEngine, TableNotFoundError

from .schemas import NoArgs, QueryAllContextArgs, QueryContextArgs, TableArgs

TOOL_DEFINITIONS = [
    {
        "name": "query_context",
        "description": "Query real-time context data by table and key",
        "inputSchema": {
            "type": "object",
            "properties": {
                "table": {"type": "string", "description": "Context table name"},
                "key": {"type": "string", "description": "Primary key to query"},
            },
            "required": ["table", "key"],
        },
    },
    {
        "name": "query_all_context",
        "description": "Query all records from a context table",
        "inputSchema": {
            "type": "object",
            "properties": {
                "table": {"type": "string", "description": "Context table name"},
                "filter": {"type": "object", "description": "Optional filter criteria (field equality)"},
            },
            "required": ["table"],
        },
    },
    {
        "name": "get_table_schema",
        "description": "Get schema information for a context table",
        "inputSchema": {
            "type": "object",
            "properties": {
                "table": {"type": "string", "description": "Context table name"},
            },
            "required": ["table"],
        },
    },
    {
        "name": "get_tables_info",
        "description": "Get information about all available context tables",
        "inputSchema": {"type": "object", "properties": {}},
    },
]


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def to_json_text(value: Any) -> str:
    return json.dumps(value, indent=2, default=_json_default, ensure_ascii=False)


def _as_json(value: Any) -> Any:
    return json.loads(json.dumps(value, default=_json_default))


def matches(entry: Any, criteria: dict[str, Any]) -> bool:
    """True if `entry` is a dict whose fields equal every criterion.

    Fields are compared in their JSON form, so a timestamp matches the ISO
    string the tools return for it.
    """
    if not isinstance(entry, dict):
        return False
    return all(k in entry and _as_json(entry[k]) == v for k, v in criteria.items())


class ContextTools:
    """Translate tool calls into context engine reads."""

    def __init__(self, engine: ContextEngine):
        self._engine = engine
        self._handlers: dict[str, tuple[type[pydantic.BaseModel], Callable[[Any], Any]]] = {
            "query_context": (QueryContextArgs, self._query_context),
            "query_all_context": (QueryAllContextArgs, self._query_all_context),
            "get_table_schema": (TableArgs, self._get_table_schema),
            "get_tables_info": (NoArgs, self._get_tables_info),
        }

    def list_tools(self) -> list[dict]:
        return TOOL_DEFINITIONS

    def call(self, name: str, arguments: dict[str, Any] | None = None) -> dict:
        """Run a tool and wrap its result (or error) in a content envelope."""
        if name not in self._handlers:
            return self._error(f"Unknown tool: {name}")

        args_model, handler = self._handlers[name]
        try:
            args = args_model.model_validate(arguments or {})
        except pydantic.ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()
            )
            return self._error(f"Invalid arguments for {name}: {problems}")

        try:
            result = handler(args)
        except TableNotFoundError as e:
            return self._error(str(e))

        logger.debug("Tool {} called", name)
        return {"content": [{"type": "text", "text": to_json_text(result)}]}

    def _query_context(self, args: QueryContextArgs) -> Any:
        return self._engine.get(args.table, args.key)

    def _query_all_context(self, args: QueryAllContextArgs) -> list[Any]:
        if not args.filter:
            return self._engine.scan(args.table)
        criteria = args.filter
        return self._engine.scan(args.table, lambda entry: matches(entry, criteria))

    def _get_table_schema(self, args: TableArgs) -> dict | None:
        return self._engine.describe_schema(args.table)

    def _get_tables_info(self, _args: NoArgs) -> list[dict]:
        return [
            {
                "name": t.name,
                "recordCount": t.record_count,
                "lastUpdated": t.last_updated,
                "ttl": t.ttl,
            }
            for t in self._engine.list_tables()
        ]

    @staticmethod
    def _error(message: str) -> dict:
        logger.warning("Tool call failed: {}", message)
        return {"content": [{"type": "text", "text": message}], "isError": True}
