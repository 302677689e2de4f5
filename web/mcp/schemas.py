"""Tool-call protocol request and argument schemas."""

from typing import Any

from pydantic import BaseModel, Field


class McpRequest(BaseModel):
    """JSON-RPC style request body: {method, params}."""

    method: str
    params: dict[str, Any] = Field(default_factory=dict)


class ToolCallParams(BaseModel):
    """Params of a `tools/call` request."""

    name: str = Field(min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)


class TableArgs(BaseModel):
    table: str = Field(min_length=1, description="Context table name")


class QueryContextArgs(TableArgs):
    key: str = Field(min_length=1, description="Primary key to query")


class QueryAllContextArgs(TableArgs):
    filter: dict[str, Any] | None = Field(default=None, description="Optional field equality filter")


class NoArgs(BaseModel):
    pass
