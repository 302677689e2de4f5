"""Context engine API client - dashboard reads and tool calls."""

import json
from typing import Any

from context_client.base import ApiError, BaseClient

ENDPOINT = "/context-engine"


class ContextClient(BaseClient):
    """Client for the context engine HTTP surface."""

    async def query_context(self, table: str, key: str) -> Any:
        """GET action=query - one entry or None."""
        resp = await self._request("GET", ENDPOINT, params={"action": "query", "table": table, "key": key})
        return resp["data"]

    async def query_all(self, table: str) -> list:
        """GET action=query_all - every entry of a table."""
        resp = await self._request("GET", ENDPOINT, params={"action": "query_all", "table": table})
        return resp["data"]

    async def table_schema(self, table: str) -> dict | None:
        """GET action=schema."""
        resp = await self._request("GET", ENDPOINT, params={"action": "schema", "table": table})
        return resp["data"]

    async def tables_info(self) -> list[dict]:
        """GET action=info."""
        resp = await self._request("GET", ENDPOINT, params={"action": "info"})
        return resp["data"]

    async def health(self) -> dict:
        """GET /health."""
        return await self._request("GET", "/health")

    async def list_tools(self) -> list[dict]:
        """POST tools/list."""
        resp = await self._request("POST", ENDPOINT, json={"method": "tools/list"})
        return resp["tools"]

    async def call_tool(self, name: str, arguments: dict | None = None) -> Any:
        """POST tools/call - decoded tool result; tool errors raise ApiError."""
        resp = await self._request(
            "POST",
            ENDPOINT,
            json={"method": "tools/call", "params": {"name": name, "arguments": arguments or {}}},
        )
        text = resp["content"][0]["text"]
        if resp.get("isError"):
            raise ApiError(400, text)
        return json.loads(text)
