"""Tests for the context API client using a mock transport."""

import asyncio
import json

import httpx
import pytest

from context_client import ApiError, ContextClient

BASE_URL = "http://context.test/api"


def run_with(handler, fn):
    async def scenario():
        async with ContextClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            return await fn(client)

    return asyncio.run(scenario())


class TestReads:
    def test_query_context(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True, "data": {"teamId": "t1"}, "table": "team_stats", "key": "t1"})

        data = run_with(handler, lambda c: c.query_context("team_stats", "t1"))

        assert data == {"teamId": "t1"}
        (request,) = seen
        assert request.url.path == "/api/context-engine"
        assert dict(request.url.params) == {"action": "query", "table": "team_stats", "key": "t1"}

    def test_tables_info(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["action"] == "info"
            return httpx.Response(200, json={"success": True, "data": [{"name": "team_stats", "recordCount": 2}]})

        assert run_with(handler, lambda c: c.tables_info()) == [{"name": "team_stats", "recordCount": 2}]


class TestTools:
    def test_call_tool_decodes_text(self):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            assert body == {"method": "tools/call", "params": {"name": "get_tables_info", "arguments": {}}}
            return httpx.Response(200, json={"content": [{"type": "text", "text": '[{"name": "t"}]'}]})

        assert run_with(handler, lambda c: c.call_tool("get_tables_info")) == [{"name": "t"}]

    def test_tool_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"content": [{"type": "text", "text": "Table nope not found"}], "isError": True},
            )

        with pytest.raises(ApiError, match="Table nope not found"):
            run_with(handler, lambda c: c.call_tool("query_context", {"table": "nope", "key": "k"}))


class TestRetry:
    def test_client_error_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404, json={"success": False, "error": "Table nope not found"})

        with pytest.raises(ApiError) as exc_info:
            run_with(handler, lambda c: c.query_all("nope"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Table nope not found"
        assert len(calls) == 1

    def test_server_error_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(503, text="unavailable")
            return httpx.Response(200, json={"status": "ok", "tables": []})

        assert run_with(handler, lambda c: c.health()) == {"status": "ok", "tables": []}
        assert len(calls) == 2
