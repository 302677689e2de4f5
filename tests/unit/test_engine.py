"""Tests for the context engine registry."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from app.models.context import RefreshStatus
from app.services.context import ContextEngine, TableAlreadyRegisteredError, TableNotFoundError


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def static_loader(data: dict):
    async def load():
        return dict(data)

    return load


def scripted_loader(*results):
    """Loader returning (or raising) the given results in order, repeating the last."""
    calls = []

    async def load():
        item = results[min(len(calls), len(results) - 1)]
        calls.append(item)
        if isinstance(item, Exception):
            raise item
        return dict(item)

    load.calls = calls
    return load


TEAM_STATS = {"team-1": {"totalFeedback": 10, "averageRating": 4.2}}


class TestRegister:
    def test_team_stats_scenario(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("team_stats", ttl=600, refresh_interval=60, loader=static_loader(TEAM_STATS))
            try:
                assert engine.get("team_stats", "team-1") == {"totalFeedback": 10, "averageRating": 4.2}
                assert engine.get("team_stats", "team-2") is None
                info = {t.name: t for t in engine.list_tables()}
                assert info["team_stats"].record_count == 1
            finally:
                await engine.shutdown()

        asyncio.run(scenario())

    def test_returns_initial_result(self):
        async def scenario():
            engine = ContextEngine()
            result = await engine.register("t", 60, 60, static_loader({"a": 1, "b": 2}))
            await engine.shutdown()
            return result

        result = asyncio.run(scenario())
        assert result.ok
        assert result.record_count == 2

    def test_duplicate_name_rejected(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("t", 60, 60, static_loader({"a": 1}))
            try:
                with pytest.raises(TableAlreadyRegisteredError):
                    await engine.register("t", 60, 60, static_loader({"b": 2}))
                assert engine.get("t", "a") == 1
            finally:
                await engine.shutdown()

        asyncio.run(scenario())

    def test_invalid_interval(self):
        async def scenario():
            engine = ContextEngine()
            with pytest.raises(ValueError):
                await engine.register("t", 60, 0, static_loader({}))
            assert "t" not in engine

        asyncio.run(scenario())

    def test_failed_initial_load_registers_empty_table(self):
        async def scenario():
            engine = ContextEngine()
            result = await engine.register("t", 60, 60, scripted_loader(RuntimeError("db down")))
            try:
                assert result.status is RefreshStatus.FAILED
                assert result.error == "db down"
                assert engine.scan("t") == []
                (info,) = engine.list_tables()
                assert info.last_updated is None
                assert info.failure_count == 1
                assert engine.is_stale("t")
            finally:
                await engine.shutdown()

        asyncio.run(scenario())


class TestReads:
    def test_unknown_table(self):
        engine = ContextEngine()
        with pytest.raises(TableNotFoundError):
            engine.get("missing", "k")
        with pytest.raises(TableNotFoundError):
            engine.scan("missing")
        with pytest.raises(TableNotFoundError):
            engine.describe_schema("missing")

    def test_scan_matches_get(self):
        data = {"a": {"v": 1}, "b": {"v": 2}, "c": {"v": 3}}

        async def scenario():
            engine = ContextEngine()
            await engine.register("t", 60, 60, static_loader(data))
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        scanned = engine.scan("t")
        assert sorted(scanned, key=lambda v: v["v"]) == [engine.get("t", k) for k in sorted(data)]

    def test_scan_with_predicate(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("t", 60, 60, static_loader({"a": 1, "b": 2, "c": 3}))
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        assert sorted(engine.scan("t", lambda v: v > 1)) == [2, 3]

    def test_empty_table_scan(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("anomaly_alerts", 120, 15, static_loader({}))
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        assert engine.scan("anomaly_alerts") == []

    def test_stale_read_logs_warning(self):
        clock = FakeClock()
        messages = []
        sink = logger.add(messages.append, level="WARNING", format="{message}")

        async def scenario():
            engine = ContextEngine(clock=clock)
            await engine.register("t", ttl=60, refresh_interval=3600, loader=static_loader({"a": 1}))
            await engine.shutdown()
            return engine

        try:
            engine = asyncio.run(scenario())
            assert engine.get("t", "a") == 1
            assert not messages

            clock.advance(61)
            assert engine.get("t", "a") == 1
            assert any("stale" in m for m in messages)
        finally:
            logger.remove(sink)

    def test_describe_schema(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("team_stats", 60, 60, static_loader({}))
            await engine.register("custom", 60, 60, static_loader({}))
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        schema = engine.describe_schema("team_stats")
        assert schema["primaryKey"] == "teamId"
        assert schema["fields"]["averageRating"] == "number"
        assert engine.describe_schema("custom") is None


class TestRefresh:
    def test_failure_keeps_snapshot(self):
        clock = FakeClock()

        async def scenario():
            engine = ContextEngine(clock=clock)
            loader = scripted_loader({"a": 1}, RuntimeError("timeout"))
            await engine.register("t", 60, 3600, loader)
            first = engine.list_tables()[0].last_updated

            clock.advance(30)
            result = await engine.refresh_once("t")
            await engine.shutdown()
            return engine, first, result

        engine, first, result = asyncio.run(scenario())
        assert result.status is RefreshStatus.FAILED
        assert result.record_count == 1
        assert engine.get("t", "a") == 1
        info = engine.list_tables()[0]
        assert info.last_updated == first
        assert info.failure_count == 1

    def test_identical_reload_only_advances_timestamp(self):
        clock = FakeClock()

        async def scenario():
            engine = ContextEngine(clock=clock)
            await engine.register("t", 60, 3600, static_loader({"a": 1, "b": 2}))
            clock.advance(5)
            await engine.refresh_once("t")
            before = engine.list_tables()[0]
            clock.advance(5)
            await engine.refresh_once("t")
            after = engine.list_tables()[0]
            await engine.shutdown()
            return before, after

        before, after = asyncio.run(scenario())
        assert before.record_count == after.record_count == 2
        assert after.last_updated > before.last_updated

    def test_replaces_whole_snapshot(self):
        async def scenario():
            engine = ContextEngine()
            await engine.register("t", 60, 3600, scripted_loader({"a": 1, "b": 2}, {"c": 3}))
            await engine.refresh_once("t")
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        assert engine.get("t", "a") is None
        assert engine.get("t", "c") == 3

    def test_overlapping_refresh_is_skipped(self):
        async def scenario():
            release = asyncio.Event()
            calls = 0

            async def slow_loader():
                nonlocal calls
                calls += 1
                if calls > 1:
                    await release.wait()
                return {"n": calls}

            engine = ContextEngine()
            await engine.register("t", 60, 3600, slow_loader)

            running = asyncio.create_task(engine.refresh_once("t"))
            await asyncio.sleep(0)
            skipped = await engine.refresh_once("t")
            during = engine.get("t", "n")
            release.set()
            finished = await running
            await engine.shutdown()
            return engine, skipped, finished, calls, during

        engine, skipped, finished, calls, during = asyncio.run(scenario())
        assert during == 1
        assert skipped.status is RefreshStatus.SKIPPED
        assert finished.ok
        assert calls == 2
        assert engine.get("t", "n") == 2

    def test_unknown_table(self):
        with pytest.raises(TableNotFoundError):
            asyncio.run(ContextEngine().refresh_once("missing"))


class TestSchedule:
    def test_periodic_refresh_picks_up_new_data(self):
        async def scenario():
            counter = 0

            async def loader():
                nonlocal counter
                counter += 1
                return {"count": counter}

            engine = ContextEngine()
            await engine.register("t", 60, 0.01, loader)
            await asyncio.sleep(0.1)
            await engine.shutdown()
            return engine

        engine = asyncio.run(scenario())
        assert engine.get("t", "count") > 1

    def test_cultural_insights_failure_scenario(self):
        first_data = {"team-1_ja_communication_style": {"insight": "indirect"}}

        async def scenario():
            engine = ContextEngine()
            loader = scripted_loader(first_data, RuntimeError("query failed"))
            await engine.register("cultural_insights", 900, 0.01, loader)
            first = engine.list_tables()[0].last_updated

            await asyncio.sleep(0.1)
            await engine.shutdown()
            return engine, first, loader

        engine, first, loader = asyncio.run(scenario())
        assert len(loader.calls) > 1
        assert engine.get("cultural_insights", "team-1_ja_communication_style") == {"insight": "indirect"}
        info = engine.list_tables()[0]
        assert info.last_updated == first
        assert info.failure_count >= 1

    def test_shutdown_stops_refreshes(self):
        async def scenario():
            loader = scripted_loader({"a": 1})
            engine = ContextEngine()
            await engine.register("t", 60, 0.01, loader)
            await asyncio.sleep(0.05)
            await engine.shutdown()
            await engine.shutdown()
            calls = len(loader.calls)
            await asyncio.sleep(0.05)
            return engine, calls, len(loader.calls)

        engine, before, after = asyncio.run(scenario())
        assert before == after
        assert engine.get("t", "a") == 1

    def test_shutdown_lets_running_refresh_finish(self):
        async def scenario():
            started = asyncio.Event()
            release = asyncio.Event()
            calls = 0

            async def loader():
                nonlocal calls
                calls += 1
                if calls > 1:
                    started.set()
                    await release.wait()
                return {"n": calls}

            engine = ContextEngine()
            await engine.register("t", 60, 0.01, loader)
            await started.wait()
            await engine.shutdown()
            during = engine.get("t", "n")
            release.set()
            await engine.drain()
            return engine, calls, during

        engine, calls, during = asyncio.run(scenario())
        assert during == 1
        assert calls == 2
        assert engine.get("t", "n") == 2
        assert not engine.running
