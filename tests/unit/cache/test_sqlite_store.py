# tests/unit/cache/test_sqlite_store.py — v1
"""Tests for cache/sqlite_store.py — SQLite result store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from aidetector.cache.models import PREVIEW_CHARS, AnalysisRecord
from aidetector.cache.sqlite_store import SqliteResultStore
from aidetector.core.errors import StoreError
from aidetector.core.models import Platform

_T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _record(fingerprint: str, minutes: int = 0, **overrides) -> AnalysisRecord:
    fields = dict(
        fingerprint=fingerprint,
        platform=Platform.TWITTER,
        final_score=5,
        confidence=0.6,
        label="mixed",
        llm_score=6,
        heuristic_score=4,
        signals=["low_sentence_variance", "short_text_low_confidence"],
        created_at=_T0 + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    return AnalysisRecord(**fields)


class TestInsertAndFind:
    @pytest.mark.asyncio
    async def test_round_trip(self, memory_store):
        record = _record("a" * 64, author="alice", post_id="123")
        assert await memory_store.insert(record, "some text") is True

        found = await memory_store.find_by_fingerprint("a" * 64)
        assert found == record

    @pytest.mark.asyncio
    async def test_missing(self, memory_store):
        assert await memory_store.find_by_fingerprint("0" * 64) is None

    @pytest.mark.asyncio
    async def test_heuristics_only_record(self, memory_store):
        await memory_store.insert(_record("b" * 64, llm_score=None), "x")
        found = await memory_store.find_by_fingerprint("b" * 64)
        assert found.llm_score is None

    @pytest.mark.asyncio
    async def test_first_writer_wins(self, memory_store):
        first = _record("c" * 64, final_score=8, label="ai")
        second = _record("c" * 64, final_score=2, label="human")

        assert await memory_store.insert(first, "text") is True
        assert await memory_store.insert(second, "text") is False

        found = await memory_store.find_by_fingerprint("c" * 64)
        assert found.id == first.id
        assert found.final_score == 8


class TestListRecent:
    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, memory_store):
        for i in range(5):
            await memory_store.insert(_record(f"{i}" * 64, minutes=i), f"post {i}")

        items, total = await memory_store.list_recent(2)
        assert total == 5
        assert [item.content_preview for item in items] == ["post 4", "post 3"]

    @pytest.mark.asyncio
    async def test_offset(self, memory_store):
        for i in range(5):
            await memory_store.insert(_record(f"{i}" * 64, minutes=i), f"post {i}")

        items, total = await memory_store.list_recent(2, offset=4)
        assert total == 5
        assert [item.content_preview for item in items] == ["post 0"]

    @pytest.mark.asyncio
    async def test_author_filter(self, memory_store):
        await memory_store.insert(_record("1" * 64, 0, author="alice"), "a1")
        await memory_store.insert(_record("2" * 64, 1, author="bob"), "b1")
        await memory_store.insert(_record("3" * 64, 2, author="alice"), "a2")

        items, total = await memory_store.list_recent(10, author="alice")
        assert total == 2
        assert [item.content_preview for item in items] == ["a2", "a1"]

    @pytest.mark.asyncio
    async def test_preview_truncated(self, memory_store):
        text = "x" * (PREVIEW_CHARS + 50)
        await memory_store.insert(_record("d" * 64), text)
        items, _ = await memory_store.list_recent(1)
        assert items[0].content_preview == "x" * PREVIEW_CHARS

    @pytest.mark.asyncio
    async def test_empty(self, memory_store):
        assert await memory_store.list_recent(20) == ([], 0)


class TestFileBacked:
    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "data.db"
        store = SqliteResultStore(path)
        await store.insert(_record("e" * 64), "text")
        store.close()

        reopened = SqliteResultStore(path)
        try:
            assert (await reopened.find_by_fingerprint("e" * 64)) is not None
        finally:
            reopened.close()


class TestErrors:
    @pytest.mark.asyncio
    async def test_corrupt_row_raises_store_error(self, memory_store):
        await memory_store.insert(_record("f" * 64), "text")
        memory_store._conn.execute("UPDATE analyses SET score = 42")
        with pytest.raises(StoreError, match="Corrupt"):
            await memory_store.find_by_fingerprint("f" * 64)

    @pytest.mark.asyncio
    async def test_closed_connection_raises_store_error(self):
        store = SqliteResultStore(":memory:")
        store.close()
        with pytest.raises(StoreError):
            await store.find_by_fingerprint("0" * 64)

    def test_unopenable_path(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(StoreError):
            SqliteResultStore(blocker / "data.db")
