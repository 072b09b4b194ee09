# tests/unit/logging/test_context.py — v1
"""Tests for logging/context.py — task-local log context."""

from __future__ import annotations

import asyncio
import dataclasses

import pytest

from aidetector.logging.context import (
    LogContext,
    clear_context,
    get_context,
    set_analysis_context,
    set_step,
)


@pytest.fixture(autouse=True)
def _clean():
    clear_context()
    yield
    clear_context()


class TestContext:
    def test_empty_by_default(self):
        assert get_context() == LogContext()
        assert get_context().as_dict() == {}

    def test_set_and_clear(self):
        set_analysis_context("fp", "anthropic")
        set_step("lookup")
        assert get_context().as_dict() == {
            "fingerprint": "fp", "provider": "anthropic", "step": "lookup",
        }
        clear_context()
        assert get_context().as_dict() == {}

    def test_step_reset(self):
        set_step("judge")
        set_step(None)
        assert get_context().step is None

    def test_snapshot_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_context().step = "x"

    @pytest.mark.asyncio
    async def test_task_local(self):
        async def worker(fp: str) -> str | None:
            set_analysis_context(fp, "none")
            await asyncio.sleep(0)
            return get_context().fingerprint

        results = await asyncio.gather(worker("one"), worker("two"))
        assert results == ["one", "two"]
        assert get_context().fingerprint is None
