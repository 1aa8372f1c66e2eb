"""Tests for keyed cancel-and-replace debounce timers."""

import asyncio
import pytest
from unittest.mock import AsyncMock

from common.utils.debounce import Debouncer


class TestDebouncer:

    @pytest.mark.asyncio
    async def test_last_schedule_wins(self):
        debouncer = Debouncer(0.01)
        calls = []

        for value in ("9", "98", "981"):
            debouncer.schedule("zip", lambda v=value: _record(calls, v))
        await debouncer.drain()

        assert calls == ["981"]

    @pytest.mark.asyncio
    async def test_keys_are_independent(self):
        debouncer = Debouncer(0.01)
        calls = []

        debouncer.schedule("a", lambda: _record(calls, "a"))
        debouncer.schedule("b", lambda: _record(calls, "b"))
        await debouncer.drain()

        assert sorted(calls) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_cancel_prevents_action(self):
        debouncer = Debouncer(0.01)
        action = AsyncMock()

        debouncer.schedule("zip", action)
        assert debouncer.is_pending("zip")
        assert debouncer.cancel("zip") is True
        await debouncer.drain()

        action.assert_not_awaited()
        assert debouncer.cancel("zip") is False

    @pytest.mark.asyncio
    async def test_in_flight_action_survives_reschedule(self):
        debouncer = Debouncer(0.01)
        release = asyncio.Event()
        finished = []

        async def _slow():
            await release.wait()
            finished.append("first")

        debouncer.schedule("zip", _slow)
        await asyncio.sleep(0.03)
        assert debouncer.in_flight == 1

        debouncer.schedule("zip", lambda: _record(finished, "second"))
        release.set()
        await debouncer.drain()

        assert sorted(finished) == ["first", "second"]

    @pytest.mark.asyncio
    async def test_failing_action_is_logged_not_raised(self, caplog):
        debouncer = Debouncer(0.01)

        debouncer.schedule("zip", AsyncMock(side_effect=RuntimeError("boom")))
        await debouncer.drain()

        assert "failed" in caplog.text

    @pytest.mark.asyncio
    async def test_per_call_delay_overrides_default(self):
        debouncer = Debouncer(10)
        action = AsyncMock()

        debouncer.schedule("fade", action, delay=0.01)
        await asyncio.wait_for(debouncer.drain(), timeout=1)

        action.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_cancels_waiting_timers(self):
        debouncer = Debouncer(0.05)
        action = AsyncMock()

        debouncer.schedule("zip", action)
        await debouncer.close()
        await asyncio.sleep(0.1)

        action.assert_not_awaited()


async def _record(calls, value):
    calls.append(value)
