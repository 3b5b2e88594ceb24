"""Tests for concurrent batch normalization."""

import inspect

import anyio
import pytest

from maybe_chain import SyncOption
from maybe_chain.async_ import gather_outcomes, invoke_all
from maybe_chain.outcome import NOTHING, Just


class Tracker:
    """Records how many sleepers run at the same time."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    async def sleep_then(self, value, delay):
        self.active += 1
        self.peak = max(self.peak, self.active)
        await anyio.sleep(delay)
        self.active -= 1
        return value


class TestGatherOutcomes:
    @pytest.mark.asyncio
    async def test_results_follow_input_order(self):
        tracker = Tracker()
        produced = [tracker.sleep_then(i, 0.005 * (4 - i)) for i in range(4)]
        assert await gather_outcomes(produced) == [Just(0), Just(1), Just(2), Just(3)]

    @pytest.mark.asyncio
    async def test_mixed_shapes(self):
        tracker = Tracker()
        produced = [1, None, SyncOption.from_value(3), tracker.sleep_then(4, 0)]
        assert await gather_outcomes(produced) == [Just(1), NOTHING, Just(3), Just(4)]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await gather_outcomes([]) == []

    @pytest.mark.asyncio
    async def test_unlimited_runs_everything_at_once(self):
        tracker = Tracker()
        await gather_outcomes([tracker.sleep_then(i, 0.01) for i in range(5)])
        assert tracker.peak == 5

    @pytest.mark.asyncio
    async def test_concurrency_limit(self):
        tracker = Tracker()
        produced = [tracker.sleep_then(i, 0.01) for i in range(5)]
        results = await gather_outcomes(produced, limit=2)
        assert tracker.peak == 2
        assert [r.value for r in results] == [0, 1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_first_error_is_raised_unwrapped(self):
        async def fail():
            raise LookupError('nope')

        tracker = Tracker()
        with pytest.raises(LookupError, match='nope'):
            await gather_outcomes([tracker.sleep_then(1, 0.05), fail()])

    @pytest.mark.asyncio
    async def test_invalid_limit(self):
        with pytest.raises(ValueError, match='at least 1'):
            await gather_outcomes([1], limit=0)


class TestInvokeAll:
    def test_calls_in_order(self):
        calls = []
        produced = invoke_all(lambda i=i: calls.append(i) or i for i in range(3))
        assert produced == [0, 1, 2]
        assert calls == [0, 1, 2]

    def test_failure_closes_produced_coroutines(self):
        created = []

        async def pending():
            return 1

        def make():
            coro = pending()
            created.append(coro)
            return coro

        def fail():
            raise RuntimeError('sync callback failed')

        with pytest.raises(RuntimeError, match='sync callback failed'):
            invoke_all([make, make, fail, make])

        assert len(created) == 2
        assert all(inspect.getcoroutinestate(c) == inspect.CORO_CLOSED for c in created)
