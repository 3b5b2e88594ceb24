"""Property-based tests for the container laws."""

import anyio
from hypothesis import given
from hypothesis import strategies as st

from maybe_chain import AsyncOption, SyncOption
from maybe_chain.outcome import NOTHING, Just, Nothing, classify
from tests.strategies import integers, maybe_values, present_values, records, sentinels


def resolve(opt):
    return anyio.run(opt.resolve)


class TestSyncLaws:
    @given(sentinels)
    def test_absence_propagates_with_its_tag(self, sentinel):
        opt = SyncOption.from_value(sentinel)
        chained = (
            opt.map(str)
            .flat_map(SyncOption.of)
            .filter(bool)
            .extend('k', SyncOption.of)
            .assign({'k': SyncOption.of})
            .filter_map(SyncOption.of)
            .effect(print)
        )
        assert chained.state == opt.state
        assert chained.value() is sentinel

    @given(maybe_values)
    def test_map_identity(self, value):
        opt = SyncOption.from_value(value)
        assert opt.map(lambda x: x) == opt

    @given(integers)
    def test_flat_map_left_identity(self, n):
        def f(x):
            return SyncOption.from_value(x * 2)

        assert SyncOption.of(n).flat_map(f) == f(n)

    @given(maybe_values)
    def test_flat_map_right_identity(self, value):
        opt = SyncOption.from_value(value)
        assert opt.flat_map(SyncOption.of) == opt

    @given(integers)
    def test_flat_map_associativity(self, n):
        def f(x):
            return SyncOption.from_value(x + 1)

        def g(x):
            return SyncOption.from_value(x if x % 2 else None)

        opt = SyncOption.of(n)
        assert opt.flat_map(f).flat_map(g) == opt.flat_map(lambda x: f(x).flat_map(g))

    @given(present_values, st.booleans())
    def test_filter_result_is_self_or_canonical_nothing(self, value, keep):
        opt = SyncOption.of(value)
        result = opt.filter(lambda _: keep)
        if keep:
            assert result is opt
        else:
            assert result.state == NOTHING

    @given(records, integers)
    def test_extend_adds_exactly_one_key(self, record, n):
        result = SyncOption.of(record).extend('__new__', lambda _: SyncOption.of(n)).value()
        assert result == {**record, '__new__': n}

    @given(st.lists(st.one_of(integers, sentinels), max_size=10))
    def test_filter_map_keeps_present_in_order(self, items):
        result = SyncOption.of(items).filter_map(SyncOption.from_value).value()
        assert result == [x for x in items if isinstance(classify(x), Just)]


class TestAsyncLaws:
    @given(maybe_values)
    def test_round_trip_through_async(self, value):
        sync = SyncOption.from_value(value)
        assert resolve(AsyncOption.from_sync(sync)) == sync.state

    @given(maybe_values)
    def test_async_matches_sync_for_map(self, value):
        def f(x):
            return [x]

        expected = SyncOption.from_value(value).map(f).state
        assert resolve(AsyncOption.from_value(value).map(f)) == expected

    @given(sentinels)
    def test_absence_propagates_with_its_tag(self, sentinel):
        opt = AsyncOption.from_value(sentinel)
        chained = (
            opt.map(str)
            .flat_map(lambda x: x)
            .extend('k', lambda x: x)
            .assign({'k': lambda x: x})
            .filter_map(lambda x: x)
            .first(lambda x: [x])
        )
        outcome = resolve(chained)
        assert isinstance(outcome, Nothing)
        assert outcome == classify(sentinel)
