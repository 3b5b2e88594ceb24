"""Tests for the curried combinators and pipe()."""

import msgspec
import pytest

from maybe_chain import (
    Absent,
    AsyncOption,
    SyncOption,
    assign,
    effect,
    extend,
    filter,  # noqa: A004
    filter_map,
    first,
    flat_map,
    from_awaitable,
    from_sync,
    from_value,
    get_or_else,
    map,  # noqa: A004
    pipe,
    with_default,
)
from maybe_chain.outcome import NOTHING, UNSET_NOTHING


async def async_value(value):
    return value


class TestPipe:
    def test_no_functions(self):
        assert pipe(5) == 5

    def test_applies_left_to_right(self):
        assert pipe(2, lambda x: x + 1, lambda x: x * 10) == 30

    def test_does_not_short_circuit_on_none(self):
        assert pipe(None, lambda x: x is None) is True


class TestSyncPipelines:
    def test_map_and_get_or_else(self):
        assert pipe(5, from_value, map(lambda x: x * 2), get_or_else(0)) == 10

    def test_sentinel_flows_through(self):
        result = pipe(msgspec.UNSET, from_value, map(lambda x: x * 2), filter(bool))
        assert result.state == UNSET_NOTHING

    def test_record_pipeline(self, user):
        result = pipe(
            user,
            from_value,
            extend('greeting', lambda u: SyncOption.of(f'Hi {u["name"]}')),
            assign({'upper': lambda u: SyncOption.of(u['name'].upper())}),
            map(lambda u: (u['greeting'], u['upper'])),
            get_or_else(None),
        )
        assert result == ('Hi Alice', 'ALICE')

    def test_filter_map_and_with_default(self, numbers):
        keep_even = filter_map(lambda n: SyncOption.of(n) if n % 2 == 0 else SyncOption.nothing())
        assert pipe(numbers, from_value, keep_even, get_or_else([])) == [2, 4]
        assert pipe(None, from_value, keep_even, with_default([]), get_or_else(None)) == []

    def test_flat_map_and_effect(self):
        seen = []
        result = pipe(
            3,
            from_value,
            flat_map(lambda x: SyncOption.from_value(x if x > 1 else None)),
            effect(seen.append),
        )
        assert isinstance(result, SyncOption)
        assert result.value() == 3
        assert seen == [3]

    def test_combinator_is_reusable(self):
        double = map(lambda x: x * 2)
        assert double(from_value(1)).value() == 2
        assert double(from_value(4)).value() == 8


class TestAsyncPipelines:
    @pytest.mark.asyncio
    async def test_from_awaitable_pipeline(self, user):
        async def fetch_posts(u):
            return ['first', None, 'second']

        result = await pipe(
            from_awaitable(async_value(user)),
            assign({'posts': fetch_posts}),
            map(lambda u: u['posts']),
            filter_map(lambda post: post),
            get_or_else([]),
        )
        assert result == ['first', 'second']

    @pytest.mark.asyncio
    async def test_combinators_keep_container_kind(self):
        opt = pipe(from_sync(from_value(4)), map(lambda x: x + 1), with_default(0))
        assert isinstance(opt, AsyncOption)
        assert await opt.value() == 5

    @pytest.mark.asyncio
    async def test_first(self):
        opt = pipe(
            AsyncOption.from_value({'phone': '555'}),
            first(lambda c: [c.get('email'), async_value(c.get('phone'))]),
        )
        assert await opt.value() == '555'

    @pytest.mark.asyncio
    async def test_extend_and_effect(self):
        seen = []

        async def record(value):
            seen.append(value)

        opt = pipe(
            AsyncOption.from_value({'id': 1}),
            extend('name', lambda _: async_value('Alice')),
            effect(record),
        )
        assert await opt.value() == {'id': 1, 'name': 'Alice'}
        assert seen == [{'id': 1, 'name': 'Alice'}]

    @pytest.mark.asyncio
    async def test_absence_tag_survives(self):
        opt = pipe(
            AsyncOption.nothing(Absent.UNSET),
            map(lambda x: x),
            flat_map(lambda x: x),
            filter(bool),
        )
        assert await opt.resolve() == UNSET_NOTHING

    @pytest.mark.asyncio
    async def test_failed_filter(self):
        opt = pipe(AsyncOption.from_value(0), filter(bool))
        assert await opt.resolve() == NOTHING
