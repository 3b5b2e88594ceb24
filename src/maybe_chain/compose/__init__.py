"""Composition utilities: curried combinators and pipe()."""

from maybe_chain.compose.combinators import (
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
    with_default,
)
from maybe_chain.compose.pipe import pipe

__all__ = [
    'assign',
    'effect',
    'extend',
    'filter',
    'filter_map',
    'first',
    'flat_map',
    'from_awaitable',
    'from_sync',
    'from_value',
    'get_or_else',
    'map',
    'pipe',
    'with_default',
]
