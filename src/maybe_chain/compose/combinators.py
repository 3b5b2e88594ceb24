"""Curried, point-free combinators for SyncOption and AsyncOption.

Each function takes the transformation first and returns a function from
container to container, so pipelines read left to right with ``pipe``::

    pipe(
        from_value(user),
        extend('posts', fetch_posts),
        map(lambda u: u['name']),
        get_or_else('anonymous'),
    )

Dispatch is purely through the ``OptionLike`` protocol: every combinator
calls the method of the same name on whatever container it receives. A
SyncOption stays a SyncOption and an AsyncOption stays an AsyncOption; the
combinators hold no state and add no behaviour of their own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from maybe_chain.async_.option import AsyncOption
from maybe_chain.option import SyncOption

if TYPE_CHECKING:
    from maybe_chain.async_.option import Produced
    from maybe_chain.protocols import OptionLike

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
    'with_default',
]

from_value = SyncOption.from_value
"""Create a SyncOption from a value that may be ``None`` or ``msgspec.UNSET``."""

from_awaitable = AsyncOption.from_awaitable
"""Create an AsyncOption from an awaitable of a possibly-absent value."""

from_sync = AsyncOption.from_sync
"""Lift a SyncOption into an AsyncOption."""


def map[A, B](f: Callable[[A], B]) -> Callable[[OptionLike[A]], OptionLike[B]]:  # noqa: A001
    """Curried ``map``: transform the value if present.

    Example:
        ```python
        double = map(lambda x: x * 2)
        double(from_value(4)).value()
        # 8
        ```
    """
    return lambda m: m.map(f)


def flat_map[A, B](
    f: Callable[[A], Produced[B]],
) -> Callable[[OptionLike[A]], OptionLike[B]]:
    """Curried ``flat_map``: chain a function returning an option.

    A SyncOption requires f to return a SyncOption; an AsyncOption accepts
    any callback-compatible shape.
    """
    return lambda m: m.flat_map(f)


def filter[A](predicate: Callable[[A], Any]) -> Callable[[OptionLike[A]], OptionLike[Any]]:  # noqa: A001
    """Curried ``filter``: keep the value only if the predicate holds.

    A failed predicate gives the canonical Nothing; absence keeps its tag.
    """
    return lambda m: m.filter(predicate)


def filter_map[A, B](
    f: Callable[[A], Produced[B]],
) -> Callable[[OptionLike[list[A]]], OptionLike[list[B]]]:
    """Curried ``filter_map``: map a sequence and drop absent results."""
    return lambda m: m.filter_map(f)


def extend[A, B](
    key: str, f: Callable[[A], Produced[B]]
) -> Callable[[OptionLike[A]], OptionLike[dict[str, Any]]]:
    """Curried ``extend``: add one computed key to a record."""
    return lambda m: m.extend(key, f)


def assign[A](
    fns: Mapping[str, Callable[[A], Produced[Any]]],
) -> Callable[[OptionLike[A]], OptionLike[dict[str, Any]]]:
    """Curried ``assign``: add several independently computed keys to a record."""
    return lambda m: m.assign(fns)


def with_default[A, D](default: D) -> Callable[[OptionLike[A]], OptionLike[A | D]]:
    """Curried ``with_default``: replace Nothing with a default."""
    return lambda m: m.with_default(default)


def get_or_else[A, D](default: D) -> Callable[[OptionLike[A]], Any]:
    """Curried ``get_or_else``: unwrap with a default.

    Returns the value for a SyncOption and a coroutine for an AsyncOption.
    """
    return lambda m: m.get_or_else(default)


def effect[A](f: Callable[[A], object]) -> Callable[[OptionLike[A]], OptionLike[A]]:
    """Curried ``effect``: run a side effect if a value is present."""
    return lambda m: m.effect(f)


def first[A, B](
    f: Callable[[A], Iterable[Produced[B]]],
) -> Callable[[AsyncOption[A]], AsyncOption[B]]:
    """Curried ``first``: pick the first present candidate (AsyncOption only)."""
    return lambda m: m.first(f)
