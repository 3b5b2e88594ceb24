"""The one-level normalization rule used by AsyncOption combinators.

A callback handed to ``flat_map``, ``extend``, ``assign``, ``filter_map`` or
``first`` may return any of:

- a raw value,
- a ``SyncOption``,
- an ``AsyncOption``,
- an awaitable of any of the above.

``normalize`` turns that into an ``Outcome`` in a single step: await the
awaitable (once), take the outcome of a container, or classify a raw value.
Containers nested inside a payload are left alone.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, TypeIs

from maybe_chain.option import SyncOption
from maybe_chain.outcome import Outcome, classify

if TYPE_CHECKING:
    from maybe_chain.protocols import Resolvable

__all__ = ['is_container', 'normalize']


def is_container(value: object) -> TypeIs[Resolvable[Any]]:
    """Return True for the two container types and nothing else."""
    from maybe_chain.async_.option import AsyncOption

    return isinstance(value, SyncOption | AsyncOption)


async def normalize[T](produced: Any) -> Outcome[T]:
    """Normalize a callback result into an Outcome.

    Args:
        produced: Raw value, SyncOption, AsyncOption, or an awaitable of one.

    Returns:
        The container's outcome, or the classified raw value. ``None`` and
        ``msgspec.UNSET`` classify as Nothing.
    """
    if not is_container(produced) and inspect.isawaitable(produced):
        produced = await produced
    if is_container(produced):
        return await produced.resolve()
    return classify(produced)
