"""Outcome: the tagged payload held by every container, Just[T] | Nothing."""

from __future__ import annotations

from typing import Any, TypeIs

import msgspec

from maybe_chain.absent import Absent, absent_of

__all__ = [
    'NOTHING',
    'UNSET_NOTHING',
    'Just',
    'Nothing',
    'Outcome',
    'classify',
]


class Just[T](msgspec.Struct, frozen=True, gc=False):
    """A present value.

    ``Just(None)`` is legal and distinct from ``Nothing``: only
    ``classify`` turns sentinels into absence.

    Examples:
        >>> Just(3).raw()
        3
        >>> Just(None) == NOTHING
        False
    """

    value: T

    def is_just(self) -> TypeIs[Just[T]]:
        """Return True since this is Just."""
        return True

    def is_nothing(self) -> TypeIs[Nothing]:
        """Return False since this is Just."""
        return False

    def raw(self) -> T:
        """Return the contained value."""
        return self.value


class Nothing(msgspec.Struct, frozen=True, gc=False):
    """An absent value, tagged with the sentinel that produced it.

    Examples:
        >>> Nothing().raw() is None
        True
        >>> Nothing(Absent.UNSET).raw() is msgspec.UNSET
        True
    """

    reason: Absent = Absent.NULL

    def is_just(self) -> TypeIs[Just[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> TypeIs[Nothing]:
        """Return True since this is Nothing."""
        return True

    def raw(self) -> Any:
        """Return the raw sentinel recorded by ``reason``."""
        return self.reason.sentinel


NOTHING: Nothing = Nothing(Absent.NULL)
"""Canonical absent outcome."""

UNSET_NOTHING: Nothing = Nothing(Absent.UNSET)
"""Absent outcome tagged with ``msgspec.UNSET``."""


type Outcome[T] = Just[T] | Nothing


def classify[T](value: T | None | msgspec.UnsetType) -> Outcome[T]:
    """Wrap a raw value, turning either sentinel into a tagged Nothing.

    Args:
        value: Any value; ``None`` and ``msgspec.UNSET`` count as absent.

    Returns:
        ``Nothing`` carrying the matching tag, or ``Just(value)``.
    """
    reason = absent_of(value)
    if reason is None:
        return Just(value)  # type: ignore[arg-type]
    if reason is Absent.UNSET:
        return UNSET_NOTHING
    return NOTHING
