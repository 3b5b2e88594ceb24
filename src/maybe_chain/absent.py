"""Absence tags and the sentinel predicates every container builds on.

Two raw values stand for absence: ``None`` and ``msgspec.UNSET``. Each maps
to its own ``Absent`` tag so that a pipeline can tell "explicitly null" from
"never set" all the way through to ``value()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeIs

import msgspec

__all__ = [
    'Absent',
    'absent_of',
    'is_absent',
    'is_present',
]


class Absent(Enum):
    """Which sentinel an absent container was built from.

    ``NULL`` is the canonical tag: combinators that collapse a present value
    to absence (failed predicate, non-record base) always produce it.
    """

    NULL = 'null'
    UNSET = 'unset'

    @property
    def sentinel(self) -> Any:
        """The raw sentinel this tag stands for."""
        if self is Absent.UNSET:
            return msgspec.UNSET
        return None


def is_absent(value: object) -> TypeIs[None | msgspec.UnsetType]:
    """Return True if value is one of the two absence sentinels."""
    return value is None or value is msgspec.UNSET


def is_present[T](value: T | None | msgspec.UnsetType) -> TypeIs[T]:
    """Return True if value is not an absence sentinel."""
    return not is_absent(value)


def absent_of(value: object) -> Absent | None:
    """Map a raw sentinel to its tag.

    Returns:
        ``Absent.NULL`` for ``None``, ``Absent.UNSET`` for ``msgspec.UNSET``,
        and ``None`` for any present value.
    """
    if value is None:
        return Absent.NULL
    if value is msgspec.UNSET:
        return Absent.UNSET
    return None
