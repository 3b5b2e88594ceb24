"""SyncOption: a synchronous container for values that may be absent.

A SyncOption holds exactly one ``Outcome``: ``Just(value)`` or
``Nothing(reason)``. Combinators never mutate it; each returns a new
container. On ``Nothing`` they pass the original tag through untouched, so a
pipeline started from ``msgspec.UNSET`` still reports ``UNSET`` at the end.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeIs, overload

import msgspec

from maybe_chain._logging import get_logger
from maybe_chain.absent import Absent, is_present
from maybe_chain.errors import InvalidCallbackShapeError
from maybe_chain.outcome import NOTHING, UNSET_NOTHING, Just, Nothing, Outcome, classify

__all__ = ['SyncOption', 'is_record', 'is_sequence']

_log = get_logger(__name__)


def is_record(value: object) -> TypeIs[Mapping[str, Any]]:
    """Return True if value can be extended with new keys."""
    return isinstance(value, Mapping)


def is_sequence(value: object) -> TypeIs[list[Any] | tuple[Any, ...]]:
    """Return True if value is a list or tuple.

    Strings and bytes are deliberately not sequences for ``filter_map``.
    """
    return isinstance(value, list | tuple)


def _expect_sync(produced: object, operation: str) -> SyncOption[Any]:
    if isinstance(produced, SyncOption):
        return produced
    error = InvalidCallbackShapeError(operation, type(produced).__name__)
    _log.debug('callback.invalid_shape', **msgspec.structs.asdict(error.to_struct()))
    raise error


def _collapse(operation: str, nothing: Nothing = NOTHING) -> SyncOption[Any]:
    _log.debug('option.collapsed', operation=operation, reason=nothing.reason.value)
    return SyncOption(nothing)


class SyncOption[T](msgspec.Struct, frozen=True):
    """Synchronous optional value.

    Examples:
        >>> SyncOption.from_value(5).map(lambda x: x * 2).value()
        10
        >>> SyncOption.from_value(None).map(lambda x: x * 2).value() is None
        True
        >>> SyncOption.from_value({'id': 1}).extend('ok', lambda _: SyncOption.of(True)).value()
        {'id': 1, 'ok': True}
    """

    state: Outcome[T]

    # --- Constructors ---

    @classmethod
    def from_value(cls, value: T | None | msgspec.UnsetType) -> SyncOption[T]:
        """Wrap a value, treating ``None`` and ``msgspec.UNSET`` as absent.

        Args:
            value: A value that may be one of the two absence sentinels.

        Returns:
            Nothing tagged by the sentinel, or Just(value).
        """
        return cls(classify(value))

    @classmethod
    def of(cls, value: T) -> SyncOption[T]:
        """Wrap a value as present, even if it is a sentinel."""
        return cls(Just(value))

    @classmethod
    def nothing(cls, reason: Absent = Absent.NULL) -> SyncOption[T]:
        """Create an absent container with the given tag."""
        return cls(UNSET_NOTHING if reason is Absent.UNSET else NOTHING)

    # --- Querying ---

    def is_just(self) -> bool:
        """Return True if a value is present."""
        return isinstance(self.state, Just)

    def is_nothing(self) -> bool:
        """Return True if the value is absent."""
        return isinstance(self.state, Nothing)

    async def resolve(self) -> Outcome[T]:
        """Return the outcome; lets async normalization treat both containers alike."""
        return self.state

    # --- Combinators ---

    def map[U](self, f: Callable[[T], U]) -> SyncOption[U]:
        """Transform the value if present, otherwise propagate Nothing.

        Args:
            f: Function applied to the contained value.

        Returns:
            The classified result of f (a sentinel result is absent), or
            this Nothing with its tag preserved.
        """
        if isinstance(self.state, Nothing):
            return self  # type: ignore[return-value]
        return SyncOption(classify(f(self.state.value)))

    def flat_map[U](self, f: Callable[[T], SyncOption[U]]) -> SyncOption[U]:
        """Chain a function that itself returns a SyncOption.

        Args:
            f: Function from the contained value to a SyncOption.

        Returns:
            The SyncOption returned by f, or this Nothing (f is not called).

        Raises:
            InvalidCallbackShapeError: If f returns anything but a SyncOption.
        """
        if isinstance(self.state, Nothing):
            return self  # type: ignore[return-value]
        return _expect_sync(f(self.state.value), 'flat_map')

    @overload
    def filter[U](self, predicate: Callable[[T], TypeIs[U]]) -> SyncOption[U]: ...
    @overload
    def filter(self, predicate: Callable[[T], bool]) -> SyncOption[T]: ...

    def filter(self, predicate: Callable[[T], Any]) -> SyncOption[Any]:
        """Keep the value only if the predicate holds.

        A ``TypeIs`` guard narrows the resulting container's type. A present
        value that fails the predicate becomes the canonical ``Nothing``
        (``Absent.NULL``); an absent one keeps its tag and the predicate is
        never called.
        """
        if isinstance(self.state, Nothing):
            return self
        if predicate(self.state.value):
            return self
        return _collapse('filter')

    def extend[U](
        self, key: str, f: Callable[[T], SyncOption[U]]
    ) -> SyncOption[dict[str, Any]]:
        """Add a computed key to a record.

        Args:
            key: The key to add.
            f: Function from the record to a SyncOption of the new value.

        Returns:
            Just of a new dict with ``key`` set, the Nothing returned by f,
            the canonical Nothing if the value is not a record, or this
            Nothing unchanged.

        Raises:
            InvalidCallbackShapeError: If f returns anything but a SyncOption.
        """
        if isinstance(self.state, Nothing):
            return self  # type: ignore[return-value]
        record = self.state.value
        if not is_record(record):
            return _collapse('extend')
        produced = _expect_sync(f(record), 'extend')
        return produced.map(lambda u: {**record, key: u})

    def assign(
        self, fns: Mapping[str, Callable[[T], SyncOption[Any]]]
    ) -> SyncOption[dict[str, Any]]:
        """Add several computed keys to a record in one step.

        Every entry receives the original record; none sees another entry's
        result. If any entry is absent the whole result is the canonical
        Nothing.

        Args:
            fns: Mapping of key to a function returning a SyncOption.

        Returns:
            Just of a new dict with all keys merged, or Nothing.

        Example:
            ```python
            user = SyncOption.from_value({"id": 1, "name": "Alice"})
            user.assign({"upper": lambda u: SyncOption.of(u["name"].upper())})
            # Just {"id": 1, "name": "Alice", "upper": "ALICE"}
            ```
        """
        if isinstance(self.state, Nothing):
            return self  # type: ignore[return-value]
        record = self.state.value
        if not is_record(record):
            return _collapse('assign')
        produced = {key: _expect_sync(fn(record), 'assign').state for key, fn in fns.items()}
        assigned: dict[str, Any] = {}
        for key, outcome in produced.items():
            if isinstance(outcome, Nothing):
                return _collapse('assign')
            assigned[key] = outcome.value
        return SyncOption(Just({**record, **assigned}))

    def filter_map[U, V](
        self: SyncOption[list[U]] | SyncOption[tuple[U, ...]],
        f: Callable[[U], SyncOption[V]],
    ) -> SyncOption[list[V]]:
        """Map every element to a SyncOption and keep the present payloads.

        Args:
            f: Function from an element to a SyncOption.

        Returns:
            Just(list) of kept payloads in original order, this Nothing
            unchanged, or ``Nothing(Absent.UNSET)`` if the value is present
            but not a list or tuple.

        Raises:
            InvalidCallbackShapeError: If f returns anything but a SyncOption.
        """
        if isinstance(self.state, Nothing):
            return self  # type: ignore[return-value]
        items = self.state.value
        if not is_sequence(items):
            return _collapse('filter_map', UNSET_NOTHING)
        kept: list[V] = []
        for item in items:
            outcome = _expect_sync(f(item), 'filter_map').state
            if isinstance(outcome, Just):
                kept.append(outcome.value)
        return SyncOption(Just(kept))

    def with_default[D](self, default: D) -> SyncOption[T | D]:
        """Replace Nothing with a default, keeping the chain going.

        A sentinel default leaves the container absent with its original tag.
        """
        if isinstance(self.state, Nothing) and is_present(default):
            return SyncOption(Just(default))
        return self  # type: ignore[return-value]

    def get_or_else[D](self, default: D) -> T | D:
        """Return the value if present, else the default. Ends the chain."""
        if isinstance(self.state, Nothing):
            return default
        return self.state.value

    def effect(self, f: Callable[[T], object]) -> SyncOption[T]:
        """Call f for its side effect if a value is present.

        Returns:
            This same container; f's return value is ignored.
        """
        if isinstance(self.state, Just):
            f(self.state.value)
        return self

    def value(self) -> T | None | msgspec.UnsetType:
        """Return the raw payload, or the raw sentinel recorded for Nothing.

        Escape hatch; prefer get_or_else() in most cases.
        """
        return self.state.raw()
