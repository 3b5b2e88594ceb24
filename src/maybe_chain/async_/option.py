"""AsyncOption type for async-aware optional values.

AsyncOption wraps a deferred computation that resolves to an ``Outcome`` and
mirrors every SyncOption combinator. Callbacks may return plain values,
SyncOptions, AsyncOptions, or awaitables of any of those; each combinator
normalizes the result exactly one level deep.

Example:
    ```python
    async def fetch_user(user_id: int) -> dict | None:
        ...

    async def fetch_posts(user: dict) -> list[dict]:
        ...

    name = await (
        AsyncOption.from_awaitable(fetch_user(1))
        .assign({"posts": fetch_posts})
        .map(lambda u: u["name"])
        .get_or_else("anonymous")
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator, Iterable, Mapping
from functools import partial
from typing import Any, TypeIs, overload

import msgspec

from maybe_chain._logging import get_logger
from maybe_chain.absent import Absent, is_present
from maybe_chain.async_.batch import gather_outcomes, invoke_all
from maybe_chain.async_.deferred import Deferred
from maybe_chain.async_.normalize import normalize
from maybe_chain.option import SyncOption, is_record, is_sequence
from maybe_chain.outcome import NOTHING, UNSET_NOTHING, Just, Nothing, Outcome, classify

__all__ = ['AsyncOption', 'Produced']

_log = get_logger(__name__)

type Produced[U] = (
    U
    | SyncOption[U]
    | AsyncOption[U]
    | Awaitable[U | SyncOption[U] | AsyncOption[U]]
)
"""Any shape a callback may hand back to an AsyncOption combinator."""


def _collapsed(operation: str, nothing: Nothing = NOTHING) -> Nothing:
    _log.debug('option.collapsed', operation=operation, reason=nothing.reason.value)
    return nothing


class AsyncOption[T]:
    """Async-aware optional value.

    An AsyncOption holds a single ``Deferred`` that yields ``Just(value)`` or
    ``Nothing(reason)``. Combinators return new AsyncOptions and stay lazy;
    only ``value()``, ``get_or_else()``, ``resolve()`` and ``await`` force
    evaluation. The deferred runs at most once, so an AsyncOption may be
    forced any number of times and always reports the same result.

    Exceptions raised by callbacks propagate to whatever forces evaluation.

    Example:
        ```python
        async def example():
            opt = AsyncOption.from_value(5).map(lambda x: x * 2)
            assert await opt.value() == 10
            assert await opt == SyncOption.from_value(10)
        ```
    """

    __slots__ = ('_deferred',)

    def __init__(self, source: Awaitable[Outcome[T]]) -> None:
        """Create an AsyncOption from an awaitable producing an Outcome.

        Args:
            source: Awaitable resolving to ``Just`` or ``Nothing``. It is
                wrapped in a Deferred unless it already is one.
        """
        self._deferred: Deferred[Outcome[T]] = (
            source if isinstance(source, Deferred) else Deferred(source)
        )

    def __await__(self) -> Generator[Any, Any, SyncOption[T]]:
        """Await to get the equivalent, already-resolved SyncOption."""
        return self._as_sync().__await__()

    async def _as_sync(self) -> SyncOption[T]:
        return SyncOption(await self._deferred)

    # --- Constructors ---

    @classmethod
    def from_value(cls, value: T | None | msgspec.UnsetType) -> AsyncOption[T]:
        """Wrap a value, treating ``None`` and ``msgspec.UNSET`` as absent."""
        return cls(Deferred.resolved(classify(value)))

    @classmethod
    def of(cls, value: T) -> AsyncOption[T]:
        """Wrap a value as present, even if it is a sentinel."""
        return cls(Deferred.resolved(Just(value)))

    @classmethod
    def nothing(cls, reason: Absent = Absent.NULL) -> AsyncOption[T]:
        """Create an absent AsyncOption with the given tag."""
        return cls(Deferred.resolved(UNSET_NOTHING if reason is Absent.UNSET else NOTHING))

    @classmethod
    def from_awaitable(
        cls, awaitable: Awaitable[T | None | msgspec.UnsetType]
    ) -> AsyncOption[T]:
        """Wrap an awaitable whose result may be a sentinel.

        Args:
            awaitable: Awaitable resolving to a raw value.

        Returns:
            AsyncOption that classifies the resolved value.
        """

        async def _classified() -> Outcome[T]:
            return classify(await awaitable)

        return cls(_classified())

    @classmethod
    def from_sync(cls, option: SyncOption[T]) -> AsyncOption[T]:
        """Lift a SyncOption, keeping its tag and payload."""
        return cls(Deferred.resolved(option.state))

    @classmethod
    def from_(cls, produced: Produced[T]) -> AsyncOption[T]:
        """Build an AsyncOption from any callback-compatible shape.

        Accepts a raw value, SyncOption, AsyncOption, or an awaitable of any
        of those, and applies the normalization rule lazily.
        """
        return cls(normalize(produced))

    # --- Forcing ---

    async def resolve(self) -> Outcome[T]:
        """Force evaluation and return the Outcome."""
        return await self._deferred

    def value(self) -> Coroutine[Any, Any, T | None | msgspec.UnsetType]:
        """Force evaluation and return the raw payload or sentinel.

        Escape hatch; prefer get_or_else() in most cases.

        Returns:
            Coroutine producing the value, ``None`` or ``msgspec.UNSET``.
        """

        async def _raw() -> T | None | msgspec.UnsetType:
            outcome = await self._deferred
            return outcome.raw()

        return _raw()

    def get_or_else[D](self, default: D) -> Coroutine[Any, Any, T | D]:
        """Force evaluation and unwrap with a default.

        Returns:
            Coroutine producing the value if present, else the default.
        """

        async def _unwrap() -> T | D:
            outcome = await self._deferred
            if isinstance(outcome, Just):
                return outcome.value
            return default

        return _unwrap()

    # --- Combinators ---

    def map[U](self, f: Callable[[T], U]) -> AsyncOption[U]:
        """Apply a sync function to the value if present.

        Args:
            f: Function applied to the contained value.

        Returns:
            AsyncOption of the classified result, or Nothing with its tag
            preserved.

        Example:
            ```python
            async def example():
                assert await AsyncOption.from_value(5).map(lambda x: x * 2).value() == 10
            ```
        """

        async def _mapped() -> Outcome[U]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            return classify(f(outcome.value))

        return AsyncOption(_mapped())

    def flat_map[U](self, f: Callable[[T], Produced[U]]) -> AsyncOption[U]:
        """Chain a function returning any callback-compatible shape.

        If absent, f is not called and the tag is preserved. Otherwise f's
        result is normalized one level: awaited if awaitable, unwrapped if a
        container, classified if raw.

        Args:
            f: Function from the contained value to a value, SyncOption,
                AsyncOption, or an awaitable of one.

        Returns:
            New AsyncOption with the flattened result.

        Example:
            ```python
            async def lookup(user_id: int) -> dict | None:
                ...

            async def example():
                user = AsyncOption.from_value(1).flat_map(lookup)
            ```
        """

        async def _chained() -> Outcome[U]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            return await normalize(f(outcome.value))

        return AsyncOption(_chained())

    @overload
    def filter[U](self, predicate: Callable[[T], TypeIs[U]]) -> AsyncOption[U]: ...
    @overload
    def filter(self, predicate: Callable[[T], bool]) -> AsyncOption[T]: ...

    def filter(self, predicate: Callable[[T], Any]) -> AsyncOption[Any]:
        """Keep the value only if the predicate holds.

        An absent value keeps its tag. A present value that fails the
        predicate becomes the canonical ``Nothing`` (``Absent.NULL``).
        """

        async def _filtered() -> Outcome[Any]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            if predicate(outcome.value):
                return outcome
            return _collapsed('filter')

        return AsyncOption(_filtered())

    def extend[U](
        self, key: str, f: Callable[[T], Produced[U]]
    ) -> AsyncOption[dict[str, Any]]:
        """Add a computed key to a record.

        Composed as ``filter(is_record)`` followed by ``flat_map``: a present
        non-record becomes the canonical Nothing, and so does an absent
        result from f.

        Args:
            key: The key to add.
            f: Function from the record to any callback-compatible shape.

        Returns:
            AsyncOption of a new dict with ``key`` set, or Nothing.
        """

        def _extend(record: Mapping[str, Any]) -> AsyncOption[dict[str, Any]]:
            async def _extended() -> Outcome[dict[str, Any]]:
                outcome = await normalize(f(record))  # type: ignore[arg-type]
                if isinstance(outcome, Nothing):
                    return _collapsed('extend')
                return Just({**record, key: outcome.value})

            return AsyncOption(_extended())

        return self.filter(is_record).flat_map(_extend)

    def assign(
        self,
        fns: Mapping[str, Callable[[T], Produced[Any]]],
        *,
        limit: int | None = None,
    ) -> AsyncOption[dict[str, Any]]:
        """Add several computed keys to a record, running the callbacks concurrently.

        Every callback is invoked with the original record before any of
        their results is awaited; the results are then awaited together.
        Short-circuits to Nothing if:

        - the AsyncOption is Nothing (tag preserved),
        - the value is not a record (canonical Nothing),
        - any callback's result is absent (canonical Nothing).

        Args:
            fns: Mapping of key to a function returning any
                callback-compatible shape.
            limit: Opt-in cap on callback results awaited at once. With a
                limit, later callbacks may start only after earlier ones
                complete.

        Returns:
            AsyncOption of a new dict with all keys merged, or Nothing.

        Example:
            ```python
            async def fetch_profile(user: dict) -> dict | None:
                ...

            async def fetch_settings(user: dict) -> dict | None:
                ...

            enriched = AsyncOption.from_value(user).assign(
                {"profile": fetch_profile, "settings": fetch_settings}
            )
            ```
        """

        async def _assigned() -> Outcome[dict[str, Any]]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            record = outcome.value
            if not is_record(record):
                return _collapsed('assign')
            keys = list(fns)
            produced = invoke_all(partial(fns[key], record) for key in keys)  # type: ignore[arg-type]
            outcomes = await gather_outcomes(produced, limit=limit)
            assigned: dict[str, Any] = {}
            for key, result in zip(keys, outcomes, strict=True):
                if isinstance(result, Nothing):
                    return _collapsed('assign')
                assigned[key] = result.value
            return Just({**record, **assigned})

        return AsyncOption(_assigned())

    def filter_map[U, V](
        self: AsyncOption[list[U]] | AsyncOption[tuple[U, ...]],
        f: Callable[[U], Produced[V]],
        *,
        limit: int | None = None,
    ) -> AsyncOption[list[V]]:
        """Map every element concurrently and keep the present payloads.

        Semantics:
            - If the source is absent, its tag is preserved exactly.
            - If the source is present but not a list or tuple, the result
              is ``Nothing(Absent.UNSET)``, distinct from the failed-predicate
              tag.
            - Otherwise f is invoked for every element, the results are
              awaited concurrently, and present payloads are kept in the
              original element order.

        Args:
            f: Function from an element to any callback-compatible shape.
            limit: Opt-in cap on callback results awaited at once.

        Returns:
            AsyncOption of the kept payloads, or Nothing.
        """

        async def _filter_mapped() -> Outcome[list[V]]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            items = outcome.value
            if not is_sequence(items):
                return _collapsed('filter_map', UNSET_NOTHING)
            produced = invoke_all(partial(f, item) for item in items)
            return Just([
                result.value
                for result in await gather_outcomes(produced, limit=limit)
                if isinstance(result, Just)
            ])

        return AsyncOption(_filter_mapped())

    def first[U](self, f: Callable[[T], Iterable[Produced[U]]]) -> AsyncOption[U]:
        """Return the first present candidate produced from the value.

        Candidates are normalized one at a time, in order; later ones are not
        awaited once a present one is found.

        Args:
            f: Function from the value to an iterable of candidates, each any
                callback-compatible shape.

        Returns:
            AsyncOption of the first present candidate, the canonical Nothing
            if none is present, or this Nothing with its tag preserved.

        Example:
            ```python
            contact = AsyncOption.from_value(user).first(
                lambda u: [u.get("email"), lookup_phone(u)]
            )
            ```
        """

        async def _first() -> Outcome[U]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing):
                return outcome
            for candidate in f(outcome.value):
                result: Outcome[U] = await normalize(candidate)
                if isinstance(result, Just):
                    return result
            return _collapsed('first')

        return AsyncOption(_first())

    def with_default[D](self, default: D) -> AsyncOption[T | D]:
        """Replace Nothing with a default, keeping the chain going.

        A sentinel default leaves the option absent with its original tag.
        """

        async def _defaulted() -> Outcome[T | D]:
            outcome = await self._deferred
            if isinstance(outcome, Nothing) and is_present(default):
                return Just(default)
            return outcome

        return AsyncOption(_defaulted())

    def effect(self, f: Callable[[T], object]) -> AsyncOption[T]:
        """Run a side effect if a value is present.

        f may be sync or async; an awaitable result is awaited before the
        chain continues. f's result is otherwise ignored.

        Returns:
            New AsyncOption yielding the original outcome.
        """

        async def _effected() -> Outcome[T]:
            outcome = await self._deferred
            if isinstance(outcome, Just):
                result = f(outcome.value)
                if inspect.isawaitable(result):
                    await result
            return outcome

        return AsyncOption(_effected())

    def __repr__(self) -> str:
        return f'AsyncOption({self._deferred!r})'
