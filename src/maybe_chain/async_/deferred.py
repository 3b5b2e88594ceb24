"""Deferred: an awaitable that runs its source once and replays the result.

Coroutine objects can only be awaited once. An AsyncOption may be forced any
number of times (``value()``, ``get_or_else()``, every downstream combinator),
so its source is wrapped in a Deferred at construction time.
"""

from __future__ import annotations

from collections.abc import Awaitable, Generator
from typing import Any

import aiologic
import anyio
import anyio.lowlevel

__all__ = ['Deferred']


class Deferred[T]:
    """Memoizing wrapper around an awaitable.

    The first awaiter runs the source under an ``aiologic.Lock``; concurrent
    awaiters wait on the lock and then read the stored value. A source that
    raises stores the exception, and every awaiter re-raises it.

    The source runs shielded from cancellation. If the awaiter that started
    it is cancelled, the source still finishes and its result is stored for
    everyone else; the cancelled awaiter then sees its cancellation.

    Example:
        ```python
        calls = 0

        async def fetch() -> int:
            nonlocal calls
            calls += 1
            return 42

        deferred = Deferred(fetch())
        assert await deferred == 42
        assert await deferred == 42
        assert calls == 1
        ```
    """

    __slots__ = ('_done', '_exception', '_lock', '_result', '_source')

    def __init__(self, source: Awaitable[T]) -> None:
        """Wrap an awaitable without starting it.

        Args:
            source: The awaitable to run on first await.
        """
        self._source: Awaitable[T] | None = source
        self._lock: aiologic.Lock = aiologic.Lock()
        self._result: T | None = None
        self._exception: Exception | None = None
        self._done = False

    @classmethod
    def resolved(cls, value: T) -> Deferred[T]:
        """Create a Deferred that already holds a value."""
        deferred: Deferred[T] = cls.__new__(cls)
        deferred._source = None
        deferred._lock = aiologic.Lock()
        deferred._result = value
        deferred._exception = None
        deferred._done = True
        return deferred

    @property
    def done(self) -> bool:
        """True once the source has produced a value or raised."""
        return self._done

    async def get(self) -> T:
        """Run the source on first call and return its (cached) result.

        Raises:
            Exception: Whatever the source raised, on every call.
        """
        if not self._done:
            async with self._lock:
                if not self._done:
                    await self._run()
        if self._exception is not None:
            raise self._exception
        return self._result  # type: ignore[return-value]

    async def _run(self) -> None:
        source, self._source = self._source, None
        if source is None:
            msg = 'Deferred source was interrupted before it completed'
            raise RuntimeError(msg)
        # The source always runs to completion; a cancelled awaiter is cancelled after.
        with anyio.CancelScope(shield=True):
            try:
                self._result = await source
            except Exception as exc:
                self._exception = exc
            self._done = True
        await anyio.lowlevel.checkpoint_if_cancelled()

    def __await__(self) -> Generator[Any, Any, T]:
        return self.get().__await__()

    def __repr__(self) -> str:
        if not self._done:
            return 'Deferred(<pending>)'
        if self._exception is not None:
            return f'Deferred(<raised {self._exception!r}>)'
        return f'Deferred({self._result!r})'
