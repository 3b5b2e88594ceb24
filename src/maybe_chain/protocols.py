"""Container protocols: the capability interface shared by both containers.

The curried combinator layer works purely through ``OptionLike``, and async
normalization only calls ``resolve`` on a container, so neither needs to know
which concrete container it holds.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from maybe_chain.outcome import Outcome

__all__ = ['OptionLike', 'Resolvable']


class Resolvable[T](Protocol):
    """Anything that can hand over its outcome asynchronously.

    Both ``SyncOption`` (already resolved) and ``AsyncOption`` (resolved on
    first await) implement it. It is a static interface only: async
    normalization recognizes exactly those two classes with
    ``is_container`` (whose ``TypeIs`` narrows to ``Resolvable``) and then
    calls ``resolve``. Other objects with a ``resolve`` method, such as
    ``pathlib.Path``, stay raw payloads.
    """

    @abstractmethod
    async def resolve(self) -> Outcome[T]:
        """Return the tagged outcome, awaiting any deferred work once."""
        ...


class OptionLike[T](Protocol):
    """Combinator surface implemented by ``SyncOption`` and ``AsyncOption``.

    Every method returns a new container of the same kind, except
    ``get_or_else`` and ``value`` which end the chain (synchronously for
    ``SyncOption``, as a coroutine for ``AsyncOption``).
    """

    @abstractmethod
    def map[U](self, f: Callable[[T], U]) -> OptionLike[U]: ...

    @abstractmethod
    def flat_map[U](self, f: Callable[[T], Any]) -> OptionLike[U]: ...

    @abstractmethod
    def filter(self, predicate: Callable[[T], Any]) -> OptionLike[Any]: ...

    @abstractmethod
    def filter_map[U, V](self, f: Callable[[U], Any]) -> OptionLike[list[V]]: ...

    @abstractmethod
    def extend(self, key: str, f: Callable[[T], Any]) -> OptionLike[dict[str, Any]]: ...

    @abstractmethod
    def assign(self, fns: Mapping[str, Callable[[T], Any]]) -> OptionLike[dict[str, Any]]: ...

    @abstractmethod
    def with_default[D](self, default: D) -> OptionLike[T | D]: ...

    @abstractmethod
    def get_or_else[D](self, default: D) -> Any: ...

    @abstractmethod
    def effect(self, f: Callable[[T], Any]) -> OptionLike[T]: ...

    @abstractmethod
    def value(self) -> Any: ...
