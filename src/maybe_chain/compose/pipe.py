"""pipe() function for threading a value through curried combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')


# Overloads for type inference (up to 6 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    /,
) -> T6: ...


def pipe(value: Any, *fns: Callable[..., Any]) -> Any:
    """Apply functions left to right, feeding each result into the next.

    Unlike a Result pipe, no wrapping or short-circuiting happens here: the
    curried combinators already carry absence through, so pipe is plain
    function composition.

    Args:
        value: The initial value, usually a raw value or a container.
        *fns: Unary functions to apply in sequence.

    Returns:
        The result of the last function, or value if no functions are given.

    Example:
        ```python
        pipe(
            {"id": 1, "name": "Alice"},
            from_value,
            map(lambda u: u["name"]),
            get_or_else("anonymous"),
        )
        # 'Alice'
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current
