"""Concurrent normalization of a batch of callback results.

Used by ``AsyncOption.assign`` and ``AsyncOption.filter_map``. Callers invoke
every callback first (``invoke_all``) and hand the produced values over to
``gather_outcomes``, so all of them are started before any one is awaited.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Sequence
from typing import Any

import aiologic
import anyio

from maybe_chain._logging import get_logger
from maybe_chain.async_.normalize import normalize
from maybe_chain.outcome import Outcome

__all__ = ['gather_outcomes', 'invoke_all']

_log = get_logger(__name__)


def _close_unawaited(produced: Iterable[Any]) -> None:
    for value in produced:
        if inspect.iscoroutine(value):
            value.close()


def invoke_all(calls: Iterable[Callable[[], Any]]) -> list[Any]:
    """Call every thunk and collect the results, in order.

    If one raises, coroutines produced by the earlier calls are closed
    before the exception propagates, so none is left unawaited.
    """
    produced: list[Any] = []
    try:
        for call in calls:
            produced.append(call())
    except Exception:
        _close_unawaited(produced)
        raise
    return produced


async def gather_outcomes(
    produced: Sequence[Any], *, limit: int | None = None
) -> list[Outcome[Any]]:
    """Normalize every produced value concurrently.

    Runs one task per value in an anyio task group and waits for all of
    them. Results come back in input order, whatever the completion order.

    Args:
        produced: Callback results, in the order the output should follow.
        limit: Cap on values awaited at once, enforced with
            ``aiologic.CapacityLimiter``. None (the default) awaits them all
            at once; a limit gives up the guarantee that every value starts
            before any one completes.

    Returns:
        One Outcome per input, in input order.

    Raises:
        ValueError: If limit is less than 1.
        Exception: The first exception raised by any task; siblings are
            cancelled. It is re-raised as-is rather than inside an
            ExceptionGroup.
    """
    if limit is not None and limit < 1:
        msg = f'limit must be at least 1, got {limit}'
        raise ValueError(msg)
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None
    results: list[Outcome[Any] | None] = [None] * len(produced)
    _log.debug('batch.issued', size=len(produced), limit=limit)

    async def run_one(i: int, value: Any) -> None:
        if limiter is None:
            results[i] = await normalize(value)
            return
        async with limiter:
            results[i] = await normalize(value)

    try:
        async with anyio.create_task_group() as tg:
            for i, value in enumerate(produced):
                tg.start_soon(run_one, i, value)
    except ExceptionGroup as group:
        # Siblings cancelled before their first step never awaited their value.
        _close_unawaited(produced)
        raise group.exceptions[0] from None

    outcomes: list[Outcome[Any]] = []
    for outcome in results:
        assert outcome is not None
        outcomes.append(outcome)
    return outcomes
