"""Async utilities: AsyncOption and the normalization machinery behind it.

This module provides:
- AsyncOption: deferred optional value with SyncOption's combinators
- normalize: one-level conversion of callback results into an Outcome
- gather_outcomes: concurrent normalization of a batch, order preserved
- invoke_all: call a batch of callbacks up front, cleaning up on failure
- Deferred: run-once awaitable backing every AsyncOption

Examples:
    >>> from maybe_chain.async_ import AsyncOption
    >>>
    >>> async def fetch(user_id: int) -> dict | None:
    ...     return {"id": user_id}
    >>>
    >>> async def main():
    ...     opt = AsyncOption.from_awaitable(fetch(1)).map(lambda d: d["id"])
    ...     assert await opt.value() == 1
"""

from maybe_chain.async_.batch import gather_outcomes, invoke_all
from maybe_chain.async_.deferred import Deferred
from maybe_chain.async_.normalize import is_container, normalize
from maybe_chain.async_.option import AsyncOption, Produced

__all__ = [
    'AsyncOption',
    'Deferred',
    'Produced',
    'gather_outcomes',
    'invoke_all',
    'is_container',
    'normalize',
]
