"""maybe-chain: chainable optional values, synchronous and asynchronous.

Two containers share one combinator surface: SyncOption for plain values and
AsyncOption for deferred ones. Absence is tagged (``None`` vs
``msgspec.UNSET``) and the tag survives every step of a pipeline.

Flat imports (preferred):
    from maybe_chain import SyncOption, AsyncOption, Absent
    from maybe_chain import pipe, map, flat_map, extend, assign

Submodule imports (for organization):
    from maybe_chain.option import SyncOption
    from maybe_chain.async_ import AsyncOption, normalize
    from maybe_chain.compose import pipe, map, filter
    from maybe_chain.outcome import Just, Nothing, classify
"""

# Configuration
from maybe_chain._config import OptionConfig, get_config, init

# Logging
from maybe_chain._logging import configure_logging, get_logger

# Absence
from maybe_chain.absent import Absent, absent_of, is_absent, is_present

# Async
from maybe_chain.async_ import AsyncOption, Deferred, Produced, normalize

# Composition
from maybe_chain.compose import (
    assign,
    effect,
    extend,
    filter,  # noqa: A004
    filter_map,
    first,
    flat_map,
    from_awaitable,
    from_sync,
    from_value,
    get_or_else,
    map,  # noqa: A004
    pipe,
    with_default,
)

# Errors
from maybe_chain.errors import InvalidCallbackShape, InvalidCallbackShapeError

# Types
from maybe_chain.option import SyncOption
from maybe_chain.outcome import NOTHING, UNSET_NOTHING, Just, Nothing, Outcome, classify
from maybe_chain.protocols import OptionLike, Resolvable

__all__ = [
    'NOTHING',
    'UNSET_NOTHING',
    'Absent',
    # Async
    'AsyncOption',
    'Deferred',
    # Errors
    'InvalidCallbackShape',
    'InvalidCallbackShapeError',
    # Outcome types
    'Just',
    'Nothing',
    # Configuration
    'OptionConfig',
    # Protocols
    'OptionLike',
    'Outcome',
    'Produced',
    'Resolvable',
    # Containers
    'SyncOption',
    # Absence
    'absent_of',
    # Composition
    'assign',
    'classify',
    'configure_logging',
    'effect',
    'extend',
    'filter',
    'filter_map',
    'first',
    'flat_map',
    'from_awaitable',
    'from_sync',
    'from_value',
    'get_config',
    'get_logger',
    'get_or_else',
    'init',
    'is_absent',
    'is_present',
    'map',
    'normalize',
    'pipe',
    'with_default',
]
