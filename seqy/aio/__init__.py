"""
async sequences.

    from seqy import aio
    await aio.iterate(fetch_next_page, first_page).take(3).collect()
"""

from .seq import AsyncSeq
from .memoize import AsyncMemoizingIterable

from .factories import (
    from_iterable,
    from_async_iterable,
    iterate,
    singleton,
    empty,
    cycle,
    cons,
    from_range,
    enum_from,
    repeat,
    replicate,
    from_indexed_generator
)

__all__ = [
    "AsyncSeq",
    "AsyncMemoizingIterable",
    "from_iterable",
    "from_async_iterable",
    "iterate",
    "singleton",
    "empty",
    "cycle",
    "cons",
    "from_range",
    "enum_from",
    "repeat",
    "replicate",
    "from_indexed_generator"
]
