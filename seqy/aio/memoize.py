"""
async flavour of seqy.memoize: one shared buffer, many independent readers,
at most one upstream advance per element.

readers may overlap in time under asyncio (e.g. asyncio.gather), and an async
generator cannot be advanced twice at once, so advances of the shared upstream
are serialized with a lock. a reader that waited on the lock checks the buffer
again before pulling, since the reader holding the lock may already have
realized the element it needs.

the upstream iterator belongs to the event loop that opened it; when that loop
shuts down its async generators are closed. a cache that is still partial can
therefore only be advanced on the loop it started on, and trying from another
loop raises SeqError instead of treating the closed upstream as exhausted. a
fully realized cache can be read from any loop.
"""
from __future__ import annotations
import asyncio
import logging
from ..config import get_config
from ..errors import SeqError
from ..types import *

logger = logging.getLogger(__name__)


class AsyncMemoizingIterable(AsyncIterable[T]):
    def __init__(self, source: AsyncIterable[T]):
        self.evaluated_data: List[T] = []
        self._source = source
        self._iterator: Optional[AsyncIterator[T]] = None
        self._partial = True
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._lock: Optional[asyncio.Lock] = None

    def __aiter__(self) -> 'AsyncMemoizingIterator[T]':
        return AsyncMemoizingIterator(self)

    @property
    def is_realized(self) -> bool:
        return not self._partial

    @property
    def realized_count(self) -> int:
        return len(self.evaluated_data)

    def _bind_loop(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if loop is not self._loop:
            if self._partial and self._iterator is not None:
                raise SeqError("memoized async source was opened on another event loop "
                               f"and is only realized up to {len(self.evaluated_data)} elements")
            self._loop = loop
            self._lock = asyncio.Lock()
        return self._lock

    async def _advance_to(self, index: int) -> bool:
        """make sure index is realized. false if the upstream ends first"""
        async with self._bind_loop():
            while len(self.evaluated_data) <= index:
                if not self._partial:
                    return False
                if self._iterator is None:
                    self._iterator = aiter(self._source)
                try:
                    value = await anext(self._iterator)
                except StopAsyncIteration:
                    logger.log(get_config().log_level,
                               f"memoized async source exhausted after {len(self.evaluated_data)} elements")
                    self._partial = False
                    return False
                except Exception as e:
                    logger.log(get_config().log_level,
                               f"memoized async source raised {type(e).__name__} after {len(self.evaluated_data)} elements")
                    raise
                self.evaluated_data.append(value)
            return True

    async def realize(self) -> None:
        """drain the upstream to completion"""
        while await self._advance_to(len(self.evaluated_data)):
            pass

    async def to_list(self) -> List[T]:
        """realize fully and return the shared buffer (not a copy)"""
        await self.realize()
        return self.evaluated_data

    def __repr__(self) -> str:
        state = "realized" if self.is_realized else "partial"
        return f"AsyncMemoizingIterable({state}, realized_count={self.realized_count})"


class AsyncMemoizingIterator(AsyncIterator[T]):
    def __init__(self, mem: AsyncMemoizingIterable[T]):
        self._mem = mem
        self._index = 0

    def __aiter__(self) -> 'AsyncMemoizingIterator[T]':
        return self

    async def __anext__(self) -> T:
        mem = self._mem
        if self._index < len(mem.evaluated_data) or await mem._advance_to(self._index):
            value = mem.evaluated_data[self._index]
            self._index += 1
            return value
        raise StopAsyncIteration
