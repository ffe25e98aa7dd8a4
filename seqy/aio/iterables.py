"""
async counterparts of seqy.iterables.

each node's __aiter__ is an async generator, so every traversal is fresh.
partners that may be sync or async (concat, zip) are lifted to async once, when
the node is built; only join has to decide per inner element, since those are
data.
"""
from __future__ import annotations
import inspect
import math
from collections.abc import AsyncIterable as _AsyncIterableABC
from ..types import *


async def resolve(x: MaybeAwaitable[T]) -> T:
    """await x if it is awaitable, else hand it back"""
    if inspect.isawaitable(x):
        return await x
    return x


def as_async_iterable(xs: AnyIterable[T]) -> AsyncIterable[T]:
    if isinstance(xs, _AsyncIterableABC):
        return xs
    return SyncAsAsyncIterable(xs)


def _is_infinite(n) -> bool:
    return isinstance(n, float) and n == math.inf


# --- producers ---

class SyncAsAsyncIterable(AsyncIterable[T]):
    """a sync iterable seen through the async protocol. values are passed through as is"""

    def __init__(self, xs: Iterable[T]):
        self._xs = xs

    async def __aiter__(self):
        for x in self._xs:
            yield x


class AsyncFromIterable(AsyncIterable[T]):
    """values or awaitables, each awaited in order before it is yielded"""

    def __init__(self, xs: Iterable[MaybeAwaitable[T]]):
        self._xs = xs

    async def __aiter__(self):
        for x in self._xs:
            yield await resolve(x)


class IterateAsyncIterable(AsyncIterable[T]):
    """x, f(x), f(f(x)), ...; each step is awaited before the next one is computed"""

    def __init__(self, f: Callable[[T], MaybeAwaitable[T]], x: T):
        self._f, self._x = f, x

    async def __aiter__(self):
        f, x = self._f, self._x
        while True:
            yield x
            x = await resolve(f(x))


class CycleAsyncIterable(AsyncIterable[T]):
    """re-traverses xs lap after lap; a lap that yields nothing ends the cycle"""

    def __init__(self, xs: AnyIterable[T]):
        self._xs = as_async_iterable(xs)

    async def __aiter__(self):
        while True:
            produced = False
            async for x in self._xs:
                produced = True
                yield x
            if not produced:
                return


class ConsAsyncIterable(AsyncIterable[T]):
    def __init__(self, x: MaybeAwaitable[T], xs: AnyIterable[T]):
        self._x, self._xs = x, as_async_iterable(xs)

    async def __aiter__(self):
        yield await resolve(self._x)
        async for y in self._xs:
            yield y


# --- combinators ---

class MapAsyncIterable(AsyncIterable[U]):
    def __init__(self, f: Callable[[T], MaybeAwaitable[U]], xs: AsyncIterable[T]):
        self._f, self._xs = f, xs

    async def __aiter__(self):
        f = self._f
        async for x in self._xs:
            yield await resolve(f(x))


class FilterAsyncIterable(AsyncIterable[T]):
    def __init__(self, p: Callable[[T], MaybeAwaitable[bool]], xs: AsyncIterable[T]):
        self._p, self._xs = p, xs

    async def __aiter__(self):
        p = self._p
        async for x in self._xs:
            if await resolve(p(x)):
                yield x


class TakeAsyncIterable(AsyncIterable[T]):
    def __init__(self, n, xs: AsyncIterable[T]):
        self._n, self._xs = n, xs

    async def __aiter__(self):
        if self._n <= 0:
            return
        n = self._n if _is_infinite(self._n) else int(self._n)
        taken = 0
        async for x in self._xs:
            yield x
            taken += 1
            # stop before asking the source for one more
            if taken >= n:
                return


class TakeWhileAsyncIterable(AsyncIterable[T]):
    def __init__(self, p: Callable[[T], MaybeAwaitable[bool]], xs: AsyncIterable[T]):
        self._p, self._xs = p, xs

    async def __aiter__(self):
        p = self._p
        async for x in self._xs:
            if not await resolve(p(x)):
                return
            yield x


class DropAsyncIterable(AsyncIterable[T]):
    def __init__(self, n, xs: AsyncIterable[T]):
        self._n, self._xs = n, xs

    async def __aiter__(self):
        if _is_infinite(self._n):
            return
        n = 0 if self._n <= 0 else int(self._n)
        async for x in self._xs:
            if n > 0:
                n -= 1
            else:
                yield x


class DropWhileAsyncIterable(AsyncIterable[T]):
    def __init__(self, p: Callable[[T], MaybeAwaitable[bool]], xs: AsyncIterable[T]):
        self._p, self._xs = p, xs

    async def __aiter__(self):
        p = self._p
        dropping = True
        async for x in self._xs:
            if dropping:
                if await resolve(p(x)):
                    continue
                dropping = False
            yield x


class ZipWithAsyncIterable(AsyncIterable[V]):
    """
    advances xs, then ys, one step at a time and never concurrently.
    stops at the shorter source; ys is not pulled once xs is spent.
    """

    def __init__(self, f: Callable[[T, U], MaybeAwaitable[V]], xs: AsyncIterable[T], ys: AnyIterable[U]):
        self._f, self._xs, self._ys = f, xs, as_async_iterable(ys)

    async def __aiter__(self):
        f = self._f
        ys = aiter(self._ys)
        async for x in self._xs:
            try:
                y = await anext(ys)
            except StopAsyncIteration:
                return
            yield await resolve(f(x, y))


class ZipAsyncIterable(ZipWithAsyncIterable):
    def __init__(self, xs: AsyncIterable[T], ys: AnyIterable[U]):
        super().__init__(lambda x, y: (x, y), xs, ys)


class ConcatAsyncIterable(AsyncIterable[T]):
    def __init__(self, xs: AsyncIterable[T], ys: AnyIterable[T]):
        self._xs, self._ys = xs, as_async_iterable(ys)

    async def __aiter__(self):
        async for x in self._xs:
            yield x
        async for y in self._ys:
            yield y


class JoinAsyncIterable(AsyncIterable[T]):
    """flattens one level; inner sequences may be sync or async"""

    def __init__(self, xss: AsyncIterable[AnyIterable[T]]):
        self._xss = xss

    async def __aiter__(self):
        async for xs in self._xss:
            async for x in as_async_iterable(xs):
                yield x


class IntersperseAsyncIterable(AsyncIterable[T]):
    def __init__(self, xs: AsyncIterable[T], sep: T):
        self._xs, self._sep = xs, sep

    async def __aiter__(self):
        first = True
        async for x in self._xs:
            if not first:
                yield self._sep
            yield x
            first = False


class IntercalateAsyncIterable(AsyncIterable[T]):
    def __init__(self, xs: AsyncIterable[T], sep: Iterable[T]):
        self._xs, self._sep = xs, sep

    async def __aiter__(self):
        first = True
        async for x in self._xs:
            if not first:
                for y in self._sep:
                    yield y
            yield x
            first = False


class SortedAsyncIterable(AsyncIterable[T]):
    def __init__(self, xs: AsyncIterable[T], key: Optional[Callable[[T], Any]] = None, reverse: bool = False):
        self._xs, self._key, self._reverse = xs, key, reverse

    async def __aiter__(self):
        realized = [x async for x in self._xs]
        for x in sorted(realized, key=self._key, reverse=self._reverse):
            yield x
