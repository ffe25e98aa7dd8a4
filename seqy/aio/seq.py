from __future__ import annotations
import typing
from .iterables import *
from .memoize import AsyncMemoizingIterable
from ..config import get_config
from ..iterables import EnumFromIterable
from ..ord import Comparator, make_comparator
from ..types import *

if typing.TYPE_CHECKING:
    from ..seq import Seq


class AsyncSeq(AsyncIterable[T]):
    """
    a lazy, chainable sequence over an async iterable.

    mirrors Seq: transformations build new sequences without touching the
    source, terminals are coroutines. per-element functions given to map,
    filter, take_while, drop_while, zip_with, reduce, all and any may return
    awaitables; each one is awaited before the next element is pulled.
    """

    def __init__(self, xs: AsyncIterable[T]):
        self._xs = xs

    def __aiter__(self) -> AsyncIterator[T]:
        return aiter(self._xs)

    def __repr__(self) -> str:
        return f"AsyncSeq({type(self._xs).__name__})"

    # --- transformations ---

    def map(self, f: Callable[[T], MaybeAwaitable[U]]) -> 'AsyncSeq[U]':
        return AsyncSeq(MapAsyncIterable(f, self._xs))

    def filter(self, p: Callable[[T], MaybeAwaitable[bool]]) -> 'AsyncSeq[T]':
        return AsyncSeq(FilterAsyncIterable(p, self._xs))

    def take(self, n: int) -> 'AsyncSeq[T]':
        """at most the first n elements; never pulls the one after the nth"""
        return AsyncSeq(TakeAsyncIterable(n, self._xs))

    def take_while(self, p: Callable[[T], MaybeAwaitable[bool]]) -> 'AsyncSeq[T]':
        return AsyncSeq(TakeWhileAsyncIterable(p, self._xs))

    def drop(self, n: int) -> 'AsyncSeq[T]':
        return AsyncSeq(DropAsyncIterable(n, self._xs))

    def drop_while(self, p: Callable[[T], MaybeAwaitable[bool]]) -> 'AsyncSeq[T]':
        return AsyncSeq(DropWhileAsyncIterable(p, self._xs))

    def zip(self, other: AnyIterable[U]) -> 'AsyncSeq[Tuple[T, U]]':
        """pair by position with a sync or async partner; as long as the shorter one"""
        return AsyncSeq(ZipAsyncIterable(self._xs, other))

    def zip_with(self, f: Callable[[T, U], MaybeAwaitable[V]], other: AnyIterable[U]) -> 'AsyncSeq[V]':
        return AsyncSeq(ZipWithAsyncIterable(f, self._xs, other))

    def concat(self, other: AnyIterable[T]) -> 'AsyncSeq[T]':
        return AsyncSeq(ConcatAsyncIterable(self._xs, other))

    def cons(self, x: MaybeAwaitable[T]) -> 'AsyncSeq[T]':
        return AsyncSeq(ConsAsyncIterable(x, self._xs))

    def join(self: 'AsyncSeq[AnyIterable[U]]') -> 'AsyncSeq[U]':
        """flatten one level; the inner sequences may be sync or async"""
        return AsyncSeq(JoinAsyncIterable(self._xs))

    def concat_map(self, f: Callable[[T], MaybeAwaitable[AnyIterable[U]]]) -> 'AsyncSeq[U]':
        return self.map(f).join()

    def intersperse(self, sep: T) -> 'AsyncSeq[T]':
        return AsyncSeq(IntersperseAsyncIterable(self._xs, sep))

    def intercalate(self, sep: Iterable[T]) -> 'AsyncSeq[T]':
        return AsyncSeq(IntercalateAsyncIterable(self._xs, sep))

    def indexed(self) -> 'AsyncSeq[IndexedValue]':
        return self.zip_with(lambda value, index: IndexedValue(index, value), EnumFromIterable(0, 1))

    def split_at(self, n: int) -> Tuple['AsyncSeq[T]', 'AsyncSeq[T]']:
        """(take(n), drop(n)); for n <= 0 that is (empty, self)"""
        if n <= 0:
            return AsyncSeq(SyncAsAsyncIterable([])), self
        return self.take(n), self.drop(n)

    def cycle(self) -> 'AsyncSeq[T]':
        return AsyncSeq(CycleAsyncIterable(self._xs))

    def memoize(self) -> 'AsyncSeq[T]':
        """evaluate each element at most once, shared by all later traversals"""
        if isinstance(self._xs, AsyncMemoizingIterable):
            return self
        return AsyncSeq(AsyncMemoizingIterable(self._xs))

    def sort(self, reverse: bool = False) -> 'AsyncSeq[T]':
        return AsyncSeq(SortedAsyncIterable(self._xs, reverse=reverse))

    def sort_by(self, cmp: Union[Comparator[T], Comparer[T]]) -> 'AsyncSeq[T]':
        return AsyncSeq(SortedAsyncIterable(self._xs, key=make_comparator(cmp).as_key()))

    def sort_on(self, key_selector: KeySelector[T, K], reverse: bool = False) -> 'AsyncSeq[T]':
        return AsyncSeq(SortedAsyncIterable(self._xs, key=key_selector, reverse=reverse))

    # --- terminals ---

    async def collect(self, always_copy: Optional[bool] = None) -> List[T]:
        """evaluate the whole sequence into a list"""
        if always_copy is None:
            always_copy = get_config().always_copy
        if isinstance(self._xs, AsyncMemoizingIterable):
            data = await self._xs.to_list()
            return data.copy() if always_copy else data
        return [x async for x in self._xs]

    async def collect_seq(self) -> 'Seq[T]':
        """evaluate into a sync Seq over a list"""
        from ..seq import Seq
        return Seq(await self.collect(always_copy=True))

    async def collect_string(self: 'AsyncSeq[str]') -> str:
        return "".join(await self.collect(always_copy=False))

    async def count(self) -> int:
        if isinstance(self._xs, AsyncMemoizingIterable):
            return len(await self._xs.to_list())
        return await self.reduce(lambda c, _: c + 1, 0)

    async def reduce(self, f: Callable[[U, T], MaybeAwaitable[U]], init: U) -> U:
        """strict left fold"""
        acc = init
        async for x in self._xs:
            acc = await resolve(f(acc, x))
        return acc

    async def reduce_right(self, f: Callable[[T, U], MaybeAwaitable[U]], init: U) -> U:
        """right fold; needs the whole sequence"""
        acc = init
        for x in reversed(await self.collect(always_copy=True)):
            acc = await resolve(f(x, acc))
        return acc

    async def sum(self: 'AsyncSeq[Union[int, float]]') -> Union[int, float]:
        return await self.reduce(lambda a, b: a + b, 0)

    async def product(self: 'AsyncSeq[Union[int, float]]') -> Union[int, float]:
        return await self.reduce(lambda p, x: p * x, 1)

    async def all(self, p: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        """short-circuits on the first element failing p"""
        async for x in self._xs:
            if not await resolve(p(x)):
                return False
        return True

    async def any(self, p: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        """short-circuits on the first element satisfying p"""
        async for x in self._xs:
            if await resolve(p(x)):
                return True
        return False

    async def first(self, default: Optional[T] = None) -> Optional[T]:
        async for x in self._xs:
            return x
        return default

    async def un_cons(self) -> Tuple[Optional[T], 'AsyncSeq[T]']:
        """(head, tail); only the head is evaluated"""
        head = await self.take(1).collect(always_copy=False)
        if not head:
            return None, AsyncSeq(SyncAsAsyncIterable([]))
        return head[0], self.drop(1)
