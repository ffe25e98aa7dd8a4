import typing
from .iterables import (
    AsyncFromIterable, ConsAsyncIterable, CycleAsyncIterable, IterateAsyncIterable, SyncAsAsyncIterable
)
from .. import factories as _sync
from ..types import *

if typing.TYPE_CHECKING:
    from .seq import AsyncSeq

def from_iterable(xs: Iterable[MaybeAwaitable[T]]) -> 'AsyncSeq[T]':
    """
    create an async seq from values and/or awaitables.
    each element is awaited in order, one at a time, before it is yielded.
    """
    from .seq import AsyncSeq
    return AsyncSeq(AsyncFromIterable(xs))

def from_async_iterable(xs: AsyncIterable[T]) -> 'AsyncSeq[T]':
    """wrap any async iterable (an async generator, another AsyncSeq, ...)"""
    from .seq import AsyncSeq
    return AsyncSeq(xs)

def iterate(f: Callable[[T], MaybeAwaitable[T]], x: T) -> 'AsyncSeq[T]':
    """x, f(x), f(f(x)), ... forever. awaitable results are awaited before the next step"""
    from .seq import AsyncSeq
    return AsyncSeq(IterateAsyncIterable(f, x))

def singleton(x: MaybeAwaitable[T]) -> 'AsyncSeq[T]':
    return from_iterable([x])

def empty() -> 'AsyncSeq[Any]':
    from .seq import AsyncSeq
    return AsyncSeq(SyncAsAsyncIterable([]))

def cycle(xs: AnyIterable[T]) -> 'AsyncSeq[T]':
    """repeat xs by re-traversing it; an empty xs gives an empty seq"""
    from .seq import AsyncSeq
    return AsyncSeq(CycleAsyncIterable(xs))

def cons(x: MaybeAwaitable[T], xs: AnyIterable[U]) -> 'AsyncSeq[Union[T, U]]':
    from .seq import AsyncSeq
    return AsyncSeq(ConsAsyncIterable(x, xs))

# --- lifted from the sync producers ---

def from_range(start, stop, step=1) -> 'AsyncSeq[Union[int, float]]':
    """inclusive range; validated right away like the sync one"""
    return _sync.from_range(start, stop, step).to_async()

def enum_from(start=0, step=1) -> 'AsyncSeq[Union[int, float]]':
    return _sync.enum_from(start, step).to_async()

def repeat(x: T) -> 'AsyncSeq[T]':
    return _sync.repeat(x).to_async()

def replicate(n: int, x: T) -> 'AsyncSeq[T]':
    return _sync.replicate(n, x).to_async()

def from_indexed_generator(g: Callable[[int], MaybeAwaitable[Optional[T]]]) -> 'AsyncSeq[T]':
    """g(0), g(1), ... up to the first None. g may be async"""
    return enum_from(0).map(g).take_while(lambda x: x is not None)
