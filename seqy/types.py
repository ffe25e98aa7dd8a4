from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, AsyncIterable, AsyncIterator,
    Awaitable, Any, Optional, Union, NamedTuple, Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]

# async transforms may hand back a plain value or something to await
MaybeAwaitable = Union[T, Awaitable[T]]
AnyIterable = Union[Iterable[T], AsyncIterable[T]]


class IndexedValue(NamedTuple):
    """a value paired with its zero-based position in a sequence"""
    index: int
    value: Any

    def __repr__(self) -> str:
        return f"IndexedValue(index={self.index}, value={self.value!r})"
