from __future__ import annotations
import typing

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor
from .extensions.sorting import _SortingOperations

# --- abstract base class ---

class ISeq(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a fresh traversal of the sequence"""
        pass

# --- base implementation ---

class _BaseSeq(ISeq[T]):
    def __init__(self, xs: Iterable[T]):
        """wrap an iterable. the source is never mutated, only wrapped further"""
        self._xs = xs

    def __iter__(self) -> Iterator[T]:
        return iter(self._xs)

    def __repr__(self) -> str:
        return f"Seq({type(self._xs).__name__})"

# --- main seq class ---

class Seq(
    _BaseSeq[T],
    _CoreOperations[T],
    _TerminalOperations[T],
    _SortingOperations[T]
):
    """a lazy, chainable sequence over any python iterable."""
    def __init__(self, xs: Iterable[T]):
        super().__init__(xs)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def to_async(self) -> 'AsyncSeq[T]':
        """lift into an async sequence over the same source"""
        from .aio.seq import AsyncSeq
        from .aio.iterables import SyncAsAsyncIterable
        return AsyncSeq(SyncAsAsyncIterable(self._xs))


if typing.TYPE_CHECKING:
    from .aio.seq import AsyncSeq
