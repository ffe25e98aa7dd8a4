from __future__ import annotations
import typing
from collections.abc import Sequence
import numpy as np
import pandas as pd
from ..config import get_config
from ..memoize import MemoizingIterable
from ..types import *

if typing.TYPE_CHECKING:
    from ..seq import Seq

# backings whose length is known without iterating
_SIZED_BACKINGS = (Sequence, np.ndarray)


class _TerminalOperations(Generic[T]):
    """
    the eager side of Seq: these drive iteration, to the end or until they can
    short-circuit, and run whatever effects the sequence was built with.
    """

    def collect(self: 'Seq[T]', always_copy: Optional[bool] = None) -> List[T]:
        """
        evaluate the whole sequence into a list.
        a list backing or a memoized buffer is not re-evaluated; with
        always_copy=False it is returned as is instead of copied.
        """
        if always_copy is None:
            always_copy = get_config().always_copy
        xs = self._xs
        if isinstance(xs, MemoizingIterable):
            xs = xs.to_list()
        if isinstance(xs, list):
            return xs.copy() if always_copy else xs
        return list(xs)

    def collect_string(self: 'Seq[str]') -> str:
        """concatenate a sequence of strings"""
        return "".join(self._xs)

    def count(self: 'Seq[T]') -> int:
        """number of elements. o(1) for sized backings and realized memo buffers"""
        xs = self._xs
        if isinstance(xs, MemoizingIterable):
            return len(xs.to_list())
        if isinstance(xs, _SIZED_BACKINGS):
            return len(xs)
        return sum(1 for _ in xs)

    def reduce(self: 'Seq[T]', f: Accumulator[U, T], init: U) -> U:
        """strict left fold: f(...f(f(init, x0), x1)..., xn)"""
        acc = init
        for x in self._xs:
            acc = f(acc, x)
        return acc

    def reduce_right(self: 'Seq[T]', f: Callable[[T, U], U], init: U) -> U:
        """
        right fold: f(x0, f(x1, ... f(xn, init))).
        needs the whole sequence, so it never returns on an infinite one.
        """
        acc = init
        for x in reversed(list(self._xs)):
            acc = f(x, acc)
        return acc

    def sum(self: 'Seq[Union[int, float]]') -> Union[int, float]:
        return self.reduce(lambda a, b: a + b, 0)

    def product(self: 'Seq[Union[int, float]]') -> Union[int, float]:
        return self.reduce(lambda p, x: p * x, 1)

    def all(self: 'Seq[T]', p: Predicate[T]) -> bool:
        """true if every element satisfies p. stops at the first that does not"""
        for x in self._xs:
            if not p(x):
                return False
        return True

    def any(self: 'Seq[T]', p: Predicate[T]) -> bool:
        """true if some element satisfies p. stops at the first that does"""
        for x in self._xs:
            if p(x):
                return True
        return False

    def first(self: 'Seq[T]', default: Optional[T] = None) -> Optional[T]:
        """the first element, or default when empty. evaluates only that element"""
        for x in self._xs:
            return x
        return default

    def un_cons(self: 'Seq[T]') -> Tuple[Optional[T], 'Seq[T]']:
        """
        (head, tail). only the head is evaluated; the tail stays lazy.
        an empty sequence gives (None, empty).
        """
        from ..seq import Seq
        head = self.take(1).collect(always_copy=False)
        if not head:
            return None, Seq([])
        return head[0], self.drop(1)


class TerminalAccessor(Generic[T]):
    """exports to other containers: seq.to.list(), seq.to.array(), ..."""

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to list (always a fresh copy)"""
        return self._seq.collect(always_copy=True)

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._seq)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._seq)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._seq}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._seq.collect(always_copy=False))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._seq.collect(always_copy=True))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._seq.collect(always_copy=True))
