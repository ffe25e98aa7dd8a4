from __future__ import annotations
from collections.abc import Mapping
from functools import cmp_to_key
from .types import *


def compare(a: Any, b: Any) -> int:
    """
    default ordering for naturally comparable values (numbers, strings, bools,
    and tuples/lists of those). returns -1, 0 or 1.
    """
    if a < b: return -1
    if a > b: return 1
    return 0


class Comparator(Generic[T]):
    """
    a comparison function (a, b) -> int with chaining combinators.
    negative means a sorts before b, zero means equal, positive means after.
    """

    def __init__(self, cmp: Comparer[T]):
        self._cmp = cmp

    def __call__(self, a: T, b: T) -> int:
        return self._cmp(a, b)

    def then_by(self, cmp: Comparer[T]) -> 'Comparator[T]':
        """use cmp to break ties left by this comparator"""
        first = self._cmp

        def chained(a: T, b: T) -> int:
            ord1 = first(a, b)
            return ord1 if ord1 != 0 else cmp(a, b)
        return Comparator(chained)

    def desc(self) -> 'Comparator[T]':
        """invert the comparison, i.e. descending order"""
        cmp = self._cmp
        return Comparator(lambda a, b: cmp(b, a))

    def as_key(self) -> Callable[[T], Any]:
        """adapt to a sort key for sorted() / list.sort()"""
        return cmp_to_key(self._cmp)

    def __repr__(self) -> str:
        return f"Comparator({getattr(self._cmp, '__name__', self._cmp)!r})"


def make_comparator(cmp: Comparer[T]) -> Comparator[T]:
    """make a comparator out of a plain comparison function"""
    if isinstance(cmp, Comparator):
        return cmp
    return Comparator(cmp)


def comparing(selector: KeySelector[T, K]) -> Comparator[T]:
    """compare two values by a naturally ordered projection of them"""
    return Comparator(lambda a, b: compare(selector(a), selector(b)))


def compare_on(name: str) -> Comparator[Any]:
    """compare objects on a named attribute, or on a key for mappings"""
    def get(obj):
        return obj[name] if isinstance(obj, Mapping) else getattr(obj, name)
    return comparing(get)
