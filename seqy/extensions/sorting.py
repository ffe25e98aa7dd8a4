from __future__ import annotations
import typing
from ..iterables import SortedIterable
from ..ord import Comparator, make_comparator
from ..types import *

if typing.TYPE_CHECKING:
    from ..seq import Seq


class _SortingOperations(Generic[T]):
    """
    sorting is deferred like everything else, but a traversal of the result
    realizes the whole source first. python's sort is stable.
    """

    def sort(self: 'Seq[T]', reverse: bool = False) -> 'Seq[T]':
        """sort by natural ordering"""
        from ..seq import Seq
        return Seq(SortedIterable(self._xs, reverse=reverse))

    def sort_by(self: 'Seq[T]', cmp: Union[Comparator[T], Comparer[T]]) -> 'Seq[T]':
        """sort with a comparator or a plain (a, b) -> int function"""
        from ..seq import Seq
        return Seq(SortedIterable(self._xs, key=make_comparator(cmp).as_key()))

    def sort_on(self: 'Seq[T]', key_selector: KeySelector[T, K], reverse: bool = False) -> 'Seq[T]':
        """sort by a projected key"""
        from ..seq import Seq
        return Seq(SortedIterable(self._xs, key=key_selector, reverse=reverse))
