from __future__ import annotations
import typing
from ..iterables import *
from ..memoize import MemoizingIterable
from ..types import *

if typing.TYPE_CHECKING:
    from ..seq import Seq


class _CoreOperations(Generic[T]):
    """
    the lazy transformations of Seq. none of these touch the source; each
    wraps it in one more node and returns a new Seq around that node.
    """

    def map(self: 'Seq[T]', f: Selector[T, U]) -> 'Seq[U]':
        """lazily apply f to every element. not cached: every traversal calls f again"""
        from ..seq import Seq
        return Seq(MapIterable(f, self._xs))

    def filter(self: 'Seq[T]', p: Predicate[T]) -> 'Seq[T]':
        """keep the elements satisfying p"""
        from ..seq import Seq
        return Seq(FilterIterable(p, self._xs))

    def take(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """
        at most the first n elements. terminates on infinite sources and never
        pulls the element after the nth.
        """
        from ..seq import Seq
        return Seq(TakeIterable(n, self._xs))

    def take_while(self: 'Seq[T]', p: Predicate[T]) -> 'Seq[T]':
        """elements up to (not including) the first one failing p"""
        from ..seq import Seq
        return Seq(TakeWhileIterable(p, self._xs))

    def drop(self: 'Seq[T]', n: int) -> 'Seq[T]':
        """everything after the first n elements. drop(math.inf) is always empty"""
        from ..seq import Seq
        return Seq(DropIterable(n, self._xs))

    def drop_while(self: 'Seq[T]', p: Predicate[T]) -> 'Seq[T]':
        """drop the prefix satisfying p; once an element fails p nothing more is dropped"""
        from ..seq import Seq
        return Seq(DropWhileIterable(p, self._xs))

    def zip(self: 'Seq[T]', other: Iterable[U]) -> 'Seq[Tuple[T, U]]':
        """pair elements by position, as long as the shorter of the two"""
        from ..seq import Seq
        return Seq(ZipIterable(self._xs, other))

    def zip_with(self: 'Seq[T]', f: Callable[[T, U], V], other: Iterable[U]) -> 'Seq[V]':
        """combine elements by position with f"""
        from ..seq import Seq
        return Seq(ZipWithIterable(f, self._xs, other))

    def concat(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """all of this sequence, then all of other"""
        from ..seq import Seq
        return Seq(ConcatIterable(self._xs, other))

    def cons(self: 'Seq[T]', x: T) -> 'Seq[T]':
        """prepend a single element"""
        from ..seq import Seq
        return Seq(ConsIterable(x, self._xs))

    def join(self: 'Seq[Iterable[U]]') -> 'Seq[U]':
        """flatten a sequence of sequences, one level deep"""
        from ..seq import Seq
        return Seq(JoinIterable(self._xs))

    def concat_map(self: 'Seq[T]', f: Selector[T, Iterable[U]]) -> 'Seq[U]':
        """map, then join"""
        return self.map(f).join()

    def intersperse(self: 'Seq[T]', sep: T) -> 'Seq[T]':
        """put sep between every two adjacent elements"""
        from ..seq import Seq
        return Seq(IntersperseIterable(self._xs, sep))

    def intercalate(self: 'Seq[T]', sep: Iterable[T]) -> 'Seq[T]':
        """put all of sep between every two adjacent elements"""
        from ..seq import Seq
        return Seq(IntercalateIterable(self._xs, sep))

    def indexed(self: 'Seq[T]') -> 'Seq[IndexedValue]':
        """pair every element with its zero-based position"""
        return self.zip_with(lambda value, index: IndexedValue(index, value), EnumFromIterable(0, 1))

    def split_at(self: 'Seq[T]', n: int) -> Tuple['Seq[T]', 'Seq[T]']:
        """(take(n), drop(n)); for n <= 0 that is (empty, self)"""
        from ..seq import Seq
        if n <= 0:
            return Seq([]), self
        return self.take(n), self.drop(n)

    def cycle(self: 'Seq[T]') -> 'Seq[T]':
        """
        repeat the sequence forever by re-traversing it. an empty sequence
        stays empty rather than looping without end.
        """
        from ..seq import Seq
        return Seq(CycleIterable(self._xs))

    def memoize(self: 'Seq[T]') -> 'Seq[T]':
        """
        a sequence that evaluates each element of this one at most once, shared
        by every later traversal. memoizing an infinite sequence is fine as long
        as it is never fully traversed. this operation is lazy.
        """
        from ..seq import Seq
        if isinstance(self._xs, MemoizingIterable):
            return self
        return Seq(MemoizingIterable(self._xs))
