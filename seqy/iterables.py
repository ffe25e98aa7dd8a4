"""
the lazy building blocks behind Seq.

every class here is an iterable whose __iter__ starts a fresh traversal of
its upstream source(s). nothing is pulled until that traversal is advanced,
and no node keeps state between traversals.
"""
from __future__ import annotations
import math
from itertools import chain, count, dropwhile, islice, repeat, takewhile
from .types import *


def _is_infinite(n) -> bool:
    return isinstance(n, float) and n == math.inf


# --- producers ---

class RangeIterable(Iterable[Union[int, float]]):
    """inclusive range start, start + step, ... <= stop"""

    def __init__(self, start, stop, step):
        self._start, self._stop, self._step = start, stop, step

    def __iter__(self):
        start, stop, step = self._start, self._stop, self._step
        if all(isinstance(v, int) for v in (start, stop, step)):
            return iter(range(start, stop + 1, step))
        return self._float_range(start, stop, step)

    @staticmethod
    def _float_range(start, stop, step):
        i = start
        while i <= stop:
            yield i
            i += step


class EnumFromIterable(Iterable[Union[int, float]]):
    """start, start + step, ... forever"""

    def __init__(self, start, step):
        self._start, self._step = start, step

    def __iter__(self):
        return count(self._start, self._step)


class IterateIterable(Iterable[T]):
    """x, f(x), f(f(x)), ... forever"""

    def __init__(self, f: Callable[[T], T], x: T):
        self._f, self._x = f, x

    def __iter__(self):
        f, x = self._f, self._x
        while True:
            yield x
            x = f(x)


class RepeatIterable(Iterable[T]):
    """the same value, forever or times times"""

    def __init__(self, x: T, times: Optional[int] = None):
        self._x, self._times = x, times

    def __iter__(self):
        if self._times is None:
            return repeat(self._x)
        return repeat(self._x, max(0, self._times))


class CycleIterable(Iterable[T]):
    """
    re-traverses xs lap after lap. a lap that yields nothing ends the cycle,
    so an empty source (or a spent one-shot iterator) gives an empty sequence.
    itertools.cycle is not used since it replays saved copies instead of
    re-running the source.
    """

    def __init__(self, xs: Iterable[T]):
        self._xs = xs

    def __iter__(self):
        xs = self._xs
        while True:
            produced = False
            for x in xs:
                produced = True
                yield x
            if not produced:
                return


class ConsIterable(Iterable[T]):
    def __init__(self, x: T, xs: Iterable[T]):
        self._x, self._xs = x, xs

    def __iter__(self):
        return chain((self._x,), self._xs)


# --- combinators ---

class MapIterable(Iterable[U]):
    def __init__(self, f: Selector[T, U], xs: Iterable[T]):
        self._f, self._xs = f, xs

    def __iter__(self):
        return map(self._f, self._xs)


class FilterIterable(Iterable[T]):
    def __init__(self, p: Predicate[T], xs: Iterable[T]):
        self._p, self._xs = p, xs

    def __iter__(self):
        return filter(self._p, self._xs)


class TakeIterable(Iterable[T]):
    """
    at most the first n elements. islice stops without requesting the
    element after the nth.
    """

    def __init__(self, n, xs: Iterable[T]):
        self._n, self._xs = n, xs

    def __iter__(self):
        if self._n <= 0:
            return iter(())
        if _is_infinite(self._n):
            return iter(self._xs)
        return islice(self._xs, int(self._n))


class TakeWhileIterable(Iterable[T]):
    def __init__(self, p: Predicate[T], xs: Iterable[T]):
        self._p, self._xs = p, xs

    def __iter__(self):
        return takewhile(self._p, self._xs)


class DropIterable(Iterable[T]):
    def __init__(self, n, xs: Iterable[T]):
        self._n, self._xs = n, xs

    def __iter__(self):
        if self._n <= 0:
            return iter(self._xs)
        # dropping everything never needs to look at the source
        if _is_infinite(self._n):
            return iter(())
        return islice(self._xs, int(self._n), None)


class DropWhileIterable(Iterable[T]):
    def __init__(self, p: Predicate[T], xs: Iterable[T]):
        self._p, self._xs = p, xs

    def __iter__(self):
        return dropwhile(self._p, self._xs)


class ZipIterable(Iterable[Tuple[T, U]]):
    """pairs by position; stops at the shorter source"""

    def __init__(self, xs: Iterable[T], ys: Iterable[U]):
        self._xs, self._ys = xs, ys

    def __iter__(self):
        # zip pulls from xs first and never touches ys once xs is spent
        return zip(self._xs, self._ys)


class ZipWithIterable(Iterable[V]):
    def __init__(self, f: Callable[[T, U], V], xs: Iterable[T], ys: Iterable[U]):
        self._f, self._xs, self._ys = f, xs, ys

    def __iter__(self):
        return map(self._f, self._xs, self._ys)


class ConcatIterable(Iterable[T]):
    def __init__(self, xs: Iterable[T], ys: Iterable[T]):
        self._xs, self._ys = xs, ys

    def __iter__(self):
        return chain(self._xs, self._ys)


class JoinIterable(Iterable[T]):
    """flattens exactly one level"""

    def __init__(self, xss: Iterable[Iterable[T]]):
        self._xss = xss

    def __iter__(self):
        return chain.from_iterable(self._xss)


class IntersperseIterable(Iterable[T]):
    def __init__(self, xs: Iterable[T], sep: T):
        self._xs, self._sep = xs, sep

    def __iter__(self):
        sep = self._sep
        first = True
        for x in self._xs:
            if not first:
                yield sep
            yield x
            first = False


class IntercalateIterable(Iterable[T]):
    """like intersperse, but the separator is itself a sequence"""

    def __init__(self, xs: Iterable[T], sep: Iterable[T]):
        self._xs, self._sep = xs, sep

    def __iter__(self):
        sep = self._sep
        first = True
        for x in self._xs:
            if not first:
                yield from sep
            yield x
            first = False


class SortedIterable(Iterable[T]):
    """realizes and sorts the source each time it is traversed"""

    def __init__(self, xs: Iterable[T], key: Optional[Callable[[T], Any]] = None, reverse: bool = False):
        self._xs, self._key, self._reverse = xs, key, reverse

    def __iter__(self):
        return iter(sorted(self._xs, key=self._key, reverse=self._reverse))
