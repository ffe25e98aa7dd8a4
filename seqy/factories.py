import typing
from .errors import InvalidRangeError
from .iterables import (
    ConsIterable, CycleIterable, EnumFromIterable, IterateIterable, RangeIterable, RepeatIterable
)
from .types import *

if typing.TYPE_CHECKING:
    from .seq import Seq

def from_iterable(xs: Iterable[T]) -> 'Seq[T]':
    """create a seq over any iterable. lists, tuples, strings and ranges can be traversed any number of times"""
    from .seq import Seq
    return Seq(xs)

def from_range(start: Union[int, float], stop: Union[int, float], step: Union[int, float] = 1) -> 'Seq[Union[int, float]]':
    """
    create a seq of the inclusive range [start..stop].
    raises InvalidRangeError right away when stop < start or step <= 0.
    """
    from .seq import Seq
    if stop < start:
        raise InvalidRangeError("stop must not be smaller than start", start, stop, step)
    if step <= 0:
        raise InvalidRangeError("step must be larger than 0", start, stop, step)
    return Seq(RangeIterable(start, stop, step))

def enum_from(start: Union[int, float] = 0, step: Union[int, float] = 1) -> 'Seq[Union[int, float]]':
    """start, start + step, ... forever"""
    from .seq import Seq
    return Seq(EnumFromIterable(start, step))

def iterate(f: Callable[[T], T], x: T) -> 'Seq[T]':
    """
    x, f(x), f(f(x)), ... forever.
    effects of f run once per element per traversal.
    """
    from .seq import Seq
    return Seq(IterateIterable(f, x))

def from_indexed_generator(g: Callable[[int], Optional[T]]) -> 'Seq[T]':
    """g(0), g(1), ... up to the first None"""
    return enum_from(0).map(g).take_while(lambda x: x is not None)

def repeat(x: T) -> 'Seq[T]':
    """x forever"""
    from .seq import Seq
    return Seq(RepeatIterable(x))

def replicate(n: int, x: T) -> 'Seq[T]':
    """x exactly n times"""
    from .seq import Seq
    return Seq(RepeatIterable(x, n))

def singleton(x: T) -> 'Seq[T]':
    """create a seq with one element"""
    from .seq import Seq
    return Seq([x])

def empty() -> 'Seq[Any]':
    """create empty seq"""
    from .seq import Seq
    return Seq([])

def cycle(xs: Iterable[T]) -> 'Seq[T]':
    """repeat xs forever by re-traversing it. an empty xs gives an empty seq"""
    from .seq import Seq
    return Seq(CycleIterable(xs))

def cons(x: T, xs: Iterable[U]) -> 'Seq[Union[T, U]]':
    """x followed by xs"""
    from .seq import Seq
    return Seq(ConsIterable(x, xs))

# --- aliases ---
seqy = from_iterable
S = from_iterable
