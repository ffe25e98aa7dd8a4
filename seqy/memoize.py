"""
memoization cache shared by every reader of a memoized sequence.

the cache owns the realized elements (evaluated_data) and, until the source is
exhausted, the partial evaluation state: how many elements have been realized
and the live upstream iterator. readers are MemoizingIterator objects, each
with its own index into the shared buffer. an element is pulled from the
upstream at most once no matter how many readers eventually see it.
"""
from __future__ import annotations
import logging
from .config import get_config
from .types import *

logger = logging.getLogger(__name__)


class _PartialEvalState(Generic[T]):
    """bookkeeping while the upstream is not yet drained"""

    def __init__(self, source: Iterable[T]):
        self.evaluation_index = 0
        self._source = source
        self._iterator: Optional[Iterator[T]] = None

    @property
    def iterator(self) -> Iterator[T]:
        # opened on the first advance, so memoize() alone never touches the source
        if self._iterator is None:
            self._iterator = iter(self._source)
        return self._iterator


class MemoizingIterable(Iterable[T]):
    """
    an iterable that realizes its source on demand, exactly once per element.
    a list source is already realized: it is kept by reference, not copied.
    """

    def __init__(self, source: Iterable[T]):
        if isinstance(source, list):
            self.evaluated_data: List[T] = source
            self.partial_state: Optional[_PartialEvalState[T]] = None
        else:
            self.evaluated_data = []
            self.partial_state = _PartialEvalState(source)

    def __iter__(self) -> 'MemoizingIterator[T]':
        return MemoizingIterator(self)

    @property
    def is_realized(self) -> bool:
        return self.partial_state is None

    @property
    def realized_count(self) -> int:
        return len(self.evaluated_data)

    def _advance(self) -> bool:
        """
        pull one new element into the buffer. returns false once the upstream
        is exhausted. upstream errors propagate and leave the state resumable.
        """
        state = self.partial_state
        if state is None:
            return False
        try:
            value = next(state.iterator)
        except StopIteration:
            self._finish()
            return False
        except Exception as e:
            logger.log(get_config().log_level,
                       f"memoized source raised {type(e).__name__} after {state.evaluation_index} elements")
            raise
        self.evaluated_data.append(value)
        state.evaluation_index += 1
        return True

    def _finish(self) -> None:
        logger.log(get_config().log_level,
                   f"memoized source exhausted after {len(self.evaluated_data)} elements")
        self.partial_state = None

    def realize(self) -> None:
        """drain the upstream to completion, regardless of any reader's position"""
        while self._advance():
            pass

    def to_list(self) -> List[T]:
        """realize fully and return the shared buffer (not a copy)"""
        self.realize()
        return self.evaluated_data

    def __getitem__(self, index: int) -> T:
        """realize up to (and including) index; negative indexes realize everything"""
        if index < 0:
            self.realize()
        else:
            while len(self.evaluated_data) <= index and self._advance():
                pass
        return self.evaluated_data[index]

    def __repr__(self) -> str:
        state = "realized" if self.is_realized else "partial"
        return f"MemoizingIterable({state}, realized_count={self.realized_count})"


class MemoizingIterator(Iterator[T]):
    """a single reader of a shared MemoizingIterable"""

    def __init__(self, mem: MemoizingIterable[T]):
        self._mem = mem
        self._index = 0

    def __iter__(self) -> 'MemoizingIterator[T]':
        return self

    def __next__(self) -> T:
        mem = self._mem
        # another reader may already have realized this position
        if self._index < len(mem.evaluated_data) or mem._advance():
            value = mem.evaluated_data[self._index]
            self._index += 1
            return value
        raise StopIteration


def is_memoizing_iterable(xs: Any) -> bool:
    return isinstance(xs, MemoizingIterable)
