r"""
'   ________  ____  __ __ __ __
'  /  ___/  _/ __ \/ /\ \ \/  /
'  \___ \\  ___/ /_/ /  \ \  /
'  /____/ \___/\__  /    /_/
'               |__|
"""
import logging

# expose the main classes
from .seq import Seq
from .memoize import MemoizingIterable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    enum_from,
    iterate,
    from_indexed_generator,
    repeat,
    replicate,
    singleton,
    empty,
    cycle,
    cons,
    seqy,
    S
)

# expose comparators
from .ord import Comparator, make_comparator, comparing, compare_on, compare

# expose supporting types, errors and config
from .types import IndexedValue
from .errors import SeqError, InvalidRangeError
from .config import SeqConfig, get_config, configure

# the async side lives in seqy.aio
from . import aio
from .aio import AsyncSeq

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Seq",
    "AsyncSeq",
    "MemoizingIterable",
    "from_iterable",
    "from_range",
    "enum_from",
    "iterate",
    "from_indexed_generator",
    "repeat",
    "replicate",
    "singleton",
    "empty",
    "cycle",
    "cons",
    "seqy",
    "S",
    "Comparator",
    "make_comparator",
    "comparing",
    "compare_on",
    "compare",
    "IndexedValue",
    "SeqError",
    "InvalidRangeError",
    "SeqConfig",
    "get_config",
    "configure",
    "aio"
]
