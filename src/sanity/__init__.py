"""
sanity - Functional helpers for treating Python collections as immutable.

Clojure/Underscore-style higher-order functions (map, filter, reduce, take,
merge, zipmap...) that always return a new list or dict and never modify
their inputs, so calls chain safely::

    from sanity import filter, map, is_positive

    filter(map([1, -2, 3], lambda x: x * 2), is_positive)  # [2, 6]
"""

import logging

from sanity.errors import (
    DivisionByZeroError,
    EmptyCollectionError,
    FileIOError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    LengthMismatchError,
    SanityError,
)
from sanity.files import slurp, spit
from sanity.maps import (
    assoc,
    dissoc,
    get,
    has_key,
    keys,
    merge,
    merge_with,
    pairs,
    rename_keys,
    vals,
    zipmap,
)
from sanity.numeric import (
    add,
    dec,
    divide,
    identity,
    inc,
    is_even,
    is_negative,
    is_odd,
    is_positive,
    is_zero,
    modulo,
    multiply,
    negate,
    subtract,
)
from sanity.random import set_seed
from sanity.seqs import (
    any,
    concat,
    conj,
    cons,
    contains,
    drop,
    drop_while,
    every,
    filter,
    first,
    index_of,
    interleave,
    interpose,
    iterate,
    last,
    length,
    map,
    maximum,
    minimum,
    nth,
    range,
    reduce,
    remove,
    repeat,
    repeatedly,
    rest,
    reverse,
    shuffle,
    sort,
    take,
    take_while,
)
from sanity.strings import split

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Errors
    "SanityError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "FileIOError",
    # Sequences
    "first", "rest", "last", "nth", "length",
    "map", "filter", "remove", "reduce", "minimum", "maximum",
    "sort", "shuffle", "reverse",
    "every", "any", "contains", "index_of",
    "take", "drop", "take_while", "drop_while",
    "cons", "conj", "concat", "interleave", "interpose",
    "range", "repeat", "repeatedly", "iterate",
    # Mappings
    "has_key", "get", "assoc", "dissoc",
    "keys", "vals", "pairs", "zipmap",
    "merge", "merge_with", "rename_keys",
    # Scalars
    "is_even", "is_odd", "is_zero", "is_positive", "is_negative",
    "inc", "dec", "add", "subtract", "multiply", "divide", "modulo",
    "identity", "negate",
    # Random
    "set_seed",
    # Boundary
    "split", "slurp", "spit",
]
