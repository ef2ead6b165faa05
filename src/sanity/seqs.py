"""
sanity - Sequence Operations.

Higher-order functions over ordered collections. Inputs may be any finite
iterable; every operation returns a new list and leaves its input untouched.

Several names shadow builtins (map, filter, any, range...) on purpose; the
originals stay reachable through ``_builtins``.
"""

from __future__ import annotations

import builtins as _builtins
import math
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from functools import reduce as functools_reduce
from operator import index as _as_index
from typing import Any, TypeVar

import numpy as np

from sanity.errors import EmptyCollectionError, IndexOutOfRangeError, InvalidArgumentError
from sanity.random import shuffled

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

_MISSING: Any = object()


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _integer(n: Any, what: str, operation: str) -> int:
    """Coerce an index-like value to int, rejecting bools and floats."""
    if isinstance(n, bool):
        raise InvalidArgumentError(f"{what} must be an integer, got {n!r}", operation)
    try:
        return _as_index(n)
    except TypeError as e:
        raise InvalidArgumentError(f"{what} must be an integer, got {n!r}", operation) from e


def _count(n: Any, operation: str) -> int:
    """Validate a non-negative element count."""
    n = _integer(n, "Count", operation)
    if n < 0:
        raise InvalidArgumentError(f"Count must be non-negative, got {n}", operation)
    return n


# =============================================================================
# Access
# =============================================================================


def length(coll: Iterable[Any]) -> int:
    """Return the number of elements in coll."""
    if hasattr(coll, "__len__"):
        return len(coll)
    return sum(1 for _ in coll)


def first(coll: Iterable[T]) -> T:
    """
    Return the first element.

    Raises:
        EmptyCollectionError: If coll has no elements

    Example:
        first([1, 2, 3]) -> 1
    """
    for item in coll:
        return item
    raise EmptyCollectionError("first")


def rest(coll: Iterable[T]) -> list[T]:
    """
    Return everything but the first element.

    Example:
        rest([1, 2, 3]) -> [2, 3]
        rest([]) -> []
    """
    return list(coll)[1:]


def last(coll: Iterable[T]) -> T:
    """
    Return the last element.

    Raises:
        EmptyCollectionError: If coll has no elements

    Example:
        last([1, 2, 3]) -> 3
    """
    items = list(coll)
    if not items:
        raise EmptyCollectionError("last")
    return items[-1]


def nth(coll: Iterable[T], index: int, not_found: T = _MISSING) -> T:
    """
    Return the element at a 0-based index.

    Negative indices are out of range; they do not count from the end.

    Args:
        coll: Source sequence
        index: Position to read
        not_found: Returned instead of raising when index is out of range

    Raises:
        IndexOutOfRangeError: If index is out of range and no not_found was given
        InvalidArgumentError: If index is not an integer

    Example:
        nth([1, 2, 3], 1) -> 2
        nth([1, 2, 3], 5, 0) -> 0
    """
    index = _integer(index, "Index", "nth")
    items = list(coll)
    if 0 <= index < len(items):
        return items[index]
    if not_found is _MISSING:
        raise IndexOutOfRangeError(index, len(items), "nth")
    return not_found


def index_of(coll: Iterable[T], value: T) -> int:
    """
    Find index of value, -1 if not found.

    Example:
        index_of([5, 6, 7], 6) -> 1
    """
    for i, item in enumerate(coll):
        if item == value:
            return i
    return -1


def contains(coll: Iterable[T], value: T) -> bool:
    """Return True if any element equals value."""
    return index_of(coll, value) != -1


# =============================================================================
# Transformation
# =============================================================================


def map(coll: Iterable[T], func: Callable[[T], U]) -> list[U]:
    """
    Apply a function to each element and return a list of results.

    Example:
        map([1, 2, 3], lambda x: x * 2) -> [2, 4, 6]
    """
    return [func(item) for item in coll]


def filter(coll: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Keep the elements that satisfy the predicate.

    Example:
        filter([1, 2, 3, 4], lambda x: x % 2 == 0) -> [2, 4]
    """
    return [item for item in coll if predicate(item)]


def remove(coll: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Drop the elements that satisfy the predicate.

    Example:
        remove([1, 2, 3, 4], lambda x: x % 2 == 0) -> [1, 3]
    """
    return [item for item in coll if not predicate(item)]


def reduce(*args: Any) -> Any:
    """
    Left fold, with or without an initial accumulator.

    ``reduce(init, coll, func)`` folds starting from init and returns init for
    an empty coll. ``reduce(coll, func)`` starts from the first two elements.

    Raises:
        EmptyCollectionError: If coll is empty and no init was given

    Example:
        reduce(0, [1, 2, 3, 4], add) -> 10
        reduce([1, 2, 3, 4], add) -> 10
    """
    if len(args) == 3:
        init, coll, func = args
        return functools_reduce(func, coll, init)
    if len(args) == 2:
        coll, func = args
        items = list(coll)
        if not items:
            raise EmptyCollectionError("reduce")
        return functools_reduce(func, items)
    raise TypeError(f"reduce() takes 2 or 3 positional arguments but {len(args)} were given")


def minimum(coll: Iterable[T]) -> T:
    """Return the smallest element; raises EmptyCollectionError if empty."""
    items = list(coll)
    if not items:
        raise EmptyCollectionError("minimum")
    return min(items)


def maximum(coll: Iterable[T]) -> T:
    """Return the largest element; raises EmptyCollectionError if empty."""
    items = list(coll)
    if not items:
        raise EmptyCollectionError("maximum")
    return max(items)


# =============================================================================
# Ordering
# =============================================================================


def sort(
    coll: Iterable[T],
    less: Callable[[T, T], bool] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
) -> list[T]:
    """
    Return a sorted list of elements.

    Args:
        coll: Source sequence
        less: Optional ``less(a, b) -> bool`` strict weak ordering
        key: Optional key function, as for ``sorted``

    Example:
        sort([3, 1, 2]) -> [1, 2, 3]
        sort([3, 1, 2], lambda a, b: a > b) -> [3, 2, 1]
    """
    if less is None:
        return sorted(coll, key=key)

    by = key or (lambda item: item)

    def compare(a: T, b: T) -> int:
        ka, kb = by(a), by(b)
        if less(ka, kb):
            return -1
        if less(kb, ka):
            return 1
        return 0

    return sorted(coll, key=cmp_to_key(compare))


def shuffle(coll: Iterable[T]) -> list[T]:
    """Return a random permutation of coll, drawn from the shared random source."""
    return shuffled(coll)


def reverse(coll: Iterable[T]) -> list[T]:
    """
    Return a reversed list of elements.

    Example:
        reverse([1, 2, 3]) -> [3, 2, 1]
    """
    items = list(coll)
    return items[::-1]


# =============================================================================
# Predicates
# =============================================================================


def every(coll: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """
    Check if all elements satisfy the predicate. True for an empty coll.

    Example:
        every([1, 2, 3], lambda x: x > 0) -> True
    """
    return all(predicate(item) for item in coll)


def any(coll: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """
    Check if any element satisfies the predicate. False for an empty coll.

    Example:
        any([1, 2, 3], lambda x: x > 2) -> True
    """
    return _builtins.any(predicate(item) for item in coll)


# =============================================================================
# Slicing
# =============================================================================


def take(coll: Iterable[T], n: int) -> list[T]:
    """
    Take the first n elements; the whole sequence if n exceeds its length.

    Example:
        take([1, 2, 3, 4, 5], 3) -> [1, 2, 3]
    """
    n = _count(n, "take")
    result: list[T] = []
    for i, item in enumerate(coll):
        if i >= n:
            break
        result.append(item)
    return result


def drop(coll: Iterable[T], n: int) -> list[T]:
    """
    Skip the first n elements; empty if n exceeds the length.

    Example:
        drop([1, 2, 3, 4, 5], 2) -> [3, 4, 5]
    """
    n = _count(n, "drop")
    return list(coll)[n:]


def take_while(coll: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Take elements while the predicate is true.

    Example:
        take_while([1, 2, 3, 4, 1], lambda x: x < 4) -> [1, 2, 3]
    """
    result: list[T] = []
    for item in coll:
        if not predicate(item):
            break
        result.append(item)
    return result


def drop_while(coll: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """
    Skip elements while the predicate is true.

    Example:
        drop_while([1, 2, 3, 4, 1], lambda x: x < 3) -> [3, 4, 1]
    """
    result: list[T] = []
    dropping = True
    for item in coll:
        if dropping and predicate(item):
            continue
        dropping = False
        result.append(item)
    return result


# =============================================================================
# Combination
# =============================================================================


def cons(coll: Iterable[T], item: T) -> list[T]:
    """Return a new list with item prepended."""
    return [item, *coll]


def conj(coll: Iterable[T], item: T) -> list[T]:
    """Return a new list with item appended."""
    return [*coll, item]


def concat(coll1: Iterable[T], coll2: Iterable[T]) -> list[T]:
    """
    Join two sequences.

    Example:
        concat([1, 2], [3, 4]) -> [1, 2, 3, 4]
    """
    result: list[T] = list(coll1)
    result.extend(coll2)
    return result


def interleave(coll1: Iterable[T], coll2: Iterable[T]) -> list[T]:
    """
    Alternate elements of two sequences, stopping at the shorter one.

    Example:
        interleave([1, 2, 3], ["a", "b"]) -> [1, "a", 2, "b"]
    """
    result: list[T] = []
    for a, b in zip(coll1, coll2):
        result.append(a)
        result.append(b)
    return result


def interpose(coll: Iterable[T], sep: T) -> list[T]:
    """
    Put sep between every pair of adjacent elements.

    Example:
        interpose([1, 2, 3], 0) -> [1, 0, 2, 0, 3]
    """
    result: list[T] = []
    for i, item in enumerate(coll):
        if i > 0:
            result.append(sep)
        result.append(item)
    return result


# =============================================================================
# Generation
# =============================================================================


def range(*args: Any) -> list[Any]:
    """
    Return an arithmetic progression over the half-open interval [start, end).

    Called as ``range(end)``, ``range(start, end)`` or ``range(start, end, step)``;
    start defaults to 0 and step to 1. A negative step counts down. Float
    arguments are allowed.

    Raises:
        InvalidArgumentError: If step is zero

    Example:
        range(1, 10, 2) -> [1, 3, 5, 7, 9]
        range(5, 0, -2) -> [5, 3, 1]
    """
    if len(args) == 1:
        start, end, step = 0, args[0], 1
    elif len(args) == 2:
        (start, end), step = args, 1
    elif len(args) == 3:
        start, end, step = args
    else:
        raise TypeError(f"range() takes 1 to 3 positional arguments but {len(args)} were given")

    if step == 0:
        raise InvalidArgumentError("Step must not be zero", "range")

    # Elements take the type of start + step; end only bounds them.
    if _is_integer(start) and _is_integer(step):
        bound = math.ceil(end) if step > 0 else math.floor(end)
        return list(_builtins.range(start, bound, step))

    values = np.arange(start, end, step).tolist()
    if step > 0:
        return [x for x in values if x < end]
    return [x for x in values if x > end]


def repeat(item: T, n: int) -> list[T]:
    """
    Repeat item n times.

    Example:
        repeat("x", 3) -> ["x", "x", "x"]
    """
    return [item] * _count(n, "repeat")


def repeatedly(n: int, func: Callable[[], T]) -> list[T]:
    """
    Call func n times and collect the results in call order.

    Example:
        repeatedly(3, lambda: 7) -> [7, 7, 7]
    """
    return [func() for _ in _builtins.range(_count(n, "repeatedly"))]


def iterate(n: int, func: Callable[[A], A], seed: A) -> list[A]:
    """
    Return [seed, func(seed), func(func(seed)), ...] with n elements.

    Example:
        iterate(4, lambda x: x * 2, 1) -> [1, 2, 4, 8]
    """
    n = _count(n, "iterate")
    result: list[A] = []
    value = seed
    for i in _builtins.range(n):
        if i > 0:
            value = func(value)
        result.append(value)
    return result
