"""
sanity - Mapping Operations.

Functions over key/value mappings. Results are always new dicts; inputs are
never modified. Iteration order follows the input mapping's own order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from sanity.errors import LengthMismatchError

K = TypeVar("K")
V = TypeVar("V")


# =============================================================================
# Lookup
# =============================================================================


def has_key(m: Mapping[K, V], key: K) -> bool:
    """Return True if m contains key."""
    return key in m


def get(m: Mapping[K, V], key: K, not_found: V | None = None) -> V | None:
    """Return the value for key, or not_found when key is absent."""
    if key in m:
        return m[key]
    return not_found


# =============================================================================
# Update
# =============================================================================


def assoc(m: Mapping[K, V], key: K, val: V) -> dict[K, V]:
    """
    Return a copy of m with key set to val.

    Example:
        assoc({"a": 1}, "b", 2) -> {"a": 1, "b": 2}
    """
    result = dict(m)
    result[key] = val
    return result


def dissoc(m: Mapping[K, V], key: K) -> dict[K, V]:
    """
    Return a copy of m without key. A missing key is not an error.

    Example:
        dissoc({"a": 1, "b": 2}, "a") -> {"b": 2}
    """
    return {k: v for k, v in m.items() if k != key}


# =============================================================================
# Views
# =============================================================================


def keys(m: Mapping[K, V]) -> list[K]:
    """Return the keys of a mapping as a list."""
    return list(m.keys())


def vals(m: Mapping[K, V]) -> list[V]:
    """Return the values of a mapping as a list."""
    return list(m.values())


def pairs(m: Mapping[K, V]) -> list[tuple[K, V]]:
    """Return the key-value pairs of a mapping as a list of tuples."""
    return list(m.items())


def zipmap(key_seq: Iterable[K], val_seq: Iterable[V]) -> dict[K, V]:
    """
    Build a mapping from parallel key and value sequences.

    A repeated key takes the value at its last position.

    Raises:
        LengthMismatchError: If the sequences differ in length

    Example:
        zipmap(["a", "b"], [1, 2]) -> {"a": 1, "b": 2}
    """
    ks = list(key_seq)
    vs = list(val_seq)
    if len(ks) != len(vs):
        raise LengthMismatchError(len(ks), len(vs), "zipmap")
    return dict(zip(ks, vs, strict=True))


# =============================================================================
# Combination
# =============================================================================


def merge(a: Mapping[K, V], b: Mapping[K, V]) -> dict[K, V]:
    """
    Merge two mappings. Keys from b overwrite matching keys in a.

    Example:
        merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) -> {"a": 1, "b": 3, "c": 4}
    """
    result = dict(a)
    result.update(b)
    return result


def merge_with(func: Callable[[V, V], V], a: Mapping[K, V], b: Mapping[K, V]) -> dict[K, V]:
    """
    Merge two mappings, combining colliding values with func(a_value, b_value).

    Example:
        merge_with(add, {"a": 1, "b": 2}, {"b": 3}) -> {"a": 1, "b": 5}
    """
    result = dict(a)
    for k, v in b.items():
        result[k] = func(a[k], v) if k in a else v
    return result


def rename_keys(m: Mapping[K, V], table: Mapping[K, Any]) -> dict[Any, V]:
    """
    Rename the keys of m that appear in table to table's values.

    Entries are written in m's iteration order, so when several keys end up
    under the same name the one that comes later in m wins.

    Example:
        rename_keys({"a": 1, "b": 2}, {"a": "x"}) -> {"x": 1, "b": 2}
    """
    result: dict[Any, V] = {}
    for k, v in m.items():
        result[table[k] if k in table else k] = v
    return result
