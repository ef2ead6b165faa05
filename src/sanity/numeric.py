"""
sanity - Scalar Helpers.

Small numeric predicates and arithmetic wrappers, handy as arguments to the
sequence and mapping operations (``filter(xs, is_even)``, ``reduce(0, xs, add)``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

from sanity.errors import DivisionByZeroError

Number = Union[int, float]

# =============================================================================
# Predicates
# =============================================================================

def is_even(x: int) -> bool:
    """Return True if x is even."""
    return x % 2 == 0

def is_odd(x: int) -> bool:
    """Return True if x is odd."""
    return not is_even(x)

def is_zero(x: Number) -> bool:
    """Return True if x is zero."""
    return x == 0

def is_positive(x: Number) -> bool:
    """Return True if x is more than zero."""
    return x > 0

def is_negative(x: Number) -> bool:
    """Return True if x is less than zero."""
    return x < 0

# =============================================================================
# Arithmetic
# =============================================================================

def inc(x: Number) -> Number:
    """Return x + 1."""
    return x + 1

def dec(x: Number) -> Number:
    """Return x - 1."""
    return x - 1

def add(a: Number, b: Number) -> Number:
    """Return a + b."""
    return a + b

def subtract(a: Number, b: Number) -> Number:
    """Return a - b."""
    return a - b

def multiply(a: Number, b: Number) -> Number:
    """Return a * b."""
    return a * b

def divide(a: Number, b: Number) -> float:
    """Return a / b; raises DivisionByZeroError when b is zero."""
    if b == 0:
        raise DivisionByZeroError("divide")
    return a / b

def modulo(a: Number, b: Number) -> Number:
    """Return a % b; raises DivisionByZeroError when b is zero."""
    if b == 0:
        raise DivisionByZeroError("modulo")
    return a % b

# =============================================================================
# Function Helpers
# =============================================================================

def identity(x: Any) -> Any:
    """Return x unchanged."""
    return x

def negate(predicate: Callable[..., bool]) -> Callable[..., bool]:
    """
    Return the logical complement of a predicate.

    Example:
        remove(xs, negate(is_even)) == filter(xs, is_even)
    """

    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated
