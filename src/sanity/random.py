"""
sanity - Shared Random Source.

One generator serves the whole process. It is seeded at import from
``SANITY_SEED`` (or OS entropy) and access is serialized with a lock.
"""

from __future__ import annotations

import logging
import random as _random
import threading
from collections.abc import Iterable
from typing import Optional, TypeVar

from sanity.config import get_settings

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Global random generator
_rng = _random.Random()
_lock = threading.Lock()


def set_seed(seed: Optional[int]) -> None:
    """Reseed the shared generator; None reseeds from OS entropy."""
    with _lock:
        _rng.seed(seed)
    logger.debug("Random source seeded with %r", seed)


def shuffled(seq: Iterable[T]) -> list[T]:
    """Return a shuffled copy of seq."""
    result = list(seq)
    with _lock:
        _rng.shuffle(result)
    return result


set_seed(get_settings().seed)
