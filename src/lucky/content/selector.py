"""Seeded pseudo-random selection over content pools.

A seed string always yields the same stream, so a batch of ``pick`` and
``pick_distinct`` calls against one rng is reproducible as a whole.
"""

import hashlib
import random
from typing import Callable, List, Sequence, TypeVar

from lucky.core.exceptions import InvalidInputError

T = TypeVar("T")

Rng = Callable[[], float]


def seed_to_int(seed: str) -> int:
    """Stable 64-bit integer from a seed string (independent of PYTHONHASHSEED)."""
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def make_rng(seed: str) -> Rng:
    """Create a deterministic float source in [0, 1) for ``seed``.

    The generator is private to the caller; never share it across requests.
    """
    return random.Random(seed_to_int(seed)).random


def _index(rng: Rng, size: int) -> int:
    # min() guards against a float that rounds up to size
    return min(int(rng() * size), size - 1)


def pick(pool: Sequence[T], rng: Rng) -> T:
    """Pick one item from ``pool`` using a single draw."""
    if not pool:
        raise InvalidInputError("cannot pick from an empty pool")
    return pool[_index(rng, len(pool))]


def pick_distinct(pool: Sequence[T], count: int, rng: Rng) -> List[T]:
    """Pick ``count`` distinct items, in draw order.

    Partial Fisher-Yates shuffle over a copy of the pool: exactly ``count``
    draws, no duplicates, no retry loop.

    Raises:
        InvalidInputError: if ``count`` is negative or exceeds the pool size.
    """
    if count < 0 or count > len(pool):
        raise InvalidInputError(
            f"cannot pick {count} distinct items from a pool of {len(pool)}"
        )

    items = list(pool)
    for i in range(count):
        j = i + _index(rng, len(items) - i)
        items[i], items[j] = items[j], items[i]
    return items[:count]
