"""Content pools and seeded selection."""

from lucky.content.pools import ContentPools, DEFAULT_POOLS, CONTENT_VERSION
from lucky.content.selector import make_rng, pick, pick_distinct

__all__ = [
    "ContentPools",
    "DEFAULT_POOLS",
    "CONTENT_VERSION",
    "make_rng",
    "pick",
    "pick_distinct",
]
