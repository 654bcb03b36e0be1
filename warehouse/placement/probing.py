"""
Probing placement: fill spare capacity anywhere before evicting.

When the home bucket is full, buckets are probed round-robin starting at the
one after home and wrapping around. The first bucket with room receives the
product. Only when every bucket is full does the home bucket evict.

Products placed this way live outside their routed bucket, so routed lookups
(restock, purchase, delete) will not find them.
"""

from __future__ import annotations

from typing import Sequence

from warehouse.bucket import Bucket
from warehouse.placement.abstract import AbstractPlacementStrategy
from warehouse.utils.logging import get_logger

log = get_logger(__name__)


class ProbingPlacement(AbstractPlacementStrategy):
    name: str = "probing"
    description: str = "Probe buckets round-robin from home for spare room; evict at home only when all are full."

    def choose_bucket(self, buckets: Sequence[Bucket], home: int) -> int:
        count = len(buckets)
        for offset in range(count):
            index = (home + offset) % count
            if not buckets[index].is_full():
                return index
        log.debug("All buckets full, falling back to home eviction", extra={"home": home})
        return home
