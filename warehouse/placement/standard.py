"""
Standard placement: every product goes to its routed (home) bucket.

A full home bucket evicts its least popular product to make room, even when
other buckets are empty.
"""

from __future__ import annotations

from typing import Sequence

from warehouse.bucket import Bucket
from warehouse.placement.abstract import AbstractPlacementStrategy


class StandardPlacement(AbstractPlacementStrategy):
    name: str = "standard"
    description: str = "Insert into the home bucket, evicting its least popular product when full."

    def choose_bucket(self, buckets: Sequence[Bucket], home: int) -> int:
        return home
