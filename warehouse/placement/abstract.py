"""
Placement strategy interfaces for the warehouse catalog.

A placement strategy decides which bucket receives a newly added product.
The catalog performs the actual insertion (and any eviction) in the chosen
bucket, so strategies are pure functions of the current bucket occupancy.
"""

from __future__ import annotations

import abc
from typing import Protocol, Sequence, runtime_checkable

from warehouse.bucket import Bucket


@runtime_checkable
class PlacementStrategy(Protocol):
    """
    Common interface all placement strategies implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the approach.
    """

    name: str
    description: str

    def choose_bucket(self, buckets: Sequence[Bucket], home: int) -> int:
        """
        Pick the bucket index that should receive a new product.

        Parameters
        ----------
        buckets : Sequence[Bucket]
            All catalog buckets, indexed by bucket number.
        home : int
            The routed bucket index for the product id.

        Returns
        -------
        int
            Index of the bucket to insert into. If that bucket is full the
            catalog evicts its least popular product first.
        """
        ...


class AbstractPlacementStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `choose_bucket`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def choose_bucket(self, buckets: Sequence[Bucket], home: int) -> int:  # pragma: no cover
        """Return the index of the bucket to insert into."""
        raise NotImplementedError


__all__ = [
    "PlacementStrategy",
    "AbstractPlacementStrategy",
]
