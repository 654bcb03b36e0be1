"""
Bounded priority queue backing a single warehouse sector.

A bucket is a 1-indexed, array-backed binary min-heap of at most
`BUCKET_CAPACITY` products ordered by `Product.heap_key`, so the root is always
the least popular resident. Slot 0 of the backing list is an unused sentinel,
which keeps the parent/child arithmetic at `i // 2`, `2 * i` and `2 * i + 1`.

The low-level primitives (`append`, `sift_up`, `sift_down`, `swap_positions`,
`pop_last`) do exactly one thing each and leave heap repair to the caller;
`insert`, `evict`, `remove_at` and `repair` compose them into complete,
order-preserving operations.
"""

from __future__ import annotations

from typing import List, Optional

from warehouse.domain.models import Product

BUCKET_CAPACITY = 5
ROOT = 1


class BucketFullError(RuntimeError):
    """Raised when appending to a bucket that is already at capacity."""


class Bucket:
    """
    Fixed-capacity min-heap of products keyed by popularity.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[Product]] = [None]

    # -- inspection ---------------------------------------------------------

    def capacity(self) -> int:
        return BUCKET_CAPACITY

    def size(self) -> int:
        return len(self._slots) - 1

    def __len__(self) -> int:
        return self.size()

    def is_full(self) -> bool:
        return self.size() >= BUCKET_CAPACITY

    def at(self, position: int) -> Optional[Product]:
        """Return the product at 1-indexed `position`, or None if unoccupied."""
        if ROOT <= position <= self.size():
            return self._slots[position]
        return None

    def records(self) -> List[Product]:
        """Residents in heap-array order."""
        return list(self._slots[ROOT:])

    def position_of(self, product_id: int) -> Optional[int]:
        for position in range(ROOT, self.size() + 1):
            if self._slots[position].id == product_id:
                return position
        return None

    # -- primitives ---------------------------------------------------------

    def append(self, product: Product) -> None:
        """Place `product` after the last occupied slot without restoring order."""
        if self.is_full():
            raise BucketFullError(
                f"bucket is at capacity ({BUCKET_CAPACITY}); evict before appending"
            )
        self._slots.append(product)

    def swap_positions(self, i: int, j: int) -> None:
        self._require(i)
        self._require(j)
        self._slots[i], self._slots[j] = self._slots[j], self._slots[i]

    def pop_last(self) -> Product:
        """Discard and return the product in the last occupied slot."""
        if self.size() == 0:
            raise IndexError("pop_last on an empty bucket")
        return self._slots.pop()

    def sift_up(self, position: int) -> int:
        """
        Move the product at `position` toward the root while it ranks below
        its parent. Returns the position it settles at.
        """
        self._require(position)
        while position > ROOT and self._precedes(position, position // 2):
            self.swap_positions(position, position // 2)
            position //= 2
        return position

    def sift_down(self, position: int) -> int:
        """
        Move the product at `position` toward the leaves while either child
        ranks below it, always swapping with the lower-ranked child. Returns
        the position it settles at.
        """
        self._require(position)
        size = self.size()
        while 2 * position <= size:
            child = 2 * position
            if child + 1 <= size and self._precedes(child + 1, child):
                child += 1
            if not self._precedes(child, position):
                break
            self.swap_positions(position, child)
            position = child
        return position

    # -- composite operations -----------------------------------------------

    def evict(self) -> Optional[Product]:
        """Remove and return the least popular product (the root)."""
        if self.size() == 0:
            return None
        self.swap_positions(ROOT, self.size())
        evicted = self.pop_last()
        if self.size():
            self.sift_down(ROOT)
        return evicted

    def insert(self, product: Product) -> Optional[Product]:
        """
        Admit `product`, evicting the least popular resident first if the
        bucket is full. Returns the evicted product, if any.
        """
        evicted = self.evict() if self.is_full() else None
        self.append(product)
        self.sift_up(self.size())
        return evicted

    def repair(self, position: int) -> int:
        """Restore heap order around a product whose key changed in place."""
        return self.sift_down(self.sift_up(position))

    def remove_at(self, position: int) -> Product:
        """Remove and return the product at `position`, keeping heap order."""
        self._require(position)
        last = self.size()
        self.swap_positions(position, last)
        removed = self.pop_last()
        if position < last:
            self.repair(position)
        return removed

    # -- rendering / checks -------------------------------------------------

    def check_invariant(self) -> bool:
        size = self.size()
        for position in range(ROOT, size + 1):
            for child in (2 * position, 2 * position + 1):
                if child <= size and self._precedes(child, position):
                    return False
        return size <= BUCKET_CAPACITY

    def render(self) -> str:
        return "[" + ", ".join(p.render() for p in self.records()) + "]"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Bucket(size={self.size()}, ids={[p.id for p in self.records()]})"

    def _precedes(self, i: int, j: int) -> bool:
        return self._slots[i].heap_key < self._slots[j].heap_key

    def _require(self, position: int) -> None:
        if not ROOT <= position <= self.size():
            raise IndexError(f"heap position {position} outside 1..{self.size()}")


__all__ = ["BUCKET_CAPACITY", "Bucket", "BucketFullError"]
