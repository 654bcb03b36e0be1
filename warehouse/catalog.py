"""
Catalog orchestrator: routes product ids to buckets and applies operations.

Usage:
    from warehouse.catalog import Catalog

    catalog = Catalog()
    catalog.add_product(7, "widget", stock=10, day=1, demand=2)
    catalog.purchase_product(7, day=5, amount=4)
    print(catalog.snapshot())

Every operation touches exactly one bucket. Lookups for restock, purchase and
delete scan only the routed bucket (`id % BUCKET_COUNT`), which is bounded by
the bucket capacity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from warehouse.bucket import Bucket
from warehouse.domain.models import Outcome, Product
from warehouse.placement import PlacementStrategy, resolve_placement
from warehouse.utils.logging import get_logger

BUCKET_COUNT = 10

log = get_logger(__name__)


@dataclass(frozen=True)
class PlacementResult:
    """
    Where an added product landed and what, if anything, it displaced.
    """

    bucket: int
    home: int
    evicted: Optional[Product] = None

    @property
    def relocated(self) -> bool:
        return self.bucket != self.home


def route(product_id: int) -> int:
    """Map a product id to its home bucket index."""
    return product_id % BUCKET_COUNT


class Catalog:
    """
    Fixed array of bounded popularity heaps keyed by product id.
    """

    def __init__(self) -> None:
        self._buckets: Tuple[Bucket, ...] = tuple(Bucket() for _ in range(BUCKET_COUNT))

    @property
    def buckets(self) -> Tuple[Bucket, ...]:
        return self._buckets

    def __len__(self) -> int:
        return sum(b.size() for b in self._buckets)

    def __iter__(self) -> Iterator[Product]:
        for bucket in self._buckets:
            yield from bucket.records()

    def find(self, product_id: int) -> Optional[Product]:
        bucket = self._buckets[route(product_id)]
        position = bucket.position_of(product_id)
        return bucket.at(position) if position is not None else None

    # -- insertion ----------------------------------------------------------

    def place(
        self,
        product_id: int,
        name: str,
        stock: int,
        day: int,
        demand: int,
        placement: Union[str, PlacementStrategy] = "standard",
    ) -> PlacementResult:
        """
        Insert a new product into the bucket chosen by `placement`, evicting
        that bucket's least popular product first if it is full.
        """
        strategy = resolve_placement(placement)
        product = Product.create(product_id, name, stock, day, demand)
        home = route(product_id)
        index = strategy.choose_bucket(self._buckets, home)
        evicted = self._buckets[index].insert(product)

        result = PlacementResult(bucket=index, home=home, evicted=evicted)
        if evicted is not None:
            log.info(
                "Product evicted",
                extra={
                    "bucket": index,
                    "evicted_id": evicted.id,
                    "evicted_demand": evicted.demand,
                    "product_id": product_id,
                },
            )
        if result.relocated:
            log.info(
                "Product placed outside home bucket",
                extra={"product_id": product_id, "home": home, "bucket": index},
            )
        log.debug(
            "Product added",
            extra={"product_id": product_id, "bucket": index, "placement": strategy.name},
        )
        return result

    def add_product(
        self, product_id: int, name: str, stock: int, day: int, demand: int
    ) -> PlacementResult:
        return self.place(product_id, name, stock, day, demand, placement="standard")

    def better_add_product(
        self, product_id: int, name: str, stock: int, day: int, demand: int
    ) -> PlacementResult:
        """Add a product, using spare room in other buckets before evicting."""
        return self.place(product_id, name, stock, day, demand, placement="probing")

    # -- mutation -----------------------------------------------------------

    def restock_product(self, product_id: int, amount: int) -> Outcome:
        bucket = self._buckets[route(product_id)]
        position = bucket.position_of(product_id)
        if position is None:
            log.debug("Restock skipped, product not found", extra={"product_id": product_id})
            return Outcome.NOT_FOUND

        product = bucket.at(position)
        if product.stock + amount < 0:
            log.debug(
                "Restock rejected",
                extra={"product_id": product_id, "amount": amount, "stock": product.stock},
            )
            return Outcome.REJECTED

        product.apply_stock_delta(amount)
        # Demand is unchanged, so this never moves anything.
        bucket.repair(position)
        log.debug("Product restocked", extra={"product_id": product_id, "amount": amount})
        return Outcome.APPLIED

    def purchase_product(self, product_id: int, day: int, amount: int) -> Outcome:
        bucket = self._buckets[route(product_id)]
        position = bucket.position_of(product_id)
        if position is None:
            log.debug("Purchase skipped, product not found", extra={"product_id": product_id})
            return Outcome.NOT_FOUND

        product = bucket.at(position)
        if amount < 0 or amount > product.stock:
            log.debug(
                "Purchase rejected",
                extra={"product_id": product_id, "amount": amount, "stock": product.stock},
            )
            return Outcome.REJECTED

        product.last_purchase_day = day
        product.apply_stock_delta(-amount)
        product.apply_demand_delta(amount)
        bucket.repair(position)
        log.debug(
            "Product purchased",
            extra={"product_id": product_id, "amount": amount, "demand": product.demand},
        )
        return Outcome.APPLIED

    def delete_product(self, product_id: int) -> Outcome:
        bucket = self._buckets[route(product_id)]
        position = bucket.position_of(product_id)
        if position is None:
            log.debug("Delete skipped, product not found", extra={"product_id": product_id})
            return Outcome.NOT_FOUND

        bucket.remove_at(position)
        log.debug("Product deleted", extra={"product_id": product_id})
        return Outcome.APPLIED

    # -- views --------------------------------------------------------------

    def check_invariants(self) -> bool:
        return all(b.check_invariant() for b in self._buckets)

    def snapshot(self) -> str:
        lines = "".join(f"\t{bucket.render()}\n" for bucket in self._buckets)
        return f"[\n{lines}]"

    def __str__(self) -> str:
        return self.snapshot()


__all__ = ["BUCKET_COUNT", "Catalog", "PlacementResult", "route"]
