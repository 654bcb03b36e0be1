"""
Domain models for the warehouse catalog.

`Product` is the record stored in every bucket. It is mutated in place by
restock and purchase operations, so unlike a plain value object it is not
frozen; only its identity (`id`) and its arrival day are immutable. Assignment
validation keeps stock and demand non-negative.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    """Result of a mutating catalog operation."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


class Product(BaseModel):
    """
    A single product held by the warehouse.
    """

    id: int = Field(..., frozen=True, description="Unique product identifier.")
    name: str = Field(..., description="Product name.")
    stock: int = Field(..., ge=0, description="Units currently on hand.")
    demand: int = Field(0, ge=0, description="Cumulative purchased quantity.")
    day_added: int = Field(..., frozen=True, description="Day the product was added.")
    last_purchase_day: int = Field(..., description="Day of the most recent purchase.")

    model_config = {
        "validate_assignment": True,
        "populate_by_name": True,
    }

    @classmethod
    def create(cls, product_id: int, name: str, stock: int, day: int, demand: int = 0) -> "Product":
        """Build a freshly added product; its last purchase day starts at `day`."""
        return cls(
            id=product_id,
            name=name,
            stock=stock,
            demand=demand,
            day_added=day,
            last_purchase_day=day,
        )

    @property
    def popularity(self) -> int:
        return self.demand

    @property
    def heap_key(self) -> Tuple[int, int]:
        # Equal demand: the lower id sits closer to the root.
        return (self.demand, self.id)

    def apply_stock_delta(self, delta: int) -> None:
        """Add `delta` to stock. Callers must not drive stock below zero."""
        self.stock = self.stock + delta

    def apply_demand_delta(self, delta: int) -> None:
        """Add `delta` to demand. Demand only ever grows."""
        if delta < 0:
            raise ValueError(f"demand cannot decrease (delta={delta})")
        self.demand = self.demand + delta

    def render(self) -> str:
        return (
            f"({self.id}: {self.name}, {self.stock}, {self.day_added}, "
            f"{self.last_purchase_day}, {self.demand})"
        )

    def __str__(self) -> str:
        return self.render()


__all__ = ["Outcome", "Product"]
