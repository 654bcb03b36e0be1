"""
Warehouse catalog - products partitioned into bounded popularity heaps.

Products are routed by `id % 10` into one of ten buckets. Each bucket holds
at most five products in an array-backed binary min-heap ordered by demand,
so a full bucket can evict its least popular product in O(log 5):

- Standard placement evicts within the home bucket
- Probing placement fills spare room in other buckets before evicting
- Restock, purchase and delete operate on the routed bucket and report an
  `Outcome` instead of raising when nothing changes
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from warehouse.bucket import BUCKET_CAPACITY, Bucket, BucketFullError
from warehouse.catalog import BUCKET_COUNT, Catalog, PlacementResult, route
from warehouse.config import Settings, get_settings
from warehouse.domain.models import Outcome, Product
from warehouse.placement import (
    AbstractPlacementStrategy,
    PlacementStrategy,
    available_placements,
    resolve_placement,
)
from warehouse.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core structures
    "BUCKET_CAPACITY",
    "BUCKET_COUNT",
    "Bucket",
    "BucketFullError",
    "Catalog",
    "PlacementResult",
    "route",
    # Domain
    "Outcome",
    "Product",
    # Placement strategies
    "AbstractPlacementStrategy",
    "PlacementStrategy",
    "available_placements",
    "resolve_placement",
    # Logging
    "configure_logging",
    "get_logger",
]
