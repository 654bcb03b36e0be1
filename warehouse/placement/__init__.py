"""
Placement strategies package for the warehouse catalog.

Re-exports the abstract interfaces, the concrete strategies and the registry
helpers so downstream code can import from `warehouse.placement` directly.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Union

from warehouse.placement.abstract import AbstractPlacementStrategy, PlacementStrategy
from warehouse.placement.probing import ProbingPlacement
from warehouse.placement.standard import StandardPlacement


def _placement_factories() -> Dict[str, Callable[[], PlacementStrategy]]:
    """Registry of available placement strategies."""
    return {
        "standard": lambda: StandardPlacement(),
        "probing": lambda: ProbingPlacement(),
    }


def available_placements() -> List[str]:
    """List available placement strategy names."""
    return sorted(_placement_factories().keys())


def resolve_placement(placement: Union[str, PlacementStrategy]) -> PlacementStrategy:
    """Return a strategy instance for a registered name, or pass an instance through."""
    if not isinstance(placement, str):
        return placement
    factories = _placement_factories()
    if placement not in factories:
        raise ValueError(
            f"Unknown placement '{placement}'. Available: {', '.join(available_placements())}"
        )
    return factories[placement]()


__all__ = [
    # Abstracts
    "AbstractPlacementStrategy",
    "PlacementStrategy",
    # Concrete strategies
    "ProbingPlacement",
    "StandardPlacement",
    # Registry
    "available_placements",
    "resolve_placement",
]
