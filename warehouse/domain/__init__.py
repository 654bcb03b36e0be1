"""
Domain package for the warehouse catalog.

Exports the product record and the operation outcome enum.
Keep this package focused on data definitions and validation concerns.
"""

from warehouse.domain.models import Outcome, Product

__all__ = [
    "Outcome",
    "Product",
]
