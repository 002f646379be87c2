"""Shelfman protocols."""

from shelfman.protocols.catalog import (
    ALL,
    BrowseResult,
    FacetSet,
    FilterState,
    PriceSortOrder,
    Product,
    ProductSource,
)
from shelfman.protocols.accessory import AccessoryPolicy

__all__ = [
    "ALL",
    "AccessoryPolicy",
    "BrowseResult",
    "FacetSet",
    "FilterState",
    "PriceSortOrder",
    "Product",
    "ProductSource",
]
