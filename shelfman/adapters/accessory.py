"""
Category-based AccessoryPolicy.

Wholesale accessories (grips, overgrips, protectors...) are sold in
pairs. This policy marks a product as a minimum-quantity accessory when
its category is listed in SHELFMAN["ACCESSORY_CATEGORIES"].

Usage in settings.py:
    SHELFMAN = {
        "ACCESSORY_POLICY": "shelfman.adapters.accessory.CategoryAccessoryPolicy",
        "ACCESSORY_CATEGORIES": ["Grips", "Protectores"],
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from shelfman.protocols.accessory import AccessoryPolicy

if TYPE_CHECKING:
    from shelfman.protocols.catalog import Product


class CategoryAccessoryPolicy:
    """
    Accessory policy driven by a list of category names.

    Comparison ignores case and surrounding whitespace. Categories are
    read from settings on each call unless given explicitly.
    """

    def __init__(self, categories: Iterable[str] | None = None):
        self._categories = None if categories is None else self._fold(categories)

    @staticmethod
    def _fold(categories: Iterable[str]) -> frozenset[str]:
        return frozenset(c.strip().casefold() for c in categories if c and c.strip())

    @property
    def categories(self) -> frozenset[str]:
        if self._categories is not None:
            return self._categories
        from shelfman.conf import shelfman_settings

        return self._fold(shelfman_settings.ACCESSORY_CATEGORIES)

    def is_min_quantity_accessory(self, product: Product) -> bool:
        return (product.category or "").strip().casefold() in self.categories


# Verify protocol compliance at import time.
if not isinstance(CategoryAccessoryPolicy(categories=()), AccessoryPolicy):
    raise TypeError("CategoryAccessoryPolicy does not implement AccessoryPolicy protocol")
