"""
AccessoryPolicy protocol.

Lets the cart subsystem decide which products are sold with a minimum
quantity, without Shelfman importing it. The price sort compares such
products at their minimum-order price.

Usage:
    # In settings.py
    SHELFMAN = {
        "ACCESSORY_POLICY": "cart.adapters.shelfman.CartAccessoryPolicy",
    }

    # The cart implements the adapter:
    class CartAccessoryPolicy:
        def is_min_quantity_accessory(self, product) -> bool:
            return product.category in MIN_QTY_CATEGORIES
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shelfman.protocols.catalog import Product


@runtime_checkable
class AccessoryPolicy(Protocol):
    """
    Interface for telling minimum-quantity accessories apart.

    Queried once per candidate, and only while sorting by price.
    """

    def is_min_quantity_accessory(self, product: "Product") -> bool:
        """
        Return True when the product must be bought in pairs.

        Args:
            product: Normalized product

        Returns:
            True if the product is subject to minimum-quantity pricing.
        """
        ...
