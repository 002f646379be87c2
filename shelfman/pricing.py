"""
Price ordering.

Accessories sold with a minimum quantity are compared at the price of
that minimum order, so a pair of grips is not listed as cheaper than a
single ball.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from shelfman.normalizer import parse_price
from shelfman.protocols.catalog import PriceSortOrder, Product

if TYPE_CHECKING:
    from shelfman.protocols.accessory import AccessoryPolicy

logger = logging.getLogger(__name__)

ACCESSORY_MIN_QUANTITY = 2


def reference_price(product: Product, policy: "AccessoryPolicy") -> int:
    """
    Price used to compare products.

    Args:
        product: Normalized product
        policy: Decides which products are minimum-quantity accessories

    Returns:
        Parsed unit price, times ACCESSORY_MIN_QUANTITY for accessories
    """
    base_price = parse_price(product.price)
    if policy.is_min_quantity_accessory(product):
        return base_price * ACCESSORY_MIN_QUANTITY
    return base_price


def sort_by_price(
    candidates: Iterable[Product],
    order: PriceSortOrder,
    policy: "AccessoryPolicy",
) -> list[Product]:
    """
    Stable sort by reference price.

    Products with the same reference price keep their relative order in
    both directions. PriceSortOrder.NONE returns the input order.
    """
    candidates = list(candidates)
    if order is PriceSortOrder.NONE:
        return candidates

    result = sorted(
        candidates,
        key=lambda p: reference_price(p, policy),
        reverse=order is PriceSortOrder.DESCENDING,
    )
    logger.debug("Sorted %d products by price (%s)", len(result), order.value)
    return result
