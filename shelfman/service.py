"""
Shelfman public API.

CORE (pure):
    ShelfService.compute_facets(products, state)           - Category/brand options
    ShelfService.compute_filtered_result(products, state)  - Filtered, ordered products
    ShelfService.normalize(records)                        - Raw records to Products
    ShelfService.reference_price(product)                  - Price used for sorting

SNAPSHOT (configured default store):
    ShelfService.refresh()         - Fetch from PRODUCT_SOURCE
    ShelfService.browse(state)     - Facets and results for the current snapshot
    ShelfService.start_polling()   - Background refresh every AUTO_REFRESH_SECONDS
"""

import logging
import threading
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from shelfman.facets import compute_facets
from shelfman.normalizer import normalize_products
from shelfman.pipeline import filter_products
from shelfman.pricing import reference_price, sort_by_price
from shelfman.snapshot import SnapshotStore

if TYPE_CHECKING:
    from shelfman.protocols import (
        AccessoryPolicy,
        BrowseResult,
        FacetSet,
        FilterState,
        Product,
    )

logger = logging.getLogger(__name__)

_store_lock = threading.Lock()
_store_instance: SnapshotStore | None = None


class ShelfService:
    """
    Shelfman public API.

    Uses @classmethod for extensibility: subclass and override
    _get_policy() or get_store() to change where collaborators come from.
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def normalize(cls, records: Iterable[Mapping[str, Any]]) -> list["Product"]:
        return normalize_products(records)

    @classmethod
    def compute_facets(cls, products: Iterable["Product"], state: "FilterState") -> "FacetSet":
        """
        Category and brand options.

        Args:
            products: Normalized products
            state: Active filter state (only the category is read)

        Returns:
            FacetSet with ALL first in both lists
        """
        return compute_facets(products, state)

    @classmethod
    def compute_filtered_result(
        cls,
        products: Iterable["Product"],
        state: "FilterState",
        accessory_policy: "AccessoryPolicy | None" = None,
    ) -> list["Product"]:
        """
        Products matching the filter state, in display order.

        Args:
            products: Normalized products
            state: Active filter state
            accessory_policy: Decides minimum-quantity accessories for the
                price sort. None means no product is an accessory.

        Returns:
            Filtered products, price-sorted when state.price_sort is set
        """
        candidates = filter_products(products, state)
        return sort_by_price(candidates, state.price_sort, cls._get_policy(accessory_policy))

    @classmethod
    def reference_price(
        cls,
        product: "Product",
        accessory_policy: "AccessoryPolicy | None" = None,
    ) -> int:
        return reference_price(product, cls._get_policy(accessory_policy))

    @classmethod
    def _get_policy(cls, accessory_policy: "AccessoryPolicy | None") -> "AccessoryPolicy":
        """Internal: explicit policy, or one that flags nothing."""
        if accessory_policy is not None:
            return accessory_policy
        from shelfman.adapters.noop import NoopAccessoryPolicy

        return NoopAccessoryPolicy()

    # ======================================================================
    # SNAPSHOT API
    # ======================================================================

    @classmethod
    def get_store(cls) -> SnapshotStore:
        """
        Return the process-wide store.

        Source and policy come from SHELFMAN["PRODUCT_SOURCE"] and
        SHELFMAN["ACCESSORY_POLICY"].
        """
        global _store_instance
        if _store_instance is None:
            with _store_lock:
                if _store_instance is None:  # double-checked
                    _store_instance = SnapshotStore()
        return _store_instance

    @classmethod
    def refresh(cls) -> bool:
        """Fetch a new snapshot; False if the source failed or was outrun."""
        return cls.get_store().refresh()

    @classmethod
    def browse(cls, state: "FilterState") -> "BrowseResult":
        return cls.get_store().browse(state)

    @classmethod
    def start_polling(cls, interval: float | None = None) -> threading.Event | None:
        """
        Refresh the default store in a daemon thread.

        Args:
            interval: Seconds between refreshes. Defaults to
                SHELFMAN["AUTO_REFRESH_SECONDS"].

        Returns:
            Event that stops the thread when set, or None when the
            interval is 0 (polling disabled)
        """
        if interval is None:
            from shelfman.conf import shelfman_settings

            interval = shelfman_settings.AUTO_REFRESH_SECONDS
        if not interval or interval <= 0:
            return None

        stop_event = threading.Event()
        thread = threading.Thread(
            target=cls.get_store().poll,
            args=(interval, stop_event),
            name="shelfman-refresh",
            daemon=True,
        )
        thread.start()
        logger.info("Polling product source every %ss", interval)
        return stop_event


def reset_store() -> None:
    """Reset the default store (for tests)."""
    global _store_instance
    _store_instance = None
