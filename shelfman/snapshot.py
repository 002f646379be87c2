"""
Product snapshot store.

Holds the last known-good product list and memoizes the derivations the
page asks for. A snapshot is replaced wholesale on every refresh; the
facets and results computed for the old one are dropped with it.

Refreshes are numbered. A refresh that finishes after a newer one has
already been applied is discarded, so a slow fetch can never roll the
catalog back.
"""

import itertools
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from shelfman.facets import compute_facets
from shelfman.normalizer import normalize_products
from shelfman.pipeline import filter_products
from shelfman.pricing import sort_by_price
from shelfman.protocols.catalog import BrowseResult, FilterState, Product
from shelfman.signals import snapshot_refresh_failed, snapshot_refreshed

if TYPE_CHECKING:
    from shelfman.protocols import AccessoryPolicy, ProductSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable product list, as fetched by one refresh."""

    version: int = 0
    products: tuple[Product, ...] = ()
    fetched_at: datetime | None = None

    @property
    def is_loaded(self) -> bool:
        return self.version > 0


class _Memo:
    """Remembers the last key and value.

    The pair lives in one attribute so threads sharing a store never see
    one call's key next to another call's value.
    """

    _missing = object()

    def __init__(self):
        self._entry = (self._missing, None)

    def get(self, key, compute: Callable[[], Any]):
        cached_key, cached_value = self._entry
        if cached_key == key:
            return cached_value
        value = compute()
        self._entry = (key, value)
        return value


@dataclass
class SnapshotStore:
    """
    Current product snapshot plus memoized facets and results.

    Usage:
        store = SnapshotStore(source=SheetProductSource(), policy=NoopAccessoryPolicy())
        store.refresh()
        result = store.browse(FilterState(search="avanzado"))
    """

    source: "ProductSource | None" = None
    policy: "AccessoryPolicy | None" = None
    snapshot: CatalogSnapshot = field(default_factory=CatalogSnapshot)

    def __post_init__(self):
        self._lock = threading.Lock()
        self._tickets = itertools.count(1)
        self._applied_ticket = 0
        self._facets_memo = _Memo()
        self._results_memo = _Memo()

    # ======================================================================
    # Refresh
    # ======================================================================

    def next_ticket(self) -> int:
        """Reserve the sequence number of a refresh about to start."""
        with self._lock:
            return next(self._tickets)

    def apply(self, ticket: int, records: Iterable[Mapping[str, Any]]) -> bool:
        """
        Replace the snapshot with freshly fetched records.

        Args:
            ticket: Number returned by next_ticket() before fetching
            records: Raw records from the source

        Returns:
            False if a newer refresh was already applied (records discarded)
        """
        products = tuple(normalize_products(records))
        with self._lock:
            if ticket <= self._applied_ticket:
                logger.warning(
                    "Discarding refresh %d: refresh %d already applied",
                    ticket,
                    self._applied_ticket,
                )
                return False
            previous = self.snapshot
            self.snapshot = CatalogSnapshot(
                version=previous.version + 1,
                products=products,
                fetched_at=datetime.now(timezone.utc),
            )
            self._applied_ticket = ticket
            snapshot = self.snapshot

        logger.info("Catalog snapshot v%d loaded (%d products)", snapshot.version, len(products))
        snapshot_refreshed.send(
            sender=self.__class__, store=self, snapshot=snapshot, previous=previous
        )
        return True

    def refresh(self) -> bool:
        """
        Fetch from the source and apply the result.

        Source failures are logged and sent on snapshot_refresh_failed;
        the previous snapshot stays in use.

        Returns:
            True if a new snapshot was applied
        """
        ticket = self.next_ticket()
        try:
            records = self._get_source().fetch_products()
        except Exception as exc:
            logger.exception("Refresh %d failed, keeping snapshot v%d", ticket, self.snapshot.version)
            snapshot_refresh_failed.send(
                sender=self.__class__, store=self, error=exc, ticket=ticket
            )
            return False
        return self.apply(ticket, records)

    def poll(self, interval: float, stop_event: threading.Event) -> None:
        """Refresh every `interval` seconds until stop_event is set."""
        while not stop_event.wait(interval):
            self.refresh()

    def _get_source(self) -> "ProductSource":
        if self.source is None:
            from shelfman.conf import get_product_source

            return get_product_source()
        return self.source

    def _get_policy(self) -> "AccessoryPolicy":
        if self.policy is None:
            from shelfman.conf import get_accessory_policy

            return get_accessory_policy()
        return self.policy

    # ======================================================================
    # Derivations
    # ======================================================================

    @property
    def is_loaded(self) -> bool:
        return self.snapshot.is_loaded

    def facets(self, state: FilterState):
        snapshot = self.snapshot
        # Facets only depend on the selected category.
        return self._facets_memo.get(
            (snapshot.version, state.category),
            lambda: compute_facets(snapshot.products, state),
        )

    def results(self, state: FilterState) -> tuple[Product, ...]:
        snapshot = self.snapshot
        policy = self._get_policy()
        return self._results_memo.get(
            (snapshot.version, state, id(policy)),
            lambda: tuple(
                sort_by_price(
                    filter_products(snapshot.products, state),
                    state.price_sort,
                    policy,
                )
            ),
        )

    def browse(self, state: FilterState) -> BrowseResult:
        return BrowseResult(
            facets=self.facets(state),
            products=self.results(state),
            is_loaded=self.is_loaded,
        )
