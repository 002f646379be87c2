"""
Shelfman signals.

Signals:
    snapshot_refreshed:
        Sent after a new product snapshot replaces the previous one.

        Kwargs:
            sender: SnapshotStore class
            store: The SnapshotStore that was refreshed
            snapshot: CatalogSnapshot, the snapshot now in use
            previous: CatalogSnapshot, the snapshot it replaced

        Example handler::

            from shelfman.signals import snapshot_refreshed

            def on_refreshed(sender, snapshot, previous, **kwargs):
                logger.info("Catalog now has %d products", len(snapshot.products))

            snapshot_refreshed.connect(on_refreshed)

    snapshot_refresh_failed:
        Sent when the product source fails. The previous snapshot stays
        in use.

        Kwargs:
            sender: SnapshotStore class
            store: The SnapshotStore whose refresh failed
            error: Exception, what the source raised
            ticket: int, refresh sequence number

        Example handler::

            from shelfman.signals import snapshot_refresh_failed

            def on_failed(sender, error, ticket, **kwargs):
                sentry_sdk.capture_exception(error)

            snapshot_refresh_failed.connect(on_failed)
"""

from django.dispatch import Signal

snapshot_refreshed = Signal()
snapshot_refresh_failed = Signal()
