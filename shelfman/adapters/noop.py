"""
Noop AccessoryPolicy -- default for catalogs without minimum-quantity items.

This adapter implements the AccessoryPolicy protocol and always returns
False, so every product is compared at its unit price.

Usage in settings.py:
    SHELFMAN = {
        "ACCESSORY_POLICY": "shelfman.adapters.noop.NoopAccessoryPolicy",
    }

This is equivalent to leaving ACCESSORY_POLICY unset (None), but makes the
intent explicit in configuration.
"""

from __future__ import annotations

from shelfman.protocols.accessory import AccessoryPolicy


class NoopAccessoryPolicy:
    """AccessoryPolicy that treats no product as an accessory."""

    def is_min_quantity_accessory(self, product) -> bool:
        return False


# Verify protocol compliance at import time.
if not isinstance(NoopAccessoryPolicy(), AccessoryPolicy):
    raise TypeError("NoopAccessoryPolicy does not implement AccessoryPolicy protocol")
