"""Shelfman adapters."""

from shelfman.adapters.accessory import CategoryAccessoryPolicy
from shelfman.adapters.noop import NoopAccessoryPolicy
from shelfman.adapters.sheets import SheetProductSource
from shelfman.adapters.static import StaticProductSource

__all__ = [
    "CategoryAccessoryPolicy",
    "NoopAccessoryPolicy",
    "SheetProductSource",
    "StaticProductSource",
]
