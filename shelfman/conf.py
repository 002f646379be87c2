"""
Shelfman configuration.

Usage in settings.py:
    SHELFMAN = {
        "PRODUCT_SOURCE": "shelfman.adapters.sheets.SheetProductSource",
        "SHEET_CSV_URL": "https://docs.google.com/spreadsheets/d/e/.../pub?output=csv",
        "ACCESSORY_POLICY": "shelfman.adapters.accessory.CategoryAccessoryPolicy",
        "ACCESSORY_CATEGORIES": ["Grips", "Protectores"],
        "AUTO_REFRESH_SECONDS": 0,
    }
"""

import importlib
import threading
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings

from shelfman.exceptions import CatalogError

DEFAULT_SHEET_COLUMNS = {
    "id": "id",
    "sku": "sku",
    "nombre": "name",
    "categoria": "category",
    "marca": "brand",
    "nivelDeJuego": "level",
    "año": "year",
    "imagenes": "images",
    "precio3": "price",
    "stock": "stock",
}


@dataclass
class ShelfmanSettings:
    """Shelfman configuration settings."""

    PRODUCT_SOURCE: str | None = "shelfman.adapters.sheets.SheetProductSource"
    ACCESSORY_POLICY: str | None = None
    SHEET_CSV_URL: str = ""
    SHEET_TIMEOUT: float = 25
    SHEET_COLUMNS: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SHEET_COLUMNS))
    ACCESSORY_CATEGORIES: list[str] = field(default_factory=list)
    AUTO_REFRESH_SECONDS: float = 0


def get_shelfman_settings() -> ShelfmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "SHELFMAN", {})
    return ShelfmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_shelfman_settings(), name)


shelfman_settings = _LazySettings()


def import_backend(path: str):
    """Instantiate the class at a dotted path."""
    try:
        module_path, cls_name = path.rsplit(".", 1)
        module = importlib.import_module(module_path)
        cls = getattr(module, cls_name)
    except (ValueError, ImportError, AttributeError) as exc:
        raise CatalogError("INVALID_BACKEND", path=path, reason=str(exc)) from exc
    return cls()


# ProductSource singleton
_source_lock = threading.Lock()
_source_instance = None


def get_product_source():
    """
    Return the configured ProductSource instance.

    Loads from SHELFMAN["PRODUCT_SOURCE"] setting (dotted path).
    If _source_instance was set directly (e.g. in tests), returns it as-is.

    Raises:
        CatalogError: SOURCE_NOT_CONFIGURED if the setting is empty
    """
    global _source_instance
    if _source_instance is not None:
        return _source_instance
    source_path = shelfman_settings.PRODUCT_SOURCE
    if not source_path:
        raise CatalogError("SOURCE_NOT_CONFIGURED")
    with _source_lock:
        if _source_instance is None:
            _source_instance = import_backend(source_path)
    return _source_instance


def reset_product_source():
    """Reset ProductSource singleton (for tests)."""
    global _source_instance
    _source_instance = None


# AccessoryPolicy singleton
_policy_lock = threading.Lock()
_policy_instance = None


def get_accessory_policy():
    """
    Return the configured AccessoryPolicy instance.

    Falls back to NoopAccessoryPolicy when SHELFMAN["ACCESSORY_POLICY"]
    is unset, so price sorting always has a policy to ask.
    """
    global _policy_instance
    if _policy_instance is not None:
        return _policy_instance
    policy_path = shelfman_settings.ACCESSORY_POLICY or "shelfman.adapters.noop.NoopAccessoryPolicy"
    with _policy_lock:
        if _policy_instance is None:
            _policy_instance = import_backend(policy_path)
    return _policy_instance


def reset_accessory_policy():
    """Reset AccessoryPolicy singleton (for tests)."""
    global _policy_instance
    _policy_instance = None
