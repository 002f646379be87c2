"""
Django Shelfman - Wholesale catalog browsing.

Usage:
    from shelfman import ShelfService, FilterState, CatalogError

    ShelfService.refresh()
    result = ShelfService.browse(FilterState(search="avanzado 2026"))
    facets = ShelfService.compute_facets(products, FilterState(category="Paletas"))
"""


def __getattr__(name):
    if name == "ShelfService":
        from shelfman.service import ShelfService

        return ShelfService
    elif name == "FilterState":
        from shelfman.protocols import FilterState

        return FilterState
    elif name == "CatalogError":
        from shelfman.exceptions import CatalogError

        return CatalogError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["ShelfService", "FilterState", "CatalogError"]
__version__ = "0.1.0"
