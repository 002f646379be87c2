"""Catalog types and protocols."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable

from shelfman.exceptions import CatalogError

ALL = "ALL"


class PriceSortOrder(str, Enum):
    """Price ordering applied after filtering."""

    NONE = "none"
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: "str | PriceSortOrder | None") -> "PriceSortOrder":
        """Accept enum members, their values, or the page's "default" alias."""
        if isinstance(value, cls):
            return value
        if value is None or value == "" or value == "default":
            return cls.NONE
        try:
            return cls(str(value).lower())
        except ValueError:
            raise CatalogError("INVALID_SORT_ORDER", value=value) from None


@dataclass(frozen=True)
class Product:
    """Normalized catalog product.

    `price` keeps the raw sheet value; use shelfman.normalizer.parse_price
    to read it as an integer. `stock` is always a non-negative number.
    """

    id: str
    sku: str
    name: str = ""
    category: str = ""
    brand: str = ""
    level: str = ""
    year: str = ""
    images: tuple[str, ...] = ()
    price: str | int | float = ""
    stock: int | float = 0


def _text_param(params: Mapping[str, Any], key: str) -> str:
    value = params.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CatalogError("INVALID_FILTER", field=key, value=value)
    return value


@dataclass(frozen=True)
class FilterState:
    """User-controlled filter snapshot.

    Transitions return new instances, the way the catalog page does it:
    picking a category resets brand and search, picking a brand clears search.
    """

    search: str = ""
    category: str = ALL
    brand: str = ALL
    show_out_of_stock: bool = False
    price_sort: PriceSortOrder = PriceSortOrder.NONE

    def __post_init__(self):
        object.__setattr__(self, "price_sort", PriceSortOrder.parse(self.price_sort))

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "FilterState":
        """
        Build a state from request-style parameters.

        Recognized keys: q or search, category, brand,
        show_out_of_stock ("1", "true", "yes", "on"), sort.

        Raises:
            CatalogError: INVALID_SORT_ORDER for an unknown sort value,
                INVALID_FILTER when search, category or brand is not text
        """
        search_key = "q" if "q" in params else "search"
        flag = str(params.get("show_out_of_stock", "")).strip().lower()
        return cls(
            search=_text_param(params, search_key),
            category=_text_param(params, "category") or ALL,
            brand=_text_param(params, "brand") or ALL,
            show_out_of_stock=flag in ("1", "true", "yes", "on"),
            price_sort=PriceSortOrder.parse(params.get("sort")),
        )

    def reset(self) -> "FilterState":
        return FilterState()

    def select_category(self, category: str) -> "FilterState":
        return replace(self, category=category or ALL, brand=ALL, search="")

    def select_brand(self, brand: str) -> "FilterState":
        return replace(self, brand=brand or ALL, search="")

    def toggle_out_of_stock(self) -> "FilterState":
        return replace(self, show_out_of_stock=not self.show_out_of_stock)

    def with_search(self, search: str) -> "FilterState":
        return replace(self, search=search or "")

    def with_price_sort(self, order: "str | PriceSortOrder") -> "FilterState":
        return replace(self, price_sort=PriceSortOrder.parse(order))


@dataclass(frozen=True)
class FacetSet:
    """Filter options offered to the user. Both tuples start with ALL."""

    categories: tuple[str, ...] = (ALL,)
    brands: tuple[str, ...] = (ALL,)


@dataclass(frozen=True)
class BrowseResult:
    """Facets and ordered products for one filter state.

    `is_loaded` is False until the first snapshot arrives, so an empty
    `products` can be told apart from "still loading".
    """

    facets: FacetSet
    products: tuple[Product, ...] = field(default_factory=tuple)
    is_loaded: bool = False

    @property
    def is_empty(self) -> bool:
        return self.is_loaded and not self.products


@runtime_checkable
class ProductSource(Protocol):
    """Interface for fetching the full product list."""

    def fetch_products(self) -> list[Mapping[str, Any]]:
        """
        Return every raw product record of the current catalog.

        Raises:
            CatalogError: FETCH_FAILED when the upstream is unreachable
        """
        ...
