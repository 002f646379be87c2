"""Facet derivation: category and brand options for the filter bar."""

from typing import Iterable

from shelfman.pipeline import only_category, only_valid
from shelfman.protocols.catalog import ALL, FacetSet, FilterState, Product


def _distinct(values: Iterable[str]) -> tuple[str, ...]:
    """ALL followed by values in first-seen order."""
    return (ALL, *dict.fromkeys(values))


def category_options(products: Iterable[Product]) -> tuple[str, ...]:
    return _distinct(p.category for p in only_valid(products))


def brand_options(products: Iterable[Product], category: str = ALL) -> tuple[str, ...]:
    """
    Brands offered for the selected category.

    Blank brands are skipped. Stock is ignored so out-of-stock brands
    stay selectable.
    """
    scoped = only_category(only_valid(products), category)
    return _distinct(p.brand for p in scoped if p.brand)


def compute_facets(products: Iterable[Product], state: FilterState) -> FacetSet:
    products = list(products)
    return FacetSet(
        categories=category_options(products),
        brands=brand_options(products, state.category),
    )
