"""
Predicate pipeline.

Stages run in a fixed order (validity, stock, category, brand, search)
and each one keeps input order. Every stage is a plain function over a
list so it can be tested and reused on its own.
"""

import logging
import re
from typing import Iterable

from shelfman.normalizer import has_valid_sku
from shelfman.protocols.catalog import ALL, FilterState, Product

logger = logging.getLogger(__name__)

_NAME_PUNCTUATION_RE = re.compile(r"[-/()]")


def only_valid(products: Iterable[Product]) -> list[Product]:
    """Drop products whose SKU is empty or whitespace."""
    return [p for p in products if has_valid_sku(p)]


def only_in_stock(products: Iterable[Product], show_out_of_stock: bool) -> list[Product]:
    if show_out_of_stock:
        return list(products)
    return [p for p in products if p.stock > 0]


def only_category(products: Iterable[Product], category: str) -> list[Product]:
    if category == ALL:
        return list(products)
    return [p for p in products if p.category == category]


def only_brand(products: Iterable[Product], brand: str) -> list[Product]:
    if brand == ALL:
        return list(products)
    return [p for p in products if p.brand == brand]


def search_terms(text: str) -> list[str]:
    """Lower-case and split a search box value; blank input has no terms."""
    return (text or "").lower().split()


def name_words(name: str) -> list[str]:
    return _NAME_PUNCTUATION_RE.sub(" ", (name or "").lower()).split()


def matches_terms(product: Product, terms: list[str]) -> bool:
    """
    Check every term against the product's searchable fields.

    A term matches when it is a substring of the SKU, the level or the
    year, or a prefix of one word of the name. All terms must match,
    each possibly on a different field.
    """
    sku = product.sku.lower()
    words = name_words(product.name)
    level = product.level.lower()
    year = product.year.lower()

    for term in terms:
        if term in sku:
            continue
        if any(word.startswith(term) for word in words):
            continue
        if term in level or term in year:
            continue
        return False
    return True


def only_matching(products: Iterable[Product], search: str) -> list[Product]:
    terms = search_terms(search)
    if not terms:
        return list(products)
    return [p for p in products if matches_terms(p, terms)]


def filter_products(products: Iterable[Product], state: FilterState) -> list[Product]:
    """
    Reduce a normalized product list to the candidate set.

    Args:
        products: Normalized products, in catalog order
        state: Active filter state

    Returns:
        Products matching every active filter, in input order
    """
    candidates = list(products)
    logger.debug("Filtering %d products with %r", len(candidates), state)

    candidates = only_valid(candidates)
    logger.debug("After SKU filter: %d", len(candidates))

    candidates = only_in_stock(candidates, state.show_out_of_stock)
    logger.debug("After stock filter: %d", len(candidates))

    candidates = only_category(candidates, state.category)
    logger.debug("After category filter: %d", len(candidates))

    candidates = only_brand(candidates, state.brand)
    logger.debug("After brand filter: %d", len(candidates))

    candidates = only_matching(candidates, state.search)
    logger.debug("After search filter: %d", len(candidates))

    return candidates
