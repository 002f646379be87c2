"""
Record normalization and price parsing.

Raw records come from a ProductSource (usually a spreadsheet export), so
every field may be missing, blank or of the wrong type. Normalization never
rejects a record: malformed stock reads as 0 and malformed text as "".
Records with a bad SKU are kept here and dropped by the pipeline's
validity stage.
"""

import logging
import math
import numbers
import re
from decimal import Decimal
from typing import Any, Iterable, Mapping

from shelfman.protocols.catalog import Product

logger = logging.getLogger(__name__)

_PRICE_STRIP_RE = re.compile(r"[$.]")
_LEADING_INT_RE = re.compile(r"[+-]?\d+")

TEXT_FIELDS = ("sku", "name", "category", "brand", "level", "year")


def parse_price(value: Any) -> int:
    """
    Parse a raw price into an integer.

    Currency signs and "." thousands separators are removed and the
    leading integer is read, so "$1.234" is 1234 and "$1.234,50" is 1234.

    Returns:
        Parsed price, or 0 when the value is empty or unparsable.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else 0
    if isinstance(value, numbers.Real):
        return int(value) if math.isfinite(value) else 0
    cleaned = _PRICE_STRIP_RE.sub("", str(value)).strip()
    match = _LEADING_INT_RE.match(cleaned)
    return int(match.group()) if match else 0


def coerce_stock(value: Any) -> int | float:
    """
    Return a non-negative finite stock count; anything else is 0.

    Text uses the same sheet locale as prices: "." separates thousands
    and "," is the decimal comma, so "1.000" is 1000 and "2,5" is 2.5.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip().replace(".", "").replace(",", "."))
        except ValueError:
            return 0
    if isinstance(value, Decimal):
        value = float(value)
    if not isinstance(value, numbers.Real):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    return int(value) if value.is_integer() else value


def _text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        if value.is_integer():
            # Spreadsheet exports turn 2026 into 2026.0
            return str(int(value))
    return str(value)


def _images(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, Iterable):
        parts = value
    else:
        return ()
    return tuple(str(part).strip() for part in parts if str(part).strip())


def has_valid_sku(product: Product) -> bool:
    """True when the SKU has something other than whitespace."""
    return bool(product.sku and product.sku.strip())


def normalize_product(record: Mapping[str, Any], index: int = 0) -> Product:
    """
    Build a Product from one raw record.

    Args:
        record: Mapping keyed by Product field names
        index: Row position, used as id when the record has none

    Returns:
        Product with coerced stock and text fields
    """
    fields = {name: _text(record.get(name)) for name in TEXT_FIELDS}
    product_id = _text(record.get("id")) or fields["sku"] or f"row-{index}"
    price = record.get("price")
    if price is None or (isinstance(price, float) and not math.isfinite(price)):
        price = ""
    return Product(
        id=product_id,
        images=_images(record.get("images")),
        price=price,
        stock=coerce_stock(record.get("stock")),
        **fields,
    )


def normalize_products(records: Iterable[Mapping[str, Any]]) -> list[Product]:
    """Normalize a full snapshot of raw records, keeping their order."""
    products = [normalize_product(record, index) for index, record in enumerate(records)]
    logger.debug("Normalized %d products", len(products))
    return products
