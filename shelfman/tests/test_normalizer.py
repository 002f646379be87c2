"""Tests for record normalization and price parsing."""

import math
from decimal import Decimal

import pytest

from shelfman.normalizer import (
    coerce_stock,
    has_valid_sku,
    normalize_product,
    normalize_products,
    parse_price,
)
from shelfman.protocols import Product


class TestParsePrice:
    """Tests for parse_price()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$500", 500),
            ("$1.234", 1234),
            ("$ 250.000", 250000),
            ("1.234,50", 1234),
            (" 42 ", 42),
            (900, 900),
            (12.9, 12),
            (Decimal("75"), 75),
        ],
    )
    def test_parses_sheet_formats(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", ["", None, "consultar", "$", True, float("nan")])
    def test_unparsable_is_zero(self, raw):
        assert parse_price(raw) == 0


class TestCoerceStock:
    """Tests for coerce_stock()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(5, 5), (0, 0), (2.5, 2.5), (3.0, 3), ("7", 7), (" 4 ", 4), (Decimal("6"), 6)],
    )
    def test_numeric_values(self, raw, expected):
        assert coerce_stock(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "sin stock", float("nan"), float("inf"), -3, True, [], {}],
    )
    def test_malformed_is_zero(self, raw):
        assert coerce_stock(raw) == 0

    @pytest.mark.parametrize("raw, expected", [("1.000", 1000), ("2,5", 2.5), ("1.250,5", 1250.5)])
    def test_text_uses_sheet_locale(self, raw, expected):
        assert coerce_stock(raw) == expected

    def test_stock_and_price_read_thousands_alike(self):
        assert coerce_stock("1.000") == parse_price("$1.000") == 1000

    def test_result_is_finite(self):
        assert math.isfinite(coerce_stock(float("-inf")))


class TestNormalizeProduct:
    """Tests for normalize_product()."""

    def test_fields_pass_through(self):
        product = normalize_product(
            {
                "id": "9",
                "sku": "A1",
                "name": "Paleta Pro",
                "category": "Paletas",
                "brand": "X",
                "level": "avanzado",
                "year": "2026",
                "images": ["a.png", "b.png"],
                "price": "$1.000",
                "stock": 5,
            }
        )
        assert product == Product(
            id="9",
            sku="A1",
            name="Paleta Pro",
            category="Paletas",
            brand="X",
            level="avanzado",
            year="2026",
            images=("a.png", "b.png"),
            price="$1.000",
            stock=5,
        )

    def test_missing_fields_default_to_blank(self):
        product = normalize_product({"sku": "", "name": "broken"}, index=4)
        assert product.sku == ""
        assert product.category == ""
        assert product.stock == 0
        assert product.price == ""
        assert product.images == ()
        assert product.id == "row-4"

    def test_id_falls_back_to_sku(self):
        assert normalize_product({"sku": "Z9"}).id == "Z9"

    def test_numeric_year_becomes_text(self):
        product = normalize_product({"sku": "A1", "year": 2026.0})
        assert product.year == "2026"

    def test_comma_separated_images(self):
        product = normalize_product({"sku": "A1", "images": "a.png, b.png,,"})
        assert product.images == ("a.png", "b.png")

    def test_nan_price_becomes_blank(self):
        product = normalize_product({"sku": "A1", "price": float("nan")})
        assert product.price == ""


class TestNormalizeProducts:
    """Tests for normalize_products()."""

    def test_keeps_order_and_invalid_rows(self, scenario_records):
        products = normalize_products(scenario_records)
        assert [p.sku for p in products] == ["A1", "", "B2"]

    def test_stock_never_negative(self, catalog_records):
        records = catalog_records + [{"sku": "NEG", "stock": -1}, {"sku": "NAN", "stock": "NaN"}]
        assert all(p.stock >= 0 for p in normalize_products(records))


class TestHasValidSku:
    """Tests for has_valid_sku()."""

    @pytest.mark.parametrize("sku, valid", [("A1", True), ("", False), ("   ", False), (" B ", True)])
    def test_validity(self, sku, valid):
        assert has_valid_sku(Product(id="1", sku=sku)) is valid
