"""Pytest fixtures for Shelfman tests."""

import pytest

from shelfman.conf import reset_accessory_policy, reset_product_source
from shelfman.normalizer import normalize_products
from shelfman.service import reset_store


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Each test gets fresh backends and a fresh default store."""
    reset_product_source()
    reset_accessory_policy()
    reset_store()
    yield
    reset_product_source()
    reset_accessory_policy()
    reset_store()


@pytest.fixture
def scenario_records():
    """Valid in-stock paddle, broken row and an out-of-stock ball."""
    return [
        {
            "id": "1",
            "sku": "A1",
            "name": "Paleta Pro",
            "category": "Paletas",
            "brand": "X",
            "price": "$1.000",
            "stock": 5,
            "level": "avanzado",
            "year": "2026",
        },
        {"sku": "", "name": "broken"},
        {
            "id": "3",
            "sku": "B2",
            "name": "Pelota Mix",
            "category": "Pelotas",
            "brand": "Y",
            "price": "$200",
            "stock": 0,
            "level": "",
            "year": "2025",
        },
    ]


@pytest.fixture
def catalog_records():
    """A small wholesale catalog covering every filter."""
    return [
        {
            "id": "p1",
            "sku": "BB-VERTEX4",
            "name": "Bullpadel Vertex 04 (Hybrid)",
            "category": "Paletas",
            "brand": "Bullpadel",
            "level": "Avanzado",
            "year": "2026",
            "price": "$250.000",
            "stock": 3,
        },
        {
            "id": "p2",
            "sku": "NOX-AT10",
            "name": "Nox AT10 Genius 18K",
            "category": "Paletas",
            "brand": "Nox",
            "level": "Avanzado",
            "year": "2025",
            "price": "$310.000",
            "stock": 0,
        },
        {
            "id": "p3",
            "sku": "HD-ALPHA",
            "name": "Head Alpha Motion",
            "category": "Paletas",
            "brand": "Head",
            "level": "Intermedio",
            "year": "2026",
            "price": "$180.000",
            "stock": 7,
        },
        {
            "id": "b1",
            "sku": "HD-PRO-S",
            "name": "Pelotas Head Pro S x3",
            "category": "Pelotas",
            "brand": "Head",
            "level": "",
            "year": "",
            "price": "$9.000",
            "stock": 120,
        },
        {
            "id": "g1",
            "sku": "BB-GRIP",
            "name": "Overgrip Bullpadel GB-1200",
            "category": "Grips",
            "brand": "Bullpadel",
            "level": "",
            "year": "",
            "price": "$4.500",
            "stock": 40,
        },
        {
            "id": "g2",
            "sku": "GEN-GRIP",
            "name": "Overgrip genérico",
            "category": "Grips",
            "brand": "",
            "level": "",
            "year": "",
            "price": "$4.500",
            "stock": 10,
        },
        {
            "id": "x1",
            "sku": "   ",
            "name": "Fila sin SKU",
            "category": "Bolsos",
            "brand": "Siux",
            "price": "$50.000",
            "stock": 2,
        },
    ]


@pytest.fixture
def scenario_products(scenario_records):
    return normalize_products(scenario_records)


@pytest.fixture
def catalog(catalog_records):
    return normalize_products(catalog_records)


class GripsArePairs:
    """AccessoryPolicy stub: grips are sold in pairs."""

    def __init__(self):
        self.calls = []

    def is_min_quantity_accessory(self, product):
        self.calls.append(product.sku)
        return product.category == "Grips"


@pytest.fixture
def grips_policy():
    return GripsArePairs()
