"""Shared fixtures for the catalog test suite."""

import pytest
from fastapi.testclient import TestClient

from bargains.main import create_app
from bargains.schemas.product import Product


def make_product(**kwargs) -> Product:
    defaults = {"category": "pantry", "id": "p", "name": "Item", "price": 1.0}
    defaults.update(kwargs)
    return Product(**defaults)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def sample_products():
    """A handful of products touching every filter dimension."""
    return [
        make_product(id="1", name="Whole Milk 2L", category="dairy", price=4.5,
                     original_price=5.5, discount=18, limit="4"),
        make_product(id="2", name="Cheddar Block", category="dairy", price=9.0,
                     original_price=12.0, discount=25),
        make_product(id="3", name="Sourdough Loaf", category="bakery", price=6.0),
        make_product(id="4", name="Greek Yoghurt", category="diary", price=3.0,
                     original_price=2.5, discount=None),
        make_product(id="5", name="Beef Mince 1kg", category="meat", price=14.99,
                     original_price=19.99, discount=25, limit="2"),
        make_product(id="6", name="Apples", category="produce", price=0.0,
                     discount=0),
    ]


@pytest.fixture
def catalog_45():
    """45 products, of which 20 carry a discount (several tied)."""
    products = []
    discounts = [10, 50, 25, 30, 25, 5, 40, 15, 50, 20, 35, 25, 60, 10, 45, 30, 5, 55, 20, 25]
    for i in range(45):
        discount = discounts[i // 2] if i % 2 == 0 and i // 2 < len(discounts) else None
        products.append(make_product(
            id=str(i), name=f"Product {i:02d}", category=("dairy", "meat", "pantry")[i % 3],
            price=float(i + 1), discount=discount,
        ))
    return products


@pytest.fixture
def client(sample_products):
    with TestClient(create_app(sample_products)) as test_client:
        yield test_client
