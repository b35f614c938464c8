"""Pytest fixtures with small in-memory catalogs."""
from __future__ import annotations

from pathlib import Path

import pytest

from gastronomy_api.catalog.data_store import Catalog, load_catalog

MENU_PATH = Path(__file__).resolve().parent / "data" / "menu.json"

TWO_PRODUCTS = [
    {
        "id": 1,
        "name": "Garden Bowl",
        "description": "Roasted vegetables on quinoa",
        "category": "Vegetarian",
        "price": 10,
        "available": True,
        "spicyLevel": 0,
        "rating": 4.8,
        "reviews": 5,
        "ingredients": ["quinoa", "Zucchini", "pepper"],
    },
    {
        "id": 2,
        "name": "Beef Chilli",
        "description": "Slow-cooked beef with beans",
        "category": "Meat",
        "price": 20,
        "available": False,
        "spicyLevel": 3,
        "rating": 4.2,
        "reviews": 2,
        "ingredients": ["beef", "kidney beans", "Chilli"],
    },
]


@pytest.fixture
def two_product_catalog() -> Catalog:
    return Catalog(
        products=TWO_PRODUCTS,
        categories=["Vegetarian", "Meat"],
        restaurant_info={"name": "Test Kitchen"},
    )


@pytest.fixture
def menu_catalog() -> Catalog:
    return load_catalog(MENU_PATH)


@pytest.fixture
def empty_catalog() -> Catalog:
    return Catalog()
