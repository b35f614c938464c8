from __future__ import annotations

from typing import Any

import pandas as pd

from .data_store import Catalog
from .models import CatalogStats, CategoryCount, ProductFilters

FEATURED_MIN_RATING = 4.5
FEATURED_LIMIT = 6
VEGETARIAN_CATEGORY = "Vegetarian"


def _records(catalog: Catalog, rows: pd.DataFrame) -> list[dict[str, Any]]:
    """Map frame rows back to the original product records."""
    return [catalog.products[i] for i in rows.index]


def _is_flag(series: pd.Series, flag: bool) -> pd.Series:
    """Strict boolean equality; numbers such as 1 or 0 never match."""
    if pd.api.types.is_bool_dtype(series):
        return series.eq(flag)
    return series.map(lambda v: isinstance(v, bool) and v == flag).astype(bool)


def _matches_search(df: pd.DataFrame, term: str) -> pd.Series:
    term = term.lower()
    in_ingredients = df["ingredients_lower"].apply(
        lambda items: any(term in item for item in items)
    ).astype(bool)
    return (
        df["name_lower"].str.contains(term, regex=False)
        | df["description_lower"].str.contains(term, regex=False)
        | in_ingredients
    )


def list_products(catalog: Catalog, filters: ProductFilters) -> list[dict[str, Any]]:
    """Return products matching every supplied filter, in catalog order."""
    df = catalog.frame
    if df.empty:
        return []

    mask = pd.Series(True, index=df.index)

    if filters.category:
        mask = mask & (df["category_lower"] == filters.category.lower())

    if filters.min_price is not None:
        mask = mask & (df["price"] >= filters.min_price)

    if filters.max_price is not None:
        mask = mask & (df["price"] <= filters.max_price)

    if filters.available is not None:
        mask = mask & _is_flag(df["available"], filters.available)

    if filters.spicy_level is not None:
        mask = mask & (df["spicyLevel"] <= filters.spicy_level)

    if filters.search:
        mask = mask & _matches_search(df, filters.search)

    return _records(catalog, df.loc[mask])


def get_product(catalog: Catalog, product_id: int) -> dict[str, Any] | None:
    """Return the first product with ``product_id``, or ``None``."""
    df = catalog.frame
    matches = df.index[df["id"] == product_id]
    if len(matches) == 0:
        return None
    return catalog.products[matches[0]]


def list_products_by_category(catalog: Catalog, name: str) -> list[dict[str, Any]]:
    df = catalog.frame
    if df.empty:
        return []
    return _records(catalog, df.loc[df["category_lower"] == name.lower()])


def list_categories(catalog: Catalog) -> list[CategoryCount]:
    """Known categories with their product counts.

    Counting is case-sensitive, unlike the category filters.
    """
    column = catalog.frame["category"]
    return [
        CategoryCount(name=name, count=int(column.eq(name).sum()))
        for name in catalog.categories
    ]


def get_restaurant_info(catalog: Catalog) -> dict[str, Any]:
    return catalog.restaurant_info


def get_featured_products(
    catalog: Catalog,
    min_rating: float = FEATURED_MIN_RATING,
    limit: int = FEATURED_LIMIT,
) -> list[dict[str, Any]]:
    """Top-rated products, best first; ties keep catalog order."""
    df = catalog.frame
    if df.empty:
        return []
    top = (
        df.loc[df["rating"] >= min_rating]
        .sort_values("rating", ascending=False, kind="stable")
        .head(limit)
    )
    return _records(catalog, top)


def _mean(series: pd.Series) -> float:
    value = series.mean()
    return 0.0 if pd.isna(value) else float(value)


def get_stats(catalog: Catalog, vegetarian_category: str = VEGETARIAN_CATEGORY) -> CatalogStats:
    df = catalog.frame
    return CatalogStats(
        total_products=len(catalog.products),
        total_categories=len(catalog.categories),
        average_price=f"{_mean(df['price']):.2f}",
        average_rating=f"{_mean(df['rating']):.1f}",
        total_reviews=int(df["reviews"].sum()),
        available_products=int(_is_flag(df["available"], True).sum()),
        vegetarian_options=int(df["category"].eq(vegetarian_category).sum()),
        spicy_options=int((df["spicyLevel"] > 0).sum()),
    )
