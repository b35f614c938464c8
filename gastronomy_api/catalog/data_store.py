from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS: list[str] = [
    "id",
    "name",
    "description",
    "category",
    "price",
    "available",
    "spicyLevel",
    "rating",
    "reviews",
    "ingredients",
]

_NUMERIC_COLUMNS = ["price", "spicyLevel", "rating", "reviews"]


def _lower(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str).str.lower()


def _lower_ingredients(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).lower() for item in value]


def _build_frame(products: tuple[Any, ...]) -> pd.DataFrame:
    # Non-object entries become all-NA rows so positions stay aligned with ``products``
    rows = [p if isinstance(p, dict) else {} for p in products]
    df = pd.DataFrame(rows, columns=PRODUCT_COLUMNS)

    for col in _NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)

    # Lowercase text columns for case-insensitive matching
    df["category_lower"] = _lower(df["category"])
    df["name_lower"] = _lower(df["name"])
    df["description_lower"] = _lower(df["description"])
    df["ingredients_lower"] = df["ingredients"].apply(_lower_ingredients)

    return df


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot of the menu document.

    ``products`` keeps the records exactly as loaded; ``frame`` is a derived
    query index whose row labels are positions in ``products``.
    """

    products: tuple[dict[str, Any], ...] = ()
    categories: tuple[str, ...] = ()
    restaurant_info: dict[str, Any] = field(default_factory=dict)
    frame: pd.DataFrame = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "frame", _build_frame(self.products))

    @classmethod
    def from_document(cls, document: Any) -> Catalog:
        """Build a catalog from a parsed JSON document.

        Raises ``TypeError`` when the top-level shape is wrong. Individual
        product records are not validated.
        """
        if not isinstance(document, dict):
            raise TypeError("catalog document must be a JSON object")

        products = document.get("products") or []
        categories = document.get("categories") or []
        restaurant_info = document.get("restaurantInfo") or {}

        if not isinstance(products, list):
            raise TypeError("'products' must be a JSON array")
        if not isinstance(categories, list):
            raise TypeError("'categories' must be a JSON array")
        if not isinstance(restaurant_info, dict):
            raise TypeError("'restaurantInfo' must be a JSON object")

        return cls(
            products=tuple(products),
            categories=tuple(categories),
            restaurant_info=restaurant_info,
        )


def load_catalog(path: Path) -> Catalog:
    """
    Read the catalog document at ``path``.

    Never raises: an unreadable or malformed document is logged and an empty
    catalog is returned so the service can still start.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            document = json.load(fh)
        catalog = Catalog.from_document(document)
    except Exception:
        logger.error("Failed to load catalog from %s, serving an empty catalog", path, exc_info=True)
        return Catalog()

    logger.info(
        "Loaded %d products in %d categories from %s",
        len(catalog.products),
        len(catalog.categories),
        path,
    )
    return catalog
