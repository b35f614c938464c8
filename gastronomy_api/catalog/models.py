from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_SPICY_LEVEL = 100


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductFilters(_CamelModel):
    category: str | None = Field(default=None, description="Category name, case-insensitive")
    min_price: float | None = Field(default=None, description="Inclusive lower price bound")
    max_price: float | None = Field(default=None, description="Inclusive upper price bound")
    available: bool | None = None
    spicy_level: int | None = Field(
        default=None, ge=0, le=MAX_SPICY_LEVEL, description="Maximum spiciness to include"
    )
    search: str | None = Field(
        default=None, description="Substring matched against name, description and ingredients"
    )


class CategoryCount(_CamelModel):
    name: str
    count: int


class CatalogStats(_CamelModel):
    total_products: int
    total_categories: int
    average_price: str
    average_rating: str
    total_reviews: int
    available_products: int
    vegetarian_options: int
    spicy_options: int


# ── Response envelopes ──────────────────────────────────────────────────


class ProductListResponse(_CamelModel):
    success: bool = True
    count: int
    data: list[Any]


class ProductResponse(_CamelModel):
    success: bool = True
    data: dict[str, Any]


class CategoryProductsResponse(_CamelModel):
    success: bool = True
    category: str
    count: int
    data: list[Any]


class CategoryListResponse(_CamelModel):
    success: bool = True
    data: list[CategoryCount]


class RestaurantResponse(_CamelModel):
    success: bool = True
    data: dict[str, Any]


class StatsResponse(_CamelModel):
    success: bool = True
    data: CatalogStats


class ErrorResponse(_CamelModel):
    success: bool = False
    message: str
    error: str | None = None
    errors: list[Any] | None = None
