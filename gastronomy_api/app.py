from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Path, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog.data_store import Catalog, load_catalog
from .catalog.models import (
    CategoryListResponse,
    CategoryProductsResponse,
    ErrorResponse,
    MAX_SPICY_LEVEL,
    ProductFilters,
    ProductListResponse,
    ProductResponse,
    RestaurantResponse,
    StatsResponse,
)
from .catalog.queries import (
    get_featured_products,
    get_product,
    get_restaurant_info,
    get_stats,
    list_categories,
    list_products,
    list_products_by_category,
)
from .config import DEFAULT_APP_CONFIG, AppConfig

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
# Product ids are compared against an int64 column
_INT64_MAX = 2**63 - 1

router = APIRouter()


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


# ── Discovery ────────────────────────────────────────────────────────────


@router.get("/")
def root() -> dict:
    return {
        "message": "Welcome to the Gastronomy Heaven API",
        "version": API_VERSION,
        "endpoints": {
            "products": "/api/products",
            "featuredProducts": "/api/products/featured",
            "productsByCategory": "/api/products/category/{category}",
            "productById": "/api/products/{product_id}",
            "categories": "/api/categories",
            "restaurant": "/api/restaurant",
            "stats": "/api/stats",
        },
    }


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Products ─────────────────────────────────────────────────────────────
# Static paths are registered before /api/products/{product_id} so they are
# not captured by it.


@router.get("/api/products", response_model=ProductListResponse)
def products(
    category: str | None = Query(default=None),
    min_price: float | None = Query(default=None, alias="minPrice", allow_inf_nan=False),
    max_price: float | None = Query(default=None, alias="maxPrice", allow_inf_nan=False),
    available: bool | None = Query(default=None),
    spicy_level: int | None = Query(default=None, alias="spicyLevel", ge=0, le=MAX_SPICY_LEVEL),
    search: str | None = Query(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> ProductListResponse:
    filters = ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        available=available,
        spicy_level=spicy_level,
        search=search,
    )
    items = list_products(catalog, filters)
    return ProductListResponse(count=len(items), data=items)


@router.get("/api/products/featured", response_model=ProductListResponse)
def featured_products(catalog: Catalog = Depends(get_catalog)) -> ProductListResponse:
    items = get_featured_products(catalog)
    return ProductListResponse(count=len(items), data=items)


@router.get("/api/products/category/{category}", response_model=CategoryProductsResponse)
def products_by_category(
    category: str,
    catalog: Catalog = Depends(get_catalog),
) -> CategoryProductsResponse:
    items = list_products_by_category(catalog, category)
    if not items:
        raise HTTPException(status_code=404, detail="No products found in this category")
    return CategoryProductsResponse(category=category, count=len(items), data=items)


@router.get("/api/products/{product_id}", response_model=ProductResponse)
def product_by_id(
    product_id: int = Path(ge=-_INT64_MAX - 1, le=_INT64_MAX),
    catalog: Catalog = Depends(get_catalog),
) -> ProductResponse:
    product = get_product(catalog, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse(data=product)


# ── Catalog metadata ─────────────────────────────────────────────────────


@router.get("/api/categories", response_model=CategoryListResponse)
def categories(catalog: Catalog = Depends(get_catalog)) -> CategoryListResponse:
    return CategoryListResponse(data=list_categories(catalog))


@router.get("/api/restaurant", response_model=RestaurantResponse)
def restaurant(catalog: Catalog = Depends(get_catalog)) -> RestaurantResponse:
    return RestaurantResponse(data=get_restaurant_info(catalog))


@router.get("/api/stats", response_model=StatsResponse)
def stats(
    catalog: Catalog = Depends(get_catalog),
    config: AppConfig = Depends(get_config),
) -> StatsResponse:
    return StatsResponse(data=get_stats(catalog, vegetarian_category=config.vegetarian_category))


# ── Error handling ───────────────────────────────────────────────────────


def _error_response(status_code: int, body: ErrorResponse, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exc.status_code,
        ErrorResponse(message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        422,
        ErrorResponse(
            message="Invalid request parameters",
            errors=jsonable_encoder(exc.errors()),
        ),
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    config: AppConfig = request.app.state.config
    return _error_response(
        500,
        ErrorResponse(
            message="Internal server error",
            error=str(exc) if config.debug else "Internal error",
        ),
    )


# ── Application factory ──────────────────────────────────────────────────


def create_app(
    catalog: Catalog | None = None,
    config: AppConfig = DEFAULT_APP_CONFIG,
) -> FastAPI:
    """
    Build the API around an immutable catalog.

    When ``catalog`` is omitted it is loaded from ``config.catalog_path``.
    """
    if catalog is None:
        catalog = load_catalog(config.catalog_path)

    app = FastAPI(title="Gastronomy Heaven API", version=API_VERSION)
    app.state.catalog = catalog
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(router)

    logger.info(
        "Catalog ready: %d products, %d categories",
        len(catalog.products),
        len(catalog.categories),
    )
    return app


app = create_app()
