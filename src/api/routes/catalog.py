"""Catalog endpoints for the GearRate API.

This module exposes the taxonomy, product and rating operations of the
Catalog. Handlers only translate between HTTP and the Catalog; validation
errors raised by the Catalog are turned into responses by the exception
handler registered in src.api.main.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field, StrictInt

from src.api.dependencies import get_catalog
from src.catalog.exceptions import NotFoundError
from src.catalog.service import Catalog

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(tags=["catalog"])


class ActivitiesRequest(BaseModel):
    """Request body for defining activities."""

    names: List[str] = Field(..., description="Activity names to define")


class ActivitiesResponse(BaseModel):
    """All known activities in lexicographic order."""

    activities: List[str]


class CategoryRequest(BaseModel):
    """Request body for adding or rebinding a category."""

    name: str = Field(..., description="Category name")
    activities: List[str] = Field(
        ..., description="Activities the category is linked to"
    )


class CategoriesResponse(BaseModel):
    """Category names, sorted, together with their count."""

    categories: List[str]
    count: int


class ProductRequest(BaseModel):
    """Request body for adding a product."""

    name: str = Field(..., description="Unique product name")
    activity: str = Field(..., description="Activity the product belongs to")
    category: str = Field(..., description="Category the product is filed under")


class ProductsResponse(BaseModel):
    products: List[str]


class ProductSummaryResponse(BaseModel):
    """Catalog data and rating aggregates of one product."""

    name: str
    activity: str
    category: str
    num_ratings: int = Field(..., description="Number of ratings received")
    mean_stars: float = Field(..., description="Mean stars, 0.0 if unrated")


class RatingRequest(BaseModel):
    """Request body for rating a product."""

    user: str = Field(..., description="Name of the rater")
    # strict: JSON true, 4.0 and "4" are not star counts
    stars: StrictInt = Field(..., description="Star count between 0 and 5")
    comment: str = Field(default="", description="Free-text comment")


class RatingsResponse(BaseModel):
    """Ratings of a product, best first, as ``"<stars> : <comment>"``."""

    product: str
    ratings: List[str]


class ProductStarsResponse(BaseModel):
    product: str
    stars: float


@router.post(
    "/activities",
    response_model=ActivitiesResponse,
    status_code=status.HTTP_201_CREATED,
)
def define_activities(
    body: ActivitiesRequest, catalog: Catalog = Depends(get_catalog)
) -> ActivitiesResponse:
    """Define one or more activities. Known activities are left unchanged."""
    catalog.define_activities(body.names)
    return ActivitiesResponse(activities=catalog.get_activities())


@router.get("/activities", response_model=ActivitiesResponse)
def list_activities(catalog: Catalog = Depends(get_catalog)) -> ActivitiesResponse:
    return ActivitiesResponse(activities=catalog.get_activities())


@router.get("/activities/{activity}/categories", response_model=CategoriesResponse)
def list_categories_for_activity(
    activity: str, catalog: Catalog = Depends(get_catalog)
) -> CategoriesResponse:
    categories = catalog.get_categories_for_activity(activity)
    return CategoriesResponse(categories=categories, count=len(categories))


@router.post(
    "/categories",
    response_model=CategoriesResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_category(
    body: CategoryRequest, catalog: Catalog = Depends(get_catalog)
) -> CategoriesResponse:
    """Add a category, or replace the activity links of an existing one."""
    catalog.add_category(body.name, body.activities)
    return CategoriesResponse(
        categories=catalog.get_categories(),
        count=catalog.count_categories(),
    )


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(catalog: Catalog = Depends(get_catalog)) -> CategoriesResponse:
    return CategoriesResponse(
        categories=catalog.get_categories(),
        count=catalog.count_categories(),
    )


@router.post(
    "/products",
    response_model=ProductSummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    body: ProductRequest, catalog: Catalog = Depends(get_catalog)
) -> ProductSummaryResponse:
    catalog.add_product(body.name, body.activity, body.category)
    return _summary_or_404(catalog, body.name)


@router.get("/products", response_model=ProductsResponse)
def list_products(
    activity: Optional[str] = None,
    category: Optional[List[str]] = Query(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> ProductsResponse:
    """List products, optionally filtered.

    Args:
        activity: Only products of this activity.
        category: Only products in these categories. May be repeated.
        catalog: Injected Catalog.

    Example:
        GET /products?activity=Running&category=Shoes&category=Apparel
    """
    if activity is not None and category:
        products = catalog.get_products(activity, category)
    elif activity is not None:
        products = catalog.get_products_for_activity(activity)
    elif category:
        products = sorted(
            {p for c in category for p in catalog.get_products_for_category(c)}
        )
    else:
        products = catalog.list_products()
    return ProductsResponse(products=products)


# Product names may contain "/", so product routes use the path converter.
# The bare summary route must stay last: its converter also matches
# "<name>/ratings" and "<name>/stars".


@router.post(
    "/products/{name:path}/ratings",
    response_model=RatingsResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_rating(
    name: str, body: RatingRequest, catalog: Catalog = Depends(get_catalog)
) -> RatingsResponse:
    catalog.add_rating(name, body.user, body.stars, body.comment)
    return RatingsResponse(product=name, ratings=catalog.get_ratings_for_product(name))


@router.get("/products/{name:path}/ratings", response_model=RatingsResponse)
def list_ratings(name: str, catalog: Catalog = Depends(get_catalog)) -> RatingsResponse:
    return RatingsResponse(product=name, ratings=catalog.get_ratings_for_product(name))


@router.get("/products/{name:path}/stars", response_model=ProductStarsResponse)
def get_product_stars(
    name: str, catalog: Catalog = Depends(get_catalog)
) -> ProductStarsResponse:
    return ProductStarsResponse(product=name, stars=catalog.get_stars_of_product(name))


@router.get("/products/{name:path}", response_model=ProductSummaryResponse)
def get_product(name: str, catalog: Catalog = Depends(get_catalog)) -> ProductSummaryResponse:
    return _summary_or_404(catalog, name)


def _summary_or_404(catalog: Catalog, name: str) -> ProductSummaryResponse:
    summary = catalog.product_summary(name)
    if summary is None:
        raise NotFoundError("product", name)
    return ProductSummaryResponse(
        name=summary.name,
        activity=summary.activity,
        category=summary.category,
        num_ratings=summary.num_ratings,
        mean_stars=summary.mean_stars,
    )
