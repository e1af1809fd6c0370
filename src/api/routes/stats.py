"""Statistics endpoints for the GearRate API."""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.dependencies import get_catalog
from src.catalog.service import Catalog

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(
    prefix="/stats",
    tags=["statistics"],
)


class AverageStarsResponse(BaseModel):
    average_stars: float = Field(
        ..., description="Mean over all ratings of all products, 0.0 if none"
    )


class ActivityStarsResponse(BaseModel):
    """Mean stars per activity, keyed and ordered by activity name."""

    activities: Dict[str, float]


class StarsBucket(BaseModel):
    stars: float = Field(..., description="Mean star value shared by the products")
    products: List[str] = Field(..., description="Product names, sorted")


class ProductsPerStarsResponse(BaseModel):
    """Products grouped by mean stars, highest mean first.

    Returned as a list because JSON object keys cannot be numbers.
    """

    buckets: List[StarsBucket]


@router.get("/average", response_model=AverageStarsResponse)
def get_average_stars(catalog: Catalog = Depends(get_catalog)) -> AverageStarsResponse:
    return AverageStarsResponse(average_stars=catalog.average_stars())


@router.get("/activities", response_model=ActivityStarsResponse)
def get_stars_per_activity(
    catalog: Catalog = Depends(get_catalog),
) -> ActivityStarsResponse:
    return ActivityStarsResponse(activities=catalog.stars_per_activity())


@router.get("/products-per-stars", response_model=ProductsPerStarsResponse)
def get_products_per_stars(
    catalog: Catalog = Depends(get_catalog),
) -> ProductsPerStarsResponse:
    per_stars = catalog.get_products_per_stars()
    logger.debug(f"Returning {len(per_stars)} star buckets")
    return ProductsPerStarsResponse(
        buckets=[
            StarsBucket(stars=stars, products=products)
            for stars, products in per_stars.items()
        ]
    )
