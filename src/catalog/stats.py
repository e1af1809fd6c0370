"""Aggregate star statistics over the product catalog.

Nothing here is cached. Each view is rebuilt from the current products and
ratings by flattening them into a pandas DataFrame with one row per rating
and grouping it by product or by activity.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from src.catalog.products import ProductCatalog
from src.catalog.ratings import RatingStore

# Configure module logger
logger = logging.getLogger(__name__)

# Columns of the per-rating frame built by ratings_frame
RATING_COLUMNS = ["product", "activity", "category", "user", "stars", "comment"]


@dataclass(frozen=True)
class ProductSummary:
    """Catalog data and rating aggregates for a single product."""

    name: str
    activity: str
    category: str
    num_ratings: int
    mean_stars: float


def ratings_frame(products: ProductCatalog, ratings: RatingStore) -> pd.DataFrame:
    """Flatten every rating into a DataFrame row tagged with its product data.

    Args:
        products: Product catalog used to resolve activity and category.
        ratings: Rating store to read from.

    Returns:
        DataFrame with columns RATING_COLUMNS and one row per rating. The
        frame is empty (but keeps its columns) when there are no ratings.
    """
    records = []
    for rating in ratings.iter_ratings():
        product = products.get(rating.product)
        if product is None:
            # only registered products can be rated, so this is unreachable
            continue
        records.append(
            {
                "product": product.name,
                "activity": product.activity,
                "category": product.category,
                "user": rating.user,
                "stars": rating.stars,
                "comment": rating.comment,
            }
        )

    df = pd.DataFrame.from_records(records, columns=RATING_COLUMNS)
    df["stars"] = df["stars"].astype(np.int64)
    return df


def mean_stars(stars: List[int]) -> float:
    """Arithmetic mean of star values, 0.0 for an empty list."""
    if not stars:
        return 0.0
    return float(np.mean(np.asarray(stars, dtype=np.float64)))


def get_stars_of_product(ratings: RatingStore, product_name: str) -> float:
    """Mean stars of one product; 0.0 if it has no ratings or is unknown."""
    return mean_stars(ratings.stars_for(product_name))


def average_stars(products: ProductCatalog, ratings: RatingStore) -> float:
    """Mean over every star value of every product; 0.0 if nothing is rated."""
    df = ratings_frame(products, ratings)
    if df.empty:
        return 0.0
    return float(df["stars"].mean())


def stars_per_activity(products: ProductCatalog, ratings: RatingStore) -> Dict[str, float]:
    """Mean stars of the ratings of each activity's products.

    Activities whose products have no ratings (or that have no products at
    all) do not appear in the result.

    Returns:
        Dictionary from activity to mean stars, ordered by activity name.
    """
    df = ratings_frame(products, ratings)
    if df.empty:
        return {}

    means = df.groupby("activity")["stars"].mean().sort_index()
    logger.debug(f"Computed mean stars for {len(means)} activities")
    return {str(activity): float(value) for activity, value in means.items()}


def get_products_per_stars(
    products: ProductCatalog, ratings: RatingStore
) -> Dict[float, List[str]]:
    """Group products by their mean star value.

    Products with a mean of exactly 0 are left out: this covers products
    without ratings as well as products whose ratings are all zero stars.

    Returns:
        Dictionary from mean stars to the sorted names of the products with
        that mean, ordered by descending mean.
    """
    df = ratings_frame(products, ratings)
    if df.empty:
        return {}

    means = df.groupby("product")["stars"].mean()
    means = means[means > 0]

    buckets: Dict[float, List[str]] = {}
    for product_name, value in means.items():
        buckets.setdefault(float(value), []).append(str(product_name))

    return {value: sorted(buckets[value]) for value in sorted(buckets, reverse=True)}


def product_summary(
    products: ProductCatalog, ratings: RatingStore, product_name: str
) -> Optional[ProductSummary]:
    """Build a ProductSummary, or None if the product does not exist."""
    product = products.get(product_name)
    if product is None:
        return None

    return ProductSummary(
        name=product.name,
        activity=product.activity,
        category=product.category,
        num_ratings=ratings.count_ratings(product_name),
        mean_stars=get_stars_of_product(ratings, product_name),
    )
