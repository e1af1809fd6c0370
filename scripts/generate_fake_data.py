"""Generate a fake sporting-goods catalog for testing and development.

This module fills a Catalog with a seeded random taxonomy, product range and
set of user ratings, and can export the ratings as a CSV file.

Example:
    Run the script directly to generate default data:
        $ python scripts/generate_fake_data.py

    Or import and use programmatically:
        from scripts.generate_fake_data import populate_fake_catalog
        catalog = populate_fake_catalog(Catalog(), num_products=40)
"""

import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.catalog.service import Catalog

# Default configuration constants
DEFAULT_NUM_PRODUCTS = 30
DEFAULT_NUM_USERS = 20
DEFAULT_NUM_RATINGS = 200
DEFAULT_RANDOM_SEED = 42

# Category -> activities it is linked to
FAKE_TAXONOMY: Dict[str, List[str]] = {
    "Apparel": ["Running", "Cycling", "Hiking", "Tennis"],
    "Footwear": ["Running", "Hiking", "Tennis"],
    "Protection": ["Cycling", "Skiing"],
    "Equipment": ["Cycling", "Skiing", "Swimming", "Tennis"],
    "Nutrition": ["Running", "Cycling", "Hiking"],
}

FAKE_COMMENTS = [
    "great value",
    "fits well",
    "broke after a month",
    "does the job",
    "would buy again",
    "too heavy",
    "excellent quality",
    "meh",
]


def populate_fake_catalog(
    catalog: Catalog,
    num_products: int = DEFAULT_NUM_PRODUCTS,
    num_users: int = DEFAULT_NUM_USERS,
    num_ratings: int = DEFAULT_NUM_RATINGS,
    random_seed: Optional[int] = DEFAULT_RANDOM_SEED,
) -> Catalog:
    """Fill a catalog with synthetic products and ratings.

    Every product is filed under a category linked to its activity, so the
    result is valid under strict category links.

    Args:
        catalog: Catalog to populate. It is modified in place.
        num_products: Number of products to create. Must be positive.
        num_users: Number of distinct rater names to draw from. Must be
            positive.
        num_ratings: Total number of ratings to add. May be zero.
        random_seed: Seed for reproducible output, or None.

    Returns:
        The same catalog, for chaining.

    Raises:
        ValueError: If num_products or num_users is not positive, or
            num_ratings is negative.
    """
    if num_products <= 0 or num_users <= 0:
        raise ValueError("num_products and num_users must be positive")
    if num_ratings < 0:
        raise ValueError("num_ratings must not be negative")

    rng = random.Random(random_seed)

    activities = sorted({a for links in FAKE_TAXONOMY.values() for a in links})
    catalog.define_activities(activities)
    for category, links in FAKE_TAXONOMY.items():
        catalog.add_category(category, links)

    product_names = []
    for i in range(1, num_products + 1):
        category = rng.choice(sorted(FAKE_TAXONOMY))
        activity = rng.choice(FAKE_TAXONOMY[category])
        name = f"{activity}-{category}-{i:03d}"
        catalog.add_product(name, activity, category)
        product_names.append(name)

    for _ in range(num_ratings):
        catalog.add_rating(
            rng.choice(product_names),
            f"user{rng.randint(1, num_users)}",
            rng.randint(0, 5),
            rng.choice(FAKE_COMMENTS),
        )

    return catalog


def ratings_to_frame(catalog: Catalog) -> pd.DataFrame:
    """Export the catalog's ratings, sorted by product then user."""
    df = catalog.ratings_frame()
    return df.sort_values(["product", "user"], kind="stable").reset_index(drop=True)


def main() -> None:
    """Main entry point for the data generation script.

    Generates a fake catalog with default parameters and saves its ratings
    to data/fake_ratings.csv. Prints summary statistics upon completion.
    """
    print(f"Generating {DEFAULT_NUM_RATINGS} fake ratings...")
    print(f"Products: {DEFAULT_NUM_PRODUCTS}, Users: {DEFAULT_NUM_USERS}")

    catalog = populate_fake_catalog(Catalog())
    df = ratings_to_frame(catalog)

    # Ensure data directory exists
    data_dir = project_root / "data"
    data_dir.mkdir(exist_ok=True)

    output_path = data_dir / "fake_ratings.csv"
    df.to_csv(output_path, index=False)

    print(f"\nData generated successfully!")
    print(f"Saved to: {output_path}")
    print(f"\nData preview:")
    print(df.head(10))
    print(f"\nData summary:")
    print(f"  Total ratings: {len(df)}")
    print(f"  Rated products: {df['product'].nunique()}")
    print(f"  Unique users: {df['user'].nunique()}")
    print(f"  Average stars: {catalog.average_stars():.2f}")


if __name__ == "__main__":
    main()
