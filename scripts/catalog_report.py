"""CLI script that prints star statistics for a fake catalog.

Useful for eyeballing the statistics views. Builds a catalog with
scripts/generate_fake_data.py and prints the requested report to the
console.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scripts.generate_fake_data import (
    DEFAULT_NUM_PRODUCTS,
    DEFAULT_NUM_RATINGS,
    DEFAULT_RANDOM_SEED,
    populate_fake_catalog,
)
from src.catalog.config import CatalogConfig
from src.catalog.service import Catalog

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s"
)
logger = logging.getLogger(__name__)


def build_report(catalog: Catalog, product: Optional[str] = None) -> List[str]:
    """Render the statistics of a catalog as printable lines.

    Args:
        catalog: Catalog to report on.
        product: If given, also list this product's ratings.

    Returns:
        Report lines, without trailing newlines.
    """
    lines = [f"Average stars: {catalog.average_stars():.2f}", "", "Stars per activity:"]
    for activity, stars in catalog.stars_per_activity().items():
        lines.append(f"  {activity:<10} {stars:.2f}")

    lines.extend(["", "Products per stars:"])
    for stars, products in catalog.get_products_per_stars().items():
        lines.append(f"  {stars:.2f}: {', '.join(products)}")

    if product is not None:
        lines.extend(["", f"Ratings for {product} ({catalog.get_stars_of_product(product):.2f}):"])
        ratings = catalog.get_ratings_for_product(product)
        if not ratings:
            lines.append("  (none)")
        lines.extend(f"  {rating}" for rating in ratings)

    return lines


def main() -> None:
    """Main CLI function."""
    parser = argparse.ArgumentParser(
        description="Print star statistics for a generated catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/catalog_report.py
  python scripts/catalog_report.py --num-ratings 500 --seed 7
  python scripts/catalog_report.py --product Running-Footwear-004
        """
    )

    parser.add_argument(
        "--num-products",
        type=int,
        default=DEFAULT_NUM_PRODUCTS,
        help=f"Number of products to generate (default: {DEFAULT_NUM_PRODUCTS})"
    )

    parser.add_argument(
        "--num-ratings",
        type=int,
        default=DEFAULT_NUM_RATINGS,
        help=f"Number of ratings to generate (default: {DEFAULT_NUM_RATINGS})"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_RANDOM_SEED,
        help=f"Random seed (default: {DEFAULT_RANDOM_SEED})"
    )

    parser.add_argument(
        "--product",
        type=str,
        default=None,
        help="Also list the ratings of this product"
    )

    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Do not require product categories to be linked to their activity"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        catalog = populate_fake_catalog(
            Catalog(CatalogConfig(strict_category_links=not args.lenient)),
            num_products=args.num_products,
            num_ratings=args.num_ratings,
            random_seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    for line in build_report(catalog, product=args.product):
        print(line)
    print()


if __name__ == "__main__":
    main()
