"""The Catalog aggregate.

A Catalog owns the taxonomy, the product catalog and the rating store, and
exposes every mutation and query of the engine. One lock guards all three
sub-models together: the statistics views read across them, and the API
serves requests from a thread pool.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

import pandas as pd

from src.catalog import stats
from src.catalog.config import CatalogConfig
from src.catalog.exceptions import CatalogError
from src.catalog.products import ProductCatalog
from src.catalog.ratings import RatingStore
from src.catalog.stats import ProductSummary
from src.catalog.taxonomy import Taxonomy

# Configure module logger
logger = logging.getLogger(__name__)


class Catalog:
    """In-memory catalog of activities, categories, products and ratings.

    Every mutation either passes all of its checks and applies a single
    state change, or raises a CatalogError and changes nothing. Queries
    never raise; unknown names give empty lists or 0.0.

    Args:
        config: Catalog settings. Defaults to CatalogConfig().
    """

    def __init__(self, config: Optional[CatalogConfig] = None):
        self.config = config or CatalogConfig()
        self._lock = threading.Lock()
        self._taxonomy = Taxonomy()
        self._products = ProductCatalog(
            self._taxonomy,
            strict_category_links=self.config.strict_category_links,
        )
        self._ratings = RatingStore()

        logger.info(
            "Initialized Catalog",
            extra={"strict_category_links": self.config.strict_category_links},
        )

    # ----- Taxonomy -----

    def define_activities(self, names: Iterable[str]) -> None:
        with self._lock:
            self._guarded(self._taxonomy.define_activities, names)

    def add_category(self, name: str, linked_activities: Iterable[str]) -> None:
        with self._lock:
            self._guarded(
                self._taxonomy.add_category,
                name,
                linked_activities,
                is_activity_in_use=self._products.is_category_in_use,
            )

    def get_activities(self) -> List[str]:
        with self._lock:
            return self._taxonomy.get_activities()

    def get_categories(self) -> List[str]:
        with self._lock:
            return self._taxonomy.get_categories()

    def get_categories_for_activity(self, activity: str) -> List[str]:
        with self._lock:
            return self._taxonomy.get_categories_for_activity(activity)

    def count_categories(self) -> int:
        with self._lock:
            return self._taxonomy.count_categories()

    # ----- Products -----

    def add_product(self, name: str, activity: str, category: str) -> None:
        with self._lock:
            self._guarded(self._products.add_product, name, activity, category)
            self._ratings.register_product(name)

    def has_product(self, name: str) -> bool:
        with self._lock:
            return self._products.has_product(name)

    def list_products(self) -> List[str]:
        with self._lock:
            return self._products.list_products()

    def get_products_for_category(self, category: str) -> List[str]:
        with self._lock:
            return self._products.get_products_for_category(category)

    def get_products_for_activity(self, activity: str) -> List[str]:
        with self._lock:
            return self._products.get_products_for_activity(activity)

    def get_products(self, activity: str, categories: Iterable[str]) -> List[str]:
        with self._lock:
            return self._products.get_products(activity, list(categories))

    # ----- Ratings -----

    def add_rating(
        self,
        product_name: str,
        user_name: str,
        num_stars: int,
        comment: str,
    ) -> None:
        with self._lock:
            self._guarded(
                self._ratings.add_rating, product_name, user_name, num_stars, comment
            )

    def get_ratings_for_product(self, product_name: str) -> List[str]:
        with self._lock:
            return self._ratings.get_ratings_for_product(product_name)

    def count_ratings(self, product_name: str) -> int:
        with self._lock:
            return self._ratings.count_ratings(product_name)

    def has_ratings(self, product_name: str) -> bool:
        with self._lock:
            return self._ratings.has_ratings(product_name)

    # ----- Statistics -----

    def get_stars_of_product(self, product_name: str) -> float:
        with self._lock:
            return stats.get_stars_of_product(self._ratings, product_name)

    def average_stars(self) -> float:
        with self._lock:
            return stats.average_stars(self._products, self._ratings)

    def stars_per_activity(self) -> Dict[str, float]:
        with self._lock:
            return stats.stars_per_activity(self._products, self._ratings)

    def get_products_per_stars(self) -> Dict[float, List[str]]:
        with self._lock:
            return stats.get_products_per_stars(self._products, self._ratings)

    def product_summary(self, product_name: str) -> Optional[ProductSummary]:
        with self._lock:
            return stats.product_summary(self._products, self._ratings, product_name)

    def ratings_frame(self) -> pd.DataFrame:
        """Snapshot of all ratings as a pandas DataFrame (see stats.ratings_frame)."""
        with self._lock:
            return stats.ratings_frame(self._products, self._ratings)

    @staticmethod
    def _guarded(operation, *args, **kwargs):
        """Run a mutation, logging rejected ones before re-raising."""
        try:
            return operation(*args, **kwargs)
        except CatalogError as e:
            logger.warning(
                f"Rejected {operation.__name__}: {e.message}",
                extra={"error_type": type(e).__name__, "details": e.details},
            )
            raise
