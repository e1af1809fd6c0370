"""Product catalog anchored to the activity/category taxonomy."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from src.catalog.exceptions import DuplicateError, ValidationError
from src.catalog.taxonomy import Taxonomy

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    """A catalog item bound to one activity and one category."""

    name: str
    activity: str
    category: str


class ProductCatalog:
    """Registry of products keyed by their globally unique name.

    Args:
        taxonomy: Taxonomy the products are validated against.
        strict_category_links: If True, reject products whose category is
            not linked to their activity.
    """

    def __init__(self, taxonomy: Taxonomy, strict_category_links: bool = True):
        self._taxonomy = taxonomy
        self._strict = strict_category_links
        self._products: Dict[str, Product] = {}

    def add_product(self, name: str, activity: str, category: str) -> Product:
        """Register a new product.

        Args:
            name: Unique product name.
            activity: Activity the product belongs to. Must be defined.
            category: Category the product is filed under.

        Returns:
            The created Product.

        Raises:
            DuplicateError: If a product with this name already exists.
            ValidationError: If the activity is undefined, or in strict mode
                if the category is not linked to the activity.
        """
        if name in self._products:
            raise DuplicateError("product", name)

        if not self._taxonomy.has_activity(activity):
            raise ValidationError(
                f"Activity {activity} does not exist",
                details={"product": name, "activity": activity},
            )

        if self._strict and not self._taxonomy.is_linked(category, activity):
            raise ValidationError(
                f"Category {category} is not linked to activity {activity}",
                details={"product": name, "activity": activity, "category": category},
            )

        product = Product(name=name, activity=activity, category=category)
        self._products[name] = product

        logger.info(
            "Product added",
            extra={"product": name, "activity": activity, "category": category},
        )
        return product

    def get(self, name: str) -> Optional[Product]:
        return self._products.get(name)

    def has_product(self, name: str) -> bool:
        return name in self._products

    def count_products(self) -> int:
        return len(self._products)

    def list_products(self) -> List[str]:
        return sorted(self._products)

    def iter_products(self) -> Iterable[Product]:
        return list(self._products.values())

    def get_products_for_category(self, category: str) -> List[str]:
        return sorted(p.name for p in self._products.values() if p.category == category)

    def get_products_for_activity(self, activity: str) -> List[str]:
        return sorted(p.name for p in self._products.values() if p.activity == activity)

    def get_products(self, activity: str, categories: Iterable[str]) -> List[str]:
        """Products of an activity that fall in any of the given categories.

        Args:
            activity: Activity the products must belong to.
            categories: Accepted categories. Duplicates are ignored.

        Returns:
            Matching product names, sorted.
        """
        wanted = set(categories)
        return sorted(
            p.name
            for p in self._products.values()
            if p.activity == activity and p.category in wanted
        )

    def is_category_in_use(self, category: str, activity: str) -> bool:
        """Whether any product is filed under ``category`` for ``activity``."""
        return any(
            p.category == category and p.activity == activity
            for p in self._products.values()
        )
