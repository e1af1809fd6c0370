"""Append-only store of user ratings per product."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List

from src.catalog.exceptions import NotFoundError, ValidationError

# Configure module logger
logger = logging.getLogger(__name__)

MIN_STARS = 0
MAX_STARS = 5


@dataclass(frozen=True)
class Rating:
    """A single star rating left by a user on a product."""

    product: str
    user: str
    stars: int
    comment: str

    def __str__(self) -> str:
        return f"{self.stars} : {self.comment}"


class RatingStore:
    """Ratings grouped by product, kept in insertion order.

    Only products registered through ``register_product`` can be rated.
    """

    def __init__(self) -> None:
        self._ratings: Dict[str, List[Rating]] = {}

    def register_product(self, product_name: str) -> None:
        self._ratings.setdefault(product_name, [])

    def add_rating(
        self,
        product_name: str,
        user_name: str,
        num_stars: int,
        comment: str,
    ) -> Rating:
        """Append a rating to a product.

        Args:
            product_name: Product being rated.
            user_name: Free-text name of the rater. Users may rate the same
                product more than once.
            num_stars: Integer star count between 0 and 5 inclusive.
            comment: Free-text comment.

        Returns:
            The stored Rating.

        Raises:
            ValidationError: If num_stars is not an integer in [0, 5].
            NotFoundError: If the product was never registered.
        """
        # bool is an int subclass but True/False are not star counts
        if isinstance(num_stars, bool) or not isinstance(num_stars, int):
            raise ValidationError(
                "Star rating must be an integer",
                details={"product": product_name, "stars": repr(num_stars)},
            )
        if not MIN_STARS <= num_stars <= MAX_STARS:
            raise ValidationError(
                f"Star rating must be between {MIN_STARS} and {MAX_STARS}",
                details={"product": product_name, "stars": num_stars},
            )
        if product_name not in self._ratings:
            raise NotFoundError("product", product_name)

        rating = Rating(
            product=product_name,
            user=user_name,
            stars=num_stars,
            comment=comment,
        )
        self._ratings[product_name].append(rating)

        logger.info(
            "Rating added",
            extra={"product": product_name, "user": user_name, "stars": num_stars},
        )
        return rating

    def get_ratings_for_product(self, product_name: str) -> List[str]:
        """Ratings of a product rendered as ``"<stars> : <comment>"``.

        Ordered by descending stars. Python's sort is stable, so ratings
        with the same star count keep the order they were added in.
        """
        ratings = self._ratings.get(product_name, [])
        return [str(r) for r in sorted(ratings, key=lambda r: r.stars, reverse=True)]

    def stars_for(self, product_name: str) -> List[int]:
        return [r.stars for r in self._ratings.get(product_name, [])]

    def count_ratings(self, product_name: str) -> int:
        return len(self._ratings.get(product_name, []))

    def has_ratings(self, product_name: str) -> bool:
        return self.count_ratings(product_name) > 0

    def iter_ratings(self) -> Iterator[Rating]:
        """Every stored rating, product by product in registration order."""
        for ratings in self._ratings.values():
            yield from ratings
