"""Activity and category taxonomy.

Activities are plain names. Each category is linked to a non-empty set of
activities, and the taxonomy keeps a reverse index from activity to the
categories linked to it so lookups in both directions stay cheap.
"""

import logging
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Set

from src.catalog.exceptions import ValidationError

# Configure module logger
logger = logging.getLogger(__name__)


class Taxonomy:
    """Set of activities plus the category <-> activity link indexes."""

    def __init__(self) -> None:
        self._activities: Set[str] = set()
        self._category_to_activities: Dict[str, FrozenSet[str]] = {}
        self._activity_to_categories: Dict[str, Set[str]] = {}

    def define_activities(self, names: Iterable[str]) -> None:
        """Add activities to the taxonomy.

        Adding an activity that is already known is a no-op.

        Args:
            names: Activity names to define.

        Raises:
            ValidationError: If no names are given, or a single string is
                passed instead of a sequence of names.
        """
        names = _as_name_list(names, "activities")
        if not names:
            raise ValidationError("No activities provided")

        added = [name for name in names if name not in self._activities]
        self._activities.update(names)
        for name in added:
            self._activity_to_categories.setdefault(name, set())

        logger.info(
            "Activities defined",
            extra={"added": added, "num_activities": len(self._activities)},
        )

    def add_category(
        self,
        name: str,
        linked_activities: Iterable[str],
        is_activity_in_use: Optional[Callable[[str, str], bool]] = None,
    ) -> None:
        """Bind a category to a set of activities.

        Re-adding an existing category replaces its previous link set. The
        forward and reverse indexes are rewritten together once every check
        has passed.

        Args:
            name: Category name.
            linked_activities: Activities the category applies to.
            is_activity_in_use: Optional predicate ``(category, activity)``
                telling whether products are filed under the category for
                that activity. Rebinding may not drop such an activity.

        Raises:
            ValidationError: If the link set is empty or a bare string,
                references an undefined activity, or would orphan existing
                products.
        """
        links = frozenset(_as_name_list(linked_activities, "linked_activities"))
        if not links:
            raise ValidationError(
                f"Category '{name}' must be linked to at least one activity",
                details={"category": name},
            )

        unknown = sorted(links - self._activities)
        if unknown:
            raise ValidationError(
                f"Activity {unknown[0]} does not exist",
                details={"category": name, "unknown_activities": unknown},
            )

        previous = self._category_to_activities.get(name, frozenset())
        dropped = previous - links
        if is_activity_in_use is not None:
            orphaned = sorted(a for a in dropped if is_activity_in_use(name, a))
            if orphaned:
                raise ValidationError(
                    f"Category '{name}' still has products for activity "
                    f"{orphaned[0]}",
                    details={"category": name, "activities_in_use": orphaned},
                )

        for activity in dropped:
            self._activity_to_categories[activity].discard(name)
        for activity in links:
            self._activity_to_categories[activity].add(name)
        self._category_to_activities[name] = links

        logger.info(
            "Category %s",
            "rebound" if previous else "added",
            extra={"category": name, "activities": sorted(links)},
        )

    def get_activities(self) -> List[str]:
        return sorted(self._activities)

    def get_categories(self) -> List[str]:
        return sorted(self._category_to_activities)

    def get_categories_for_activity(self, activity: str) -> List[str]:
        """Categories linked to an activity, sorted; empty if unknown."""
        return sorted(self._activity_to_categories.get(activity, ()))

    def count_categories(self) -> int:
        return len(self._category_to_activities)

    def has_activity(self, name: str) -> bool:
        return name in self._activities

    def has_category(self, name: str) -> bool:
        return name in self._category_to_activities

    def is_linked(self, category: str, activity: str) -> bool:
        return activity in self._category_to_activities.get(category, ())


def _as_name_list(names: Iterable[str], argument: str) -> List[str]:
    """Materialize a sequence of names, refusing a lone string.

    A str is itself an iterable of str, so without this check "Running"
    would be read as the activities R, u, n, n, i, n, g.
    """
    if isinstance(names, str):
        raise ValidationError(
            f"{argument} must be a sequence of names, not a single string",
            details={argument: names},
        )
    return list(names)
