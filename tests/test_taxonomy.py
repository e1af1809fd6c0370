"""Tests for the activity/category taxonomy."""

import pytest

from src.catalog.exceptions import ValidationError
from src.catalog.taxonomy import Taxonomy


@pytest.fixture
def taxonomy() -> Taxonomy:
    """Fixture providing a taxonomy with three activities and one category."""
    taxonomy = Taxonomy()
    taxonomy.define_activities(["Swimming", "Running", "Cycling"])
    taxonomy.add_category("Apparel", ["Running", "Cycling"])
    return taxonomy


def test_define_activities_sorted_and_unique():
    """Test that activities are the sorted union of every defined name."""
    taxonomy = Taxonomy()
    taxonomy.define_activities(["Skiing", "Running", "Skiing"])
    taxonomy.define_activities(["Archery", "Running"])

    assert taxonomy.get_activities() == ["Archery", "Running", "Skiing"]


def test_define_activities_empty_raises():
    """Test that an empty activity list is rejected."""
    taxonomy = Taxonomy()

    with pytest.raises(ValidationError):
        taxonomy.define_activities([])

    assert taxonomy.get_activities() == []


def test_define_activities_single_string_raises():
    """Test that a bare string is not read as one activity per character."""
    taxonomy = Taxonomy()

    with pytest.raises(ValidationError):
        taxonomy.define_activities("Running")

    assert taxonomy.get_activities() == []


def test_add_category_single_string_raises(taxonomy):
    with pytest.raises(ValidationError):
        taxonomy.add_category("Wetsuits", "Swimming")

    assert not taxonomy.has_category("Wetsuits")
    assert taxonomy.count_categories() == 1


def test_define_activities_accepts_any_iterable():
    taxonomy = Taxonomy()
    taxonomy.define_activities(name for name in ("Rowing", "Archery"))

    assert taxonomy.get_activities() == ["Archery", "Rowing"]


def test_activity_names_are_case_sensitive():
    taxonomy = Taxonomy()
    taxonomy.define_activities(["running", "Running"])

    assert taxonomy.get_activities() == ["Running", "running"]


def test_add_category_links_activities(taxonomy):
    """Test that a category shows up under each linked activity."""
    assert taxonomy.get_categories_for_activity("Running") == ["Apparel"]
    assert taxonomy.get_categories_for_activity("Cycling") == ["Apparel"]
    assert taxonomy.get_categories_for_activity("Swimming") == []
    assert taxonomy.count_categories() == 1
    assert taxonomy.is_linked("Apparel", "Running")
    assert not taxonomy.is_linked("Apparel", "Swimming")


def test_categories_for_activity_sorted(taxonomy):
    taxonomy.add_category("Nutrition", ["Running"])
    taxonomy.add_category("Footwear", ["Running"])

    assert taxonomy.get_categories_for_activity("Running") == [
        "Apparel",
        "Footwear",
        "Nutrition",
    ]


def test_categories_for_unknown_activity_is_empty(taxonomy):
    assert taxonomy.get_categories_for_activity("Curling") == []


def test_add_category_with_undefined_activity_raises(taxonomy):
    """Test that an undefined activity leaves the taxonomy unchanged."""
    with pytest.raises(ValidationError) as exc_info:
        taxonomy.add_category("Boats", ["Swimming", "Sailing"])

    assert "Sailing" in exc_info.value.message
    assert exc_info.value.details["unknown_activities"] == ["Sailing"]
    assert taxonomy.count_categories() == 1
    assert not taxonomy.has_category("Boats")
    assert taxonomy.get_categories_for_activity("Swimming") == []


def test_add_category_without_activities_raises(taxonomy):
    with pytest.raises(ValidationError):
        taxonomy.add_category("Empty", [])

    assert taxonomy.count_categories() == 1


def test_rebinding_category_replaces_links(taxonomy):
    """Test that re-adding a category rewrites both link indexes."""
    taxonomy.add_category("Apparel", ["Swimming"])

    assert taxonomy.count_categories() == 1
    assert taxonomy.get_categories_for_activity("Swimming") == ["Apparel"]
    assert taxonomy.get_categories_for_activity("Running") == []
    assert taxonomy.get_categories_for_activity("Cycling") == []
    assert not taxonomy.is_linked("Apparel", "Running")


def test_rebinding_category_blocked_when_activity_in_use(taxonomy):
    """Test that rebinding cannot drop an activity that still has products."""

    def in_use(category, activity):
        return (category, activity) == ("Apparel", "Running")

    with pytest.raises(ValidationError) as exc_info:
        taxonomy.add_category("Apparel", ["Cycling"], is_activity_in_use=in_use)

    assert exc_info.value.details["activities_in_use"] == ["Running"]
    assert taxonomy.get_categories_for_activity("Running") == ["Apparel"]

    # dropping only the unused activity is fine
    taxonomy.add_category("Apparel", ["Running"], is_activity_in_use=in_use)
    assert taxonomy.get_categories_for_activity("Cycling") == []


def test_get_categories_sorted(taxonomy):
    taxonomy.add_category("Accessories", ["Swimming"])

    assert taxonomy.get_categories() == ["Accessories", "Apparel"]
