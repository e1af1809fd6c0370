"""Tests for the product catalog."""

import pytest

from src.catalog.exceptions import DuplicateError, ValidationError
from src.catalog.products import Product, ProductCatalog
from src.catalog.taxonomy import Taxonomy


@pytest.fixture
def taxonomy() -> Taxonomy:
    """Fixture providing a taxonomy for running and swimming gear."""
    taxonomy = Taxonomy()
    taxonomy.define_activities(["Running", "Swimming"])
    taxonomy.add_category("Footwear", ["Running"])
    taxonomy.add_category("Apparel", ["Running", "Swimming"])
    taxonomy.add_category("Goggles", ["Swimming"])
    return taxonomy


@pytest.fixture
def products(taxonomy) -> ProductCatalog:
    """Fixture providing a strict catalog with a handful of products."""
    products = ProductCatalog(taxonomy)
    products.add_product("ShoeX", "Running", "Footwear")
    products.add_product("ShoeA", "Running", "Footwear")
    products.add_product("Singlet", "Running", "Apparel")
    products.add_product("Swimsuit", "Swimming", "Apparel")
    products.add_product("AquaView", "Swimming", "Goggles")
    return products


def test_add_product_returns_record(taxonomy):
    products = ProductCatalog(taxonomy)

    product = products.add_product("ShoeX", "Running", "Footwear")

    assert product == Product(name="ShoeX", activity="Running", category="Footwear")
    assert products.get("ShoeX") == product
    assert products.has_product("ShoeX")
    assert products.count_products() == 1


def test_add_duplicate_product_raises(products):
    """Test that product names are globally unique."""
    with pytest.raises(DuplicateError) as exc_info:
        products.add_product("ShoeX", "Swimming", "Apparel")

    assert exc_info.value.status_code == 409
    assert products.get("ShoeX").activity == "Running"


def test_add_product_with_undefined_activity_raises(products):
    with pytest.raises(ValidationError):
        products.add_product("Puck", "Hockey", "Apparel")

    assert not products.has_product("Puck")


def test_add_product_with_unlinked_category_raises(products):
    """Test that strict mode rejects a category not linked to the activity."""
    with pytest.raises(ValidationError):
        products.add_product("Flippers", "Swimming", "Footwear")

    with pytest.raises(ValidationError):
        products.add_product("Mystery", "Running", "NoSuchCategory")

    assert products.count_products() == 5


def test_lenient_mode_skips_link_check(taxonomy):
    """Test that lenient mode accepts unlinked categories but not unknown activities."""
    products = ProductCatalog(taxonomy, strict_category_links=False)

    products.add_product("Flippers", "Swimming", "Footwear")
    products.add_product("Mystery", "Running", "NoSuchCategory")

    assert products.list_products() == ["Flippers", "Mystery"]

    with pytest.raises(ValidationError):
        products.add_product("Puck", "Hockey", "Footwear")


def test_get_products_for_category(products):
    assert products.get_products_for_category("Footwear") == ["ShoeA", "ShoeX"]
    assert products.get_products_for_category("Apparel") == ["Singlet", "Swimsuit"]
    assert products.get_products_for_category("Helmets") == []


def test_get_products_for_activity(products):
    assert products.get_products_for_activity("Running") == [
        "ShoeA",
        "ShoeX",
        "Singlet",
    ]
    assert products.get_products_for_activity("Hockey") == []


def test_get_products_filters_activity_and_categories(products):
    """Test that get_products needs both the activity and a listed category."""
    assert products.get_products("Running", ["Footwear", "Apparel"]) == [
        "ShoeA",
        "ShoeX",
        "Singlet",
    ]
    assert products.get_products("Swimming", ["Apparel"]) == ["Swimsuit"]
    assert products.get_products("Swimming", ["Footwear"]) == []
    assert products.get_products("Running", []) == []


def test_get_products_collapses_duplicate_categories(products):
    assert products.get_products("Swimming", ["Goggles", "Goggles"]) == ["AquaView"]


def test_list_products_sorted(products):
    assert products.list_products() == [
        "AquaView",
        "ShoeA",
        "ShoeX",
        "Singlet",
        "Swimsuit",
    ]


def test_is_category_in_use(products):
    assert products.is_category_in_use("Apparel", "Swimming")
    assert not products.is_category_in_use("Footwear", "Swimming")
