"""Tests for the rating store."""

import pytest

from src.catalog.exceptions import NotFoundError, ValidationError
from src.catalog.ratings import Rating, RatingStore


@pytest.fixture
def store() -> RatingStore:
    """Fixture providing a store with two registered products."""
    store = RatingStore()
    store.register_product("ShoeX")
    store.register_product("Singlet")
    return store


def test_rating_renders_stars_and_comment():
    rating = Rating(product="ShoeX", user="bob", stars=4, comment="good")

    assert str(rating) == "4 : good"


def test_add_rating_returns_record(store):
    rating = store.add_rating("ShoeX", "bob", 4, "good")

    assert rating.user == "bob"
    assert rating.stars == 4
    assert store.count_ratings("ShoeX") == 1
    assert store.has_ratings("ShoeX")
    assert not store.has_ratings("Singlet")


@pytest.mark.parametrize("stars", [-1, 6, 100])
def test_add_rating_out_of_range_raises(store, stars):
    """Test that star counts outside 0-5 are rejected."""
    with pytest.raises(ValidationError):
        store.add_rating("ShoeX", "bob", stars, "bad input")

    assert store.count_ratings("ShoeX") == 0


@pytest.mark.parametrize("stars", [True, 3.0, "4", None])
def test_add_rating_non_integer_raises(store, stars):
    with pytest.raises(ValidationError):
        store.add_rating("ShoeX", "bob", stars, "bad input")


@pytest.mark.parametrize("stars", [0, 5])
def test_add_rating_accepts_bounds(store, stars):
    store.add_rating("ShoeX", "bob", stars, "edge")

    assert store.stars_for("ShoeX") == [stars]


def test_add_rating_unknown_product_raises(store):
    """Test that ratings for unregistered products are rejected."""
    with pytest.raises(NotFoundError) as exc_info:
        store.add_rating("Ghost", "bob", 3, "where is it")

    assert exc_info.value.status_code == 404
    assert store.count_ratings("Ghost") == 0
    assert store.get_ratings_for_product("Ghost") == []


def test_star_check_runs_before_existence_check(store):
    with pytest.raises(ValidationError):
        store.add_rating("Ghost", "bob", 9, "both wrong")


def test_ratings_sorted_by_descending_stars(store):
    store.add_rating("ShoeX", "bob", 2, "meh")
    store.add_rating("ShoeX", "ann", 5, "superb")
    store.add_rating("ShoeX", "cid", 0, "awful")
    store.add_rating("ShoeX", "dee", 4, "good")

    assert store.get_ratings_for_product("ShoeX") == [
        "5 : superb",
        "4 : good",
        "2 : meh",
        "0 : awful",
    ]


def test_equal_stars_keep_insertion_order(store):
    """Test that ties are listed in the order they were added."""
    store.add_rating("ShoeX", "bob", 3, "first")
    store.add_rating("ShoeX", "ann", 5, "top")
    store.add_rating("ShoeX", "cid", 3, "second")
    store.add_rating("ShoeX", "bob", 3, "third")

    assert store.get_ratings_for_product("ShoeX") == [
        "5 : top",
        "3 : first",
        "3 : second",
        "3 : third",
    ]


def test_same_user_may_rate_twice(store):
    store.add_rating("ShoeX", "bob", 1, "first try")
    store.add_rating("ShoeX", "bob", 5, "grew on me")

    assert store.count_ratings("ShoeX") == 2


def test_iter_ratings_covers_every_product(store):
    store.add_rating("ShoeX", "bob", 1, "a")
    store.add_rating("Singlet", "ann", 2, "b")
    store.add_rating("ShoeX", "cid", 3, "c")

    assert [(r.product, r.stars) for r in store.iter_ratings()] == [
        ("ShoeX", 1),
        ("ShoeX", 3),
        ("Singlet", 2),
    ]
