"""Catalog-and-review engine for GearRate.

This module contains the activity/category taxonomy, the product catalog,
the rating store and the star statistics computed over them, all owned by
a single Catalog aggregate.
"""
