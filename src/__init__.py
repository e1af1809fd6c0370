"""GearRate: sporting-goods catalog and product review engine.

This package provides an in-memory catalog of activities, categories and
products, collects user ratings for those products, and derives star
statistics from them.

Modules:
    catalog: Taxonomy, products, ratings and statistics
    api: FastAPI application exposing the catalog over HTTP
"""

__version__ = "0.1.0"
