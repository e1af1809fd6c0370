"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from src.catalog.service import Catalog


def get_catalog(request: Request) -> Catalog:
    """Return the Catalog owned by the application serving this request."""
    return request.app.state.catalog
