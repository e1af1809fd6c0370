"""FastAPI application main module.

This module builds the FastAPI application for the GearRate catalog service.
Each application owns exactly one Catalog, stored on ``app.state.catalog``
and handed to route handlers through the get_catalog dependency.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src import __version__
from src.api.logging_config import RequestLoggingMiddleware, setup_logging
from src.api.routes import catalog as catalog_routes
from src.api.routes import stats as stats_routes
from src.catalog.config import CatalogConfig
from src.catalog.exceptions import CatalogError
from src.catalog.service import Catalog

# Configure module logger
logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Turn a CatalogError into a JSON error response with its status code."""
    logger.warning(
        "Catalog operation rejected",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


def create_app(
    catalog: Optional[Catalog] = None,
    config: Optional[CatalogConfig] = None,
    configure_logging: bool = False,
) -> FastAPI:
    """Create a FastAPI application serving a Catalog.

    Args:
        catalog: Catalog to serve. A new one is built from ``config`` if None.
        config: Settings for a newly built Catalog and for logging. Ignored
            for the Catalog when ``catalog`` is given.
        configure_logging: If True, install the JSON logging setup.

    Returns:
        Configured FastAPI application.

    Example:
        >>> app = create_app(config=CatalogConfig(strict_category_links=False))
        >>> app.state.catalog.config.strict_category_links
        False
    """
    config = config or (catalog.config if catalog is not None else CatalogConfig())
    if configure_logging:
        setup_logging(config.log_level)

    app = FastAPI(
        title="GearRate API",
        description="Sporting-goods catalog and product review service",
        version=__version__,
    )
    app.state.catalog = catalog if catalog is not None else Catalog(config)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.include_router(catalog_routes.router)
    app.include_router(stats_routes.router)

    @app.get("/ping")
    def ping() -> Dict[str, str]:
        """Health check endpoint.

        Returns:
            Dictionary with status key set to "ok".
        """
        return {"status": "ok"}

    return app


def create_service_app() -> FastAPI:
    """Build the production application with JSON logging installed.

    Used by ``uvicorn --factory src.api.main:create_service_app`` and by
    ``python -m src.api.main``.
    """
    return create_app(configure_logging=True)


# Importable application without logging side effects, for embedding and tests
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_service_app(),
        host="0.0.0.0",
        port=8000,
        log_config=None,
    )
