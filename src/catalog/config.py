"""Configuration for a GearRate catalog instance."""

import logging
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class CatalogConfig:
    """Settings shared by the catalog core and the API that hosts it.

    Attributes:
        strict_category_links: If True, a product's category must be linked
            to the product's activity. If False, only the activity has to be
            defined.
        log_level: Logging level name passed to setup_logging by the API.
    """

    strict_category_links: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        # frozen dataclass, so bypass __setattr__ to store the normalized name
        object.__setattr__(self, "log_level", level)
