"""FastAPI dependencies shared by the routes."""

import logging
from functools import lru_cache

from speedlearn.config import get_settings
from speedlearn.services.passages import PassageCatalog

logger = logging.getLogger(__name__)


@lru_cache
def get_passage_catalog() -> PassageCatalog:
    """Return the passage catalog configured by ``passages_file``."""
    settings = get_settings()
    if settings.passages_file is None:
        logger.warning("No passages_file configured; passage catalog is empty")
        return PassageCatalog()
    return PassageCatalog.from_json_file(settings.passages_file)
