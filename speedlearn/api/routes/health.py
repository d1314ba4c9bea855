"""Health check API route."""

from fastapi import APIRouter, Depends

from speedlearn import __version__
from speedlearn.api.dependencies import get_passage_catalog
from speedlearn.services.passages import PassageCatalog
from speedlearn.services.rsvp import RSVP_ENGINE_VERSION

router = APIRouter()


@router.get("/health")
def health_check(catalog: PassageCatalog = Depends(get_passage_catalog)) -> dict:
    """Health check endpoint."""
    return {
        "status": "ok" if len(catalog) else "degraded",
        "passages": len(catalog),
        "modules": len(catalog.modules()),
        "engine_version": RSVP_ENGINE_VERSION,
        "version": __version__,
    }
