"""Shared pytest fixtures and test helpers."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from speedlearn.api.dependencies import get_passage_catalog
from speedlearn.config import get_settings
from speedlearn.main import app
from speedlearn.services.passages import PassageCatalog

DATA_DIR = Path(__file__).resolve().parents[1] / "speedlearn" / "data"


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings so environment overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def passages_file() -> Path:
    return DATA_DIR / "passages.json"


@pytest.fixture
def catalog(passages_file) -> PassageCatalog:
    """Catalog loaded from the bundled sample passages."""
    return PassageCatalog.from_json_file(passages_file)


@pytest.fixture
def client(catalog):
    """Test client whose routes see the sample catalog."""
    app.dependency_overrides[get_passage_catalog] = lambda: catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
