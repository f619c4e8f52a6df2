import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# Settings are read when config is first imported, so point it at a temp DB now.
_TMP_DIR = tempfile.mkdtemp(prefix="inventory-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'inventory.db'}"


@pytest.fixture()
def connections():
    from database import ConnectionManager
    manager = ConnectionManager("sqlite://")
    yield manager
    manager.close()


@pytest.fixture()
def repository(connections):
    from crud.inventory import InventoryRepository
    return InventoryRepository(connections)


@pytest.fixture()
def page_cache():
    from utils.view_cache import PageCache
    return PageCache()


@pytest.fixture()
def client(repository, page_cache):
    from fastapi.testclient import TestClient
    from crud.inventory import get_repository
    from main import app
    from utils.view_cache import get_page_cache

    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_page_cache] = lambda: page_cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
