# Set test environment before any application imports.
import os

os.environ["TESTING"] = "true"

import pytest
from fastapi.testclient import TestClient

from battery_core import store
from main import app


@pytest.fixture
def client():
    """API test client on a fresh store; startup seeds the default monitor."""
    store.clear()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        store.clear()
