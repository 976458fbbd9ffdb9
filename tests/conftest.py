# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from crest.api import http
from crest.api.http import app  # ensures imports resolve; run tests from repo root


@pytest.fixture()
def client():
    # Every API test starts from the five sample deals.
    http._book.reset(seed=True)
    return TestClient(app)
