"""
Pytest fixtures for API tests.

The application is built fresh for every test so that dependency
overrides never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from practice_api.app.main import create_app
from practice_api.app.schemas.city import City


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================

@pytest.fixture
def app():
    """Create FastAPI application instance."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    """Create test client."""
    return TestClient(app)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_cities() -> list:
    """A tiny city dataset for service-level tests."""
    return [
        City(id=1, name="Alpha", population=100, is_capital=True, country_id=1, country="Aland"),
        City(id=2, name="Beta", population=5000, is_capital=False, country_id=1, country="Aland"),
        City(id=3, name="Gamma", population=250, is_capital=False, country_id=2, country="Bland"),
    ]
