# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from grid_engine.models import Opening
from grid_engine.core.generator import GridGenerator
from grid_engine.services.grid_service import GridService


def make_opening(**overrides) -> Opening:
    fields = {
        "id": "opening-1",
        "name": "Storefront A",
        "width": 10.0,
        "height": 8.0,
        "grid_columns": 2,
        "grid_rows": 2,
        "mullion_width": 2.5,
    }
    fields.update(overrides)
    return Opening(**fields)


@pytest.fixture
def opening():
    """10ft x 8ft opening with a 2 x 2 grid."""
    return make_opening()


@pytest.fixture
def transom_opening():
    """12ft x 10ft opening, 3 x 2 grid below a 2ft transom."""
    return make_opening(
        id="opening-transom", width=12.0, height=10.0,
        grid_columns=3, grid_rows=2, has_transom=True, transom_height=2.0,
    )


@pytest.fixture
def generator():
    return GridGenerator()


@pytest.fixture
def state(generator, opening):
    return generator.generate(opening)


@pytest.fixture
def service(opening):
    svc = GridService()
    svc.create_opening(opening)
    return svc


@pytest.fixture
def client():
    """Test client over the app with a fresh, empty service."""
    from grid_engine.api.main import app
    from grid_engine.api.routes import get_service

    fresh = GridService()
    app.dependency_overrides[get_service] = lambda: fresh
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
