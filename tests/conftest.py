"""Shared fixtures: a small in-memory reference table and an API client."""

import pytest
from fastapi.testclient import TestClient

from paint_analyzer.core.config import get_settings
from paint_analyzer.core.dependencies import get_catalog, get_sessions, limiter
from paint_analyzer.main import app
from paint_analyzer.models.vehicle import PaintRecord
from paint_analyzer.services.paint_data import PaintCatalog
from paint_analyzer.services.wizard_sessions import SessionStore

RECORDS = [
    {
        "make": "BMW",
        "model": "3 Series",
        "year": "2018",
        "paintRisk": 12,
        "notes": "BMW clear coats are relatively soft and prone to marring.",
        "sizeCategory": "Sedan",
    },
    {"make": "BMW", "model": "3 Series", "year": "2020", "paintRisk": 10, "sizeCategory": "Sedan"},
    {"make": "BMW", "model": "X5", "year": "2021", "paintRisk": 13, "sizeCategory": "SUV"},
    {"make": "Buick", "model": "Encore", "year": "2020", "paintRisk": 7, "sizeCategory": "Compact"},
    {"make": "Ford", "model": "F-150", "year": "2021", "paintRisk": 15, "sizeCategory": "Truck"},
    {"make": "Lexus", "model": "ES", "year": "2020", "paintRisk": 6, "sizeCategory": "Large Sedan"},
    {"make": "Oddball", "model": "Roadster", "year": "1999", "paintRisk": 4, "sizeCategory": "Convertible"},
]


@pytest.fixture
def catalog() -> PaintCatalog:
    return PaintCatalog([PaintRecord.model_validate(r) for r in RECORDS])


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore(maxsize=16, ttl=60)


@pytest.fixture
def client(catalog, session_store):
    settings = get_settings().model_copy(update={"analysis_delay_seconds": 0.0})
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_sessions] = lambda: session_store
    app.dependency_overrides[get_settings] = lambda: settings
    limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
