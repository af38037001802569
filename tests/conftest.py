"""Shared test fixtures for all tests."""
import pytest
from fastapi.testclient import TestClient

from pos_backend.core.config import Settings
from pos_backend.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="function")
def test_settings(tmp_path):
    """Settings pointing at a fresh SQLite database for each test."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        STATIC_DIR=str(tmp_path / "public"),
        LOG_DIR=str(tmp_path / "logs"),
        _env_file=None,
    )


@pytest.fixture(scope="function")
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture(scope="function")
def client(app):
    """Create a test client; startup builds the store and its tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_products(client):
    """Create sample products for testing."""
    products = [
        {
            "barcode": "6281000000011",
            "name": "Mineral Water 1.5L",
            "price": 2.5,
            "details": "Carton of 6"
        },
        {
            "barcode": "6281000000028",
            "name": "Arabic Coffee 250g",
            "price": 18.0
        },
        {
            "barcode": "6281000000035",
            "name": "Dates Box 1kg",
            "price": 35.75,
            "details": "Premium"
        },
    ]
    for product in products:
        response = client.post("/api/products", json=product)
        assert response.status_code == 201
    return products


@pytest.fixture
def sample_invoices(client):
    """Create invoices with ids 3, 7 and 1, saved on different days."""
    invoices = [
        {
            "id": 3,
            "date": "2026-03-02T09:30:00",
            "customerName": "Ahmed Salem",
            "customerPhone": "0551234567",
            "items": [
                {"barcode": "6281000000011", "name": "Mineral Water 1.5L", "price": 2.5, "quantity": 4}
            ],
            "subtotal": 10.0,
            "discount": 0,
            "taxRate": 15,
            "taxAmount": 1.5,
            "total": 11.5
        },
        {
            "id": 7,
            "date": "2026-03-05T14:00:00",
            "customerName": "Mona Khalid",
            "customerPhone": "0509876543",
            "items": [
                {"barcode": "6281000000028", "name": "Arabic Coffee 250g", "price": 18.0, "quantity": 1},
                {"barcode": "6281000000035", "name": "Dates Box 1kg", "price": 35.75, "quantity": 2}
            ],
            "subtotal": 89.5,
            "discount": 5,
            "taxRate": 15,
            "taxAmount": 12.68,
            "total": 97.18
        },
        {
            "id": 1,
            "date": "2026-03-01T08:00:00",
            "customerName": "Walk-in",
            "items": [],
            "subtotal": 0,
            "total": 0
        },
    ]
    for invoice in invoices:
        response = client.post("/api/invoices", json=invoice)
        assert response.status_code == 201
    return invoices
