"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.core.store import InMemoryCustomerStore
from customer_api.app.main import create_app
from customer_api.app.services.customer_service import CustomerService


@pytest.fixture
def settings():
    """Settings isolated from the environment of the test run."""
    return Settings(
        debug=False,
        log_level="WARNING",
        log_file=None,
        api_prefix="/api/v1",
        allow_client_ids=False,
        seed_customers=False,
        enable_compression=False,
    )


@pytest.fixture
def store():
    return InMemoryCustomerStore()


@pytest.fixture
def service(store, settings):
    return CustomerService(store, settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ada():
    return {"firstName": "Ada", "lastName": "Lovelace"}
