"""
Pytest fixtures and configuration for Products API tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from products_api.api.deps import get_product_store
from products_api.main import app
from products_api.repositories.base import ProductStore
from products_api.repositories.memory_repository import InMemoryProductRepository


@pytest.fixture
def memory_store():
    """
    Provides an empty in-memory product store

    Scope: function (fresh store per test)
    """
    return InMemoryProductRepository()


@pytest.fixture
def client(memory_store):
    """
    Provides a TestClient whose requests hit the in-memory store

    Dependency override is removed after the test
    """
    app.dependency_overrides[get_product_store] = lambda: memory_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_store():
    """
    Provides a store mock where every operation raises
    """
    store = MagicMock(spec=ProductStore)
    error = RuntimeError("connection to server at 10.0.0.5 refused")
    store.get_all_products.side_effect = error
    store.get_product_by_id.side_effect = error
    store.create_product.side_effect = error
    store.update_product.side_effect = error
    store.delete_product.side_effect = error
    store.ping.side_effect = error
    return store


@pytest.fixture
def failing_client(failing_store):
    """
    Provides a TestClient backed by a store that always fails
    """
    app.dependency_overrides[get_product_store] = lambda: failing_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product_data():
    """
    Provides a valid product payload
    """
    return {
        "name": "Barra Keto Cacao",
        "price": 19.99,
        "category": "BARRAS",
    }
