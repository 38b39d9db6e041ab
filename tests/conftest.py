"""Pytest configuration and fixtures for shop tests."""

from contextlib import ExitStack
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from shop.main import create_app
from shop.services.inventory_service import InventoryService


@pytest.fixture
def seed() -> Dict[str, int]:
    """Inventory of the routed variant."""
    return {"shoes": 50, "socks": 5}


@pytest.fixture
def service(seed: Dict[str, int]) -> InventoryService:
    return InventoryService(seed)


@pytest.fixture
def make_client():
    """Build a test client for a variant, running its lifespan."""
    with ExitStack() as stack:

        def _make(variant: int, inventory=None) -> TestClient:
            return stack.enter_context(TestClient(create_app(variant, inventory)))

        yield _make
