"""Fixtures for tests that exercise the assembled application."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def storefront_app():
    """Import the application once; importing it configures logging and the domain."""
    from app import app

    return app


@pytest.fixture()
def client(storefront_app):
    return TestClient(storefront_app)
