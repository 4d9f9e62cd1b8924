"""
Pytest fixtures for the coach API tests.

Every adapter dependency is overridden with an in-memory fake, so no test
reaches Shopify, Google Sheets, OpenAI or FoodData Central.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_customer_store, get_food_lookup, get_language_model, get_sheet_table
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeCustomerStore,
    FakeFoodLookup,
    FakeLanguageModel,
    FakeSheetTable,
    create_sheet_table,
)

TEST_CUSTOMER_ID = "1001"
TEST_CUSTOMER_GID = f"gid://shopify/Customer/{TEST_CUSTOMER_ID}"
TEST_EMAIL = "client@example.com"


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_model() -> FakeLanguageModel:
    return FakeLanguageModel()


@pytest.fixture
def fake_store() -> FakeCustomerStore:
    store = FakeCustomerStore()
    store.seed_customer(TEST_CUSTOMER_GID, email=TEST_EMAIL)
    return store


@pytest.fixture
def fake_sheets() -> FakeSheetTable:
    return create_sheet_table()


@pytest.fixture
def fake_foods() -> FakeFoodLookup:
    return FakeFoodLookup()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with no external credentials."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, fake_model, fake_store, fake_sheets, fake_foods) -> FastAPI:
    """Test application with every adapter replaced by a fake."""
    application = create_app(settings=test_settings)
    application.dependency_overrides[get_language_model] = lambda: fake_model
    application.dependency_overrides[get_customer_store] = lambda: fake_store
    application.dependency_overrides[get_sheet_table] = lambda: fake_sheets
    application.dependency_overrides[get_food_lookup] = lambda: fake_foods
    return application


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()
