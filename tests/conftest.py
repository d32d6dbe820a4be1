import pytest
from fastapi.testclient import TestClient

from storefront.main import app
from storefront.services.pricing import fee_settings_store


@pytest.fixture(autouse=True)
def default_fee_settings():
    """each test starts from the stock flat $10 / $99 free-delivery config"""
    fee_settings_store.update(
        fee_type="flat",
        flat_fee="10.00",
        per_mile_fee="1.50",
        per_item_fee="0.50",
        free_delivery_threshold="99.00",
    )
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
