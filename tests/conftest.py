"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from product_relay.models import Product, ProductBatch
from product_relay.transport import HttpTransport


@pytest.fixture
def source_body():
    """Two-product payload served by the source API."""
    return (
        '[{"id":"P001","name":"Laptop","price":1200.0,"category":"Electronics","inStock":true},'
        '{"id":"P002","name":"Mouse","price":25.0,"category":"Electronics","inStock":true}]'
    )


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    def _make(status_code: int, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return _make


@pytest.fixture
def transport():
    """Transport with a real (unused) session whose methods tests patch."""
    t = HttpTransport()
    yield t
    t.close()


@pytest.fixture
def keyboard():
    return Product("P003", "Keyboard", 75.0, "Electronics", True)


@pytest.fixture
def sample_products():
    return [
        Product("P005", "Webcam", 50.0, "Peripherals", True),
        Product("P006", "Microphone", 70.0, "Peripherals", False),
    ]


@pytest.fixture
def sample_batch(keyboard):
    return ProductBatch("B001", [keyboard], 1678886400000)
