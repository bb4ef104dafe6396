"""pytest configuration and shared fixtures."""

import pytest

from csvconv import build_default_converter


@pytest.fixture
def converter():
    """Fully wired default converter."""
    return build_default_converter()


@pytest.fixture
def sample_document():
    """Nested document for pointer / query fields."""
    return {
        "order": {
            "id": "A-17",
            "qty": "12",
            "lines": [
                {"sku": "X1", "price": 9.5},
                {"sku": "X2", "price": 20.0},
            ],
        },
        "flags": {"paid": True},
    }
