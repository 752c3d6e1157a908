import pytest

from coffee_order.main import build_sample_order


@pytest.fixture
def sample_order():
    """The Turkish/France coffee order used throughout the tests."""
    return build_sample_order()
