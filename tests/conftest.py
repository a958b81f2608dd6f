import pytest

from tests.helpers import FakeClock, at


@pytest.fixture
def clock():
    """Wednesday 2025-10-15 07:05, a regular service day."""
    return FakeClock(at(7, 5))
