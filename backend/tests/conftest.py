"""Shared fixtures for the LED Forms test suite."""

import pytest
from fastapi.testclient import TestClient

from ledforms.main import app
from ledforms.services.rate_limiter import rate_limiter


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    """Every test starts with full submission buckets."""
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def contact_values():
    """A contact form submission that passes every rule."""
    return {
        "first_name": "Li",
        "last_name": "Wei",
        "email": "li.wei@example.com",
        "phone": "8613800138000",
        "company": "Shenzhen Signage Ltd",
        "industry": "retail",
        "message": "We need an indoor P2.5 wall for a flagship store.",
        "terms": True,
    }
