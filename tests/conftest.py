"""
Pytest Configuration and Fixtures

Shared fixtures for all tests in the UA document utilities test suite.
Run with: pytest -v
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_rnokpp_male():
    """Valid RNOKPP with an odd gender digit."""
    return {
        "code": "3456789014",
        "date_of_birth": "22.08.1994",
        "gender": "Male",
    }


@pytest.fixture
def sample_rnokpp_female():
    """Valid RNOKPP with an even gender digit."""
    return {
        "code": "3456789020",
        "date_of_birth": "22.08.1994",
        "gender": "Female",
    }


@pytest.fixture
def client():
    """TestClient for an application without API key auth."""
    from fastapi.testclient import TestClient
    from main import create_app
    return TestClient(create_app())


@pytest.fixture
def secured_client():
    """TestClient for an application that requires X-API-Key."""
    from fastapi.testclient import TestClient
    from main import create_app
    return TestClient(create_app(api_keys=["test-key"]))
