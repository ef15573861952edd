# This project was developed with assistance from AI tools.
"""Shared fixtures.

The default interest rate is process-wide state, so every test starts and
ends with a fresh cell built from settings.
"""

import pytest
from fastapi.testclient import TestClient

from mortgage_api.main import app
from mortgage_api.services.interest_rate import reset_rate_cell


@pytest.fixture(autouse=True)
def _fresh_rate_cell():
    reset_rate_cell()
    yield
    reset_rate_cell()


@pytest.fixture
def client():
    return TestClient(app)
