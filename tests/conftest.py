"""Shared pytest fixtures and test markers.

Test tiers
----------
  unit        Fast, fully offline, zero external dependencies.
              Always run.

  integration Mocked HTTP (requests-mock). Always run. Validates the full
              request flow without real network calls.

  quality     Property-based (Hypothesis). Always run offline.

  live        Real HTTP calls. Skipped unless FHIR_LIVE_BASE_URL is set.
              See tests/live/conftest.py.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

import pytest

from fhir_http import HttpClient

BASE_URL = "https://fhir.example.com/r4"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: mock-based integration tests")
    config.addinivalue_line("markers", "quality: property-based tests")
    config.addinivalue_line("markers", "live: requires a reachable FHIR server (skipped by default)")


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def client(base_url: str) -> HttpClient:
    return HttpClient(base_url)


@pytest.fixture
def authed_client(base_url: str) -> HttpClient:
    client = HttpClient(base_url, custom_headers={"X-Tenant": "acme"})
    client.bearer_token = "test-token"
    return client


@pytest.fixture
def sample_patient() -> dict:
    return {"resourceType": "Patient", "id": "p-001", "name": [{"family": "Doe", "given": ["Jane"]}]}
