"""Fixtures for live tests.

Live tests talk to a real FHIR server and skip silently unless it is
configured. They never fail due to missing config.

Required environment variables:
  FHIR_LIVE_BASE_URL       Base URL of a reachable FHIR R4 server,
                           e.g. https://hapi.fhir.org/baseR4

Optional:
  FHIR_LIVE_BEARER_TOKEN   Token sent as the authorization header

Set them in your shell before running:
  export FHIR_LIVE_BASE_URL=https://hapi.fhir.org/baseR4
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os

import pytest

from fhir_http import HttpClient


@pytest.fixture(scope="session")
def live_client() -> HttpClient:
    client = HttpClient(os.environ["FHIR_LIVE_BASE_URL"])
    token = os.environ.get("FHIR_LIVE_BEARER_TOKEN")
    if token:
        client.bearer_token = token
    return client
