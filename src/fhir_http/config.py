"""Client configuration loaded from arguments or the environment."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Connection settings for an HttpClient.

    Immutable once built. The bearer token here only seeds the client; later
    tokens are assigned on the client itself.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Base URL used to resolve relative paths")
    custom_headers: dict[str, str] = Field(default_factory=dict, description="Headers sent with every request")
    bearer_token: str | None = Field(default=None, description="Initial bearer token")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from FHIR_BASE_URL, FHIR_BEARER_TOKEN and FHIR_CUSTOM_HEADERS.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            The validated ClientConfig.
        """
        env = os.environ if environ is None else environ

        base_url = env.get("FHIR_BASE_URL")
        if not base_url:
            raise ValueError("Set FHIR_BASE_URL to configure the FHIR client")

        raw_headers = env.get("FHIR_CUSTOM_HEADERS")
        custom_headers = {}
        if raw_headers:
            try:
                custom_headers = json.loads(raw_headers)
            except ValueError as exc:
                raise ValueError("FHIR_CUSTOM_HEADERS must be a JSON object") from exc
            if not isinstance(custom_headers, dict):
                raise ValueError("FHIR_CUSTOM_HEADERS must be a JSON object")

        return cls(
            base_url=base_url,
            custom_headers=custom_headers,
            bearer_token=env.get("FHIR_BEARER_TOKEN") or None,
        )
