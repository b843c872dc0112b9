"""Normalized error raised for non-2xx responses."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Status and decoded body of a failed response."""

    status: int = Field(..., description="HTTP status code")
    data: Any = Field(default=None, description="JSON-decoded body, or the raw text")


class RequestConfig(BaseModel):
    """The request that produced a failed response."""

    method: str = Field(..., description="Lowercase HTTP verb")
    url: str = Field(..., description="Fully resolved URL")
    headers: dict[str, Any] = Field(default_factory=dict, description="Merged request headers")


class ResponseError(Exception):
    """Raised by HttpClient when the server answers with a non-2xx status.

    Callers branch on ``error.response.status`` and ``error.response.data``.
    """

    def __init__(self, response: ErrorResponse, config: RequestConfig) -> None:
        self.response = response
        self.config = config
        super().__init__(f"{response.status} error for {config.method.upper()} {config.url}")

    def __reduce__(self):
        return type(self), (self.response, self.config)

    @classmethod
    def from_raw(
        cls,
        status: int,
        raw_data: str,
        method: str,
        url: str,
        headers: dict[str, Any],
    ) -> "ResponseError":
        """Build the error, decoding raw_data as JSON when possible."""
        return cls(
            response=ErrorResponse(status=status, data=parse_body(raw_data)),
            config=RequestConfig(method=method, url=url, headers=headers),
        )


def parse_body(raw_data: str) -> Any:
    """Return raw_data decoded as JSON, or unchanged if it is not valid JSON."""
    try:
        return json.loads(raw_data)
    except ValueError:
        return raw_data
