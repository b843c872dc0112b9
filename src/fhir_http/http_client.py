"""HTTP request executor for FHIR JSON APIs.

Used by higher-level FHIR clients to issue REST calls. Every verb helper goes
through HttpClient.request, which:
  1. Merges default, auth, configured and per-call headers (later wins).
  2. Resolves the path against the base URL.
  3. Returns the decoded JSON body for 2xx responses.
  4. Raises ResponseError for any other status.

Transport failures (requests.RequestException) are not normalized and reach
the caller unchanged.
"""

from __future__ import annotations

import json
from typing import Any

import requests

from .config import ClientConfig
from .errors import ResponseError
from .request_logging import log_request_error, log_request_info, log_response_info


DEFAULT_HEADERS: dict[str, str] = {"accept": "application/json+fhir"}


class HttpClient:
    """Make HTTP requests on behalf of a FHIR client.

    Raises ResponseError on unsuccessful requests.
    """

    def __init__(
        self,
        base_url: str,
        custom_headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.custom_headers = dict(custom_headers or {})
        self._session = session or requests.Session()
        self._auth_header: dict[str, str] = {}

    @classmethod
    def from_config(cls, config: ClientConfig, session: requests.Session | None = None) -> "HttpClient":
        client = cls(config.base_url, dict(config.custom_headers), session)
        if config.bearer_token:
            client.bearer_token = config.bearer_token
        return client

    def _set_bearer_token(self, token: str) -> None:
        self._auth_header = {"authorization": f"Bearer {token}"}

    bearer_token = property(fset=_set_bearer_token, doc="Token sent as an authorization header (write-only).")

    def request(
        self,
        http_verb: str,
        url: str = "",
        request_headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            http_verb: Lowercase HTTP method, e.g. "get".
            url: Absolute URL or a path relative to base_url.
            request_headers: Per-call headers; these override all others.
            body: JSON-serializable payload. None sends no body.

        Returns:
            The parsed JSON response, or None for an empty success body.

        Raises:
            ResponseError: the server answered with a non-2xx status.
        """
        headers = self.merge_headers(request_headers)
        full_url = self.expand_url(url)
        log_request_info(http_verb, full_url, headers)

        payload = json.dumps(body) if body is not None else None
        response = self._session.request(http_verb, full_url, headers=headers, data=payload)

        status = response.status_code
        error = not 200 <= status < 300
        if error:
            data = response.text
        elif response.content:
            data = response.json()
        else:
            data = None

        log_response_info(status, data)

        if error:
            response_error = ResponseError.from_raw(
                status=status,
                raw_data=data,
                method=http_verb,
                url=full_url,
                headers=headers,
            )
            log_request_error(response_error)
            raise response_error
        return data

    def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return self.request("get", url, headers)

    def delete(self, url: str, headers: dict[str, str] | None = None) -> Any:
        return self.request("delete", url, headers)

    def put(self, url: str, body: Any = None, headers: dict[str, str] | None = None) -> Any:
        return self.request("put", url, headers, body)

    def post(self, url: str, body: Any = None, headers: dict[str, str] | None = None) -> Any:
        return self.request("post", url, headers, body)

    def patch(self, url: str, body: Any = None, headers: dict[str, str] | None = None) -> Any:
        # Headers are taken as-is, the same as the other verbs.
        return self.request("patch", url, headers, body)

    def expand_url(self, url: str = "") -> str:
        """Join url onto base_url with exactly one slash; absolute URLs pass through."""
        if url.startswith("http"):
            return url
        if self.base_url.endswith("/") and url.startswith("/"):
            return self.base_url + url[1:]
        if self.base_url.endswith("/") or url.startswith("/"):
            return self.base_url + url
        return f"{self.base_url}/{url}"

    def merge_headers(self, request_headers: dict[str, str] | None = None) -> dict[str, str]:
        return {
            **DEFAULT_HEADERS,
            **self._auth_header,
            **self.custom_headers,
            **(request_headers or {}),
        }
