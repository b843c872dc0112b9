"""Log entries for outbound requests, responses and normalized errors.

Logging is best-effort: nothing here may fail a request.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from .errors import ResponseError


logger = logging.getLogger(__name__)


def _best_effort(func: Callable[..., None]) -> Callable[..., None]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except Exception:
            pass

    return wrapper


@_best_effort
def log_request_info(verb: str, url: str, headers: dict[str, str]) -> None:
    logger.debug("Request: %s %s headers=%s", verb.upper(), url, headers)


@_best_effort
def log_response_info(status: int, data: Any) -> None:
    logger.debug("Response: status=%s data=%s", status, data)


@_best_effort
def log_request_error(error: ResponseError) -> None:
    logger.error(
        "Request failed: %s %s status=%s data=%s",
        error.config.method.upper(),
        error.config.url,
        error.response.status,
        error.response.data,
    )
