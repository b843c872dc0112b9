import logging

from .config import ClientConfig
from .errors import ErrorResponse, RequestConfig, ResponseError
from .http_client import HttpClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["ClientConfig", "ErrorResponse", "HttpClient", "RequestConfig", "ResponseError"]
