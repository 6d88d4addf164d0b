from .api_client import APIClient, ParsedResponse
from .client import DigiTicketsApiClient
from .config import ClientSettings
from .consts import DEFAULT_API_URL, ApiVersion, Request
from .exceptions import (
    ConfigurationError,
    DigiTicketsApiError,
    MalformedApiResponseException,
    MalformedResponseError,
)

__version__ = "0.1.0"

__all__ = [
    "APIClient",
    "ApiVersion",
    "ClientSettings",
    "ConfigurationError",
    "DEFAULT_API_URL",
    "DigiTicketsApiClient",
    "DigiTicketsApiError",
    "MalformedApiResponseException",
    "MalformedResponseError",
    "ParsedResponse",
    "Request",
]
