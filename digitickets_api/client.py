# client.py - DigiTickets API client
from typing import Any, Optional

import requests

from .api_client import DEFAULT_TIMEOUT, APIClient, normalize_root_url
from .config import ClientSettings
from .consts import DEFAULT_API_URL, ApiVersion
from .exceptions import MalformedApiResponseException

API_KEY_PARAM = "apiKey"


def build_root_url(api_url: str, api_version: str) -> str:
    root = normalize_root_url(api_url)
    return root + (f"{api_version}/" if api_version else "")


class DigiTicketsApiClient:
    """Client for the DigiTickets REST API. Responses are returned whatever their status."""

    def __init__(
        self,
        api_version: str = ApiVersion.V2,
        api_url: str = DEFAULT_API_URL,
        api_key: Optional[str] = None,
        timeout=DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_version = api_version
        self.api_url = api_url
        self.http = APIClient(build_root_url(api_url, api_version), timeout=timeout, session=session)
        self.set_api_key(api_key)

    @classmethod
    def from_env(cls, settings: Optional[ClientSettings] = None, **kwargs):
        settings = settings or ClientSettings.from_env()
        return cls(
            api_version=settings.api_version,
            api_url=settings.api_url,
            api_key=settings.api_key,
            timeout=settings.timeout,
            **kwargs,
        )

    def get_api_key(self) -> Optional[str]:
        return self.http.default_query.get(API_KEY_PARAM)

    def set_api_key(self, api_key: Optional[str] = None) -> "DigiTicketsApiClient":
        if api_key:
            self.http.default_query[API_KEY_PARAM] = api_key
        else:
            self.http.default_query.pop(API_KEY_PARAM, None)
        return self

    def get_api_root_url(self) -> str:
        return self.http.root_url

    def set_api_root_url(self, url: str) -> "DigiTicketsApiClient":
        self.http.root_url = url
        return self

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def request(self, method, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.http.request(method, endpoint, body_parameters, query_parameters, headers)

    def get(self, endpoint, query_parameters=None, headers=None):
        return self.http.get(endpoint, query_parameters, headers)

    def post(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.http.post(endpoint, body_parameters, query_parameters, headers)

    def put(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.http.put(endpoint, body_parameters, query_parameters, headers)

    def patch(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.http.patch(endpoint, body_parameters, query_parameters, headers)

    def delete(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.http.delete(endpoint, body_parameters, query_parameters, headers)

    def parse_response(self, response: requests.Response) -> Any:
        parsed = self.http.decode_response(response)
        if not parsed.ok:
            raise MalformedApiResponseException.from_parsed(parsed)
        return parsed.data

    def __repr__(self):
        masked_key = "***" if self.get_api_key() else "None"
        return f"<{self.__class__.__name__} root_url={self.get_api_root_url()} api_key={masked_key}>"
