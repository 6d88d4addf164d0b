# api_client.py - minimal HTTP client wrapper around requests
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests
from requests.structures import CaseInsensitiveDict

from .consts import Request
from .exceptions import MalformedResponseError
from .utils import build_query, get_logger

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_TIMEOUT = 30
REDACTED_PARAMS = ("apiKey",)


@dataclass
class ParsedResponse:
    """Outcome of decoding a response body: either ``data`` or ``error``."""

    response: requests.Response
    data: Any = None
    error: Optional[json.JSONDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_root_url(url: str) -> str:
    return url.rstrip("/") + "/"


def redact_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (k, "[REDACTED]" if k in REDACTED_PARAMS else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="[]")))


def parse_json_int(digits: str):
    # Past the interpreter's int digit limit, fall back to float.
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def decode_json_body(response: requests.Response) -> Any:
    """Strict JSON decode of the body (UTF-8, no NaN/Infinity)."""
    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise json.JSONDecodeError(
            "Malformed UTF-8 characters, possibly incorrectly encoded",
            response.content.decode("utf-8", errors="replace"),
            e.start,
        ) from e

    def reject_constant(name):
        raise json.JSONDecodeError(f"Invalid constant {name}", text, max(text.find(name), 0))

    try:
        return json.loads(text, parse_constant=reject_constant, parse_int=parse_json_int)
    except RecursionError:
        raise json.JSONDecodeError("Maximum stack depth exceeded", text, 0) from None


class APIClient:
    def __init__(self, root_url, default_query=None, timeout=DEFAULT_TIMEOUT, session=None):
        self._root_url = normalize_root_url(root_url)
        self.default_query: Dict[str, Any] = dict(default_query or {})
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def root_url(self) -> str:
        return self._root_url

    @root_url.setter
    def root_url(self, url: str) -> None:
        self._root_url = normalize_root_url(url)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _url(self, endpoint):
        return f"{self._root_url.rstrip('/')}/{endpoint.strip('/')}"

    def build_url(self, endpoint: str, query_parameters: Optional[Mapping[str, Any]] = None) -> str:
        url = self._url(endpoint)
        query = dict(query_parameters or {})
        # Defaults only fill gaps, caller values always win.
        for key, value in self.default_query.items():
            if key not in query:
                query[key] = value
        query_string = build_query(query)
        if query_string:
            url += ("&" if "?" in url else "?") + query_string
        return url

    def build_request(
        self,
        method: str,
        endpoint: str,
        body_parameters: Optional[Mapping[str, Any]] = None,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Request:
        method = method.upper()
        request_headers = CaseInsensitiveDict(headers or {})
        if method == Request.METHOD_GET:
            body = None
        else:
            request_headers.setdefault("content-type", FORM_CONTENT_TYPE)
            body = build_query(dict(body_parameters or {}))
        return requests.Request(
            method,
            self.build_url(endpoint, query_parameters),
            headers=dict(request_headers),
            data=body,
        )

    def request(self, method, endpoint, body_parameters=None, query_parameters=None, headers=None):
        # 4xx/5xx come back as responses; only transport errors raise.
        req = self.build_request(method, endpoint, body_parameters, query_parameters, headers)
        prepared = self.session.prepare_request(req)
        logger.debug("%s %s", prepared.method, redact_url(prepared.url))
        resp = self.session.send(prepared, timeout=self.timeout)
        logger.debug("%s %s -> %s", prepared.method, redact_url(prepared.url), resp.status_code)
        return resp

    def get(self, endpoint, query_parameters=None, headers=None):
        return self.request(Request.METHOD_GET, endpoint, None, query_parameters, headers)

    def post(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.request(Request.METHOD_POST, endpoint, body_parameters, query_parameters, headers)

    def put(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.request(Request.METHOD_PUT, endpoint, body_parameters, query_parameters, headers)

    def patch(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.request(Request.METHOD_PATCH, endpoint, body_parameters, query_parameters, headers)

    def delete(self, endpoint, body_parameters=None, query_parameters=None, headers=None):
        return self.request(Request.METHOD_DELETE, endpoint, body_parameters, query_parameters, headers)

    def decode_response(self, response: requests.Response) -> ParsedResponse:
        try:
            return ParsedResponse(response, data=decode_json_body(response))
        except json.JSONDecodeError as e:
            logger.warning(
                "Response with status %s is not valid JSON (%s): %.200r",
                response.status_code, e.msg, response.text,
            )
            return ParsedResponse(response, error=e)

    def parse_response(self, response: requests.Response) -> Any:
        parsed = self.decode_response(response)
        if not parsed.ok:
            raise MalformedResponseError.from_parsed(parsed)
        return parsed.data
