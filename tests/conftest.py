# conftest.py - shared fixtures: a requests Session with a recording transport
import logging
from typing import List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and replies from a queue."""

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.replies = []

    def reply(self, status=200, body=b"", headers=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.replies.append((status, body, headers or {}))
        return self

    def fail_with(self, exc: Exception):
        self.replies.append(exc)
        return self

    @property
    def last(self) -> Optional[requests.PreparedRequest]:
        return self.requests[-1] if self.requests else None

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.last_timeout = timeout
        reply = self.replies.pop(0) if self.replies else (200, b"{}", {})
        if isinstance(reply, Exception):
            raise reply
        status, body, headers = reply
        resp = requests.Response()
        resp.status_code = status
        resp._content = body
        resp.encoding = "utf-8"
        resp.headers.update(headers)
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def session(adapter):
    s = requests.Session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    yield s
    s.close()


def make_response(body, status=200):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def response_factory():
    return make_response
