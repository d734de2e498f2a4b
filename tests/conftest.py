from __future__ import annotations
import json
from typing import Any, Dict, List, Optional
import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from workspace_api import WorkspaceClient

TEST_BASE_URL = 'https://api.test.local/v1'
TEST_API_KEY = 'test_api_key'


def build_response(status: int, headers: Optional[Dict[str, str]] = None, body: Any = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        resp._content = b''
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body).encode('utf-8')
        resp.headers.setdefault('Content-Type', 'application/json')
    resp.encoding = 'utf-8'
    return resp


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and replays queued outcomes."""

    def __init__(self):
        super().__init__()
        self.sent: List[requests.PreparedRequest] = []
        self._outcomes: List[Any] = []
        self.closed = False

    def queue(self, status: int = 200, headers: Optional[Dict[str, str]] = None, body: Any = None) -> None:
        self._outcomes.append(build_response(status, headers, body))

    def queue_error(self, exc: Exception) -> None:
        self._outcomes.append(exc)

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.sent.append(request)
        outcome = self._outcomes.pop(0) if self._outcomes else build_response(200, body={})
        if isinstance(outcome, Exception):
            raise outcome
        outcome.url = request.url
        outcome.request = request
        return outcome

    def close(self):
        self.closed = True


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def client(adapter):
    session = requests.Session()
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    c = WorkspaceClient(TEST_API_KEY, base_url=TEST_BASE_URL, session=session)
    yield c
    c.close()
