"""
Shared fixtures: a requests transport adapter that records prepared requests
and answers with canned responses, so no test touches the network.
"""

import json
from typing import Any, Callable, List, Optional, Union

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from teamwork_api.client.http_client import HttpClient
from teamwork_api.client.teamwork_client import TeamworkClient
from teamwork_api.config.teamwork_config import TeamworkConfig


BASE_URI = "https://example.teamwork.com"


class FakeAdapter(BaseAdapter):
    """Transport adapter returning queued responses or raising queued errors"""

    def __init__(self) -> None:
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self._responses: List[Union[Exception, Callable, tuple]] = []

    def queue(self, status: int = 200, body: Optional[Union[str, bytes, Any]] = None) -> None:
        """Queue a response; non-string bodies are JSON-encoded"""
        self._responses.append((status, body))

    def queue_error(self, error: Exception) -> None:
        self._responses.append(error)

    def queue_echo(self) -> None:
        """Queue a 200 response whose body describes the received request"""
        self._responses.append(self._echo)

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def _echo(self, request: requests.PreparedRequest) -> tuple:
        body = request.body
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return 200, {
            "method": request.method,
            "url": request.url,
            "headers": dict(request.headers),
            "body": body,
        }

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)

        queued = self._responses.pop(0) if self._responses else (200, None)
        if isinstance(queued, Exception):
            raise queued
        if callable(queued):
            queued = queued(request)

        status, body = queued
        if body is None:
            content = b""
        elif isinstance(body, bytes):
            content = body
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            content = json.dumps(body).encode("utf-8")

        response = requests.Response()
        response.status_code = status
        response._content = content
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def session(adapter: FakeAdapter) -> requests.Session:
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


@pytest.fixture
def config() -> TeamworkConfig:
    return TeamworkConfig(base_uri=BASE_URI, username="u", password="p")


@pytest.fixture
def http_client(config: TeamworkConfig, session: requests.Session) -> HttpClient:
    return HttpClient(config, session=session)


@pytest.fixture
def teamwork(session: requests.Session) -> TeamworkClient:
    return TeamworkClient(BASE_URI, "u", "p", session=session)
