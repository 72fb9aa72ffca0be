"""
Shared pytest fixtures for the pfSense API client tests.

HTTP traffic never leaves the process: ``requests.Session.request`` is
replaced by :class:`MockPfSense`, which records every call and answers with
queued (or handler generated) ``requests.Response`` objects.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
import requests

from pfsense_api import PfSenseClient

HOST = "https://pfsense.test"
TESTDATA = Path(__file__).parent / "testdata"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a canned response envelope from ``tests/testdata``."""
    with open(TESTDATA / name, encoding="utf-8") as fixture:
        return json.load(fixture)


def ok_envelope(data: Any = None) -> Dict[str, Any]:
    return {"status": "ok", "code": 200, "return": 0, "message": "Success", "data": data}


def make_response(
    status_code: int = 200,
    body: Union[Dict[str, Any], List[Any], str, bytes, None] = None,
    url: str = HOST,
) -> requests.Response:
    """Build a real ``requests.Response``; dicts and lists are JSON encoded."""
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    response.url = url
    return response


@dataclass
class RecordedCall:
    method: str
    url: str
    kwargs: Dict[str, Any]

    @property
    def params(self) -> Dict[str, str]:
        return self.kwargs.get("params") or {}

    @property
    def json(self) -> Any:
        return self.kwargs.get("json")

    @property
    def headers(self) -> Dict[str, str]:
        return self.kwargs.get("headers") or {}

    @property
    def auth(self):
        return self.kwargs.get("auth")


@dataclass
class MockPfSense:
    """
    Scripted stand-in for the appliance.

    Queued items are consumed first (an exception instance is raised instead
    of returned); after that ``handler`` answers, and without a handler every
    call gets an empty success envelope.
    """

    calls: List[RecordedCall] = field(default_factory=list)
    responses: List[Any] = field(default_factory=list)
    handler: Optional[Callable[[str, str, Dict[str, Any]], requests.Response]] = None

    def queue(self, *responses):
        self.responses.extend(responses)

    def queue_json(self, *bodies, status_code: int = 200):
        for body in bodies:
            self.responses.append(make_response(status_code, body))

    def queue_fixture(self, name: str, status_code: int = 200):
        self.responses.append(make_response(status_code, load_fixture(name)))

    def __call__(self, method: str, url: str, **kwargs) -> requests.Response:
        self.calls.append(RecordedCall(method, url, kwargs))
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        if self.handler is not None:
            return self.handler(method, url, kwargs)
        return make_response(200, ok_envelope())

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def pfsense(monkeypatch) -> MockPfSense:
    """Patch ``requests.Session.request`` and return the recording fake."""
    mock = MockPfSense()

    def _request(session, method, url, **kwargs):
        return mock(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, "request", _request)
    return mock


@pytest.fixture
def client(pfsense) -> PfSenseClient:
    """A client using HTTP basic auth, so no token requests get in the way."""
    pfsense_client = PfSenseClient.with_local_auth(HOST, "admin", "pfsense")
    yield pfsense_client
    pfsense_client.close()


@pytest.fixture
def jwt_client(pfsense) -> PfSenseClient:
    pfsense_client = PfSenseClient.with_jwt_auth(HOST, "admin", "pfsense")
    yield pfsense_client
    pfsense_client.close()
