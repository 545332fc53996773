import json

import httpx
import pytest

from core.api import PoligraphClient
from tools.mcp_server import create_server

BASE_URL = "https://poligraph.fr"


class FakeUpstream:
    """In-memory stand-in for the Poligraph API.

    Routes are keyed by the raw (still percent-encoded) request path.  A
    route's payload may be a callable taking the httpx.Request, for
    endpoints whose answer depends on the query string.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, payload=None, status=200, text=None):
        self.routes[path] = (status, payload, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        if path not in self.routes:
            return httpx.Response(404, text=json.dumps({"error": "Not found"}))
        status, payload, text = self.routes[path]
        if text is not None:
            return httpx.Response(status, text=text)
        if callable(payload):
            payload = payload(request)
        return httpx.Response(status, json=payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> dict:
        return dict(self.last.url.params)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def api(upstream):
    return PoligraphClient(base_url=BASE_URL, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def server(api):
    return create_server(api)
