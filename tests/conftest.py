"""
Shared fixtures: a fake Dhan API built on httpx.MockTransport
"""

import httpx
import pytest

from dhan_dashboard.services.dhan_service import DhanClient

BASE_URL = "https://dhan.test"
TOKEN = "test-token"


class FakeDhan:
    """
    Route table for a fake Dhan API.

    Paths map to a JSON body (served with 200), an httpx.Response, or an
    exception instance to raise. Unknown paths return 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, result):
        self.routes[path] = result

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query.decode()}"

        result = self.routes.get(path)
        if result is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(result, Exception):
            raise result
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    @property
    def paths(self):
        return [r.url.path for r in self.requests]

    def client(self, token: str = TOKEN) -> DhanClient:
        return DhanClient(
            base_url=BASE_URL,
            access_token=token,
            timeout=None,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def fake_dhan():
    return FakeDhan()
