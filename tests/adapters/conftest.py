"""Fake aiohttp session shared by the HTTP client tests."""

import json

import pytest


class FakeResponse:
    def __init__(self, status, data):
        self.status = status
        self._data = data

    async def json(self, content_type="application/json"):
        return self._data

    async def text(self):
        if isinstance(self._data, str):
            return self._data
        return json.dumps(self._data)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeHTTP:
    """Replaces aiohttp.ClientSession.

    responses: list of (status, body) tuples consumed in order by every
    get()/post() across all sessions. Calls are recorded in ``calls``.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.session_kwargs = []

    def _request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        status, data = self.responses.pop(0)
        return FakeResponse(status, data)

    def __call__(self, **kwargs):
        self.session_kwargs.append(kwargs)
        http = self

        class FakeSession:
            def get(self, url, **kw):
                return http._request("GET", url, **kw)

            def post(self, url, **kw):
                return http._request("POST", url, **kw)

            async def __aenter__(self):
                return self

            async def __aexit__(self, *args):
                pass

        return FakeSession()


@pytest.fixture
def fake_http():
    return FakeHTTP
