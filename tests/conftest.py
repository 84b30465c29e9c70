"""
Shared fixtures: a recording httpx transport and clients wired to it.
"""

import json

import httpx
import pytest

from wuzapi import AsyncWuzapiClient, WuzapiClient

API_URL = "http://x"
ENV_VARS = ("WUZAPI_API_URL", "WUZAPI_TOKEN", "WUZAPI_DEBUG", "WUZAPI_TIMEOUT")


def envelope(data=None, code=200, success=True, error=None):
    body = {"code": code, "data": data, "success": success}
    if error is not None:
        body["error"] = error
    return body


class TransportSpy:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = envelope({})
        self.exc = None

    def reply(self, body, status=200):
        self.body = body
        self.status = status

    def fail(self, exc):
        self.exc = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status, json=self.body)
        return httpx.Response(self.status, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # WuzapiConfig also reads .env from the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def spy():
    return TransportSpy()


@pytest.fixture
def make_client(spy):
    clients = []

    def factory(token="default-token", **kwargs):
        client = WuzapiClient(API_URL, token=token, transport=httpx.MockTransport(spy), **kwargs)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
async def async_client(spy):
    client = AsyncWuzapiClient(API_URL, token="default-token", transport=httpx.MockTransport(spy))
    yield client
    await client.close()
