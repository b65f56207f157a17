"""Test configuration and fixtures."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from paypal_api.adapters.http_client import HttpxTransport, build_async_client
from paypal_api.core.config import Configuration
from paypal_api.core.services.auth import TokenManager
from paypal_api.core.services.pipeline import RequestPipeline

TOKEN_BODY = {
    "scope": "https://uri.paypal.com/services/subscriptions",
    "access_token": "A21AAF-test-token",
    "token_type": "Bearer",
    "app_id": "APP-80W284485P519543T",
    "expires_in": 32400,
    "nonce": "2024-01-01T00:00:00Z-nonce",
}


class FakeClock:
    """Controllable replacement for `datetime.now(timezone.utc)`."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class MockPayPal:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.token_response = httpx.Response(200, json=TOKEN_BODY)

    def add(self, method, path, response):
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/v1/oauth2/token":
            return self.token_response
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND", "message": "No route"})
        return response

    @property
    def token_requests(self):
        return [r for r in self.requests if r.url.path == "/v1/oauth2/token"]

    @property
    def api_requests(self):
        return [r for r in self.requests if r.url.path != "/v1/oauth2/token"]

    def last_json(self):
        return json.loads(self.api_requests[-1].content)


@pytest.fixture
def config():
    return Configuration(id="client-id", secret="client-secret")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def paypal():
    return MockPayPal()


@pytest.fixture
def transport(paypal):
    client = build_async_client(transport=httpx.MockTransport(paypal.handler))
    return HttpxTransport(client)


@pytest.fixture
def tokens(config, transport, clock):
    return TokenManager(config, transport, clock=clock)


@pytest.fixture
def pipeline(config, transport, tokens):
    return RequestPipeline(config, transport, tokens)
