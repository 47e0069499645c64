"""Shared fixtures: a recording upstream stub and a TestClient factory.

The upstream is an httpx.MockTransport, so no test ever leaves the process.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from motivator.core.config import Settings
from motivator.main import create_app

TEST_KEY = "test-key-123"


def completion_body(content: str) -> dict[str, Any]:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


class Upstream:
    """Records every request and answers with a fixed response (or raises)."""

    def __init__(self, status_code: int = 200, json: Any = None, text: str | None = None, exc: Exception | None = None):
        self.status_code = status_code
        self.body = json
        self.text = text
        self.exc = exc
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> Any:
        return json.loads(self.calls[-1].content)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream(json=completion_body("You've got this."))


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    def _make(handler: Callable, api_key: str = TEST_KEY, **overrides: Any) -> TestClient:
        settings = Settings(API_KEY=api_key, **overrides)
        app = create_app(settings, transport=httpx.MockTransport(handler))
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client, upstream) -> TestClient:
    return make_client(upstream)
