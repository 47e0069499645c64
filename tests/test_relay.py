"""CompletionRelay used directly, without the HTTP layer."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from conftest import TEST_KEY, Upstream, completion_body
from motivator.api.types import MotivationRequest
from motivator.core.config import Settings
from motivator.core.errors import (
    ConfigurationError,
    UpstreamOtherError,
    UpstreamRateLimitError,
)
from motivator.llm.relay import CompletionRelay

REQ = MotivationRequest(feeling="lonely", responseType="a motivational quote")


def _relay(handler, **overrides) -> CompletionRelay:
    settings = Settings(API_KEY=overrides.pop("api_key", TEST_KEY), **overrides)
    return CompletionRelay(settings, transport=httpx.MockTransport(handler))


def test_complete_returns_content():
    stub = Upstream(json=completion_body("Reach out to one friend today."))
    assert asyncio.run(_relay(stub).complete(REQ)) == "Reach out to one friend today."


def test_payload_uses_configured_model_and_limits():
    relay = _relay(Upstream(), LLM_MODEL="my/model", TEMPERATURE=0.3, MAX_TOKENS=64)
    payload = relay.build_payload(REQ)
    assert payload["model"] == "my/model"
    assert payload["temperature"] == 0.3
    assert payload["max_tokens"] == 64


def test_zero_max_tokens_leaves_length_to_provider():
    payload = _relay(Upstream(), MAX_TOKENS=0).build_payload(REQ)
    assert "max_tokens" not in payload


def test_missing_key_raises_before_network():
    stub = Upstream()
    with pytest.raises(ConfigurationError):
        asyncio.run(_relay(stub, api_key="").complete(REQ))
    assert stub.calls == []


def test_credential_comes_from_injected_settings():
    stub = Upstream(json=completion_body("ok"))
    asyncio.run(_relay(stub, api_key="other-key").complete(REQ))
    assert stub.calls[0].headers["Authorization"] == "Bearer other-key"


def test_rate_limit_is_not_retried():
    stub = Upstream(status_code=429, json={"error": "slow down"})
    with pytest.raises(UpstreamRateLimitError):
        asyncio.run(_relay(stub).complete(REQ))
    assert len(stub.calls) == 1


def test_plain_text_error_body_becomes_detail():
    stub = Upstream(status_code=418, text="I'm a teapot")
    with pytest.raises(UpstreamOtherError) as exc:
        asyncio.run(_relay(stub).complete(REQ))
    assert exc.value.status == 418
    assert exc.value.message == "API error: 418 - I'm a teapot"


def test_custom_completions_url():
    stub = Upstream(json=completion_body("hi"))
    asyncio.run(_relay(stub, COMPLETIONS_URL="https://llm.internal/v1/chat/completions").complete(REQ))
    assert str(stub.calls[0].url) == "https://llm.internal/v1/chat/completions"
