"""
Completion relay and it does:
- Checks the credential before anything touches the network
- Sends ONE chat-completion request per call (no retries)
- Bounds the call with a timeout
- Maps upstream statuses / transport failures onto the error taxonomy

Main purpose:
The only outbound dependency of the service.
"""


import asyncio
from typing import Any, Dict, Optional

import httpx

from motivator.api.types import MotivationRequest
from motivator.core.config import Settings
from motivator.core.errors import (
    STATUS_ERRORS,
    ConfigurationError,
    MalformedUpstreamResponseError,
    RequestConstructionError,
    UpstreamOtherError,
    UpstreamUnreachableError,
)
from motivator.core.logging import get_logger, safe_snippet
from motivator.llm.prompts import build_messages

log = get_logger("llm.relay")


def _upstream_detail(r: httpx.Response, n: int = 200) -> Optional[str]:
    """Pull a short human-readable error out of an upstream error body."""
    try:
        data = r.json()
    except ValueError:
        return safe_snippet(r.text, n) or None

    if isinstance(data, dict):
        err = data.get("error", data.get("message"))
        if isinstance(err, dict):
            err = err.get("message")
        if isinstance(err, str) and err:
            return safe_snippet(err, n)
    return safe_snippet(r.text, n) or None


def extract_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise MalformedUpstreamResponseError()
    if not isinstance(content, str):
        raise MalformedUpstreamResponseError()
    return content


class CompletionRelay:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport

    @property
    def timeout(self) -> float:
        return self._settings.REQUEST_TIMEOUT_SEC

    def build_payload(self, req: MotivationRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": self._settings.LLM_MODEL,
            "messages": build_messages(req.feeling, req.response_type),
            "temperature": self._settings.TEMPERATURE,
        }
        if self._settings.MAX_TOKENS > 0:
            payload["max_tokens"] = self._settings.MAX_TOKENS
        return payload

    async def complete(self, req: MotivationRequest) -> str:
        api_key = self._settings.API_KEY
        if not api_key:
            raise ConfigurationError()

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
            try:
                request = client.build_request(
                    "POST", self._settings.COMPLETIONS_URL, headers=headers, json=self.build_payload(req)
                )
            except (httpx.InvalidURL, ValueError, TypeError) as e:
                log.error(f"Could not build upstream request: {e}")
                raise RequestConstructionError(str(e)) from e

            try:
                r = await asyncio.wait_for(client.send(request), timeout=self.timeout)
            except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
                log.error(f"Could not send upstream request: {e}")
                raise RequestConstructionError(str(e)) from e
            except asyncio.TimeoutError as e:
                log.warning(f"Upstream did not answer within {self.timeout:.1f}s")
                raise UpstreamUnreachableError() from e
            except httpx.TransportError as e:
                log.warning(f"No response from upstream: {type(e).__name__}: {e}")
                raise UpstreamUnreachableError() from e

        if r.status_code >= 400:
            log.error(f"Upstream error {r.status_code}: {safe_snippet(r.text)}")
            err_cls = STATUS_ERRORS.get(r.status_code)
            if err_cls is not None:
                raise err_cls()
            raise UpstreamOtherError(r.status_code, _upstream_detail(r))

        try:
            data = r.json()
        except ValueError as e:
            log.error(f"Upstream returned non-JSON body: {safe_snippet(r.text)}")
            raise MalformedUpstreamResponseError() from e

        try:
            return extract_content(data)
        except MalformedUpstreamResponseError:
            log.error(f"Unexpected upstream response: {safe_snippet(str(data))}")
            raise
