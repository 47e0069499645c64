"""
FastAPI routes for the relay.
What it provides:
- Health endpoint (status, time, whether a key is configured)
- Motivate endpoint (validate -> prompt -> upstream -> response)

And, the main purpose:
Expose the relay over HTTP. Errors are raised as RelayError and turned
into JSON bodies by the handlers registered in main.py.
"""
import json
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from motivator.api.types import HealthResponse, MotivationResponse
from motivator.api.validator import validate_motivation_request
from motivator.core.errors import ConfigurationError
from motivator.core.logging import get_logger
from motivator.llm.relay import CompletionRelay

log = get_logger("api.routes")

router = APIRouter()


def _relay(request: Request) -> CompletionRelay:
    return request.app.state.relay


@router.get("/health", response_model=HealthResponse)
async def api_health(request: Request):
    settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        has_api_key=settings.has_api_key,
    )


@router.post("/motivate", response_model=MotivationResponse)
async def api_motivate(request: Request):
    if not request.app.state.settings.has_api_key:
        raise ConfigurationError()

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = {}

    req = validate_motivation_request(body)
    log.info(f"motivate: feeling={len(req.feeling)} chars, responseType={req.response_type!r}")

    text = await _relay(request).complete(req)
    return MotivationResponse(motivation=text)
