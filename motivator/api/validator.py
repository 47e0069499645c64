from typing import Any

from motivator.api.types import MotivationRequest
from motivator.core.errors import MissingFieldError

REQUIRED_FIELDS = ("feeling", "responseType")


def _present(body: dict, key: str) -> bool:
    value = body.get(key)
    return isinstance(value, str) and value != ""


def validate_motivation_request(body: Any) -> MotivationRequest:
    """
    Turn a decoded JSON body into a MotivationRequest.
    Anything that is not an object, or lacks a non-empty string for either
    field, raises MissingFieldError. Values are passed through untouched.
    """
    if not isinstance(body, dict):
        body = {}
    if not all(_present(body, k) for k in REQUIRED_FIELDS):
        raise MissingFieldError()
    return MotivationRequest(feeling=body["feeling"], responseType=body["responseType"])
