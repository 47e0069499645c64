"""
Error taxonomy for the relay.
Every error carries:
- The HTTP status it maps to
- The curated message returned to the caller

Raw upstream bodies and tracebacks are logged, never put in `message`.
"""


from typing import Optional

GENERIC_FAILURE = "Failed to get a motivational response."


class RelayError(RuntimeError):
    status_code: int = 500
    message: str = GENERIC_FAILURE

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConfigurationError(RelayError):
    message = "API key not found."


class ValidationError(RelayError):
    status_code = 400


class MissingFieldError(ValidationError):
    message = "Feeling and response type are required."


class UpstreamError(RelayError):
    pass


class UpstreamAuthError(UpstreamError):
    message = "Authentication failed. Please check your API key."


class UpstreamForbiddenError(UpstreamError):
    message = "Access forbidden. Please check your billing or API permissions."


class UpstreamNotFoundError(UpstreamError):
    message = "The requested model is not available."


class UpstreamRateLimitError(UpstreamError):
    message = "Rate limit exceeded. Please try again later."


class UpstreamOtherError(UpstreamError):
    def __init__(self, status: int, detail: Optional[str] = None):
        self.status = status
        msg = f"API error: {status}"
        if detail:
            msg = f"{msg} - {detail}"
        super().__init__(msg)


class UpstreamUnreachableError(UpstreamError):
    message = "No response from the AI service. Please try again."


class RequestConstructionError(UpstreamError):
    def __init__(self, detail: str):
        super().__init__(f"Request setup error: {detail}")


class MalformedUpstreamResponseError(UpstreamError):
    message = "Received an unexpected response from the AI service."


STATUS_ERRORS = {
    401: UpstreamAuthError,
    403: UpstreamForbiddenError,
    404: UpstreamNotFoundError,
    429: UpstreamRateLimitError,
}
