"""
API request and response schemas.
What it defines:
- Input payload (feeling + responseType)
- Success, error and health response formats

And, the main purpose:
Ensure structured communication between client and server.
"""


from pydantic import BaseModel, ConfigDict, Field


class MotivationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    feeling: str = Field(..., min_length=1, description="How the user is feeling, sent as-is to the model")
    response_type: str = Field(..., alias="responseType", min_length=1)


class MotivationResponse(BaseModel):
    motivation: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    timestamp: str
    has_api_key: bool = Field(..., alias="hasApiKey")
