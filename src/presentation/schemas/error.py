"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["PROFILE_STORE_UNAVAILABLE"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Service temporarily unavailable. Please try again."],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_PURCHASE_REQUEST",
                    "message": "customer_id is required",
                    "request_id": "abc123",
                }
            ]
        }
    }
