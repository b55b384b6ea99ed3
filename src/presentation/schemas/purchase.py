"""Purchase evaluation Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


class PurchaseDetailsSchema(BaseModel):
    """Schema for an (amount, period) pair."""

    amount: float = Field(
        ...,
        allow_inf_nan=False,
        description="Purchase amount in euros",
        examples=[2400.0],
    )
    period: int = Field(
        ...,
        description="Payment period in months",
        examples=[24],
    )


class PurchaseRequestSchema(BaseModel):
    """Schema for POST /v1/evaluate-purchase request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "customer_id": "12345678923",
                    "details": {"amount": 2400.0, "period": 24},
                }
            ]
        }
    )
    customer_id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Personal identifier of the customer",
        examples=["12345678923"],
    )
    details: PurchaseDetailsSchema = Field(
        ...,
        description="Requested amount and period",
    )

    @field_validator("customer_id")
    @classmethod
    def validate_customer_id(cls, v: str) -> str:
        """Ensure customer_id is not just whitespace."""
        if not v.strip():
            raise ValueError("customer_id cannot be empty or whitespace")
        return v.strip()


class PurchaseResponseSchema(BaseModel):
    """Schema for POST /v1/evaluate-purchase response body."""

    approved: bool = Field(
        ...,
        description="Whether an offer is granted",
    )
    details: Optional[PurchaseDetailsSchema] = Field(
        None,
        description="Granted amount and period (null if denied)",
    )
    message: str = Field(
        ...,
        description="Reason for the denial or nature of the offer",
        examples=["The maximum available offer is €1200.0"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "approved": True,
                    "details": {"amount": 1200.0, "period": 12},
                    "message": "The maximum available offer is €1200.0",
                },
                {
                    "approved": False,
                    "details": None,
                    "message": "Customer is flagged.",
                },
            ]
        }
    )
