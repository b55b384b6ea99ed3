"""Pydantic schemas for API request/response validation."""

from .purchase import (
    PurchaseDetailsSchema,
    PurchaseRequestSchema,
    PurchaseResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "PurchaseDetailsSchema",
    "PurchaseRequestSchema",
    "PurchaseResponseSchema",
    "ErrorResponseSchema",
]
