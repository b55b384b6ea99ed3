"""Data Transfer Objects for application layer."""

from .purchase import (
    PurchaseEvaluationRequest,
    PurchaseEvaluationResponse,
    PurchaseDetailsDTO,
)

__all__ = [
    "PurchaseEvaluationRequest",
    "PurchaseEvaluationResponse",
    "PurchaseDetailsDTO",
]
