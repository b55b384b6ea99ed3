"""Application services (use cases)."""

from .purchase_service import PurchaseApprovalService

__all__ = [
    "PurchaseApprovalService",
]
