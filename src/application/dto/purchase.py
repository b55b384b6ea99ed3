"""Data transfer objects for purchase evaluation."""

import math
from dataclasses import dataclass
from typing import List, Optional

from src.service.approval.models import PurchaseDetails, PurchaseRequest, PurchaseResponse


@dataclass(frozen=True)
class PurchaseEvaluationRequest:
    """Input data for evaluating a purchase."""
    customer_id: str
    amount: float
    period: int

    def validate(self) -> List[str]:
        errors = []

        if not self.customer_id or not self.customer_id.strip():
            errors.append("customer_id is required")

        if not math.isfinite(self.amount):
            errors.append("amount must be a finite number")

        return errors

    def to_entity(self) -> PurchaseRequest:
        return PurchaseRequest(
            customer_id=self.customer_id.strip(),
            details=PurchaseDetails(amount=self.amount, period=self.period),
        )


@dataclass(frozen=True)
class PurchaseDetailsDTO:
    """Offer terms included in evaluation responses."""

    amount: float
    period: int


@dataclass(frozen=True)
class PurchaseEvaluationResponse:
    """Response data for a purchase evaluation."""

    approved: bool
    details: Optional[PurchaseDetailsDTO]
    message: str
    reason: str

    @classmethod
    def from_entity(cls, response: PurchaseResponse) -> "PurchaseEvaluationResponse":
        details = None
        if response.details is not None:
            details = PurchaseDetailsDTO(
                amount=response.details.amount,
                period=response.details.period,
            )
        return cls(
            approved=response.approved,
            details=details,
            message=response.message,
            reason=response.reason.value,
        )
