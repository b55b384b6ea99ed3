"""
Data models for purchase approval.

These are the value types passed through the decision pipeline, from the
customer's risk profile and the raw request to the final verdict. Outcomes
that may or may not carry a value (profile lookup, offer search, range
check) are modelled as explicit result variants rather than None.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class DecisionReason(str, Enum):
    """Why a verdict came out the way it did (for metrics and logs)."""
    EXACT_MATCH = "exact_match"
    MAX_AMOUNT = "max_amount"
    NEAREST_PERIOD = "nearest_period"
    AMOUNT_OUT_OF_RANGE = "amount_out_of_range"
    PERIOD_OUT_OF_RANGE = "period_out_of_range"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    CUSTOMER_FLAGGED = "customer_flagged"
    NO_VALID_OFFER = "no_valid_offer"


@dataclass(frozen=True)
class CustomerProfile:
    """
    Risk profile of a customer, owned by the profile store.

    Attributes:
        flagged: True if the customer must not receive any offer
        financial_factor: Capacity coefficient, i.e. the amount the customer
            can finance per month of period. May be a sentinel such as -1 for
            flagged profiles, so eligibility is never inferred from its sign.
    """
    flagged: bool
    financial_factor: int


@dataclass(frozen=True)
class PurchaseDetails:
    """
    An (amount, period) pair: either a requested offer or a counter-offer.

    Attributes:
        amount: Purchase amount in currency units
        period: Payment period in months
    """
    amount: float
    period: int


@dataclass(frozen=True)
class PurchaseRequest:
    """A customer's request for a financing offer."""
    customer_id: str
    details: PurchaseDetails


@dataclass(frozen=True)
class PurchaseResponse:
    """
    The final verdict for a purchase request.

    `details` is present if and only if the request is approved. Use the
    `approve` and `deny` constructors to keep it that way.

    Attributes:
        approved: Whether an offer is granted
        details: The granted offer (None if denied)
        message: Human-readable reason for the denial or nature of the offer
        reason: Machine-readable outcome, not part of the wire format
    """
    approved: bool
    details: Optional[PurchaseDetails]
    message: str
    reason: DecisionReason

    def __post_init__(self):
        if self.approved != (self.details is not None):
            raise ValueError("details must be present if and only if approved")

    @classmethod
    def approve(
        cls,
        details: PurchaseDetails,
        message: str,
        reason: DecisionReason,
    ) -> "PurchaseResponse":
        return cls(approved=True, details=details, message=message, reason=reason)

    @classmethod
    def deny(cls, message: str, reason: DecisionReason) -> "PurchaseResponse":
        return cls(approved=False, details=None, message=message, reason=reason)


# =============================================================================
# Result variants
# =============================================================================

@dataclass(frozen=True)
class ProfileFound:
    """The profile store knows the customer."""
    profile: CustomerProfile


@dataclass(frozen=True)
class ProfileNotFound:
    """The profile store has no entry for the customer."""
    customer_id: str


ProfileLookup = Union[ProfileFound, ProfileNotFound]


@dataclass(frozen=True)
class Offer:
    """A valid offer was found."""
    details: PurchaseDetails


@dataclass(frozen=True)
class NoOffer:
    """No period within bounds yields a valid amount."""


OfferResult = Union[Offer, NoOffer]


@dataclass(frozen=True)
class RangeAccepted:
    """Request values are usable, possibly after clamping."""
    details: PurchaseDetails


@dataclass(frozen=True)
class RangeRejected:
    """Request values fall outside the bounds and the policy rejects them."""
    reason: DecisionReason
    message: str


RangeCheck = Union[RangeAccepted, RangeRejected]
