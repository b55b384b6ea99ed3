"""
Purchase Approval Engine
"""

from .models import (
    CustomerProfile,
    DecisionReason,
    NoOffer,
    Offer,
    ProfileFound,
    ProfileLookup,
    ProfileNotFound,
    PurchaseDetails,
    PurchaseRequest,
    PurchaseResponse,
    RangeAccepted,
    RangeRejected,
)
from .settings import ApprovalSettings, RangePolicy, approval_settings
from .range_policy import (
    apply_range_policy,
    clamp_amount,
    clamp_period,
    is_valid_amount,
    is_valid_period,
)
from .approval_score import calculate_approval_score, is_exact_match
from .offer import calculate_max_amount_for_period, find_nearest_valid_offer
from .decision import (
    decide_for_profile,
    evaluate_purchase,
    evaluate_purchase_async,
    explain_response,
    screen_details,
)

__all__ = [
    # Settings
    "ApprovalSettings",
    "RangePolicy",
    "approval_settings",
    # Models
    "CustomerProfile",
    "DecisionReason",
    "PurchaseDetails",
    "PurchaseRequest",
    "PurchaseResponse",
    "ProfileFound",
    "ProfileNotFound",
    "ProfileLookup",
    "Offer",
    "NoOffer",
    "RangeAccepted",
    "RangeRejected",
    # Range Policy
    "apply_range_policy",
    "clamp_amount",
    "clamp_period",
    "is_valid_amount",
    "is_valid_period",
    # Scoring
    "calculate_approval_score",
    "is_exact_match",
    # Offers
    "calculate_max_amount_for_period",
    "find_nearest_valid_offer",
    # Decision
    "evaluate_purchase",
    "evaluate_purchase_async",
    "screen_details",
    "decide_for_profile",
    "explain_response",
]
