"""
Decision Engine for the Purchase Approval Engine.

This module orchestrates the complete decision-making process:
1. Apply the range policy to the requested details
2. Look up the customer's risk profile
3. Deny unknown and flagged customers
4. Calculate the approval score
5. Approve the exact request, the capped maximum for the requested period,
   or the nearest later period with a valid amount
6. Deny when no period within bounds yields a valid amount

The profile lookup is injected as a plain callable, so the engine works with
any profile store (or a fake in tests).
"""

from typing import Awaitable, Callable, Union

from . import messages
from .approval_score import calculate_approval_score, is_exact_match
from .models import (
    DecisionReason,
    Offer,
    ProfileLookup,
    ProfileNotFound,
    PurchaseDetails,
    PurchaseRequest,
    PurchaseResponse,
    RangeRejected,
)
from .offer import calculate_max_amount_for_period, find_nearest_valid_offer
from .range_policy import apply_range_policy
from .settings import ApprovalSettings, approval_settings

LookupProfile = Callable[[str], ProfileLookup]
AsyncLookupProfile = Callable[[str], Awaitable[ProfileLookup]]


def evaluate_purchase(
    request: PurchaseRequest,
    lookup_profile: LookupProfile,
    settings: ApprovalSettings = approval_settings,
) -> PurchaseResponse:
    """
    Decide whether a purchase request can be approved, and on what terms.

    This is the main entry point for the approval module. The profile is
    only looked up once the requested details passed the range policy.

    Args:
        request: Customer id plus requested amount and period
        lookup_profile: Returns ProfileFound or ProfileNotFound for an id
        settings: Approval settings (uses defaults if not provided)

    Returns:
        PurchaseResponse; every outcome, including denials, is a verdict
    """
    screened = screen_details(request.details, settings)
    if isinstance(screened, PurchaseResponse):
        return screened

    return decide_for_profile(lookup_profile(request.customer_id), screened, settings)


async def evaluate_purchase_async(
    request: PurchaseRequest,
    lookup_profile: AsyncLookupProfile,
    settings: ApprovalSettings = approval_settings,
) -> PurchaseResponse:
    """Same as evaluate_purchase, for a profile lookup that must be awaited."""
    screened = screen_details(request.details, settings)
    if isinstance(screened, PurchaseResponse):
        return screened

    lookup = await lookup_profile(request.customer_id)
    return decide_for_profile(lookup, screened, settings)


def screen_details(
    details: PurchaseDetails,
    settings: ApprovalSettings = approval_settings,
) -> Union[PurchaseDetails, PurchaseResponse]:
    """
    Apply the range policy to the requested details.

    Returns:
        The normalized details, or the denial when the policy rejects them
    """
    range_check = apply_range_policy(details, settings)
    if isinstance(range_check, RangeRejected):
        return PurchaseResponse.deny(range_check.message, range_check.reason)
    return range_check.details


def decide_for_profile(
    lookup: ProfileLookup,
    details: PurchaseDetails,
    settings: ApprovalSettings = approval_settings,
) -> PurchaseResponse:
    """
    Produce the verdict once the profile lookup has been done.

    Args:
        lookup: Result of the profile lookup
        details: Requested details that already passed the range policy
        settings: Approval settings (uses defaults if not provided)

    Returns:
        PurchaseResponse for the customer and details
    """
    if isinstance(lookup, ProfileNotFound):
        return PurchaseResponse.deny(
            messages.CUSTOMER_NOT_FOUND, DecisionReason.CUSTOMER_NOT_FOUND
        )

    profile = lookup.profile
    if profile.flagged:
        return PurchaseResponse.deny(
            messages.CUSTOMER_FLAGGED, DecisionReason.CUSTOMER_FLAGGED
        )

    financial_factor = profile.financial_factor

    score = calculate_approval_score(financial_factor, details.amount, details.period)
    if is_exact_match(score):
        return PurchaseResponse.approve(
            details,
            messages.exact_match(details.amount),
            DecisionReason.EXACT_MATCH,
        )

    max_amount = calculate_max_amount_for_period(financial_factor, details.period, settings)
    if max_amount >= settings.min_amount:
        return PurchaseResponse.approve(
            PurchaseDetails(amount=max_amount, period=details.period),
            messages.max_amount(max_amount),
            DecisionReason.MAX_AMOUNT,
        )

    nearest = find_nearest_valid_offer(financial_factor, details.period, settings)
    if isinstance(nearest, Offer):
        return PurchaseResponse.approve(
            nearest.details,
            messages.nearest_offer(nearest.details.amount, nearest.details.period),
            DecisionReason.NEAREST_PERIOD,
        )

    return PurchaseResponse.deny(messages.NO_VALID_OFFER, DecisionReason.NO_VALID_OFFER)


def explain_response(response: PurchaseResponse) -> str:
    """
    Generate a human-readable explanation of a verdict.

    This can be used for:
    - Logging and debugging
    - Support team reference

    Args:
        response: The verdict to explain

    Returns:
        Human-readable explanation string
    """
    lines = []

    if not response.approved:
        lines.append("Decision: DENIED")
    else:
        lines.append(
            f"Decision: APPROVED (€{response.details.amount:.2f} "
            f"over {response.details.period} months)"
        )

    lines.append(f"Reason: {response.reason.value}")
    lines.append(f"Message: {response.message}")

    return "\n".join(lines)
