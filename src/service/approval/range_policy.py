"""
Range Policy for the Purchase Approval Engine.

Decides what happens to request values outside the configured bounds.
This is the only step that sees raw request values; everything downstream
works on the details it accepts.

Policies:
    CLAMP:  saturate amount and period to the nearest bound
    REJECT: deny the request, naming the violated bound (amount first)
"""

from . import messages
from .models import (
    DecisionReason,
    PurchaseDetails,
    RangeAccepted,
    RangeCheck,
    RangeRejected,
)
from .settings import ApprovalSettings, RangePolicy, approval_settings


def is_valid_amount(
    amount: float,
    settings: ApprovalSettings = approval_settings,
) -> bool:
    """Check that an amount lies within [min_amount, max_amount]."""
    return settings.min_amount <= amount <= settings.max_amount


def is_valid_period(
    period: int,
    settings: ApprovalSettings = approval_settings,
) -> bool:
    """Check that a period lies within [min_period, max_period]."""
    return settings.min_period <= period <= settings.max_period


def clamp_amount(
    amount: float,
    settings: ApprovalSettings = approval_settings,
) -> float:
    """
    Saturate an amount into the configured bounds.

    Returns:
        The amount as a float, moved to the nearest bound if outside
    """
    return float(max(min(amount, settings.max_amount), settings.min_amount))


def clamp_period(
    period: int,
    settings: ApprovalSettings = approval_settings,
) -> int:
    """Saturate a period into the configured bounds."""
    return int(max(min(period, settings.max_period), settings.min_period))


def apply_range_policy(
    details: PurchaseDetails,
    settings: ApprovalSettings = approval_settings,
) -> RangeCheck:
    """
    Validate or normalize requested details according to the range policy.

    Args:
        details: Raw requested amount and period
        settings: Approval settings (uses defaults if not provided)

    Returns:
        RangeAccepted with in-bounds details, or RangeRejected when the
        REJECT policy is active and a bound is violated
    """
    if settings.range_policy == RangePolicy.REJECT:
        if not is_valid_amount(details.amount, settings):
            return RangeRejected(
                reason=DecisionReason.AMOUNT_OUT_OF_RANGE,
                message=messages.amount_out_of_range(settings),
            )
        if not is_valid_period(details.period, settings):
            return RangeRejected(
                reason=DecisionReason.PERIOD_OUT_OF_RANGE,
                message=messages.period_out_of_range(settings),
            )
        return RangeAccepted(
            details=PurchaseDetails(amount=float(details.amount), period=details.period)
        )

    return RangeAccepted(
        details=PurchaseDetails(
            amount=clamp_amount(details.amount, settings),
            period=clamp_period(details.period, settings),
        )
    )
