"""
Offer Calculation for the Purchase Approval Engine.

The maximum amount a customer can get for a period grows linearly with the
period and is capped at the global maximum:

    max_amount(period) = min(financial_factor * period, max_amount_bound)

When that amount is below the minimum for the requested period, the
nearest-period search looks at longer periods only, one month at a time, up
to the maximum period. The first period with an in-bounds amount wins.
"""

from .models import NoOffer, Offer, OfferResult, PurchaseDetails
from .range_policy import is_valid_amount
from .settings import ApprovalSettings, approval_settings


def calculate_max_amount_for_period(
    financial_factor: int,
    period: int,
    settings: ApprovalSettings = approval_settings,
) -> float:
    """
    Maximum amount obtainable for a period, capped at the maximum bound.

    Args:
        financial_factor: Customer's capacity coefficient
        period: Payment period in months
        settings: Approval settings (uses defaults if not provided)

    Returns:
        Capped maximum amount (may be below min_amount)
    """
    return float(min(financial_factor * period, settings.max_amount))


def find_nearest_valid_offer(
    financial_factor: int,
    period: int,
    settings: ApprovalSettings = approval_settings,
) -> OfferResult:
    """
    Find the shortest period after `period` that yields a valid amount.

    The requested period itself and anything shorter are never considered.

    Args:
        financial_factor: Customer's capacity coefficient
        period: The already rejected period to search beyond
        settings: Approval settings (uses defaults if not provided)

    Returns:
        Offer with the capped amount and the period found, or NoOffer if
        no period up to max_period qualifies
    """
    for months in range(period + 1, settings.max_period + 1):
        amount = calculate_max_amount_for_period(financial_factor, months, settings)
        if is_valid_amount(amount, settings):
            return Offer(details=PurchaseDetails(amount=amount, period=months))

    return NoOffer()
