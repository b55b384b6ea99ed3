"""
Message templates for purchase verdicts.

Every outcome has its own stable template so that callers can tell denial
reasons and offer kinds apart from the message alone.
"""

from .settings import ApprovalSettings

CUSTOMER_NOT_FOUND = "Customer is not found."
CUSTOMER_FLAGGED = "Customer is flagged."
NO_VALID_OFFER = "No valid offer found."


def exact_match(amount: float) -> str:
    return f"The maximum available offer is the same as the requested amount €{amount}"


def max_amount(amount: float) -> str:
    return f"The maximum available offer is €{amount}"


def nearest_offer(amount: float, period: int) -> str:
    return f"Nearest offer - €{amount} in {period} months"


def amount_out_of_range(settings: ApprovalSettings) -> str:
    return (
        f"Requested amount is out of range "
        f"({settings.min_amount} - {settings.max_amount})."
    )


def period_out_of_range(settings: ApprovalSettings) -> str:
    return (
        f"Requested period is out of range "
        f"({settings.min_period} - {settings.max_period} months)."
    )
