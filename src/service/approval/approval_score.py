"""
Approval Score for the Purchase Approval Engine.

    approval_score = (financial_factor / amount) * period

Interpretation:
    score == 1: the requested amount is exactly the customer's maximum
    score >  1: the customer qualifies for more than was requested
    score <  1: the request exceeds what the customer qualifies for
"""


def calculate_approval_score(financial_factor: int, amount: float, period: int) -> float:
    """
    Relate a customer's capacity to the requested amount and period.

    Args:
        financial_factor: Customer's capacity coefficient
        amount: Requested amount, already range-checked (never zero)
        period: Requested period in months

    Returns:
        Dimensionless approval score
    """
    return (financial_factor / float(amount)) * period


def is_exact_match(score: float) -> bool:
    """True if the score says the request is exactly the maximum offer."""
    return score == 1
