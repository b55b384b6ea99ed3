"""Purchase request domain exceptions."""

from .base import DomainException


class InvalidPurchaseRequestException(DomainException):
    """Raised when a purchase request cannot be evaluated at all."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PURCHASE_REQUEST",
        )
