"""Customer profile store exceptions."""

from .base import DomainException


class ProfileStoreUnavailableException(DomainException):
    """Raised when the customer profile store cannot be reached."""

    def __init__(self, message: str = "Customer profile store is unavailable"):
        super().__init__(
            message=message,
            code="PROFILE_STORE_UNAVAILABLE",
        )
