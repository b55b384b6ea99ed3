"""Domain Exceptions - Malformed requests and collaborator failures."""

from .base import DomainException
from .purchase import InvalidPurchaseRequestException
from .profile import ProfileStoreUnavailableException

__all__ = [
    "DomainException",
    "InvalidPurchaseRequestException",
    "ProfileStoreUnavailableException",
]
