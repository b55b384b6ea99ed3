"""In-memory implementation of CustomerProfileRepository."""

from typing import Mapping

from src.domain.interfaces import CustomerProfileRepository
from src.infrastructure.database.seed import DEFAULT_CUSTOMER_PROFILES
from src.service.approval.models import (
    CustomerProfile,
    ProfileFound,
    ProfileLookup,
    ProfileNotFound,
)


class InMemoryCustomerProfileRepository(CustomerProfileRepository):
    """
    Profile store backed by a fixed mapping.

    The mapping is copied on construction and never modified afterwards,
    so one instance can be shared by concurrent requests.
    """

    def __init__(self, profiles: Mapping[str, CustomerProfile] | None = None):
        source = DEFAULT_CUSTOMER_PROFILES if profiles is None else profiles
        self._profiles = dict(source)

    def lookup(self, customer_id: str) -> ProfileLookup:
        """Synchronous lookup, usable directly as the engine's profile lookup."""
        profile = self._profiles.get(customer_id)
        if profile is None:
            return ProfileNotFound(customer_id=customer_id)
        return ProfileFound(profile=profile)

    async def get_by_customer_id(self, customer_id: str) -> ProfileLookup:
        """Look up a customer's risk profile."""
        return self.lookup(customer_id)
