"""Repository interfaces for customer profile lookup."""

from abc import ABC, abstractmethod

from src.service.approval.models import ProfileLookup


class CustomerProfileRepository(ABC):
    """
    Abstract repository for customer risk profiles.

    Implementations may use an in-memory map, PostgreSQL, etc. The
    repository is read-only from the decision engine's point of view.
    """

    @abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> ProfileLookup:
        """
        Look up a customer's risk profile.

        Args:
            customer_id: The customer's personal identifier

        Returns:
            ProfileFound with the profile, or ProfileNotFound if the store
            has no entry for the customer

        Raises:
            ProfileStoreUnavailableException: If the store cannot be reached
        """
        ...
