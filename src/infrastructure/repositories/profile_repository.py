"""SQL implementation of CustomerProfileRepository."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import ProfileStoreUnavailableException
from src.domain.interfaces import CustomerProfileRepository
from src.infrastructure.database.models import CustomerProfileModel
from src.service.approval.models import ProfileFound, ProfileLookup, ProfileNotFound

logger = structlog.get_logger(__name__)


class SqlCustomerProfileRepository(CustomerProfileRepository):
    """
    SQL implementation of the customer profile repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_customer_id(self, customer_id: str) -> ProfileLookup:
        """Retrieve a customer's profile by id."""
        stmt = select(CustomerProfileModel).where(
            CustomerProfileModel.customer_id == customer_id
        )

        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "profile_store_error",
                customer_id=customer_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ProfileStoreUnavailableException() from e

        if model is None:
            return ProfileNotFound(customer_id=customer_id)

        return ProfileFound(profile=model.to_entity())
