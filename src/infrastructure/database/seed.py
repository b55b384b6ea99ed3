"""Seed data for the customer profile table."""

from typing import Mapping

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.service.approval.models import CustomerProfile
from .models import CustomerProfileModel

logger = structlog.get_logger(__name__)

DEFAULT_CUSTOMER_PROFILES: Mapping[str, CustomerProfile] = {
    "12345678901": CustomerProfile(flagged=True, financial_factor=-1),  # ineligible
    "12345678912": CustomerProfile(flagged=False, financial_factor=50),
    "12345678923": CustomerProfile(flagged=False, financial_factor=100),
    "12345678934": CustomerProfile(flagged=False, financial_factor=500),
}


async def seed_customer_profiles(
    session: AsyncSession,
    profiles: Mapping[str, CustomerProfile] = DEFAULT_CUSTOMER_PROFILES,
) -> int:
    """
    Insert profiles that are not in the table yet.

    Existing rows are left untouched.

    Returns:
        Number of profiles inserted
    """
    stmt = select(CustomerProfileModel.customer_id).where(
        CustomerProfileModel.customer_id.in_(list(profiles))
    )
    result = await session.execute(stmt)
    existing = set(result.scalars().all())

    inserted = 0
    for customer_id, profile in profiles.items():
        if customer_id in existing:
            continue
        session.add(
            CustomerProfileModel(
                customer_id=customer_id,
                flagged=profile.flagged,
                financial_factor=profile.financial_factor,
            )
        )
        inserted += 1

    await session.flush()
    logger.info("customer_profiles_seeded", inserted=inserted, skipped=len(existing))
    return inserted
