"""Dependency injection for FastAPI."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends

from src.core.config import settings
from src.domain.interfaces import CustomerProfileRepository
from src.infrastructure.database import db_manager
from src.infrastructure.repositories import (
    InMemoryCustomerProfileRepository,
    SqlCustomerProfileRepository,
)
from src.application.services import PurchaseApprovalService
from src.service.approval.settings import ApprovalSettings, get_approval_settings

_memory_profile_repository = InMemoryCustomerProfileRepository()


# Repository dependencies
async def get_profile_repository() -> AsyncGenerator[CustomerProfileRepository, None]:
    """Get the configured CustomerProfileRepository."""
    if settings.profile_store == "database":
        async with db_manager.session() as session:
            yield SqlCustomerProfileRepository(session)
    else:
        yield _memory_profile_repository


# Settings dependencies
def get_approval_config() -> ApprovalSettings:
    """Get the approval bounds and range policy."""
    return get_approval_settings()


# Service dependencies
async def get_purchase_service(
    profile_repo: Annotated[CustomerProfileRepository, Depends(get_profile_repository)],
    approval_config: Annotated[ApprovalSettings, Depends(get_approval_config)],
) -> PurchaseApprovalService:
    """Get a PurchaseApprovalService instance with all dependencies."""
    return PurchaseApprovalService(
        profile_repository=profile_repo,
        settings=approval_config,
    )
