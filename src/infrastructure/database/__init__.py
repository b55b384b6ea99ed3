"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import Base, CustomerProfileModel
from .seed import DEFAULT_CUSTOMER_PROFILES, seed_customer_profiles

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "CustomerProfileModel",
    "DEFAULT_CUSTOMER_PROFILES",
    "seed_customer_profiles",
]
