"""Repository implementations."""

from .memory_profile_repository import InMemoryCustomerProfileRepository
from .profile_repository import SqlCustomerProfileRepository

__all__ = [
    "InMemoryCustomerProfileRepository",
    "SqlCustomerProfileRepository",
]
