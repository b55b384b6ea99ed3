"""
Domain Interfaces (Ports)
"""

from .repositories import CustomerProfileRepository

__all__ = [
    "CustomerProfileRepository",
]
