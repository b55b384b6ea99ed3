"""
Approval Settings for the Purchase Approval Engine.

This module holds the bounds every offer must respect and the policy applied
to requests that fall outside of them. The values are immutable once loaded,
so several bound profiles (e.g. one per product line) can coexist without
interfering with each other.

Environment variables use the APPROVAL_ prefix:
    APPROVAL_MIN_AMOUNT=200
    APPROVAL_MAX_PERIOD=24
    APPROVAL_RANGE_POLICY=reject

Usage:
    from src.service.approval.settings import approval_settings

    # Use default settings (loaded from env)
    upper = approval_settings.max_amount

    # Or create custom settings for testing
    strict = ApprovalSettings(range_policy=RangePolicy.REJECT)
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RangePolicy(str, Enum):
    """How out-of-range request values are handled."""
    CLAMP = "clamp"    # Saturate to the nearest bound and keep going
    REJECT = "reject"  # Deny the request straight away


class ApprovalSettings(BaseSettings):
    """
    Bounds and normalization policy for purchase offers.

    Amounts are in currency units, periods in months.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPROVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Amount Bounds ===
    min_amount: float = Field(
        default=200.0,
        gt=0.0,
        description="Smallest amount that can be offered",
    )
    max_amount: float = Field(
        default=5000.0,
        gt=0.0,
        description="Largest amount that can be offered",
    )

    # === Period Bounds ===
    min_period: int = Field(
        default=6,
        ge=1,
        description="Shortest payment period in months",
    )
    max_period: int = Field(
        default=24,
        ge=1,
        description="Longest payment period in months",
    )

    # === Normalization ===
    range_policy: RangePolicy = Field(
        default=RangePolicy.CLAMP,
        description="Clamp out-of-range requests into bounds, or reject them",
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "ApprovalSettings":
        """Ensure each lower bound does not exceed its upper bound."""
        if self.min_amount > self.max_amount:
            raise ValueError(
                f"min_amount ({self.min_amount}) > max_amount ({self.max_amount})"
            )
        if self.min_period > self.max_period:
            raise ValueError(
                f"min_period ({self.min_period}) > max_period ({self.max_period})"
            )
        return self


@lru_cache
def get_approval_settings() -> ApprovalSettings:
    """Get cached approval settings instance."""
    return ApprovalSettings()


approval_settings = get_approval_settings()
