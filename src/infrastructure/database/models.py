"""SQLAlchemy ORM models for customer profiles."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.service.approval.models import CustomerProfile


class Base(DeclarativeBase):
    pass


class CustomerProfileModel(Base):
    """Persisted customer risk profile."""

    __tablename__ = "customer_profiles"

    customer_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    flagged: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    financial_factor: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_entity(self) -> CustomerProfile:
        """Convert to the engine's profile value."""
        return CustomerProfile(
            flagged=self.flagged,
            financial_factor=self.financial_factor,
        )
