"""
SQLAlchemy models for Notaire persistence.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class WalletModel(Base):
    """Wallet database model - one row per signing identity."""

    __tablename__ = "wallets"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    address: Mapped[str] = mapped_column(
        String(42), unique=True, index=True, nullable=False
    )
    private_key: Mapped[str] = mapped_column(String(64), nullable=False)
    admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    operator: Mapped[bool] = mapped_column(
        Boolean, default=False, index=True, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now
    )
