"""Persistence layer: storage records, SQLAlchemy models, repositories."""

from notaire.infrastructure.persistence.models import Base, WalletModel
from notaire.infrastructure.persistence.records import (
    WalletRecord,
    from_record,
    to_record,
)

__all__ = [
    "Base",
    "WalletModel",
    "WalletRecord",
    "from_record",
    "to_record",
]
