"""Repository implementations."""

from notaire.infrastructure.persistence.repositories.wallet_repository import (
    WalletRepository,
)

__all__ = ["WalletRepository"]
