"""Repository interfaces."""

from notaire.domain.repositories.i_wallet_repository import IWalletRepository

__all__ = ["IWalletRepository"]
