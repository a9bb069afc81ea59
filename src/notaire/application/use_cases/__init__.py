"""Use cases."""

from notaire.application.use_cases.load_platform_wallet import LoadPlatformWallet

__all__ = ["LoadPlatformWallet"]
