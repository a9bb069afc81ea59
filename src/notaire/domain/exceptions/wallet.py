"""
Wallet-related exceptions.

Defines exceptions for key lifecycle, signing and record decoding.
"""

from notaire.domain.exceptions.base import NotaireException


class WalletError(NotaireException):
    """Base exception for wallet operations."""


class KeyGenerationFailed(WalletError):
    """Raised when the random source cannot produce a private key."""

    def __init__(self, reason: str):
        """
        Initialize key generation error.

        Args:
            reason: Why the random source failed
        """
        super().__init__(
            f"Private key generation failed: {reason}",
            code="KEY_GENERATION_FAILED",
        )


class InvalidKeyFormat(WalletError):
    """Raised when a hex private key is malformed or out of range."""

    def __init__(self, reason: str):
        """
        Initialize invalid key error.

        Args:
            reason: What is wrong with the key (never the key itself)
        """
        super().__init__(
            f"Invalid private key: {reason}",
            code="INVALID_KEY_FORMAT",
        )


class SigningFailed(WalletError):
    """Raised when the ECDSA primitive rejects the key/digest pair."""

    def __init__(self, reason: str):
        super().__init__(f"Signing failed: {reason}", code="SIGNING_FAILED")


class RecordDecodeFailed(WalletError):
    """Raised when a stored wallet record is structurally invalid."""

    def __init__(self, reason: str):
        super().__init__(
            f"Wallet record decode failed: {reason}",
            code="RECORD_DECODE_FAILED",
        )
