"""
Domain exceptions package.
"""

# Base exceptions
from notaire.domain.exceptions.base import (
    ConfigurationError,
    EntityNotFoundError,
    NotaireException,
    ValidationError,
)

# Wallet exceptions
from notaire.domain.exceptions.wallet import (
    InvalidKeyFormat,
    KeyGenerationFailed,
    RecordDecodeFailed,
    SigningFailed,
    WalletError,
)

__all__ = [
    # Base
    "NotaireException",
    "EntityNotFoundError",
    "ValidationError",
    "ConfigurationError",
    # Wallet
    "WalletError",
    "KeyGenerationFailed",
    "InvalidKeyFormat",
    "SigningFailed",
    "RecordDecodeFailed",
]
