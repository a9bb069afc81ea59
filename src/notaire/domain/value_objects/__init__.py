"""Domain value objects."""

from notaire.domain.value_objects.signature import Signature
from notaire.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "Signature",
    "WalletAddress",
]
