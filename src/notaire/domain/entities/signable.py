"""
Signable capability - domain objects a wallet can sign.
"""

from abc import ABC, abstractmethod
from typing import Optional

from notaire.domain.value_objects.signature import Signature

WORD_LENGTH = 32


def encode_word(value: int) -> bytes:
    """Encode a non-negative integer as a 32-byte big-endian word."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    return value.to_bytes(WORD_LENGTH, "big")


class Signable(ABC):
    """
    Abstract capability for objects signed by a wallet.

    Implementations compute a canonical 32-byte hash of their content and
    carry mutable `hash` and `signature` attributes that the wallet sets
    together after a successful signing.
    """

    hash: Optional[bytes]
    signature: Optional[Signature]

    @abstractmethod
    def compute_hash(self) -> bytes:
        """
        Compute canonical hash of the object content.

        Returns:
            32-byte keccak-256 digest
        """

    def is_signed(self) -> bool:
        """True when both hash and signature are attached."""
        return self.hash is not None and self.signature is not None
