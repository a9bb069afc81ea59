"""
Trade entity - Domain model for a fill against a signed order.
"""

from dataclasses import dataclass, field
from typing import Optional

from notaire.domain.entities.signable import Signable, encode_word
from notaire.domain.value_objects.signature import Signature
from notaire.domain.value_objects.wallet_address import WalletAddress
from notaire.infrastructure.crypto import keccak256


@dataclass
class Trade(Signable):
    """
    Trade entity signed by the taker wallet.

    Business rules:
    - References the 32-byte hash of the matched order
    - Amount must be positive, trade nonce non-negative
    """

    order_hash: bytes
    maker: WalletAddress
    taker: WalletAddress
    amount: int
    trade_nonce: int = field(default=0)
    hash: Optional[bytes] = field(default=None, compare=False)
    signature: Optional[Signature] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate trade data after initialization."""
        if len(self.order_hash) != 32:
            raise ValueError("Order hash must be 32 bytes")

        if self.amount <= 0:
            raise ValueError("Trade amount must be positive")

        if self.trade_nonce < 0:
            raise ValueError("Trade nonce must be non-negative")

    def compute_hash(self) -> bytes:
        """Hash the trade content (order hash, parties, then 32-byte words)."""
        return keccak256(
            bytes(self.order_hash),
            bytes(self.maker),
            bytes(self.taker),
            encode_word(self.amount),
            encode_word(self.trade_nonce),
        )

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "order_hash": "0x" + self.order_hash.hex(),
            "maker": str(self.maker),
            "taker": str(self.taker),
            "amount": str(self.amount),
            "trade_nonce": str(self.trade_nonce),
            "hash": "0x" + self.hash.hex() if self.hash else None,
            "signature": self.signature.to_dict() if self.signature else None,
        }
