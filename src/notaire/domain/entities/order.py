"""
Order entity - Domain model for exchange orders.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from notaire.domain.entities.signable import Signable, encode_word
from notaire.domain.value_objects.signature import Signature
from notaire.domain.value_objects.wallet_address import WalletAddress
from notaire.infrastructure.crypto import keccak256


class OrderSide(str, Enum):
    """Order sides."""

    BUY = "BUY"
    SELL = "SELL"

    def encoded(self) -> int:
        """Integer encoding used in the order hash."""
        return 0 if self is OrderSide.BUY else 1


@dataclass
class Order(Signable):
    """
    Order entity signed by the maker wallet.

    Business rules:
    - Amount and price point must be positive
    - Fees and nonce must be non-negative
    - Hash covers every economic field; hash and signature are set
      together by the signing wallet
    """

    exchange_address: WalletAddress
    user_address: WalletAddress
    base_token: WalletAddress
    quote_token: WalletAddress
    amount: int
    price_point: int
    side: OrderSide = field(default=OrderSide.BUY)
    nonce: int = field(default=0)
    make_fee: int = field(default=0)
    take_fee: int = field(default=0)
    hash: Optional[bytes] = field(default=None, compare=False)
    signature: Optional[Signature] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate order data after initialization."""
        if self.amount <= 0:
            raise ValueError("Order amount must be positive")

        if self.price_point <= 0:
            raise ValueError("Order price point must be positive")

        if self.nonce < 0 or self.make_fee < 0 or self.take_fee < 0:
            raise ValueError("Order nonce and fees must be non-negative")

    def compute_hash(self) -> bytes:
        """Hash the order content (addresses, then 32-byte words)."""
        return keccak256(
            bytes(self.exchange_address),
            bytes(self.user_address),
            bytes(self.base_token),
            bytes(self.quote_token),
            encode_word(self.amount),
            encode_word(self.price_point),
            encode_word(self.side.encoded()),
            encode_word(self.nonce),
            encode_word(self.make_fee),
            encode_word(self.take_fee),
        )

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "exchange_address": str(self.exchange_address),
            "user_address": str(self.user_address),
            "base_token": str(self.base_token),
            "quote_token": str(self.quote_token),
            "amount": str(self.amount),
            "price_point": str(self.price_point),
            "side": self.side.value,
            "nonce": str(self.nonce),
            "make_fee": str(self.make_fee),
            "take_fee": str(self.take_fee),
            "hash": "0x" + self.hash.hex() if self.hash else None,
            "signature": self.signature.to_dict() if self.signature else None,
        }
