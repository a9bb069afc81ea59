"""
Wallet entity - signing identity for orders and trades.

A wallet owns one secp256k1 private key and the address derived from it.
Signatures follow the personal message convention so any third party can
recover the signer address from (hash, signature) alone.
"""

import json
from dataclasses import FrozenInstanceError, dataclass, field
from typing import Optional
from uuid import UUID

from eth_keys import keys

from notaire.domain.entities.order import Order
from notaire.domain.entities.signable import Signable
from notaire.domain.entities.trade import Trade
from notaire.domain.exceptions import SigningFailed, ValidationError
from notaire.domain.value_objects.signature import Signature
from notaire.domain.value_objects.wallet_address import WalletAddress
from notaire.infrastructure.crypto import secp256k1
from notaire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

# Key material and the address derived from it are fixed at construction.
_READ_ONLY_FIELDS = frozenset({"private_key", "address"})


@dataclass
class Wallet:
    """
    Wallet entity holding an address and its private key.

    Business rules:
    - Address is always derived from the private key, never set directly
    - Private key and address cannot be reassigned after construction
    - Private key never appears in repr, logs or the display projection
    - Admin/operator flags are independent of key material
    - Signing a Signable sets hash and signature together or not at all
    """

    private_key: keys.PrivateKey = field(repr=False)
    id: Optional[UUID] = field(default=None)
    admin: bool = field(default=False)
    operator: bool = field(default=False)
    address: WalletAddress = field(init=False)

    def __post_init__(self):
        """Derive address from the private key."""
        if not isinstance(self.private_key, keys.PrivateKey):
            raise ValidationError("private_key", "expected a secp256k1 private key")

        self.address = self._derive_address()

    def __setattr__(self, name, value):
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in _READ_ONLY_FIELDS:
            raise FrozenInstanceError(f"cannot delete field '{name}'")
        super().__delattr__(name)

    # ================================================================
    # Key lifecycle
    # ================================================================

    @classmethod
    def new(
        cls,
        entropy: Optional[secp256k1.EntropySource] = None,
        **flags,
    ) -> "Wallet":
        """
        Create a wallet from a fresh random private key.

        Args:
            entropy: Optional random source (defaults to secrets)
            **flags: id / admin / operator

        Returns:
            New Wallet

        Raises:
            KeyGenerationFailed: If the random source is unavailable
        """
        wallet = cls(private_key=secp256k1.generate_private_key(entropy), **flags)
        logger.debug(
            "Generated new wallet",
            extra={"wallet_address": wallet.get_address()},
        )
        return wallet

    @classmethod
    def from_private_key(cls, key: str, **flags) -> "Wallet":
        """
        Create a wallet from a hex-encoded private key.

        Args:
            key: Hex private key (optional 0x prefix)
            **flags: id / admin / operator

        Returns:
            Wallet for the given key

        Raises:
            InvalidKeyFormat: If the key is malformed or out of range
        """
        return cls(private_key=secp256k1.private_key_from_hex(key), **flags)

    def get_address(self) -> str:
        """Return checksummed hex address."""
        return self.address.checksum

    def get_private_key(self) -> str:
        """Return minimal big-endian hex private key (no 0x prefix)."""
        return secp256k1.private_key_to_hex(self.private_key)

    def validate(self) -> None:
        """
        Validate wallet invariants.

        Raises:
            ValidationError: If the address no longer matches the key
        """
        if self.address != self._derive_address():
            raise ValidationError("address", "does not match private key")

    def _derive_address(self) -> WalletAddress:
        return WalletAddress(
            value=secp256k1.pubkey_to_address(self.private_key.public_key)
        )

    # ================================================================
    # Signing
    # ================================================================

    def sign_hash(self, digest: bytes) -> Signature:
        """
        Sign a 32-byte hash under the personal message convention.

        The signed message is keccak256("\\x19Ethereum Signed Message:\\n32"
        || digest).

        Args:
            digest: 32-byte hash of the artifact

        Returns:
            Signature with V = recovery id + 27

        Raises:
            SigningFailed: If the digest is malformed or signing fails
        """
        try:
            message = secp256k1.personal_message_hash(digest)
        except ValueError as e:
            raise SigningFailed(str(e)) from e

        signature = Signature.from_bytes(secp256k1.sign(message, self.private_key))

        logger.debug(
            "Signed hash",
            extra={
                "wallet_address": self.get_address(),
                "digest": "0x" + bytes(digest).hex(),
            },
        )
        return signature

    def sign(self, signable: Signable) -> None:
        """
        Compute the hash of a signable, sign it and attach both.

        Args:
            signable: Order, Trade or any Signable

        Raises:
            SigningFailed: If signing fails (signable left unmodified)
        """
        digest = signable.compute_hash()
        signature = self.sign_hash(digest)

        signable.hash = digest
        signable.signature = signature

    def sign_order(self, order: Order) -> None:
        """Sign an order and set its hash and signature."""
        self.sign(order)

    def sign_trade(self, trade: Trade) -> None:
        """Sign a trade and set its hash and signature."""
        self.sign(trade)

    # ================================================================
    # Display
    # ================================================================

    def to_dict(self) -> dict:
        """Convert public fields to dictionary representation."""
        return {
            "id": str(self.id) if self.id else None,
            "address": self.get_address(),
            "admin": self.admin,
            "operator": self.operator,
        }

    def to_json(self) -> str:
        """Pretty-printed JSON of the public fields."""
        return json.dumps(self.to_dict(), indent=2)

    def print(self) -> None:
        """Print the public fields for diagnostics."""
        print(self.to_json())
