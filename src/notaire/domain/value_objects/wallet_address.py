"""
WalletAddress value object - Immutable 20-byte account address.
"""

import string
from dataclasses import dataclass

from eth_utils import remove_0x_prefix, to_checksum_address

ADDRESS_LENGTH = 20


@dataclass(frozen=True)
class WalletAddress:
    """
    Value object representing a 20-byte account address.

    Business rules:
    - Exactly 20 bytes
    - Displayed in EIP-55 checksummed form
    - Immutable once created
    """

    value: bytes

    def __post_init__(self):
        """Validate address bytes on creation."""
        if not isinstance(self.value, (bytes, bytearray)):
            raise ValueError("Wallet address must be bytes")

        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError(f"Invalid wallet address length: {len(self.value)}")

        object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def from_hex(cls, address: str) -> "WalletAddress":
        """
        Parse a hex address leniently.

        No checksum validation. Longer input keeps the trailing 20 bytes,
        shorter input is left-padded, odd length gets a leading zero.

        Args:
            address: Hex string, with or without 0x prefix

        Returns:
            WalletAddress

        Raises:
            ValueError: If the string contains non-hex characters
        """
        if not isinstance(address, str):
            raise ValueError("Wallet address must be a hex string")

        raw = remove_0x_prefix(address.strip())
        if not all(c in string.hexdigits for c in raw):
            raise ValueError("Wallet address contains invalid characters")

        if len(raw) % 2:
            raw = "0" + raw

        data = bytes.fromhex(raw)[-ADDRESS_LENGTH:]
        return cls(value=data.rjust(ADDRESS_LENGTH, b"\x00"))

    @property
    def checksum(self) -> str:
        """EIP-55 checksummed hex form with 0x prefix."""
        return to_checksum_address(self.value)

    def truncated(self) -> str:
        """Return truncated address for display (e.g., '0xAbC1...9fE2')."""
        checksum = self.checksum
        return f"{checksum[:6]}...{checksum[-4:]}"

    def __str__(self) -> str:
        """String representation returns checksummed address."""
        return self.checksum

    def __bytes__(self) -> bytes:
        return self.value
