"""
Signature value object - recoverable secp256k1 signature.
"""

from dataclasses import dataclass

from eth_utils import decode_hex, encode_hex

# Ethereum-style offset added to the raw recovery id.
V_OFFSET = 27

COMPONENT_LENGTH = 32


@dataclass(frozen=True)
class Signature:
    """
    Value object for an (R, S, V) signature.

    Business rules:
    - R and S are 32 bytes each
    - V is the recovery id plus 27 (27 or 28)
    - Immutable once produced by a signing operation
    """

    r: bytes
    s: bytes
    v: int

    def __post_init__(self):
        """Validate signature components."""
        if len(self.r) != COMPONENT_LENGTH:
            raise ValueError(f"Invalid R length: {len(self.r)}")

        if len(self.s) != COMPONENT_LENGTH:
            raise ValueError(f"Invalid S length: {len(self.s)}")

        if self.v not in (V_OFFSET, V_OFFSET + 1):
            raise ValueError(f"Invalid V value: {self.v}")

        object.__setattr__(self, "r", bytes(self.r))
        object.__setattr__(self, "s", bytes(self.s))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Signature":
        """
        Split a raw 65-byte signature (recovery id 0 or 1 in last byte).

        Args:
            raw: r (32) || s (32) || recovery id (1)

        Returns:
            Signature with V offset applied
        """
        if len(raw) != 2 * COMPONENT_LENGTH + 1:
            raise ValueError(f"Invalid signature length: {len(raw)}")

        return cls(
            r=raw[0:32],
            s=raw[32:64],
            v=raw[64] + V_OFFSET,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Signature":
        """Build from the wire format produced by to_dict()."""
        return cls(
            r=decode_hex(data["R"]),
            s=decode_hex(data["S"]),
            v=int(data["V"]),
        )

    @property
    def recovery_id(self) -> int:
        """Raw recovery id (0 or 1)."""
        return self.v - V_OFFSET

    def to_bytes(self) -> bytes:
        """65-byte RSV encoding with the V offset kept."""
        return self.r + self.s + bytes([self.v])

    def to_raw_bytes(self) -> bytes:
        """65-byte encoding with the raw recovery id (0 or 1)."""
        return self.r + self.s + bytes([self.recovery_id])

    def to_hex(self) -> str:
        return encode_hex(self.to_bytes())

    def to_dict(self) -> dict:
        """Convert to wire format."""
        return {
            "R": encode_hex(self.r),
            "S": encode_hex(self.s),
            "V": self.v,
        }
