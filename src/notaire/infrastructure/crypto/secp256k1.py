"""
secp256k1 primitives for wallet identities.

Thin layer over eth-keys / eth-utils providing key generation, hex
parsing, address derivation, keccak hashing, signing and recovery.
Every failure is raised as a domain exception; nothing is logged here.
"""

import secrets
import string
from typing import Callable, Optional

from eth_keys import keys
from eth_keys.constants import SECPK1_N
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as EthKeysValidationError
from eth_utils import keccak, remove_0x_prefix

from notaire.domain.exceptions import (
    InvalidKeyFormat,
    KeyGenerationFailed,
    SigningFailed,
)

PRIVATE_KEY_LENGTH = 32
DIGEST_LENGTH = 32
SIGNATURE_LENGTH = 65

# Personal message preamble; the trailing "32" is the digest length.
PERSONAL_MESSAGE_PREAMBLE = b"\x19Ethereum Signed Message:\n32"

MAX_KEYGEN_ATTEMPTS = 16

EntropySource = Callable[[int], bytes]


def generate_private_key(
    entropy: Optional[EntropySource] = None,
    max_attempts: int = MAX_KEYGEN_ATTEMPTS,
) -> keys.PrivateKey:
    """
    Generate a random private key.

    Candidates outside [1, n) are discarded and drawn again.

    Args:
        entropy: Callable returning N random bytes (defaults to secrets)
        max_attempts: Candidates to draw before giving up

    Returns:
        eth-keys PrivateKey

    Raises:
        KeyGenerationFailed: If the random source fails or keeps
            producing unusable candidates
    """
    source = entropy or secrets.token_bytes

    for _ in range(max_attempts):
        try:
            candidate = source(PRIVATE_KEY_LENGTH)
        except (OSError, NotImplementedError) as e:
            raise KeyGenerationFailed(f"random source unavailable ({e})") from e

        if not isinstance(candidate, (bytes, bytearray)):
            raise KeyGenerationFailed("random source returned non-bytes")
        if len(candidate) != PRIVATE_KEY_LENGTH:
            raise KeyGenerationFailed(
                f"random source returned {len(candidate)} bytes, "
                f"expected {PRIVATE_KEY_LENGTH}"
            )

        if _in_curve_range(int.from_bytes(candidate, "big")):
            return keys.PrivateKey(bytes(candidate))

    raise KeyGenerationFailed(
        f"no valid scalar after {max_attempts} attempts"
    )


def private_key_from_hex(value: str) -> keys.PrivateKey:
    """
    Parse a hex-encoded private scalar.

    Accepts an optional 0x prefix and minimal encodings shorter than
    32 bytes (left-padded with zeros).

    Args:
        value: Hex string

    Returns:
        eth-keys PrivateKey

    Raises:
        InvalidKeyFormat: If the string is not even-length hex of at most
            32 bytes, or the scalar is outside [1, n)
    """
    if not isinstance(value, str):
        raise InvalidKeyFormat("expected a hex string")

    raw = remove_0x_prefix(value.strip())
    if not raw:
        raise InvalidKeyFormat("empty value")
    if not is_strict_hex(raw):
        raise InvalidKeyFormat("not a hex string")
    if len(raw) % 2:
        raise InvalidKeyFormat("odd-length hex string")
    if len(raw) > PRIVATE_KEY_LENGTH * 2:
        raise InvalidKeyFormat(f"longer than {PRIVATE_KEY_LENGTH} bytes")

    scalar = int(raw, 16)
    if not _in_curve_range(scalar):
        raise InvalidKeyFormat("scalar outside the secp256k1 curve order")

    return keys.PrivateKey(scalar.to_bytes(PRIVATE_KEY_LENGTH, "big"))


def private_key_to_hex(private_key: keys.PrivateKey) -> str:
    """Big-endian minimal hex encoding, no 0x prefix."""
    scalar = int.from_bytes(private_key.to_bytes(), "big")
    length = (scalar.bit_length() + 7) // 8
    return scalar.to_bytes(length, "big").hex()


def pubkey_to_address(public_key: keys.PublicKey) -> bytes:
    """Derive the 20-byte account address of a public key."""
    return public_key.to_canonical_address()


def keccak256(*parts: bytes) -> bytes:
    """keccak-256 over the concatenation of parts."""
    return keccak(b"".join(parts))


def personal_message_hash(digest: bytes) -> bytes:
    """Hash a 32-byte digest under the personal message convention."""
    _require_digest(digest)
    return keccak256(PERSONAL_MESSAGE_PREAMBLE, bytes(digest))


def sign(message_hash: bytes, private_key: keys.PrivateKey) -> bytes:
    """
    Sign a 32-byte message hash.

    Args:
        message_hash: Hash to sign (already prefixed if required)
        private_key: Signing key

    Returns:
        65 bytes: r (32) || s (32) || recovery id (1, 0 or 1)

    Raises:
        SigningFailed: If the primitive rejects the key or hash
    """
    try:
        _require_digest(message_hash)
        signature = private_key.sign_msg_hash(bytes(message_hash))
    except (EthKeysValidationError, ValueError, TypeError) as e:
        raise SigningFailed(str(e)) from e

    return signature.to_bytes()


def recover_address(message_hash: bytes, signature: bytes) -> bytes:
    """
    Recover the signer address from a raw 65-byte signature.

    Args:
        message_hash: Hash that was signed
        signature: r || s || recovery id (0 or 1)

    Returns:
        20-byte address

    Raises:
        ValueError: If the signature cannot be recovered
    """
    if len(signature) != SIGNATURE_LENGTH:
        raise ValueError(f"signature must be {SIGNATURE_LENGTH} bytes")

    try:
        public_key = keys.Signature(bytes(signature)).recover_public_key_from_msg_hash(
            bytes(message_hash)
        )
    except (BadSignature, EthKeysValidationError) as e:
        raise ValueError(f"unrecoverable signature: {e}") from e

    return pubkey_to_address(public_key)


def is_strict_hex(value: str) -> bool:
    """True if every character is a hex digit."""
    return all(c in string.hexdigits for c in value)


def _require_digest(digest: bytes) -> None:
    if not isinstance(digest, (bytes, bytearray)) or len(digest) != DIGEST_LENGTH:
        raise ValueError(f"digest must be {DIGEST_LENGTH} bytes")


def _in_curve_range(scalar: int) -> bool:
    return 0 < scalar < SECPK1_N
