"""secp256k1 crypto primitives."""

from notaire.infrastructure.crypto.secp256k1 import (
    PERSONAL_MESSAGE_PREAMBLE,
    generate_private_key,
    keccak256,
    personal_message_hash,
    private_key_from_hex,
    private_key_to_hex,
    pubkey_to_address,
    recover_address,
    sign,
)

__all__ = [
    "PERSONAL_MESSAGE_PREAMBLE",
    "generate_private_key",
    "private_key_from_hex",
    "private_key_to_hex",
    "pubkey_to_address",
    "keccak256",
    "personal_message_hash",
    "sign",
    "recover_address",
]
