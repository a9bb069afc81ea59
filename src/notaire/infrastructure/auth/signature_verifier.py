"""
Signature verification using only public data.

Recovers the signer of a personal-message signature and compares it with
the claimed wallet address.
"""

from notaire.domain.value_objects.signature import Signature
from notaire.domain.value_objects.wallet_address import WalletAddress
from notaire.infrastructure.crypto import secp256k1


class SignatureVerifier:
    """
    Verifies wallet signatures over 32-byte artifact hashes.

    Mirrors the wallet signing protocol: the recovered key is checked
    against keccak256(preamble || digest), not the raw digest.
    """

    def recover_address(self, digest: bytes, signature: Signature) -> str:
        """
        Recover the checksummed address that produced a signature.

        Args:
            digest: 32-byte artifact hash that was signed
            signature: Signature with V offset

        Returns:
            Checksummed hex address

        Raises:
            ValueError: If digest or signature are malformed
        """
        message = secp256k1.personal_message_hash(digest)
        address = secp256k1.recover_address(message, signature.to_raw_bytes())
        return WalletAddress(value=address).checksum

    def verify(self, wallet_address: str, digest: bytes, signature: Signature) -> bool:
        """
        Verify a signature against a claimed address.

        Args:
            wallet_address: Address claiming authorship (any case)
            digest: 32-byte artifact hash
            signature: Signature to check

        Returns:
            True if signature is valid, False otherwise
        """
        try:
            expected = WalletAddress.from_hex(wallet_address)
            recovered = self.recover_address(digest, signature)
        except ValueError:
            return False

        return recovered == expected.checksum
