"""Signature verification."""

from notaire.infrastructure.auth.signature_verifier import SignatureVerifier

__all__ = ["SignatureVerifier"]
