"""
Unit tests for WalletAddress value object.

Tests address validation, lenient hex parsing and formatting.

Usage:
    pytest tests/unit/domain/value_objects/test_wallet_address.py
"""

import pytest

from notaire.domain.value_objects.wallet_address import WalletAddress
from tests.base import KNOWN_ADDRESS, NotaireTest


class TestWalletAddress(NotaireTest):
    """Unit tests for WalletAddress value object."""

    component_name = "notaire"
    test_category = "unit"

    # ================================================================
    # Creation & Validation tests
    # ================================================================

    def test_create_from_bytes(self):
        """Test creating WalletAddress from 20 bytes."""
        self.reporter.info("Testing byte construction", context="Test")

        address = WalletAddress(value=b"\x01" * 20)

        assert bytes(address) == b"\x01" * 20
        self.reporter.info("Address created", context="Test")

    def test_reject_wrong_length(self):
        """Test WalletAddress rejects non-20-byte values."""
        self.reporter.info("Testing length validation", context="Test")

        with pytest.raises(ValueError, match="Invalid wallet address length"):
            WalletAddress(value=b"\x01" * 19)

        with pytest.raises(ValueError, match="must be bytes"):
            WalletAddress(value="0x" + "01" * 20)

        self.reporter.info("Wrong lengths rejected", context="Test")

    # ================================================================
    # Hex parsing tests
    # ================================================================

    def test_from_hex_ignores_case_and_checksum(self):
        """Test any case parses without checksum validation."""
        self.reporter.info("Testing lenient parsing", context="Test")

        lower = WalletAddress.from_hex(KNOWN_ADDRESS.lower())
        upper = WalletAddress.from_hex("0x" + KNOWN_ADDRESS[2:].upper())
        bare = WalletAddress.from_hex(KNOWN_ADDRESS[2:])

        assert lower == upper == bare
        assert lower.checksum == KNOWN_ADDRESS
        assert str(lower) == KNOWN_ADDRESS
        self.reporter.info("Lenient parsing works", context="Test")

    def test_from_hex_pads_and_truncates(self):
        """Test short input is left-padded and long input keeps tail."""
        self.reporter.info("Testing pad/truncate", context="Test")

        short = WalletAddress.from_hex("0x1")
        long = WalletAddress.from_hex("0x" + "ff" * 4 + "01" * 20)

        assert bytes(short) == b"\x00" * 19 + b"\x01"
        assert bytes(long) == b"\x01" * 20
        self.reporter.info("Pad/truncate correct", context="Test")

    def test_from_hex_rejects_non_hex(self):
        """Test non-hex characters are rejected."""
        with pytest.raises(ValueError, match="invalid characters"):
            WalletAddress.from_hex("0xZZ")

    def test_from_hex_rejects_doubled_prefix(self):
        """Test a second 0x after the prefix is not treated as hex."""
        with pytest.raises(ValueError, match="invalid characters"):
            WalletAddress.from_hex("0x0xab")
        with pytest.raises(ValueError, match="invalid characters"):
            WalletAddress.from_hex("0x" + "ab" * 19 + " a")

    # ================================================================
    # Formatting tests
    # ================================================================

    def test_truncated_format(self):
        """Test truncated display format."""
        address = WalletAddress.from_hex(KNOWN_ADDRESS)

        assert address.truncated() == "0x2c75...5c23"

    def test_hashable(self):
        """Test addresses work as set members."""
        first = WalletAddress(value=b"\x01" * 20)
        second = WalletAddress(value=b"\x01" * 20)

        assert len({first, second}) == 1
