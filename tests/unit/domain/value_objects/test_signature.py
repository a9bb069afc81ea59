"""
Unit tests for Signature value object.

Usage:
    pytest tests/unit/domain/value_objects/test_signature.py
"""

import pytest

from notaire.domain.value_objects.signature import Signature
from tests.base import NotaireTest


class TestSignature(NotaireTest):
    """Unit tests for Signature value object."""

    component_name = "notaire"
    test_category = "unit"

    # ================================================================
    # Creation & Validation tests
    # ================================================================

    def test_from_bytes_applies_v_offset(self):
        """Test raw recovery id 0/1 becomes V 27/28."""
        self.reporter.info("Testing V offset", context="Test")

        raw = b"\x01" * 32 + b"\x02" * 32 + b"\x01"
        signature = Signature.from_bytes(raw)

        assert signature.r == b"\x01" * 32
        assert signature.s == b"\x02" * 32
        assert signature.v == 28
        assert signature.recovery_id == 1
        assert signature.to_raw_bytes() == raw
        assert signature.to_bytes() == raw[:64] + b"\x1c"
        self.reporter.info("V offset applied", context="Test")

    def test_reject_bad_components(self):
        """Test component length and V range validation."""
        self.reporter.info("Testing signature validation", context="Test")

        with pytest.raises(ValueError, match="Invalid R length"):
            Signature(r=b"\x01" * 31, s=b"\x02" * 32, v=27)

        with pytest.raises(ValueError, match="Invalid S length"):
            Signature(r=b"\x01" * 32, s=b"\x02" * 33, v=27)

        with pytest.raises(ValueError, match="Invalid V value"):
            Signature(r=b"\x01" * 32, s=b"\x02" * 32, v=1)

        with pytest.raises(ValueError, match="Invalid signature length"):
            Signature.from_bytes(b"\x00" * 64)

        self.reporter.info("Bad signatures rejected", context="Test")

    def test_immutable(self):
        """Test signature fields cannot be reassigned."""
        signature = Signature(r=b"\x01" * 32, s=b"\x02" * 32, v=27)

        with pytest.raises(AttributeError):
            signature.v = 28

    # ================================================================
    # Wire format tests
    # ================================================================

    def test_to_dict_and_back(self):
        """Test R/S/V wire format."""
        self.reporter.info("Testing wire format", context="Test")

        signature = Signature(r=b"\x0a" * 32, s=b"\x0b" * 32, v=27)
        data = signature.to_dict()

        assert data == {"R": "0x" + "0a" * 32, "S": "0x" + "0b" * 32, "V": 27}
        assert Signature.from_dict(data) == signature
        assert signature.to_hex() == "0x" + "0a" * 32 + "0b" * 32 + "1b"
        self.reporter.info("Wire format correct", context="Test")
