"""
Opcode Tests
============

Tests for the opcode classifier.
"""

import pytest

from wsframe_inspector.models.opcode import Opcode


class TestOpcodeFromBits:
    """Tests for Opcode.from_bits."""

    @pytest.mark.parametrize(
        "bits, expected",
        [
            (0x0, Opcode.CONTINUATION),
            (0x1, Opcode.TEXT),
            (0x2, Opcode.BINARY),
            (0x8, Opcode.CLOSE_CONNECTION),
            (0x9, Opcode.PING),
            (0xA, Opcode.PONG),
        ],
    )
    def test_known_opcodes(self, bits, expected):
        assert Opcode.from_bits(bits) is expected

    @pytest.mark.parametrize("bits", [3, 4, 5, 6, 7, 11, 12, 13, 14, 15])
    def test_reserved_opcodes(self, bits):
        assert Opcode.from_bits(bits) is Opcode.RESERVED_FUTURE

    @pytest.mark.parametrize("bits", [16, 0b01000000, 255, -1])
    def test_out_of_range_is_unrecognized(self, bits):
        """Values wider than 4 bits never raise."""
        assert Opcode.from_bits(bits) is Opcode.UNRECOGNIZED

    def test_values_are_category_names(self):
        assert Opcode.CLOSE_CONNECTION.value == "CloseConnection"
        assert Opcode.RESERVED_FUTURE.value == "ReservedFuture"


class TestOpcodeIsControl:
    """Tests for Opcode.is_control."""

    def test_control_opcodes(self):
        assert Opcode.PING.is_control
        assert Opcode.PONG.is_control
        assert Opcode.CLOSE_CONNECTION.is_control

    def test_data_opcodes(self):
        assert not Opcode.TEXT.is_control
        assert not Opcode.BINARY.is_control
        assert not Opcode.CONTINUATION.is_control
