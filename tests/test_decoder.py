"""
Frame Decoder Tests
===================

Tests for decode_frame across the three length encodings and its failures.
"""

import pytest

from wsframe_inspector.decoding import (
    FrameDecodeError,
    MalformedFrameError,
    UnsupportedFrameError,
    decode_frame,
    get_bit,
)
from wsframe_inspector.models import LongLength, MediumLength, Opcode, ShortLength


class TestGetBit:
    """Tests for MSB-first bit access."""

    def test_msb_is_position_zero(self):
        assert get_bit(0b10000000, 0)
        assert not get_bit(0b10000000, 1)

    def test_lsb_is_position_seven(self):
        assert get_bit(0b00000001, 7)
        assert not get_bit(0b00000001, 0)

    def test_out_of_range_position(self):
        assert not get_bit(0xFF, 8)


class TestDecodeShortFrame:
    """Tests for frames with a 7-bit payload length."""

    def test_abc_frame(self, abc_frame_bytes):
        frame = decode_frame(abc_frame_bytes)

        assert frame.fin is True
        assert (frame.rsv1, frame.rsv2, frame.rsv3) == (False, False, False)
        assert frame.opcode_bits == 1
        assert frame.opcode is Opcode.TEXT
        assert frame.mask_bit is True
        assert frame.length_code == 3
        assert frame.payload_length == ShortLength(3)
        assert frame.masking_key == bytes([0x5A, 0x0E, 0x91, 0x36])
        assert bytes(frame.masked_payload) == bytes([0x3B, 0x6C, 0xF2])
        assert frame.unmasked_payload == bytes([0x61, 0x62, 0x63])
        assert frame.payload_chars == ("a", "b", "c")

    def test_offsets(self, abc_frame_bytes):
        frame = decode_frame(abc_frame_bytes)
        assert frame.masking_key_offset == 2
        assert frame.payload_offset == 6
        assert frame.frame_size == 9

    def test_header_flags(self, build_frame_bytes):
        data = bytearray(build_frame_bytes(b"x", opcode=0x9, fin=False))
        data[0] |= 0b01010000  # RSV1 and RSV3
        frame = decode_frame(bytes(data))

        assert frame.fin is False
        assert frame.rsv1 is True
        assert frame.rsv2 is False
        assert frame.rsv3 is True
        assert frame.opcode is Opcode.PING

    def test_empty_payload(self, build_frame_bytes):
        frame = decode_frame(build_frame_bytes(b""))
        assert frame.payload_length == ShortLength(0)
        assert frame.unmasked_payload == b""
        assert frame.payload_chars == ()

    def test_masked_payload_is_a_view(self, abc_frame_bytes):
        frame = decode_frame(abc_frame_bytes)
        assert isinstance(frame.masked_payload, memoryview)
        assert frame.masked_payload.readonly
        assert frame.masked_payload.obj is abc_frame_bytes

    def test_accepts_bytearray_and_memoryview(self, abc_frame_bytes):
        assert decode_frame(bytearray(abc_frame_bytes)).unmasked_payload == b"abc"
        assert decode_frame(memoryview(abc_frame_bytes)).unmasked_payload == b"abc"

    def test_trailing_bytes_are_ignored(self, abc_frame_bytes):
        frame = decode_frame(abc_frame_bytes + b"\x81\x80")
        assert frame.unmasked_payload == b"abc"
        assert len(frame.masked_payload) == 3

    def test_frame_is_immutable(self, abc_frame_bytes):
        frame = decode_frame(abc_frame_bytes)
        with pytest.raises(AttributeError):
            frame.fin = False


class TestDecodeExtendedFrames:
    """Tests for 16-bit and 64-bit payload lengths."""

    def test_medium_frame(self, build_frame_bytes):
        payload = bytes(range(200))
        frame = decode_frame(build_frame_bytes(payload, opcode=0x2))

        assert frame.length_code == 126
        assert frame.payload_length == MediumLength(200)
        assert frame.masking_key_offset == 4
        assert frame.payload_offset == 8
        assert frame.unmasked_payload == payload
        assert frame.opcode is Opcode.BINARY

    def test_medium_code_for_small_payload(self, build_frame_bytes):
        frame = decode_frame(build_frame_bytes(b"hello", length_code=126))
        assert frame.payload_length == MediumLength(5)
        assert frame.unmasked_payload == b"hello"

    def test_long_frame(self, build_frame_bytes):
        payload = b"0123456789"
        frame = decode_frame(build_frame_bytes(payload, length_code=127))

        assert frame.payload_length == LongLength(10)
        assert frame.masking_key_offset == 10
        assert frame.payload_offset == 14
        assert frame.unmasked_payload == payload

    def test_large_payload_uses_long_length(self, build_frame_bytes):
        payload = b"z" * 70000
        frame = decode_frame(build_frame_bytes(payload))
        assert frame.payload_length == LongLength(70000)
        assert frame.unmasked_payload == payload


class TestDecodeFailures:
    """Tests for all-or-nothing decode failures."""

    @pytest.mark.parametrize("data", [b"", b"\x81"])
    def test_missing_header(self, data):
        with pytest.raises(MalformedFrameError) as exc_info:
            decode_frame(data)
        assert exc_info.value.field == "frame header"
        assert exc_info.value.actual == len(data)

    def test_unmasked_frame(self):
        with pytest.raises(UnsupportedFrameError):
            decode_frame(bytes([0x81, 0x03]) + b"abc")

    def test_truncated_extended_length(self):
        with pytest.raises(MalformedFrameError) as exc_info:
            decode_frame(bytes([0x81, 0xFE, 0x00]))
        assert exc_info.value.field == "extended payload length"

    def test_truncated_masking_key(self):
        with pytest.raises(MalformedFrameError) as exc_info:
            decode_frame(bytes([0x81, 0xFE, 0x00, 0x05, 0x01, 0x02]))
        error = exc_info.value
        assert error.field == "masking key"
        assert error.offset == 4
        assert error.expected == 4
        assert error.actual == 2

    def test_truncated_payload(self, abc_frame_bytes):
        with pytest.raises(MalformedFrameError) as exc_info:
            decode_frame(abc_frame_bytes[:-1])
        error = exc_info.value
        assert error.field == "payload"
        assert error.offset == 6
        assert error.expected == 3
        assert error.actual == 2
        assert "offset 6" in str(error)

    def test_errors_share_a_base_class(self):
        assert issubclass(MalformedFrameError, FrameDecodeError)
        assert issubclass(UnsupportedFrameError, FrameDecodeError)
