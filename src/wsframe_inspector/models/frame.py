"""
Frame Data Model
=================

Decoded representation of a single masked WebSocket frame.

This module defines the WebSocketFrame value produced by the decoder and
consumed by the diagram renderer.

Design Rules:
    - Built once, atomically, by wsframe_inspector.decoding.decode_frame
    - Immutable (frozen) with no mutation methods
    - masked_payload is a read-only view into the caller's buffer (NOT a copy);
      the buffer must not be mutated while the frame is alive
    - unmasked_payload and payload_chars are owned and computed once, so
      repeated renders never redo the XOR pass
"""

from dataclasses import dataclass
from typing import Tuple

from wsframe_inspector.models.opcode import Opcode
from wsframe_inspector.models.payload_length import PayloadLength


# Fixed part of every frame header: two bytes of flags, opcode, mask and length code
BASE_HEADER_SIZE = 2
MASKING_KEY_SIZE = 4


@dataclass(frozen=True, slots=True)
class WebSocketFrame:
    """
    Decoded, masked WebSocket frame.

    Attributes:
        fin: FIN flag, set on the final fragment of a message
        rsv1: Reserved extension bit 1
        rsv2: Reserved extension bit 2
        rsv3: Reserved extension bit 3
        opcode_bits: Raw 4-bit opcode value
        opcode: Semantic opcode category
        mask_bit: MASK flag (always True for decodable frames)
        length_code: Raw 7-bit payload length code
        payload_length: Length variant selected by length_code
        masking_key: 4-byte XOR masking key
        masked_payload: Read-only view of the payload bytes in the input buffer
        unmasked_payload: Payload after XOR unmasking
        payload_chars: One display glyph per unmasked byte (lossy preview)
    """

    fin: bool
    rsv1: bool
    rsv2: bool
    rsv3: bool
    opcode_bits: int
    opcode: Opcode
    mask_bit: bool
    length_code: int
    payload_length: PayloadLength
    masking_key: bytes
    masked_payload: memoryview
    unmasked_payload: bytes
    payload_chars: Tuple[str, ...]

    @property
    def masking_key_offset(self) -> int:
        """Offset of the masking key within the frame."""
        return BASE_HEADER_SIZE + self.payload_length.extension_size

    @property
    def payload_offset(self) -> int:
        """Offset of the first payload byte within the frame."""
        return self.masking_key_offset + MASKING_KEY_SIZE

    @property
    def frame_size(self) -> int:
        """Total size of header plus payload in bytes."""
        return self.payload_offset + len(self.masked_payload)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full payload."""
        return (
            f"WebSocketFrame(opcode={self.opcode.value}, "
            f"fin={self.fin}, "
            f"payload_length={self.payload_length!r}, "
            f"masking_key={self.masking_key.hex()})"
        )
