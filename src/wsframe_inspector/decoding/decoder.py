"""
Frame Decoder
=============

Extracts every header field of a masked WebSocket frame from a byte buffer.

Wire Layout (RFC 6455 §5.2, bit 0 is the most significant bit):
    byte 0: FIN | RSV1 | RSV2 | RSV3 | OPCODE (4 bits)
    byte 1: MASK | PAYLOAD LEN CODE (7 bits)
    then 0, 2 or 8 bytes of extended payload length
    then 4 bytes of masking key
    then the masked payload

Design Rules:
    - All-or-nothing: every bounds check runs before the frame is built
    - Only masked frames are supported; unmasked input is rejected
    - The masked payload is a memoryview into the caller's buffer (no copy)
    - Bytes past the declared payload belong to the next frame and are ignored
"""

import logging
from typing import Union

from wsframe_inspector.decoding.errors import MalformedFrameError, UnsupportedFrameError
from wsframe_inspector.decoding.length import resolve_payload_length
from wsframe_inspector.decoding.unmask import preview_chars, unmask
from wsframe_inspector.models.frame import BASE_HEADER_SIZE, MASKING_KEY_SIZE, WebSocketFrame
from wsframe_inspector.models.opcode import Opcode


logger = logging.getLogger(__name__)


BytesLike = Union[bytes, bytearray, memoryview]

# Largest extension the length code can announce (code 127)
MAX_EXTENSION_SIZE = 8


def get_bit(byte: int, bit_position: int) -> bool:
    """
    Read one bit of a byte, counting from the most significant bit.

    Args:
        byte: Byte value (0-255)
        bit_position: 0 for the MSB through 7 for the LSB

    Returns:
        True if the bit is set. Positions outside 0-7 read as False.
    """
    if not 0 <= bit_position <= 7:
        return False
    return bool(byte & (0b10000000 >> bit_position))


def decode_frame(data: BytesLike) -> WebSocketFrame:
    """
    Decode a single masked WebSocket frame.

    Args:
        data: Complete frame bytes. The buffer must stay unmodified for as
            long as the returned frame is used.

    Returns:
        Fully populated WebSocketFrame

    Raises:
        MalformedFrameError: If the buffer is too short for any field
        UnsupportedFrameError: If the frame is not masked
    """
    view = memoryview(data).cast("B").toreadonly()
    frame_len = len(view)

    if frame_len < BASE_HEADER_SIZE:
        raise MalformedFrameError(
            field="frame header",
            offset=0,
            expected=BASE_HEADER_SIZE,
            actual=frame_len,
        )

    first_byte = view[0]
    second_byte = view[1]

    mask_bit = get_bit(second_byte, 0)
    if not mask_bit:
        raise UnsupportedFrameError(
            "Frame is not masked (MASK bit is 0); only masked frames can be decoded"
        )

    opcode_bits = first_byte & 0b00001111
    length_code = second_byte & 0b01111111

    extension = view[BASE_HEADER_SIZE:BASE_HEADER_SIZE + MAX_EXTENSION_SIZE]
    payload_length, consumed = resolve_payload_length(length_code, extension)

    key_offset = BASE_HEADER_SIZE + consumed
    available = max(frame_len - key_offset, 0)
    if available < MASKING_KEY_SIZE:
        raise MalformedFrameError(
            field="masking key",
            offset=key_offset,
            expected=MASKING_KEY_SIZE,
            actual=available,
        )
    masking_key = bytes(view[key_offset:key_offset + MASKING_KEY_SIZE])

    payload_start = key_offset + MASKING_KEY_SIZE
    available = frame_len - payload_start
    if available < payload_length.value:
        raise MalformedFrameError(
            field="payload",
            offset=payload_start,
            expected=payload_length.value,
            actual=available,
        )

    payload_end = payload_start + payload_length.value
    if payload_end < frame_len:
        logger.debug(
            f"Ignoring {frame_len - payload_end} trailing bytes after payload "
            f"(payload ends at offset {payload_end})"
        )

    masked_payload = view[payload_start:payload_end]
    unmasked_payload = unmask(masked_payload, masking_key)

    frame = WebSocketFrame(
        fin=get_bit(first_byte, 0),
        rsv1=get_bit(first_byte, 1),
        rsv2=get_bit(first_byte, 2),
        rsv3=get_bit(first_byte, 3),
        opcode_bits=opcode_bits,
        opcode=Opcode.from_bits(opcode_bits),
        mask_bit=mask_bit,
        length_code=length_code,
        payload_length=payload_length,
        masking_key=masking_key,
        masked_payload=masked_payload,
        unmasked_payload=unmasked_payload,
        payload_chars=preview_chars(unmasked_payload),
    )

    logger.debug(
        f"Decoded {frame.opcode.value} frame: "
        f"{payload_length.label} length {payload_length.value}, "
        f"key={masking_key.hex()}"
    )
    return frame
