"""
Payload Length Resolver
=======================

Resolves the 7-bit length code plus its extension bytes into a PayloadLength.

    code 0-125 -> ShortLength(code), 0 extension bytes consumed
    code 126   -> MediumLength(u16 big-endian), 2 extension bytes consumed
    code 127   -> LongLength(u64 big-endian), 8 extension bytes consumed

The consumed count fixes the rest of the header layout:
    masking key offset = 2 + consumed
    payload offset     = masking key offset + 4
"""

import struct
from typing import Tuple

from wsframe_inspector.decoding.errors import MalformedFrameError, UnsupportedFrameError
from wsframe_inspector.models.frame import BASE_HEADER_SIZE
from wsframe_inspector.models.payload_length import (
    LONG_LENGTH_CODE,
    MEDIUM_LENGTH_CODE,
    SHORT_LENGTH_MAX,
    LongLength,
    MediumLength,
    PayloadLength,
    ShortLength,
)


def resolve_payload_length(length_code: int, extension: bytes) -> Tuple[PayloadLength, int]:
    """
    Resolve a length code into its payload length variant.

    Args:
        length_code: Low 7 bits of the second frame byte
        extension: Bytes following the base header (only the first 0, 2 or 8
            are read, extra bytes are ignored)

    Returns:
        Tuple of (payload length variant, number of extension bytes consumed)

    Raises:
        MalformedFrameError: If extension holds fewer bytes than the code needs
        UnsupportedFrameError: If length_code is outside 0-127
    """
    if 0 <= length_code <= SHORT_LENGTH_MAX:
        return ShortLength(length_code), 0

    if length_code == MEDIUM_LENGTH_CODE:
        _require_extension(extension, MediumLength.extension_size)
        (value,) = struct.unpack(">H", bytes(extension[:2]))
        return MediumLength(value), MediumLength.extension_size

    if length_code == LONG_LENGTH_CODE:
        _require_extension(extension, LongLength.extension_size)
        (value,) = struct.unpack(">Q", bytes(extension[:8]))
        return LongLength(value), LongLength.extension_size

    raise UnsupportedFrameError(
        f"Payload length code {length_code} is outside the 7-bit range 0-127"
    )


def _require_extension(extension: bytes, size: int) -> None:
    if len(extension) < size:
        raise MalformedFrameError(
            field="extended payload length",
            offset=BASE_HEADER_SIZE,
            expected=size,
            actual=len(extension),
        )
