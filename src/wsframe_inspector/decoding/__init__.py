"""
Decoding Module
===============

Turns one in-memory masked WebSocket frame into a WebSocketFrame value.

This module provides:
    - decode_frame: Field decoder (header bits, masking key, payload view)
    - resolve_payload_length: Short / Medium / Long length resolution
    - unmask, preview_chars: XOR unmasking and display-glyph projection
    - FrameDecodeError, MalformedFrameError, UnsupportedFrameError

Example:
    from wsframe_inspector.decoding import decode_frame

    frame = decode_frame(bytes.fromhex("81835a0e91363b6cf2"))
    print(frame.unmasked_payload)  # b'abc'
"""

from wsframe_inspector.decoding.errors import (
    FrameDecodeError,
    MalformedFrameError,
    UnsupportedFrameError,
)
from wsframe_inspector.decoding.length import resolve_payload_length
from wsframe_inspector.decoding.unmask import preview_chars, unmask
from wsframe_inspector.decoding.decoder import decode_frame, get_bit


__all__ = [
    "decode_frame",
    "get_bit",
    "resolve_payload_length",
    "unmask",
    "preview_chars",
    "FrameDecodeError",
    "MalformedFrameError",
    "UnsupportedFrameError",
]
