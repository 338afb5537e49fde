"""
wsframe-inspector
=================

Bit-level diagrams of masked WebSocket frames (RFC 6455 §5.2).

This package decodes one in-memory WebSocket frame and renders every header
bit, the payload-length encoding, the masking key, and the payload bytes both
masked and unmasked, for engineers inspecting raw WebSocket traffic.

Components:
    - models: Frame, opcode and payload-length value types
    - decoding: Field decoder, length resolver and unmasker
    - rendering: Frame diagram, qword dump, summary line and themes
    - inputs: base64 / hex input decoding
    - config: pydantic + YAML settings for the command line
    - main: wsframe-inspect command line

Example:
    from wsframe_inspector import decode_frame, format_frame

    frame = decode_frame(bytes.fromhex("81835a0e91363b6cf2"))
    print(format_frame(frame), end="")
"""

__version__ = "0.1.0"

from wsframe_inspector.decoding import (
    FrameDecodeError,
    MalformedFrameError,
    UnsupportedFrameError,
    decode_frame,
)
from wsframe_inspector.models import Opcode, WebSocketFrame
from wsframe_inspector.rendering import FrameDiagramRenderer, StyleTheme, format_frame


__all__ = [
    "__version__",
    "decode_frame",
    "format_frame",
    "FrameDiagramRenderer",
    "StyleTheme",
    "WebSocketFrame",
    "Opcode",
    "FrameDecodeError",
    "MalformedFrameError",
    "UnsupportedFrameError",
]
