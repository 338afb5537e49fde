"""
Data Models
===========

Typed values shared by the decoder and the renderer.

This module re-exports all data models for convenient access.

Models:
    Opcode:
        - Opcode: Semantic category of the 4-bit opcode field

    Payload length:
        - ShortLength, MediumLength, LongLength: Length-encoding variants
        - PayloadLength: Union of the three variants

    Frame:
        - WebSocketFrame: Immutable decoded frame
"""

from wsframe_inspector.models.opcode import Opcode
from wsframe_inspector.models.payload_length import (
    LongLength,
    MediumLength,
    PayloadLength,
    ShortLength,
)
from wsframe_inspector.models.frame import (
    BASE_HEADER_SIZE,
    MASKING_KEY_SIZE,
    WebSocketFrame,
)

__all__ = [
    # Opcode
    "Opcode",
    # Payload length
    "ShortLength",
    "MediumLength",
    "LongLength",
    "PayloadLength",
    # Frame
    "WebSocketFrame",
    "BASE_HEADER_SIZE",
    "MASKING_KEY_SIZE",
]
