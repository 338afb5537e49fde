"""
Opcode Classification
=====================

Maps the 4-bit opcode field of a WebSocket frame header to a semantic category.

Opcode Table (RFC 6455 §5.2):
    0x0        -> Continuation
    0x1        -> Text
    0x2        -> Binary
    0x3 - 0x7  -> ReservedFuture (non-control)
    0x8        -> CloseConnection
    0x9        -> Ping
    0xA        -> Pong
    0xB - 0xF  -> ReservedFuture (control)

Rules:
    - Classification is total: it never raises
    - Values outside 0-15 map to Unrecognized (the field is only 4 bits wide,
      so this only happens when callers pass unmasked integers)
"""

from enum import Enum


class Opcode(str, Enum):
    """
    Semantic category of a WebSocket opcode.

    Attributes:
        CONTINUATION: Fragment of a message started by an earlier frame
        TEXT: UTF-8 text data frame
        BINARY: Binary data frame
        CLOSE_CONNECTION: Close control frame
        PING: Ping control frame
        PONG: Pong control frame
        RESERVED_FUTURE: Opcode reserved by the RFC for future use
        UNRECOGNIZED: Value outside the 4-bit opcode range
    """

    CONTINUATION = "Continuation"
    TEXT = "Text"
    BINARY = "Binary"
    CLOSE_CONNECTION = "CloseConnection"
    PING = "Ping"
    PONG = "Pong"
    RESERVED_FUTURE = "ReservedFuture"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def from_bits(cls, opcode_bits: int) -> "Opcode":
        """
        Classify a raw opcode value.

        Args:
            opcode_bits: Low nibble of the first frame byte

        Returns:
            The matching Opcode category
        """
        if opcode_bits in _KNOWN_OPCODES:
            return _KNOWN_OPCODES[opcode_bits]
        if 0 <= opcode_bits <= 0xF:
            return cls.RESERVED_FUTURE
        return cls.UNRECOGNIZED

    @property
    def is_control(self) -> bool:
        """Whether this opcode names a control frame (close, ping, pong)."""
        return self in (Opcode.CLOSE_CONNECTION, Opcode.PING, Opcode.PONG)


_KNOWN_OPCODES = {
    0x0: Opcode.CONTINUATION,
    0x1: Opcode.TEXT,
    0x2: Opcode.BINARY,
    0x8: Opcode.CLOSE_CONNECTION,
    0x9: Opcode.PING,
    0xA: Opcode.PONG,
}
