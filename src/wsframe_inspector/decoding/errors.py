"""
Decode Errors
=============

Exceptions raised while decoding a frame buffer.

All decode errors are fatal for the frame being decoded: no partially
constructed WebSocketFrame is ever returned. A malformed static buffer cannot
heal on retry, so callers should report and move on.
"""


class FrameDecodeError(Exception):
    """Base class for all frame decoding failures."""
    pass


class MalformedFrameError(FrameDecodeError):
    """
    Raised when the buffer is too short for a field its own header implies.

    Attributes:
        field: Name of the field that could not be read
        offset: Byte offset where the field starts
        expected: Number of bytes the field needs
        actual: Number of bytes available from offset
    """

    def __init__(self, field: str, offset: int, expected: int, actual: int) -> None:
        self.field = field
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot read {field} at offset {offset}: "
            f"expected {expected} bytes, got {actual}"
        )


class UnsupportedFrameError(FrameDecodeError):
    """Raised for frames or length variants this decoder does not handle."""
    pass
