"""
Payload Length Variants
=======================

Tagged union over the three payload-length encodings of RFC 6455 §5.2.

    Length code 0-125 -> ShortLength   (no extension bytes)
    Length code 126   -> MediumLength  (16-bit big-endian extension)
    Length code 127   -> LongLength    (64-bit big-endian extension)

Each variant only carries the fields valid for its arm. Consumers dispatch
with isinstance() and must end every dispatch chain with an
UnsupportedFrameError branch so that an unknown variant is never silently
rendered as another one.
"""

from dataclasses import dataclass
from typing import ClassVar, Union


SHORT_LENGTH_MAX = 125
MEDIUM_LENGTH_CODE = 126
LONG_LENGTH_CODE = 127


@dataclass(frozen=True, slots=True)
class ShortLength:
    """Payload length carried directly in the 7-bit length code."""

    value: int

    extension_size: ClassVar[int] = 0
    label: ClassVar[str] = "Short"

    def __post_init__(self) -> None:
        if not 0 <= self.value <= SHORT_LENGTH_MAX:
            raise ValueError(f"Short payload length out of range: {self.value}")

    @property
    def length_code(self) -> int:
        return self.value

    def extension_bytes(self) -> bytes:
        return b""


@dataclass(frozen=True, slots=True)
class MediumLength:
    """Payload length carried in a 16-bit extension (length code 126)."""

    value: int

    extension_size: ClassVar[int] = 2
    label: ClassVar[str] = "Medium"

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"Medium payload length out of range: {self.value}")

    @property
    def length_code(self) -> int:
        return MEDIUM_LENGTH_CODE

    def extension_bytes(self) -> bytes:
        """Big-endian extension bytes as they appear on the wire."""
        return self.value.to_bytes(self.extension_size, "big")


@dataclass(frozen=True, slots=True)
class LongLength:
    """Payload length carried in a 64-bit extension (length code 127)."""

    value: int

    extension_size: ClassVar[int] = 8
    label: ClassVar[str] = "Long"

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFFFFFFFFFF:
            raise ValueError(f"Long payload length out of range: {self.value}")

    @property
    def length_code(self) -> int:
        return LONG_LENGTH_CODE

    def extension_bytes(self) -> bytes:
        """Big-endian extension bytes as they appear on the wire."""
        return self.value.to_bytes(self.extension_size, "big")


PayloadLength = Union[ShortLength, MediumLength, LongLength]
