"""
Unmasker
========

Cyclic 4-byte XOR unmasking and the display-glyph projection of a payload.

XOR with the same key is its own inverse, so unmask() also masks.
"""

from typing import Tuple

from wsframe_inspector.models.frame import MASKING_KEY_SIZE


NON_PRINTABLE_GLYPH = "."


def unmask(masked: bytes, key: bytes) -> bytes:
    """
    Apply the masking key to a payload.

    Args:
        masked: Payload bytes (any bytes-like object)
        key: 4-byte masking key

    Returns:
        New bytes where output[i] == masked[i] ^ key[i % 4]

    Raises:
        ValueError: If key is not exactly 4 bytes long
    """
    if len(key) != MASKING_KEY_SIZE:
        raise ValueError(f"Masking key must be {MASKING_KEY_SIZE} bytes, got {len(key)}")
    return bytes(byte ^ key[i % MASKING_KEY_SIZE] for i, byte in enumerate(masked))


def preview_chars(data: bytes) -> Tuple[str, ...]:
    """
    Project each byte onto a single display glyph.

    This is a debug preview, NOT a text decode. Each byte is cast directly to
    the character with the same code point, so multi-byte UTF-8 sequences show
    up as one Latin-1 glyph per byte (lossy for values >= 128). Characters that
    would not print as one visible glyph (control codes, non-breaking space)
    are replaced with '.' so table columns stay aligned.

    Args:
        data: Unmasked payload bytes

    Returns:
        Tuple with one single-character string per input byte
    """
    glyphs = []
    for byte in data:
        char = chr(byte)
        glyphs.append(char if char.isprintable() else NON_PRINTABLE_GLYPH)
    return tuple(glyphs)
