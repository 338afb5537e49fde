"""
Input Decoding
==============

Turns the text a user pastes (base64 or hex) into raw frame bytes.

Formats:
    - base64: Standard alphabet, padding required, whitespace ignored
    - hex: Whitespace, ':' separators and '0x' prefixes ignored
    - auto: hex when the cleaned text is an even-length hex string,
      base64 otherwise

Note that "auto" prefers hex for ambiguous text such as "abcd", which is
also valid base64. Pass an explicit format when that matters.
"""

import base64
import binascii
import logging
import re
from typing import Literal


logger = logging.getLogger(__name__)


InputFormat = Literal["auto", "base64", "hex"]

INPUT_FORMATS = ("auto", "base64", "hex")

_HEX_NOISE = re.compile(r"0x|[\s:]", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class InputDecodeError(ValueError):
    """Raised when input text is not valid in the requested format."""

    def __init__(self, input_format: str, reason: str) -> None:
        self.input_format = input_format
        super().__init__(f"Invalid {input_format} input: {reason}")


def _clean_hex(text: str) -> str:
    return _HEX_NOISE.sub("", text)


def looks_like_hex(text: str) -> bool:
    """Whether text is a non-empty, even-length hex string after cleanup."""
    cleaned = _clean_hex(text)
    return bool(cleaned) and len(cleaned) % 2 == 0 and _HEX_DIGITS.fullmatch(cleaned) is not None


def decode_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(_clean_hex(text))
    except ValueError as e:
        raise InputDecodeError("hex", str(e)) from e


def decode_base64(text: str) -> bytes:
    try:
        return base64.b64decode("".join(text.split()), validate=True)
    except binascii.Error as e:
        raise InputDecodeError("base64", str(e)) from e


def decode_input(text: str, input_format: InputFormat = "auto") -> bytes:
    """
    Decode frame text into bytes.

    Args:
        text: Encoded frame
        input_format: One of "auto", "base64", "hex"

    Returns:
        Raw frame bytes

    Raises:
        InputDecodeError: If text is empty or not valid in the chosen format
        ValueError: If input_format is unknown
    """
    if input_format not in INPUT_FORMATS:
        raise ValueError(f"Unknown input format {input_format!r}; expected one of {INPUT_FORMATS}")
    if not text.strip():
        raise InputDecodeError(input_format, "no data")

    if input_format == "auto":
        input_format = "hex" if looks_like_hex(text) else "base64"
        logger.debug(f"Auto-detected input format: {input_format}")

    if input_format == "hex":
        return decode_hex(text)
    return decode_base64(text)
