"""
Bit Formatting Helpers
======================

Small string helpers shared by the frame diagram and the qword dumper.
"""


BITS_IN_BYTE = 8


def bit_str(bit: bool) -> str:
    """Render a single bit as '1' or '0'."""
    return "1" if bit else "0"


def byte_str(byte: int, num_bits: int = BITS_IN_BYTE) -> str:
    """
    Render the low num_bits of a byte, MSB first, separated by spaces.

    Args:
        byte: Byte value (0-255)
        num_bits: Number of low-order bits to render (1-8)

    Returns:
        e.g. byte_str(0x81) == "1 0 0 0 0 0 0 1", byte_str(0x1, 4) == "0 0 0 1"
    """
    return " ".join(
        bit_str(bool(byte & (1 << shift)))
        for shift in range(num_bits - 1, -1, -1)
    )


def delim(value: int) -> str:
    """Wrap a byte value in parentheses, e.g. (97)."""
    return f"({value})"
