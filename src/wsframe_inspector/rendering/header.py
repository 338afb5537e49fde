"""
Header Block
============

The fixed-width block drawn above the DWORD rows: byte columns, masking and
length-variant labels, and the bit-index ruler.

                   +---------------+---------------+---------------+---------------+
      Frame Data   |    Byte  0    |    Byte  1    |    Byte  2    |    Byte  3    |
       (Masked)    +---------------+---------------+---------------+---------------+
       (Short)     |0              |    1          |        2      |            3  |
                   |0 1 2 3 4 5 6 7|8 9 0 1 2 3 4 5|6 7 8 9 0 1 2 3|4 5 6 7 8 9 0 1|
"""

from wsframe_inspector.models.frame import WebSocketFrame
from wsframe_inspector.rendering.segments import BYTE_CELL_WIDTH, BYTES_IN_DWORD
from wsframe_inspector.rendering.theme import StyleTheme


HEADER_INDENT = " " * 2
HEADER_LABEL_WIDTH = 10
HEADER_GAP = " " * 3

# Tens digit of each bit index, placed where it changes
_TENS_RULER = ("0              ", "    1          ", "        2      ", "            3  ")


def _byte_columns(theme: StyleTheme, cells) -> str:
    pipe = theme.paint("|", "border")
    return pipe + pipe.join(cells) + pipe


def _ruler_cells(byte_index: int) -> str:
    start = byte_index * 8
    return " ".join(str((start + bit) % 10) for bit in range(8))


def format_header_block(frame: WebSocketFrame, theme: StyleTheme) -> str:
    """
    Render the header block for a frame.

    Args:
        frame: Decoded frame (only mask_bit and the length variant are used)
        theme: Colours to apply

    Returns:
        Five newline-terminated lines
    """
    separator = theme.paint(
        "+" + "+".join("-" * BYTE_CELL_WIDTH for _ in range(BYTES_IN_DWORD)) + "+",
        "border",
    )
    mask_label = "(Masked)" if frame.mask_bit else "(Unmasked)"
    variant_label = f"({frame.payload_length.label})"
    label_pad = " " * (len(HEADER_INDENT) + HEADER_LABEL_WIDTH + len(HEADER_GAP))

    byte_titles = [
        theme.paint(f"{f'Byte  {i}':^{BYTE_CELL_WIDTH}}", "title")
        for i in range(BYTES_IN_DWORD)
    ]
    tens = [theme.paint(cell, "tick") for cell in _TENS_RULER]
    units = [theme.paint(_ruler_cells(i), "tick") for i in range(BYTES_IN_DWORD)]

    lines = [
        label_pad + separator,
        HEADER_INDENT + theme.paint("Frame Data", "title") + HEADER_GAP + _byte_columns(theme, byte_titles),
        HEADER_INDENT + theme.paint(f"{mask_label:^{HEADER_LABEL_WIDTH}}", "note") + HEADER_GAP + separator,
        HEADER_INDENT + theme.paint(f"{variant_label:^{HEADER_LABEL_WIDTH}}", "note") + HEADER_GAP + _byte_columns(theme, tens),
        label_pad + _byte_columns(theme, units),
    ]
    return "\n".join(lines) + "\n"
