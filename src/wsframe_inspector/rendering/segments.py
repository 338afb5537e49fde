"""
Diagram Segments
================

Column groups that make up one DWORD row of the frame diagram.

Every DWORD row is five content lines tall plus a bottom border:

    line 0: bit values of the bytes in the row (drawn next to "DWORD")
    line 1: first annotation line (drawn next to the DWORD number)
    line 2: second annotation line
    line 3: third annotation line
    line 4: fourth annotation line

A Segment covers one or more whole bytes of the row. A segment of N bytes is
exactly 16 * N - 1 columns wide on every line (15 columns per byte cell plus
the separators between cells), so any sequence of segments covering four
bytes lines up with the 4-byte ruler of the header block.

Column Widths:
    1 byte  -> 15 columns
    2 bytes -> 31 columns
    3 bytes -> 47 columns
    4 bytes -> 63 columns

Segment Kinds:
    - header_bits_segment: FIN/RSV/opcode/MASK/length-code cells (2 bytes)
    - field_segment: a named multi-byte field (extended length, masking key)
    - payload_segment: masked and unmasked payload bytes (1-4 bytes)
    - blank_segment: header payload slots with no byte to show
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from wsframe_inspector.models.frame import WebSocketFrame
from wsframe_inspector.rendering.bits import bit_str, byte_str, delim
from wsframe_inspector.rendering.theme import StyleTheme


BYTE_CELL_WIDTH = 15
BYTES_IN_DWORD = 4


class RenderRangeError(ValueError):
    """
    Raised when a payload row is requested for an illegal byte range.

    Attributes:
        from_byte_ix: Requested first payload index (inclusive)
        to_byte_ix: Requested end payload index (exclusive)
    """

    def __init__(self, from_byte_ix: int, to_byte_ix: int, reason: str) -> None:
        self.from_byte_ix = from_byte_ix
        self.to_byte_ix = to_byte_ix
        super().__init__(
            f"Illegal payload byte range [{from_byte_ix}, {to_byte_ix}): {reason}"
        )


@dataclass(frozen=True)
class Segment:
    """
    Pre-rendered column group of a DWORD row.

    Attributes:
        num_bytes: Number of byte columns covered
        bits: Content of line 0
        lines: Content of lines 1-4
        border: Bottom border (dashes and '+' joints, no outer '+')
    """

    num_bytes: int
    bits: str
    lines: Tuple[str, str, str, str]
    border: str


def segment_width(num_bytes: int) -> int:
    """Plain-text column width of a segment covering num_bytes bytes."""
    return num_bytes * (BYTE_CELL_WIDTH + 1) - 1


def solid_border(num_bytes: int) -> str:
    return "-" * segment_width(num_bytes)


def split_border(num_bytes: int) -> str:
    return "+".join("-" * BYTE_CELL_WIDTH for _ in range(num_bytes))


def _bytes_bits(data: Sequence[int], theme: StyleTheme) -> str:
    separator = theme.paint("|", "border")
    return separator.join(theme.paint(byte_str(byte), "bit") for byte in data)


# =============================================================================
# Header Segments
# =============================================================================

# Cell widths of the first two header bytes: F R R R opcode M length-code
_HEADER_CELL_WIDTHS = (1, 1, 1, 1, 7, 1, 13)

_HEADER_CELL_LABELS = (
    ("F", "R", "R", "R", "", "M", ""),
    ("I", "S", "S", "S", "op code", "A", " Payload len "),
    ("N", "V", "V", "V", " (4 b) ", "S", "  (7 bits)   "),
    (" ", "1", "2", "3", "", "K", ""),
)


def header_bits_segment(frame: WebSocketFrame, theme: StyleTheme) -> Segment:
    """
    Build the segment for the first two frame bytes.

    Args:
        frame: Decoded frame
        theme: Colours to apply

    Returns:
        2-byte Segment with one cell per header field
    """
    separator = theme.paint("|", "border")
    values = (
        bit_str(frame.fin),
        bit_str(frame.rsv1),
        bit_str(frame.rsv2),
        bit_str(frame.rsv3),
        byte_str(frame.opcode_bits, 4),
        bit_str(frame.mask_bit),
        byte_str(frame.length_code, 7),
    )
    bits = separator.join(theme.paint(value, "bit") for value in values)

    lines = []
    for labels in _HEADER_CELL_LABELS:
        cells = [
            theme.paint(f"{label:<{width}}", "title")
            for label, width in zip(labels, _HEADER_CELL_WIDTHS)
        ]
        lines.append(separator.join(cells))

    border = "+".join("-" * width for width in _HEADER_CELL_WIDTHS)
    return Segment(num_bytes=2, bits=bits, lines=tuple(lines), border=border)


def field_segment(
    data: bytes,
    title: str,
    subtitle: str,
    theme: StyleTheme,
    note: str = "",
) -> Segment:
    """
    Build a segment for a named header field.

    Args:
        data: Bytes of the field shown in this row (1-4)
        title: Field name, e.g. "Masking-key (part 1)"
        subtitle: Size annotation, e.g. "(16 bits)"
        theme: Colours to apply
        note: Optional value annotation on the last line

    Returns:
        Segment as wide as data
    """
    width = segment_width(len(data))
    lines = (
        " " * width,
        theme.paint(f"{title:^{width}}", "title"),
        theme.paint(f"{subtitle:^{width}}", "note"),
        theme.paint(f"{note:^{width}}", "byte_value"),
    )
    return Segment(
        num_bytes=len(data),
        bits=_bytes_bits(data, theme),
        lines=lines,
        border=solid_border(len(data)),
    )


def blank_segment(num_bytes: int, theme: StyleTheme) -> Segment:
    """Segment for header payload slots when the payload is too short to fill them."""
    width = segment_width(num_bytes)
    blank = " " * width
    return Segment(
        num_bytes=num_bytes,
        bits=blank,
        lines=(blank, theme.paint(f"{'(no payload)':^{width}}", "note"), blank, blank),
        border=solid_border(num_bytes),
    )


# =============================================================================
# Payload Template
# =============================================================================

def _masked_value_cell(values: Sequence[int], theme: StyleTheme) -> str:
    if len(values) == 2:
        return (
            " " + theme.paint(f"{delim(values[0]):>5}", "byte_value")
            + "      " + theme.paint("MASKED", "note")
            + "  " + theme.paint(f"{delim(values[1]):>5}", "byte_value")
            + "      "
        )
    return (
        " " + theme.paint(f"{delim(values[0]):>5}", "byte_value")
        + "     " + theme.paint("MSK", "note") + " "
    )


def _unmasked_value_cell(values: Sequence[int], chars: Sequence[str], theme: StyleTheme) -> str:
    if len(values) == 2:
        return (
            " " + theme.paint(f"{delim(values[0]):>5}", "byte_value")
            + " " + theme.paint(f"'{chars[0]}'", "char_preview")
            + " " + theme.paint("UNMASKED", "note")
            + " " + theme.paint(f"{delim(values[1]):>5}", "byte_value")
            + " " + theme.paint(f"'{chars[1]}'", "char_preview")
            + "  "
        )
    return (
        " " + theme.paint(f"{delim(values[0]):>5}", "byte_value")
        + " " + theme.paint(f"'{chars[0]}'", "char_preview")
        + " " + theme.paint("UNM", "note") + " "
    )


def _pair_chunks(num_bytes: int) -> List[Tuple[int, int]]:
    """Split a row of num_bytes into (start, end) chunks of two, last one may be single."""
    return [(start, min(start + 2, num_bytes)) for start in range(0, num_bytes, 2)]


def payload_label(num_bytes: int, part_number: int) -> str:
    """Label of a payload row: short form for a lone trailing byte."""
    if num_bytes == 1:
        return f"Payload pt {part_number}"
    return f"Payload Data (part {part_number})"


def payload_segment(
    frame: WebSocketFrame,
    from_byte_ix: int,
    to_byte_ix: int,
    part_number: int,
    theme: StyleTheme,
    split: bool = True,
) -> Segment:
    """
    Build the payload template for 1-4 payload bytes.

    Bytes are grouped in pairs ("MASKED" / "UNMASKED" cells, 31 columns) with
    an odd trailing byte in a single cell ("MSK" / "UNM", 15 columns). The
    label line spans the whole segment.

    Args:
        frame: Decoded frame
        from_byte_ix: First payload index (inclusive)
        to_byte_ix: End payload index (exclusive)
        part_number: Number shown in the payload label
        theme: Colours to apply
        split: Draw a '+' joint under every byte in the bottom border

    Returns:
        Segment covering to_byte_ix - from_byte_ix bytes

    Raises:
        RenderRangeError: If the width is outside 1-4 or the range falls
            outside the payload
    """
    num_bytes = to_byte_ix - from_byte_ix
    if not 1 <= num_bytes <= BYTES_IN_DWORD:
        raise RenderRangeError(
            from_byte_ix, to_byte_ix, f"row width {num_bytes} is outside 1-{BYTES_IN_DWORD}"
        )
    if from_byte_ix < 0 or to_byte_ix > len(frame.masked_payload):
        raise RenderRangeError(
            from_byte_ix, to_byte_ix, f"payload has {len(frame.masked_payload)} bytes"
        )

    masked = frame.masked_payload[from_byte_ix:to_byte_ix]
    unmasked = frame.unmasked_payload[from_byte_ix:to_byte_ix]
    chars = frame.payload_chars[from_byte_ix:to_byte_ix]

    separator = theme.paint("|", "border")
    chunks = _pair_chunks(num_bytes)
    masked_values = separator.join(
        _masked_value_cell(masked[start:end], theme) for start, end in chunks
    )
    unmasked_values = separator.join(
        _unmasked_value_cell(unmasked[start:end], chars[start:end], theme)
        for start, end in chunks
    )

    width = segment_width(num_bytes)
    label = theme.paint(f"{payload_label(num_bytes, part_number):^{width}}", "title")

    return Segment(
        num_bytes=num_bytes,
        bits=_bytes_bits(masked, theme),
        lines=(masked_values, _bytes_bits(unmasked, theme), unmasked_values, label),
        border=split_border(num_bytes) if split else solid_border(num_bytes),
    )
