"""
DWORD Rows
==========

Assembles segments into bordered DWORD rows and renders payload rows.

Row Layout (80 columns):
    "       | DWORD |<line 0 of each segment, '|'-separated>|"
    "       |   N   |<line 1 ...>|"
    "       |       |<line 2 ...>|"
    "       |       |<line 3 ...>|"
    "       |       |<line 4 ...>|"
    "       +-------+<segment borders, '+'-separated>+"

Failure Policy:
    format_payload_row never raises for a bad byte range. It logs a warning
    and returns an inline error marker in place of the row, so one bad row
    request cannot abort a whole diagram.
"""

import logging
from typing import Sequence

from wsframe_inspector.models.frame import WebSocketFrame
from wsframe_inspector.rendering.segments import RenderRangeError, Segment, payload_segment
from wsframe_inspector.rendering.theme import StyleTheme


logger = logging.getLogger(__name__)


ROW_INDENT = " " * 7
ROW_LABEL_WIDTH = 7

ROW_ERROR_TEMPLATE = (
    "ERROR: Cannot print dword row. Illegal byte indexes provided. "
    "from_byte_ix: {from_byte_ix} to_byte_ix: {to_byte_ix}"
)


def format_border(segments: Sequence[Segment], theme: StyleTheme) -> str:
    """Horizontal border line matching the column joints of segments."""
    border = "+" + "-" * ROW_LABEL_WIDTH + "+" + "+".join(s.border for s in segments) + "+"
    return ROW_INDENT + theme.paint(border, "border") + "\n"


def assemble_row(segments: Sequence[Segment], dword_number: int, theme: StyleTheme) -> str:
    """
    Lay segments side by side into one DWORD row.

    Args:
        segments: Column groups, left to right, covering 4 bytes in total
            (a trailing payload row may cover fewer)
        dword_number: Row number shown under "DWORD"
        theme: Colours to apply

    Returns:
        Five content lines plus the bottom border, newline-terminated
    """
    pipe = theme.paint("|", "border")
    labels = (
        theme.paint(" DWORD ", "title"),
        theme.paint(f" {dword_number:^5} ", "title"),
        " " * ROW_LABEL_WIDTH,
        " " * ROW_LABEL_WIDTH,
        " " * ROW_LABEL_WIDTH,
    )
    contents = [
        [segment.bits for segment in segments],
        *([segment.lines[i] for segment in segments] for i in range(4)),
    ]

    result = ""
    for label, cells in zip(labels, contents):
        result += ROW_INDENT + pipe + label + pipe + pipe.join(cells) + pipe + "\n"
    result += format_border(segments, theme)
    return result


def format_payload_row(
    frame: WebSocketFrame,
    from_byte_ix: int,
    to_byte_ix: int,
    dword_number: int,
    part_number: int,
    theme: StyleTheme,
) -> str:
    """
    Render payload bytes [from_byte_ix, to_byte_ix) as one DWORD row.

    Args:
        frame: Decoded frame
        from_byte_ix: First payload index (inclusive)
        to_byte_ix: End payload index (exclusive), at most 4 past from_byte_ix
        dword_number: Row number shown in the row label
        part_number: Number shown in the payload label
        theme: Colours to apply

    Returns:
        The rendered row, or an inline error marker line when the range is
        not a legal 1-4 byte slice of the payload
    """
    try:
        segment = payload_segment(frame, from_byte_ix, to_byte_ix, part_number, theme)
    except RenderRangeError as e:
        logger.warning(f"Skipping DWORD {dword_number}: {e}")
        return ROW_ERROR_TEMPLATE.format(
            from_byte_ix=from_byte_ix,
            to_byte_ix=to_byte_ix,
        ) + "\n"
    return assemble_row([segment], dword_number, theme)
